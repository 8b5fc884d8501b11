"""File and string helpers used at the edges of the pipeline."""

from __future__ import annotations

import logging
from pathlib import Path

from cdd_rust.errors import FileReadError, FileWriteError

logger = logging.getLogger(__name__)


def read_file(path: str | Path) -> str:
    """Return the full text of *path*.

    Raises:
        FileReadError: If the file cannot be opened or decoded.
    """
    file_path = Path(path)
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(file_path) from exc


def write_file(path: str | Path, content: str) -> None:
    """Write *content* to *path*, replacing any existing file.

    Raises:
        FileWriteError: If the file cannot be written.
    """
    file_path = Path(path)
    try:
        file_path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise FileWriteError(file_path) from exc
    logger.debug("Wrote %d characters to %s", len(content), file_path)


def truncate(text: str, max_width: int) -> str:
    """Keep at most *max_width* characters of *text*."""
    return text[: max(max_width, 0)]
