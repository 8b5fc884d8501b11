"""Exceptions raised by the extraction and generation pipeline."""

from __future__ import annotations

from pathlib import Path


class CddError(Exception):
    """Base exception for cdd-rust failures."""


class ParseError(CddError):
    """Raised when the source text is not valid syntax in the host grammar."""

    def __init__(self, error_ranges: list[tuple[int, int]]) -> None:
        self.error_ranges = error_ranges
        spans = ", ".join(
            str(start) if start == end else f"{start}-{end}" for start, end in error_ranges
        )
        super().__init__(f"Source contains syntax errors (lines {spans or '?'})")


class UnnamedFieldError(CddError):
    """Raised when a declaration has a positional (unnamed) field."""

    def __init__(self, struct_name: str) -> None:
        self.struct_name = struct_name
        super().__init__(f"Struct {struct_name} has an unnamed (positional) field")


class FileReadError(CddError):
    """Raised when a source file cannot be opened or read."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Could not open or read file: {self.path}")


class FileWriteError(CddError):
    """Raised when generated output cannot be written."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Could not write file: {self.path}")
