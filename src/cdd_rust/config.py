"""Configuration parsing from ``.cdd.yml``."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from cdd_rust.parsing.treesitter import SUPPORTED_LANGUAGES

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".cdd.yml"

_ENV_VAR_RE = re.compile(r"\$\{(\w+)\}")
_TRUTHY = {"1", "true", "yes", "on"}
_VISIBILITY_RE = re.compile(r"^(pub(\((crate|super|self|in [\w:]+)\))?)?$")
_MAX_INDENT = 16


def _resolve_env_vars(value: str) -> str:
    """Replace ``${VAR_NAME}`` placeholders with environment variable values."""

    def _replace(match: re.Match[str]) -> str:
        var = match.group(1)
        resolved = os.environ.get(var)
        if resolved is None:
            logger.warning("Environment variable %s is not set (referenced in config)", var)
            return ""
        return resolved

    return _ENV_VAR_RE.sub(_replace, value)


def _resolve_dict(data: dict[str, Any]) -> dict[str, Any]:
    """Recursively resolve environment variables in a dictionary."""
    result: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, str):
            result[key] = _resolve_env_vars(value)
        elif isinstance(value, dict):
            result[key] = _resolve_dict(value)
        else:
            result[key] = value
    return result


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


@dataclass
class ExtractConfig:
    """Extraction configuration."""

    language: str | None = None
    """Tree-sitter language used when it cannot be inferred from a path."""

    faithful_generics: bool = False
    """Map ``Option<T>``/``Vec<T>`` arguments instead of the legacy placeholders."""


@dataclass
class WriterConfig:
    """Declaration writer configuration."""

    visibility: str = "pub"
    """Visibility modifier for generated structs and fields (empty for private)."""

    indent: int = 4
    """Spaces before each generated field."""


@dataclass
class CddConfig:
    """Complete configuration from ``.cdd.yml``."""

    extract: ExtractConfig = field(default_factory=ExtractConfig)
    """Extraction configuration."""

    writer: WriterConfig = field(default_factory=WriterConfig)
    """Writer configuration."""


def _as_int(value: Any, default: int) -> int:
    return default if value is None else int(value)


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name, {})
    return value if isinstance(value, dict) else {}


def load_config(root: str | Path) -> CddConfig:
    """Load and parse ``.cdd.yml`` from *root*.

    Falls back to defaults and environment variables when the file is
    missing or incomplete.
    """
    root_path = Path(root).resolve()
    cdd_yml = root_path / CONFIG_FILENAME

    raw: dict[str, Any] = {}
    if cdd_yml.is_file():
        parsed = yaml.safe_load(cdd_yml.read_text(encoding="utf-8"))
        if isinstance(parsed, dict):
            raw = _resolve_dict(parsed)
        else:
            logger.warning("Ignoring %s: top level is not a mapping", cdd_yml)

    extract_raw = _section(raw, "extract")
    extract = ExtractConfig(
        language=str(extract_raw["language"]) if extract_raw.get("language") else None,
        faithful_generics=_as_bool(
            extract_raw.get(
                "faithful_generics", os.environ.get("CDD_FAITHFUL_GENERICS", "false")
            )
        ),
    )

    writer_raw = _section(raw, "writer")
    writer = WriterConfig(
        visibility=str(writer_raw.get("visibility", os.environ.get("CDD_VISIBILITY", "pub"))),
        indent=_as_int(writer_raw.get("indent"), 4),
    )

    return CddConfig(extract=extract, writer=writer)


def validate_config(config: CddConfig) -> list[str]:
    """Validate the configuration and return a list of error messages.

    Returns an empty list if the configuration is valid.
    """
    errors: list[str] = []

    language = config.extract.language
    if language is not None and language not in SUPPORTED_LANGUAGES:
        errors.append(f"extract.language '{language}' is not supported")

    if not _VISIBILITY_RE.match(config.writer.visibility):
        errors.append(f"writer.visibility '{config.writer.visibility}' is not a Rust visibility")

    if not 0 <= config.writer.indent <= _MAX_INDENT:
        errors.append(f"writer.indent must be between 0 and {_MAX_INDENT}")

    return errors
