"""Source parsing and declaration discovery."""

from cdd_rust.parsing.languages import get_extractor, map_type
from cdd_rust.parsing.treesitter import (
    detect_language,
    parse_checked,
    parse_code,
)

__all__ = [
    "detect_language",
    "get_extractor",
    "map_type",
    "parse_checked",
    "parse_code",
]
