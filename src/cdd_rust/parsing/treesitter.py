"""Tree-sitter wrapper for parsing source files into syntax trees."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, cast

import tree_sitter
import tree_sitter_language_pack as tslp

from cdd_rust.errors import ParseError
from cdd_rust.utils.cache import MemoryCache, content_hash

if TYPE_CHECKING:
    from tree_sitter_language_pack import SupportedLanguage

logger = logging.getLogger(__name__)

# Map file extensions to tree-sitter language names
EXTENSION_TO_LANGUAGE: dict[str, str] = {
    ".rs": "rust",
}

SUPPORTED_LANGUAGES = frozenset({"rust"})


# ── Module-level caches ──────────────────────────────────────────
_parser_cache: dict[str, tree_sitter.Parser] = {}
_code_ast_cache: MemoryCache[tree_sitter.Tree] = MemoryCache(max_size=256)


def detect_language(file_path: str | Path) -> str | None:
    """Detect language from file extension.

    Returns the tree-sitter language name, or None if unsupported.
    """
    ext = Path(file_path).suffix.lower()
    return EXTENSION_TO_LANGUAGE.get(ext)


def get_parser(language: str) -> tree_sitter.Parser:
    """Get a (cached) tree-sitter parser for the given language."""
    if language not in SUPPORTED_LANGUAGES:
        raise ValueError(f"Unsupported language: {language}")
    cached = _parser_cache.get(language)
    if cached is not None:
        return cached
    parser = tslp.get_parser(cast("SupportedLanguage", language))
    _parser_cache[language] = parser
    return parser


def parse_code(source: bytes, language: str) -> tree_sitter.Tree:
    """Parse source code bytes into a tree-sitter AST (cached by content hash)."""
    key = content_hash(source) + ":" + language
    cached = _code_ast_cache.get(key)
    if cached is not None:
        logger.debug("Parse cache hit for %s", key)
        return cached
    tree = get_parser(language).parse(source)
    _code_ast_cache.put(key, tree)
    return tree


def parse_checked(source: bytes, language: str) -> tree_sitter.Tree:
    """Parse *source* and reject trees that contain syntax errors.

    Raises:
        ParseError: If tree-sitter had to recover from invalid syntax.
    """
    tree = parse_code(source, language)
    if has_parse_errors(tree.root_node):
        raise ParseError(collect_error_ranges(tree.root_node))
    return tree


def has_parse_errors(root: tree_sitter.Node) -> bool:
    """Check if the AST contains any parse errors."""
    return root.has_error


def collect_error_ranges(root: tree_sitter.Node) -> list[tuple[int, int]]:
    """Collect line ranges of parse error nodes."""
    errors: list[tuple[int, int]] = []
    _walk_errors(root, errors)
    return errors


def _walk_errors(node: tree_sitter.Node, errors: list[tuple[int, int]]) -> None:
    if node.is_error or node.is_missing:
        errors.append((node.start_point.row + 1, node.end_point.row + 1))
    for child in node.children:
        _walk_errors(child, errors)


def node_text(node: tree_sitter.Node | None) -> str:
    """Decode node text from bytes, returning empty string for None."""
    if node is None:
        return ""
    return node.text.decode("utf-8", errors="replace") if node.text else ""
