"""Language-specific declaration extractors.

Use get_extractor() to obtain one for a tree-sitter language name.
"""

from __future__ import annotations

from cdd_rust.parsing.languages.base import DeclarationExtractor
from cdd_rust.parsing.languages.rust import RustExtractor, StructVisitor, map_type

_EXTRACTORS: dict[str, type[DeclarationExtractor]] = {
    "rust": RustExtractor,
}


def get_extractor(language: str, *, faithful_generics: bool = False) -> DeclarationExtractor:
    """Get a declaration extractor instance for the given language."""
    cls = _EXTRACTORS.get(language)
    if cls is None:
        raise ValueError(f"No extractor for language: {language}")
    return cls(faithful_generics=faithful_generics)


__all__ = [
    "DeclarationExtractor",
    "RustExtractor",
    "StructVisitor",
    "get_extractor",
    "map_type",
]
