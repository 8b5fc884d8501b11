"""Base class for language-specific declaration extractors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from cdd_rust.parsing.treesitter import parse_checked

if TYPE_CHECKING:
    import tree_sitter

    from cdd_rust.models import Variable


class DeclarationExtractor(ABC):
    """Base class for extractors that collect named declarations and their fields.

    Args:
        faithful_generics: Carry generic arguments (``Option<T>``,
            ``Vec<T>``) through to the canonical type instead of the
            historical placeholders.
    """

    def __init__(self, *, faithful_generics: bool = False) -> None:
        self.faithful_generics = faithful_generics

    @property
    @abstractmethod
    def language(self) -> str:
        """Tree-sitter language name."""

    def extract(self, source: bytes) -> dict[str, list[Variable]]:
        """Parse source and map every declaration name to its fields.

        Raises:
            ParseError: If the source is not valid syntax.
            UnnamedFieldError: If a declaration has a positional field.
        """
        tree = parse_checked(source, self.language)
        return self.visit(tree.root_node)

    @abstractmethod
    def visit(self, root: tree_sitter.Node) -> dict[str, list[Variable]]:
        """Walk a parsed tree and collect declarations by name."""
