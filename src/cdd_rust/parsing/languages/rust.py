"""Rust struct extractor.

Maps ``struct`` items to canonical :class:`~cdd_rust.models.Variable` lists.
By default two historical simplifications are kept:

* ``Vec<T>`` always becomes ``Array(String)``; the element type is not read.
* ``Option<T>`` sets ``optional`` but loses ``T``, which becomes
  ``Complex("None")``.

Both are lifted when the extractor runs with ``faithful_generics=True``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cdd_rust.errors import UnnamedFieldError
from cdd_rust.models import Variable, VariableType
from cdd_rust.parsing.languages.base import DeclarationExtractor
from cdd_rust.parsing.treesitter import node_text

if TYPE_CHECKING:
    import tree_sitter

logger = logging.getLogger(__name__)

_INT_TOKENS = frozenset({"u32", "u64", "i32", "i64"})

# Raw token used in place of the wrapped type of an optional field
OPTION_SENTINEL = "None"

_OPTION_PATHS = frozenset({"Option", "std::option::Option", "core::option::Option"})
_VEC_PATHS = frozenset({"Vec", "std::vec::Vec", "alloc::vec::Vec"})

_PATH_SEGMENT_NODES = frozenset(
    {"type_identifier", "primitive_type", "identifier", "crate", "self", "super"}
)
_SCOPED_NODES = frozenset({"scoped_type_identifier", "scoped_identifier"})
_NON_TYPE_ARGUMENTS = frozenset({"lifetime", "line_comment", "block_comment"})


def map_type(raw_token: str) -> VariableType:
    """Map a raw Rust type token to its canonical type.

    Total over strings: anything unrecognised becomes ``Complex(raw_token)``.
    """
    if raw_token == "String":
        return VariableType.string()
    if raw_token in _INT_TOKENS:
        return VariableType.integer()
    if raw_token == "f64":
        return VariableType.floating()
    if raw_token == "bool":
        return VariableType.boolean()
    if raw_token == "Vec":
        # Element type is not inspected here
        return VariableType.array(VariableType.string())
    return VariableType.complex(raw_token)


def leading_segment(type_node: tree_sitter.Node) -> str | None:
    """Return the first path segment of a path type, ignoring generic arguments.

    ``Vec<u8>`` gives ``Vec`` and ``std::string::String`` gives ``std``.
    Returns None for types that are not paths (references, tuples, arrays).
    """
    node: tree_sitter.Node | None = type_node
    while node is not None:
        if node.type in _PATH_SEGMENT_NODES:
            return node_text(node)
        if node.type == "generic_type":
            node = node.child_by_field_name("type")
        elif node.type in _SCOPED_NODES:
            node = node.child_by_field_name("path") or node.child_by_field_name("name")
        else:
            return None
    return None


def _type_path(type_node: tree_sitter.Node) -> str:
    """Full path of a type without its generic arguments."""
    if type_node.type == "generic_type":
        return node_text(type_node.child_by_field_name("type"))
    return node_text(type_node)


def _first_type_argument(type_node: tree_sitter.Node) -> tree_sitter.Node | None:
    if type_node.type != "generic_type":
        return None
    args = type_node.child_by_field_name("type_arguments")
    if args is None:
        return None
    for child in args.named_children:
        if child.type not in _NON_TYPE_ARGUMENTS:
            return child
    return None


def is_option(type_node: tree_sitter.Node, *, faithful_generics: bool = False) -> bool:
    """Whether the declared type is wrapped in ``Option``."""
    if faithful_generics:
        return _type_path(type_node) in _OPTION_PATHS
    return leading_segment(type_node) == "Option"


def resolve_type(type_node: tree_sitter.Node, *, faithful_generics: bool = False) -> VariableType:
    """Classify a (non-optional) declared type."""
    raw = leading_segment(type_node)
    if raw is None:
        logger.debug("Type %r is not a path; treating it as complex", node_text(type_node))
        return map_type(node_text(type_node))
    if faithful_generics and _type_path(type_node) in _VEC_PATHS:
        inner = _first_type_argument(type_node)
        if inner is not None:
            return VariableType.array(resolve_type(inner, faithful_generics=True))
    return map_type(raw)


def extract_fields(
    struct_name: str,
    body: tree_sitter.Node | None,
    *,
    faithful_generics: bool = False,
) -> list[Variable]:
    """Extract the named fields of one struct body in declaration order.

    Raises:
        UnnamedFieldError: If the body declares positional fields.
    """
    if body is None:
        return []
    if body.type == "ordered_field_declaration_list":
        if body.children_by_field_name("type"):
            raise UnnamedFieldError(struct_name)
        return []

    variables: list[Variable] = []
    for child in body.named_children:
        if child.type != "field_declaration":
            continue
        name = node_text(child.child_by_field_name("name"))
        if not name:
            raise UnnamedFieldError(struct_name)
        type_node = child.child_by_field_name("type")
        if type_node is None:
            raise UnnamedFieldError(struct_name)

        optional = is_option(type_node, faithful_generics=faithful_generics)
        if optional:
            inner = _first_type_argument(type_node) if faithful_generics else None
            if inner is None:
                variable_type = map_type(OPTION_SENTINEL)
            else:
                variable_type = resolve_type(inner, faithful_generics=True)
        else:
            variable_type = resolve_type(type_node, faithful_generics=faithful_generics)

        variables.append(
            Variable(name=name, optional=optional, value=None, variable_type=variable_type)
        )
    return variables


class StructVisitor:
    """Collects top-level ``struct`` items into a name -> fields mapping.

    A struct name that appears twice keeps only the later declaration, placed
    where that declaration occurs.
    """

    def __init__(self, *, faithful_generics: bool = False) -> None:
        self.faithful_generics = faithful_generics
        self.structs: dict[str, list[Variable]] = {}

    def visit(self, root: tree_sitter.Node) -> dict[str, list[Variable]]:
        for child in root.children:
            if child.type == "struct_item":
                self.visit_struct(child)
        return self.structs

    def visit_struct(self, node: tree_sitter.Node) -> None:
        struct_name = node_text(node.child_by_field_name("name"))
        variables = extract_fields(
            struct_name,
            node.child_by_field_name("body"),
            faithful_generics=self.faithful_generics,
        )
        if struct_name in self.structs:
            logger.debug("Struct %s redeclared on line %d", struct_name, node.start_point.row + 1)
            del self.structs[struct_name]
        self.structs[struct_name] = variables
        logger.debug("Found struct %s with %d field(s)", struct_name, len(variables))


class RustExtractor(DeclarationExtractor):
    language = "rust"

    def visit(self, root: tree_sitter.Node) -> dict[str, list[Variable]]:
        return StructVisitor(faithful_generics=self.faithful_generics).visit(root)


def extract_structures_from_code(
    code: str, *, faithful_generics: bool = False
) -> dict[str, list[Variable]]:
    """Parse Rust *code* and return its structs keyed by name."""
    return RustExtractor(faithful_generics=faithful_generics).extract(code.encode("utf-8"))
