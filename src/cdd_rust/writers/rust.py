"""Render canonical models as Rust struct declarations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cdd_rust.models import VariableKind

if TYPE_CHECKING:
    from cdd_rust.config import WriterConfig
    from cdd_rust.models import Model, Project, Variable, VariableType

DEFAULT_VISIBILITY = "pub"
DEFAULT_INDENT = 4

# Integers always render at one fixed width regardless of the source width
_SCALAR_TYPES: dict[VariableKind, str] = {
    VariableKind.STRING: "String",
    VariableKind.BOOL: "bool",
    VariableKind.FLOAT: "f64",
    VariableKind.INT: "i32",
}


def variable_type_to_rust_type(variable_type: VariableType) -> str:
    """Inverse of the type mapper: canonical type -> Rust type syntax."""
    scalar = _SCALAR_TYPES.get(variable_type.kind)
    if scalar is not None:
        return scalar
    if variable_type.kind is VariableKind.ARRAY and variable_type.inner is not None:
        return f"Vec<{variable_type_to_rust_type(variable_type.inner)}>"
    return variable_type.name or ""


def _prefixed(visibility: str, text: str) -> str:
    return f"{visibility} {text}" if visibility else text


class RustWriter:
    """Serializes models into Rust source text.

    Args:
        visibility: Visibility modifier for structs and fields (``""`` for private).
        indent: Number of spaces before each field line.
    """

    def __init__(self, visibility: str = DEFAULT_VISIBILITY, indent: int = DEFAULT_INDENT) -> None:
        self.visibility = visibility
        self.indent = indent

    @classmethod
    def from_config(cls, config: WriterConfig) -> RustWriter:
        return cls(visibility=config.visibility, indent=config.indent)

    def write_variable(self, var: Variable) -> str:
        rust_type = variable_type_to_rust_type(var.variable_type)
        if var.optional:
            rust_type = f"Option<{rust_type}>"
        return _prefixed(self.visibility, f"{var.name}: {rust_type},")

    def write_model(self, model: Model) -> str:
        header = _prefixed(self.visibility, f"struct {model.name}")
        if not model.vars:
            return header + " {}"
        pad = " " * self.indent
        fields = "".join(f"{pad}{self.write_variable(var)}\n" for var in model.vars)
        return f"{header} {{\n{fields}}}"

    def write_project(self, project: Project) -> str:
        """Concatenate every model's declaration, separated by blank lines."""
        if not project.models:
            return ""
        return "\n\n".join(self.write_model(model) for model in project.models) + "\n"


def write_model(model: Model) -> str:
    """Render one model with the default layout."""
    return RustWriter().write_model(model)


def write_project(project: Project) -> str:
    """Render a whole project with the default layout."""
    return RustWriter().write_project(project)
