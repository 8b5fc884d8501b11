"""Canonical, language-agnostic model of extracted declarations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class VariableKind(Enum):
    """Tag of a canonical variable type."""

    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    ARRAY = "array"
    COMPLEX = "complex"


@dataclass(frozen=True)
class VariableType:
    """Canonical type of a field.

    ``ARRAY`` always carries an ``inner`` type; ``COMPLEX`` carries the
    ``name`` of a declared (or unknown) type.  Use the constructors below
    rather than building instances directly.
    """

    kind: VariableKind
    inner: VariableType | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        if self.kind is VariableKind.ARRAY and self.inner is None:
            raise ValueError("Array type requires an inner type")
        if self.kind is VariableKind.COMPLEX and self.name is None:
            raise ValueError("Complex type requires a name")

    @classmethod
    def string(cls) -> VariableType:
        return cls(VariableKind.STRING)

    @classmethod
    def integer(cls) -> VariableType:
        return cls(VariableKind.INT)

    @classmethod
    def floating(cls) -> VariableType:
        return cls(VariableKind.FLOAT)

    @classmethod
    def boolean(cls) -> VariableType:
        return cls(VariableKind.BOOL)

    @classmethod
    def array(cls, inner: VariableType) -> VariableType:
        return cls(VariableKind.ARRAY, inner=inner)

    @classmethod
    def complex(cls, name: str) -> VariableType:
        return cls(VariableKind.COMPLEX, name=name)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dict."""
        data: dict[str, Any] = {"kind": self.kind.value}
        if self.inner is not None:
            data["inner"] = self.inner.to_dict()
        if self.name is not None:
            data["name"] = self.name
        return data

    def __str__(self) -> str:
        if self.kind is VariableKind.ARRAY:
            return f"Array({self.inner})"
        if self.kind is VariableKind.COMPLEX:
            return f"Complex({self.name})"
        return self.kind.name.capitalize()


@dataclass
class Variable:
    """A single named field of a declaration."""

    name: str
    """Field name (never empty)."""

    variable_type: VariableType
    """Canonical type of the field."""

    optional: bool = False
    """Whether the source wrapped the type in ``Option<...>``."""

    value: str | None = None
    """Literal placeholder; always ``None`` on extraction."""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Variable name must not be empty")

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "optional": self.optional,
            "value": self.value,
            "variable_type": self.variable_type.to_dict(),
        }


@dataclass
class Model:
    """A named declaration and its fields in source order."""

    name: str
    vars: list[Variable] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "vars": [var.to_dict() for var in self.vars]}


@dataclass
class Project:
    """Ordered collection of models handed to a writer."""

    models: list[Model] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"models": [model.to_dict() for model in self.models]}
