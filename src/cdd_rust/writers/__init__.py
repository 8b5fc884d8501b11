"""Declaration writers for canonical models."""

from cdd_rust.writers.rust import (
    RustWriter,
    variable_type_to_rust_type,
    write_model,
    write_project,
)

__all__ = [
    "RustWriter",
    "variable_type_to_rust_type",
    "write_model",
    "write_project",
]
