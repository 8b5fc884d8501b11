"""cdd-rust: extract Rust struct declarations into a canonical model and write them back."""

__version__ = "0.1.0"
