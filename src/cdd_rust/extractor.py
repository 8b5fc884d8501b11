"""Extract canonical models from source text or files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from cdd_rust.errors import ParseError
from cdd_rust.models import Model, Project, Variable
from cdd_rust.parsing.languages import get_extractor
from cdd_rust.parsing.treesitter import collect_error_ranges, detect_language, has_parse_errors
from cdd_rust.utils.files import read_file

if TYPE_CHECKING:
    from collections.abc import Mapping

    import tree_sitter

logger = logging.getLogger(__name__)


def build_models(structs: Mapping[str, list[Variable]]) -> list[Model]:
    """Convert a name -> fields mapping into models, keeping mapping order."""
    return [Model(name=name, vars=list(variables)) for name, variables in structs.items()]


def extract_from_tree(
    tree: tree_sitter.Tree,
    language: str = "rust",
    *,
    faithful_generics: bool = False,
) -> list[Model]:
    """Build models from an already parsed syntax tree.

    Raises:
        ParseError: If the tree contains error nodes.
        UnnamedFieldError: If a declaration has a positional field.
    """
    root = tree.root_node
    if has_parse_errors(root):
        raise ParseError(collect_error_ranges(root))
    extractor = get_extractor(language, faithful_generics=faithful_generics)
    return build_models(extractor.visit(root))


def extract_from_source(
    source: str | bytes,
    language: str = "rust",
    *,
    faithful_generics: bool = False,
) -> list[Model]:
    """Parse *source* and build one model per declaration.

    Extraction is all-or-nothing: any failure raises and no models are returned.
    """
    data = source.encode("utf-8") if isinstance(source, str) else source
    extractor = get_extractor(language, faithful_generics=faithful_generics)
    models = build_models(extractor.extract(data))
    logger.debug("Extracted %d model(s)", len(models))
    return models


def extract_from_file(
    file_path: str | Path,
    language: str | None = None,
    *,
    faithful_generics: bool = False,
) -> list[Model]:
    """Read a file and build its models.

    Detects language from file extension, falling back to *language* when
    the extension is not recognised.

    Raises:
        ValueError: If the language cannot be detected.
        FileReadError: If the file cannot be read.
    """
    path = Path(file_path)
    language = detect_language(path) or language
    if language is None:
        raise ValueError(f"Cannot detect language for: {path}")
    logger.debug("Extracting %s declarations from %s", language, path)
    return extract_from_source(read_file(path), language, faithful_generics=faithful_generics)


def extract_project(
    file_path: str | Path,
    language: str | None = None,
    *,
    faithful_generics: bool = False,
) -> Project:
    """Extract a file's models as a :class:`Project` ready for a writer."""
    models = extract_from_file(file_path, language, faithful_generics=faithful_generics)
    return Project(models=models)
