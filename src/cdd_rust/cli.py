"""cdd-rust CLI: top-level command group."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any

import click
import yaml

from cdd_rust import __version__
from cdd_rust.config import CddConfig, load_config, validate_config
from cdd_rust.errors import CddError
from cdd_rust.extractor import extract_from_file
from cdd_rust.models import Model, Project
from cdd_rust.reporter import console, reporter
from cdd_rust.utils.files import write_file
from cdd_rust.utils.log_setup import setup_logging
from cdd_rust.writers import RustWriter

logger = logging.getLogger(__name__)

_SOURCE_ARGUMENT = click.argument(
    "source",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
_FAITHFUL_OPTION = click.option(
    "--faithful-generics",
    is_flag=True,
    help="Map the argument of Option<T>/Vec<T> instead of the legacy placeholders "
    "(also enabled by extract.faithful_generics in .cdd.yml).",
)


def _config_to_dict(config: CddConfig) -> dict[str, Any]:
    """Convert CddConfig to dictionary for display."""
    return asdict(config)


def _load_models(config: CddConfig, source: Path, faithful_generics: bool) -> list[Model]:
    """Run extraction, turning pipeline failures into a reported abort."""
    faithful_generics = faithful_generics or config.extract.faithful_generics
    logger.debug("Extracting %s (faithful_generics=%s)", source, faithful_generics)
    try:
        return extract_from_file(
            source, config.extract.language, faithful_generics=faithful_generics
        )
    except (CddError, ValueError) as e:
        reporter.print_error(str(e))
        raise click.Abort from e


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option(
    "--path",
    default=".",
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    help="Directory containing .cdd.yml.",
)
@click.version_option(version=__version__, prog_name="cdd-rust")
@click.pass_context
def cli(ctx: click.Context, *, verbose: bool, path: str) -> None:
    """cdd-rust: extract Rust structs into a canonical model and regenerate them."""
    setup_logging(is_verbose=verbose)
    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = load_config(path)
    except (yaml.YAMLError, TypeError, ValueError) as e:
        reporter.print_error(f"Failed to load configuration: {e}")
        raise click.Abort from e


@cli.command("extract")
@_SOURCE_ARGUMENT
@click.option("--json", "as_json", is_flag=True, help="Output models as JSON.")
@_FAITHFUL_OPTION
@click.pass_context
def extract_cmd(
    ctx: click.Context, source: Path, *, as_json: bool, faithful_generics: bool
) -> None:
    """Extract struct declarations from SOURCE.

    Example:
      cdd-rust extract src/models.rs --json
    """
    models = _load_models(ctx.obj["config"], source, faithful_generics)

    if as_json:
        click.echo(json.dumps(Project(models=models).to_dict(), indent=2))
        return

    reporter.print_header(str(source))
    reporter.print_models(models)


@cli.command("generate")
@_SOURCE_ARGUMENT
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write generated code to this file instead of stdout.",
)
@_FAITHFUL_OPTION
@click.pass_context
def generate_cmd(
    ctx: click.Context, source: Path, output: Path | None, *, faithful_generics: bool
) -> None:
    """Regenerate struct declarations from SOURCE.

    Example:
      cdd-rust generate src/models.rs -o generated.rs
    """
    config: CddConfig = ctx.obj["config"]
    models = _load_models(config, source, faithful_generics)
    code = RustWriter.from_config(config.writer).write_project(Project(models=models))

    if output is None:
        click.echo(code, nl=False)
        return

    try:
        write_file(output, code)
    except CddError as e:
        reporter.print_error(str(e))
        raise click.Abort from e
    reporter.print_success(f"Wrote {len(models)} struct(s) to {output}")


@cli.group("config")
def config_group() -> None:
    """Inspect `.cdd.yml` configuration."""


@config_group.command("show")
@click.option(
    "--json-output",
    "as_json",
    is_flag=True,
    help="Output as JSON instead of YAML.",
)
@click.pass_context
def config_show(ctx: click.Context, *, as_json: bool) -> None:
    """Display the resolved configuration."""
    config_dict = _config_to_dict(ctx.obj["config"])

    if as_json:
        click.echo(json.dumps(config_dict, indent=2))
    else:
        click.echo(yaml.safe_dump(config_dict, sort_keys=False, default_flow_style=False))


@config_group.command("validate")
@click.pass_context
def config_validate(ctx: click.Context) -> None:
    """Validate `.cdd.yml` configuration values."""
    errors = validate_config(ctx.obj["config"])

    if not errors:
        reporter.print_success("Configuration is valid!")
        return

    reporter.print_error(f"Found {len(errors)} configuration error(s):")
    for idx, error in enumerate(errors, start=1):
        console.print(f"  {idx}. [red]{error}[/red]")
    raise click.Abort
