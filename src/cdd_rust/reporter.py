"""Terminal reporter with rich output formatting."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from cdd_rust.utils.files import truncate

if TYPE_CHECKING:
    from cdd_rust.models import Model

console = Console()

_MAX_FIELD_NAME_LENGTH = 30
_MAX_TYPE_LENGTH = 40


class CLIReporter:
    """Rich terminal output for extraction results."""

    def __init__(self, output: Console | None = None) -> None:
        self.console = output or console

    def print_header(self, title: str) -> None:
        """Print a bold header."""
        self.console.print(f"\n[bold cyan]{title}[/bold cyan]\n")

    def print_success(self, message: str) -> None:
        """Print a success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def print_error(self, message: str) -> None:
        """Print an error message."""
        self.console.print(f"[red]✗[/red] {message}")

    def print_warning(self, message: str) -> None:
        """Print a warning message."""
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    def print_models(self, models: list[Model]) -> None:
        """Render one table per model listing its fields in order."""
        if not models:
            self.print_warning("No struct declarations found")
            return

        for model in models:
            table = Table(title=f"[bold]{model.name}[/bold]", title_justify="left")
            table.add_column("#", justify="right", style="dim")
            table.add_column("Field", style="cyan")
            table.add_column("Type")
            table.add_column("Optional", justify="center")

            for index, var in enumerate(model.vars, start=1):
                table.add_row(
                    str(index),
                    truncate(var.name, _MAX_FIELD_NAME_LENGTH),
                    truncate(str(var.variable_type), _MAX_TYPE_LENGTH),
                    "[green]yes[/green]" if var.optional else "[dim]no[/dim]",
                )
            if not model.vars:
                table.add_row("", "[dim](no fields)[/dim]", "", "")
            self.console.print(table)

        self.print_success(f"{len(models)} struct(s) extracted")


reporter = CLIReporter()
