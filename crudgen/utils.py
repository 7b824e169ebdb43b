"""Shared console helpers for crudgen.

Rich-based status messages and summary tables used by the CLI.  The
generator itself never prints; it returns what it wrote and the caller
reports it.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.table import Table

from crudgen.scaffolder.models import GenerationResult

console = Console()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_generation_result(result: GenerationResult, root: Path | None = None) -> None:
    """Print the files a generation run wrote, relative to *root* when given."""
    table = Table(title="Generated files", show_header=True, header_style="bold cyan")
    table.add_column("Kind", style="dim", no_wrap=True)
    table.add_column("Path")

    for kind, path in result.written:
        shown = path
        if root is not None and path.is_relative_to(root):
            shown = path.relative_to(root)
        table.add_row(kind.value, str(shown))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
