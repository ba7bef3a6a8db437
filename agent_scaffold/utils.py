"""Shared utility functions for the agent scaffolder.

Provides the Rich console used for operator output, plain and coloured
print helpers, and the directory helper used before files are written.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.table import Table

# Emoji codes are off so ":name:" in project names is printed verbatim.
console = Console(highlight=False, emoji=False)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    An existing directory is not an error.

    Args:
        path: Directory path.

    Returns:
        The ``Path`` object for the directory.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(
    rows: list[tuple[str, ...]],
    columns: tuple[str, ...] = ("Item", "Value"),
    title: str = "Summary",
) -> None:
    """Print a simple table with a bold header row.

    The first column is rendered dim and never wrapped.

    Args:
        rows: Table rows; each tuple must have one entry per column.
        columns: Column headings.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for index, column in enumerate(columns):
        if index == 0:
            table.add_column(column, style="dim", no_wrap=True)
        else:
            table.add_column(column)

    for row in rows:
        table.add_row(*(str(cell) for cell in row))

    console.print(table)
    console.print()


def print_plain(text: str) -> None:
    """Print *text* exactly as given: no markup, emoji codes or wrapping."""
    console.print(text, markup=False, soft_wrap=True)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]", soft_wrap=True)


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]", soft_wrap=True)
