"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Glyphtrace[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_path_info(
    node_count: int,
    bounds: tuple[float, float, float, float] | None,
) -> None:
    """Print outline statistics.

    Args:
        node_count: Number of outline points
        bounds: (x_min, y_min, x_max, y_max) or None for an empty outline
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_row("Nodes", str(node_count))
    if bounds is None:
        table.add_row("Bounds", "empty")
    else:
        x_min, y_min, x_max, y_max = bounds
        table.add_row("Bounds", f"{x_min:g},{y_min:g} {SYM_DOT} {x_max:g},{y_max:g}")
        table.add_row("Size", f"{x_max - x_min:g} x {y_max - y_min:g}")
    console.print(table)


def print_path(description: str) -> None:
    """Print a path description on its own line.

    Args:
        description: Serialized outline
    """
    # Text keeps rich from reading brackets in the path as markup
    console.print(Text(description or "(empty)"), soft_wrap=True)


def print_change(before: int, after: int) -> None:
    """Print how an edit changed the node count."""
    console.print(f"  {before} {SYM_STEP} {after} nodes")


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"[bold green]{SYM_OK}[/bold green] {message}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
