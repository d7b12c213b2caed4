"""CLI application entry point for glyphtrace.

This module provides a small Typer interface over the path engine, useful
for inspecting and transforming stored path descriptions.
"""

from pathlib import Path
from typing import Annotated

import structlog
import typer

from glyphtrace import __version__
from glyphtrace.cli.output import (
    console,
    print_change,
    print_error,
    print_header,
    print_path,
    print_path_info,
    print_step,
    print_success,
)
from glyphtrace.config import EditorConfig, LoggingConfig
from glyphtrace.core import PathModel, decimate, smooth
from glyphtrace.exceptions import PathError
from glyphtrace.io import path_bounds
from glyphtrace.utils import configure_logging

logger = structlog.get_logger(__name__)

# Create the Typer app
app = typer.Typer(
    name="glyphtrace",
    help="Inspect and refine traced glyph outlines.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Glyphtrace[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Console logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
) -> None:
    """Inspect and refine traced glyph outlines."""
    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(f"Unknown log level: {log_level}")
        raise typer.Exit(code=1)

    config = LoggingConfig(log_file=log_file, log_level=log_level.upper())
    configure_logging(
        log_file=config.log_file,
        console_level=config.log_level,
        file_level=config.file_log_level,
    )


def _load(description: str) -> PathModel:
    """Parse a path argument, turning errors into a clean exit."""
    try:
        return PathModel.from_description(description)
    except PathError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None


@app.command()
def inspect(
    path: Annotated[
        str,
        typer.Argument(help="Path description, e.g. 'M0 0L10 0L10 10Z'", show_default=False),
    ],
) -> None:
    """Show node count and bounds of a path description."""
    model = _load(path)
    print_header(__version__)
    print_path_info(len(model), path_bounds(model.points))


@app.command(name="smooth")
def smooth_command(
    path: Annotated[
        str,
        typer.Argument(help="Path description to smooth", show_default=False),
    ],
    times: Annotated[
        int,
        typer.Option("--times", "-n", help="Number of smoothing passes", min=1, max=8),
    ] = 1,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Print only the resulting path"),
    ] = False,
) -> None:
    """Cut the corners of a path, doubling its nodes on each pass."""
    model = _load(path)
    before = len(model)
    for _ in range(times):
        model.replace_all(smooth(model.points))
    logger.info("Path smoothed", passes=times, nodes_before=before, nodes_after=len(model))

    if not quiet:
        print_step(f"Smoothed {times}x")
        print_change(before, len(model))
    print_path(model.to_description())


@app.command(name="simplify")
def simplify_command(
    path: Annotated[
        str,
        typer.Argument(help="Path description to simplify", show_default=False),
    ],
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Print only the resulting path"),
    ] = False,
) -> None:
    """Drop every other node of a path with enough nodes."""
    model = _load(path)
    before = len(model)
    min_points = EditorConfig().decimate_min_points
    model.replace_all(decimate(model.points, min_points))
    logger.info("Path simplified", nodes_before=before, nodes_after=len(model))

    if not quiet:
        print_step("Simplified")
        print_change(before, len(model))
        if before == len(model):
            print_success(f"Already at or below {min_points} nodes, unchanged")
    print_path(model.to_description())


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
