"""Command-line interface for glyphtrace.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Node count and bounds of a path description
- Smoothing and simplification of stored outlines
- Clear parse error reporting
"""

from glyphtrace.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
