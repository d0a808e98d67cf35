"""Command-line interface for shapekit.

This module provides the CLI using Typer with rich output:

- Segment stream listing, optionally flattened
- Point containment queries
- Rectangle classification and intersection queries
"""

from shapekit.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
