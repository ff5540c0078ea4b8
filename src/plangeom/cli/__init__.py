"""Command-line interface for plangeom.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Boolean operations on rings stored as JSON
- Face listing with vertex loops and areas
- Edge splitting queries
- Graph consistency checks
"""

from plangeom.cli.app import cli, main

__all__ = ["cli", "main"]
