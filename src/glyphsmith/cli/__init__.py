"""Command-line interface for glyphsmith.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Style selection and listing
- Dry-run simplification report
- Verbose/quiet output modes
- Detailed error reporting
"""

from glyphsmith.cli.app import cli, main

__all__ = ["cli", "main"]
