"""Command-line interface for svg2librepcb.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Metadata, UUID, layer and geometry options
- Verbose/quiet output modes
- Inkscape-compatible SVG echo
- Detailed error reporting
"""

from svg2librepcb.cli.app import cli, main

__all__ = ["cli", "main"]
