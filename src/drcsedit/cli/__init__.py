"""Command-line interface for drcsedit.

This module provides the CLI using Typer with rich output for
inspecting, previewing and creating soft fonts.

Key features:
- Font summaries with detected cell geometry
- Text or VT420 previews of glyphs
- New fonts from device presets
- 7-bit/8-bit control conversion
"""

from drcsedit.cli.app import cli, main

__all__ = ["cli", "main"]
