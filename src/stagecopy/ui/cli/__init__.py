"""Command line interface package."""

from stagecopy.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
