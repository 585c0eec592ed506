"""Command execution package for CLI."""

from stagecopy.ui.cli.commands.copy import CopyCommand
from stagecopy.ui.cli.commands.shell import ShellCommand

__all__ = ["CopyCommand", "ShellCommand"]
