"""Command line argument parsing."""

from .options import CLIArgs, CopyArgs, ShellArgs
from .parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "CopyArgs", "ShellArgs"]
