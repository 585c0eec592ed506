"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class CopyArgs:
    """Command line arguments for the one-shot ``copy`` subcommand."""

    command: Literal["copy"]
    sources: list[Path]
    target_path: Path
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ShellArgs:
    """Command line arguments for the interactive ``shell`` subcommand."""

    command: Literal["shell"]
    start_path: Path
    verbose: bool
    quiet: bool
    no_feedback: bool


CLIArgs = CopyArgs | ShellArgs

__all__ = ["CLIArgs", "CopyArgs", "ShellArgs"]
