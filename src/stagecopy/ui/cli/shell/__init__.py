"""Interactive terminal host for the copy list."""

from .host import TerminalListing
from .repl import StagingShell

__all__ = ["StagingShell", "TerminalListing"]
