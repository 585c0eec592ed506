"""Render a directory listing with cursor, marks, and staged flags."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import final

from rich.console import Console
from rich.table import Table
from rich.text import Text


@final
class ListingDisplay:
    """Handles directory listings in the interactive shell."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_listing(
        self,
        directory: Path,
        entries: Sequence[Path],
        *,
        cursor: Path | None,
        marked: Callable[[Path], bool],
        staged: Callable[[Path], bool],
    ) -> None:
        table = Table(title=str(directory), title_justify="left", box=None, show_header=False)
        table.add_column("cursor", width=1)
        table.add_column("flags", width=2)
        table.add_column("name")

        if not entries:
            self.console.print(table)
            self.console.print("  (empty)")
            return

        for entry in entries:
            pointer = ">" if entry == cursor else " "
            flags = ("*" if marked(entry) else " ") + ("C" if staged(entry) else " ")
            name = Text(entry.name + ("/" if entry.is_dir() else ""))
            if entry.is_dir():
                name.stylize("bold blue")
            if entry == cursor:
                name.stylize("reverse")
            table.add_row(pointer, flags, name)
        self.console.print(table)


__all__ = ["ListingDisplay"]
