"""Where: src/stagecopy/ui/cli/display/status.py
What: Render user-facing status lines for copy list operations.
Why: Keep message wording out of the staging use cases.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.markup import escape

from stagecopy.features.staging import (
    CollectMode,
    CollectResult,
    CommitResult,
    CopyFailureError,
    StagingError,
)


def _plural(count: int) -> str:
    return "item" if count == 1 else "items"


@final
class StatusDisplay:
    """Handles status messages in the CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_collect(self, result: CollectResult, *, quiet: bool = False) -> None:
        if quiet:
            return
        if result.mode is CollectMode.NOTHING:
            self.console.print("[yellow]Nothing under the cursor to copy[/yellow]")
        elif result.mode is CollectMode.MARKED:
            self.console.print(
                f"[cyan]Copy list now holds {result.count} marked {_plural(result.count)}[/cyan]"
            )
        elif result.outcome is not None:
            name = escape(result.outcome.path.name)
            if result.duplicate:
                self.console.print(f"[yellow]{name} is already in the copy list[/yellow]")
            else:
                self.console.print(f"[cyan]Added {name} to the copy list[/cyan]")

    def show_paste(self, result: CommitResult, *, quiet: bool = False) -> None:
        if quiet:
            return
        count = result.copied_count
        target = escape(str(result.target_dir))
        if result.single_item and result.last_basename is not None:
            self.console.print(
                f"[green]Pasted {escape(result.last_basename)} to {target}[/green]"
            )
        else:
            self.console.print(f"[green]Pasted {count} {_plural(count)} to {target}[/green]")

    def show_pending(self, lines: Sequence[str], *, quiet: bool = False) -> None:
        if quiet:
            return
        if not lines:
            self.console.print("No items in copy list")
            return
        self.console.print(f"[bold]Copy list ({len(lines)} {_plural(len(lines))}):[/bold]")
        for line in lines:
            self.console.print(f"  • {escape(line)}")

    def show_cleared(self, *, quiet: bool = False) -> None:
        if quiet:
            return
        self.console.print("Copy list cleared")

    def show_error(self, error: StagingError) -> None:
        """Errors are printed even in quiet mode."""

        self.console.print(f"[red]{escape(str(error))}[/red]")
        if isinstance(error, CopyFailureError):
            if error.copied_count:
                self.console.print(
                    f"[yellow]{error.copied_count} {_plural(error.copied_count)} copied before the "
                    "failure; the copy list was kept so the paste can be retried[/yellow]"
                )
            else:
                self.console.print("[yellow]The copy list was kept so the paste can be retried[/yellow]")


__all__ = ["StatusDisplay"]
