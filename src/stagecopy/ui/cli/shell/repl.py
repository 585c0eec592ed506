"""Interactive command loop for browsing and collecting items."""

from __future__ import annotations

import cmd
import shlex
from typing import override

from rich.markup import escape

from stagecopy.application.services.staging_service import StagingSession
from stagecopy.features.staging import StagingError
from stagecopy.ui.cli.display.listing import ListingDisplay
from stagecopy.ui.cli.display.status import StatusDisplay

from .host import TerminalListing


class StagingShell(cmd.Cmd):
    """Browse directories, collect entries, and paste them elsewhere."""

    intro = "Type help or ? to list commands."

    def __init__(
        self,
        *,
        listing: TerminalListing,
        session: StagingSession,
        status: StatusDisplay,
        listing_display: ListingDisplay,
        quiet: bool = False,
    ) -> None:
        super().__init__()
        self.listing = listing
        self.session = session
        self.status = status
        self.listing_display = listing_display
        self.quiet = quiet

    @property
    def prompt(self) -> str:  # pyright: ignore[reportIncompatibleVariableOverride]
        return f"stagecopy [{self.session.size()}] {self.listing.directory.name or '/'}> "

    @override
    def emptyline(self) -> bool:
        return False

    @override
    def default(self, line: str) -> None:
        self._error(f"Unknown command: {line.split()[0]}")

    def do_ls(self, _arg: str) -> None:
        """ls: show the current directory (> cursor, * marked, C in copy list)."""
        _ = self.listing.refresh(self.listing.directory)
        self.listing_display.show_listing(
            self.listing.directory,
            self.listing.entries,
            cursor=self.listing.cursor,
            marked=self.listing.is_marked,
            staged=lambda entry: entry in self.session.pending,
        )

    def do_cd(self, arg: str) -> None:
        """cd [DIR]: change directory (parent by default); marks are dropped, the copy list is kept."""
        parts = self._split(arg)
        if parts is None:
            return
        target = parts[0] if parts else ".."
        try:
            _ = self.listing.change_directory(target)
        except OSError as exc:
            self._error(str(exc))
            return
        self.do_ls("")

    def do_point(self, arg: str) -> None:
        """point NAME: move the cursor onto an entry."""
        name = self._single_argument(arg)
        if name is None:
            self._error("Usage: point NAME")
            return
        try:
            _ = self.listing.point(name)
        except FileNotFoundError as exc:
            self._error(str(exc))

    def do_mark(self, arg: str) -> None:
        """mark NAME...: mark entries for the next copy."""
        names = self._split(arg)
        if names is None:
            return
        if not names:
            self._error("Usage: mark NAME...")
            return
        try:
            _ = self.listing.mark(names)
        except FileNotFoundError as exc:
            self._error(str(exc))

    def do_unmark(self, arg: str) -> None:
        """unmark [NAME...]: remove marks; without names every mark is removed."""
        names = self._split(arg)
        if names is None:
            return
        try:
            self.listing.unmark(names or None)
        except FileNotFoundError as exc:
            self._error(str(exc))

    def do_copy(self, _arg: str) -> None:
        """copy: put marked entries on the copy list, or add the entry under the cursor."""
        result = self.session.smart_copy(self.listing)
        self.status.show_collect(result, quiet=self.quiet)

    def do_paste(self, _arg: str) -> None:
        """paste: copy every listed item into the current directory and clear the list."""
        try:
            result = self.session.paste(self.listing.current_directory())
        except StagingError as exc:
            self.status.show_error(exc)
            return
        self.status.show_paste(result, quiet=self.quiet)

    def do_list(self, _arg: str) -> None:
        """list: show the copy list relative to the current directory."""
        self.status.show_pending(self.session.describe(self.listing.current_directory()))

    def do_clear(self, _arg: str) -> None:
        """clear: empty the copy list."""
        self.session.clear()
        self.status.show_cleared(quiet=self.quiet)

    def do_quit(self, _arg: str) -> bool:
        """quit: leave the shell; the copy list is discarded."""
        return True

    do_exit = do_quit

    def do_EOF(self, _arg: str) -> bool:  # noqa: N802 - cmd.Cmd naming
        self.status.console.print()
        return True

    def _split(self, arg: str) -> list[str] | None:
        try:
            return shlex.split(arg)
        except ValueError as exc:
            self._error(f"Cannot parse arguments: {exc}")
            return None

    def _single_argument(self, arg: str) -> str | None:
        parts = self._split(arg)
        return parts[0] if parts else None

    def _error(self, message: str) -> None:
        self.status.console.print(f"[red]{escape(message)}[/red]")


__all__ = ["StagingShell"]
