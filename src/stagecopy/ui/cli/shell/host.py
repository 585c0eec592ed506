"""Terminal listing that plays the host role for the staging ports."""

from __future__ import annotations

from concurrent.futures import Future
from pathlib import Path

from stagecopy.platform.filesystem import absolute_path


class TerminalListing:
    """In-memory view of one directory with a cursor and marks.

    Implements ``SelectionSource`` and ``ListingView``. Refreshing is
    synchronous, so ``refresh`` never hands back a future.
    """

    directory: Path
    entries: list[Path]
    cursor: Path | None
    _marks: set[Path]

    def __init__(self, directory: Path) -> None:
        self.directory = absolute_path(directory)
        self.entries = []
        self.cursor = None
        self._marks = set()
        self._read()

    # SelectionSource -------------------------------------------------------

    def marked_items(self) -> list[Path]:
        return [entry for entry in self.entries if entry in self._marks]

    def current_item(self) -> Path | None:
        return self.cursor

    def current_directory(self) -> Path:
        return self.directory

    # ListingView -----------------------------------------------------------

    def refresh(self, directory: Path) -> Future[None] | None:
        if absolute_path(directory) == self.directory:
            self._read()
        return None

    def locate(self, path: Path) -> bool:
        if path in self.entries:
            self.cursor = path
            return True
        return False

    # Navigation ------------------------------------------------------------

    def change_directory(self, target: Path | str) -> Path:
        candidate = absolute_path(self.directory / target)
        if not candidate.is_dir():
            raise NotADirectoryError(f"Not a directory: {candidate}")
        previous = self.directory
        self.directory = candidate
        self._marks.clear()
        self.cursor = None
        self._read()
        if previous.parent == candidate:
            _ = self.locate(previous)
        return candidate

    def resolve_entry(self, name: str) -> Path:
        candidate = self.directory / name
        if candidate not in self.entries:
            raise FileNotFoundError(f"No entry named {name!r} in {self.directory}")
        return candidate

    def point(self, name: str) -> Path:
        entry = self.resolve_entry(name)
        self.cursor = entry
        return entry

    def mark(self, names: list[str]) -> list[Path]:
        entries = [self.resolve_entry(name) for name in names]
        self._marks.update(entries)
        return entries

    def unmark(self, names: list[str] | None = None) -> None:
        if names is None:
            self._marks.clear()
            return
        for name in names:
            self._marks.discard(self.resolve_entry(name))

    def is_marked(self, entry: Path) -> bool:
        return entry in self._marks

    def _read(self) -> None:
        try:
            children = list(self.directory.iterdir())
        except OSError:
            children = []
        self.entries = sorted(children, key=lambda entry: (not entry.is_dir(), entry.name.lower()))
        self._marks.intersection_update(self.entries)
        if self.cursor not in self.entries:
            self.cursor = self.entries[0] if self.entries else None


__all__ = ["TerminalListing"]
