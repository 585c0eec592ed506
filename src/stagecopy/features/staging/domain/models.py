"""Data structures describing the copy list and paste outcomes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from stagecopy.platform.filesystem import absolute_path


@dataclass(slots=True, frozen=True)
class AddOutcome:
    """Result of staging a single item."""

    path: Path
    added: bool


@dataclass(slots=True, frozen=True)
class CommitResult:
    """Outcome of pasting the copy list into a directory."""

    copied_count: int
    target_dir: Path
    last_basename: str | None
    single_item: bool
    cursor_placed: bool = False

    @property
    def cursor_target(self) -> Path | None:
        """Return the entry the cursor should land on after the paste."""

        if self.last_basename is None:
            return None
        return self.target_dir / self.last_basename


class PendingSet:
    """Ordered, duplicate-free collection of absolute paths awaiting copy.

    ``add_all`` replaces the whole collection while ``add_one`` appends
    when absent. Entries are made absolute on insertion.
    """

    _items: list[Path]
    _index: set[Path]

    def __init__(self, paths: Iterable[Path | str] = ()) -> None:
        self._items = []
        self._index = set()
        _ = self.add_all(paths)

    def add_all(self, paths: Iterable[Path | str]) -> int:
        """Replace the collection with ``paths`` and return the new size.

        Repeated paths keep their first position.
        """

        items: list[Path] = []
        index: set[Path] = set()
        for raw in paths:
            path = absolute_path(raw)
            if path in index:
                continue
            index.add(path)
            items.append(path)
        self._items = items
        self._index = index
        return len(items)

    def add_one(self, path: Path | str) -> AddOutcome:
        """Append ``path`` unless it is already staged."""

        candidate = absolute_path(path)
        if candidate in self._index:
            return AddOutcome(path=candidate, added=False)
        self._index.add(candidate)
        self._items.append(candidate)
        return AddOutcome(path=candidate, added=True)

    def clear(self) -> None:
        self._items = []
        self._index = set()

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def snapshot(self) -> tuple[Path, ...]:
        """Return a read-only ordered view of the staged paths."""

        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Path]:
        return iter(self.snapshot())

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, Path)):
            return False
        return absolute_path(path) in self._index

    def __repr__(self) -> str:
        return f"PendingSet({[str(item) for item in self._items]!r})"


__all__ = ["AddOutcome", "CommitResult", "PendingSet"]
