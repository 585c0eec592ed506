"""Ports for the staging feature."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import Future
from pathlib import Path
from typing import Protocol


class SelectionSource(Protocol):
    """Expose what the host listing currently has selected."""

    def marked_items(self) -> Sequence[Path]:
        """Return marked entries in listing order; empty when nothing is marked."""

        ...

    def current_item(self) -> Path | None:
        """Return the entry under the cursor, if any."""

        ...

    def current_directory(self) -> Path:
        """Return the directory the listing shows."""

        ...


class ListingView(Protocol):
    """Listing operations the paste flow drives after copying."""

    def refresh(self, directory: Path) -> Future[None] | None:
        """Re-read ``directory``; return a future when the refresh completes later."""

        ...

    def locate(self, path: Path) -> bool:
        """Move the cursor onto ``path``; return False when no entry matches yet."""

        ...


class FeedbackEmitter(Protocol):
    """Cosmetic highlight of touched entries."""

    def pulse(self, paths: Sequence[Path]) -> None:
        """Briefly highlight ``paths``."""

        ...


class FileSystemGateway(Protocol):
    """Abstract filesystem operations needed by the paste use case."""

    def is_dir(self, path: Path) -> bool:
        """Return True when ``path`` is a directory, following symlinks."""

        ...

    def check_target(self, path: Path) -> None:
        """Raise ``InvalidTargetError`` when ``path`` cannot receive copies."""

        ...

    def copy_tree(self, source: Path, destination: Path) -> None:
        """Recursively copy a directory, merging into and overwriting ``destination``."""

        ...

    def copy_file(self, source: Path, destination: Path) -> None:
        """Copy a single file, overwriting ``destination``."""

        ...


__all__ = [
    "FeedbackEmitter",
    "FileSystemGateway",
    "ListingView",
    "SelectionSource",
]
