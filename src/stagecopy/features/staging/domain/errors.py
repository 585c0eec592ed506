"""Errors raised while pasting the copy list."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class StagingError(Exception):
    """Base class for copy list failures reported to the user."""


class EmptyPendingSetError(StagingError):
    """Raised when a paste is requested with nothing staged."""

    def __init__(self) -> None:
        super().__init__("No items in copy list")


class InvalidTargetError(StagingError):
    """Raised when the paste destination cannot receive copies."""

    def __init__(self, target: Path, reason: str) -> None:
        super().__init__(f"Cannot paste into {target}: {reason}")
        self.target: Path = target
        self.reason: str = reason


class CopyFailureError(StagingError):
    """Raised when copying one item fails; remaining items are not attempted."""

    def __init__(
        self,
        path: Path,
        cause: BaseException,
        *,
        copied_count: int,
        completed: Sequence[Path] = (),
    ) -> None:
        detail = str(cause) or cause.__class__.__name__
        super().__init__(f"Failed to copy {path}: {detail}")
        self.path: Path = path
        self.cause: BaseException = cause
        self.copied_count: int = copied_count
        self.completed: tuple[Path, ...] = tuple(completed)


__all__ = [
    "CopyFailureError",
    "EmptyPendingSetError",
    "InvalidTargetError",
    "StagingError",
]
