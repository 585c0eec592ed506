"""Use case pasting the copy list into a destination directory."""

from __future__ import annotations

import errno
import shutil
import time
from collections.abc import Callable
from logging import Logger, getLogger
from pathlib import Path

from stagecopy.config.settings import CURSOR_POLL_ATTEMPTS, CURSOR_POLL_INTERVAL
from stagecopy.platform.filesystem import absolute_path

from ..domain.errors import CopyFailureError, EmptyPendingSetError
from ..domain.models import CommitResult, PendingSet
from .cursor import place_cursor
from .events import StagingEvent
from .ports import FeedbackEmitter, FileSystemGateway, ListingView


class CommitEngine:
    """Copy every staged item into a directory and clear the list on success."""

    _filesystem: FileSystemGateway
    _view: ListingView | None
    _feedback: FeedbackEmitter | None
    _poll_attempts: int
    _poll_interval: float
    _sleep: Callable[[float], None]
    _logger: Logger

    def __init__(
        self,
        *,
        filesystem: FileSystemGateway,
        view: ListingView | None = None,
        feedback: FeedbackEmitter | None = None,
        poll_attempts: int = CURSOR_POLL_ATTEMPTS,
        poll_interval: float = CURSOR_POLL_INTERVAL,
        sleep: Callable[[float], None] = time.sleep,
        logger: Logger | None = None,
    ) -> None:
        self._filesystem = filesystem
        self._view = view
        self._feedback = feedback
        self._poll_attempts = poll_attempts
        self._poll_interval = poll_interval
        self._sleep = sleep
        self._logger = logger or getLogger(__name__)

    def commit(self, pending: PendingSet, target_dir: Path) -> CommitResult:
        """Copy ``pending`` into ``target_dir`` in stored order.

        Raises:
            EmptyPendingSetError: Nothing is staged; the filesystem is untouched.
            InvalidTargetError: ``target_dir`` cannot receive copies.
            CopyFailureError: An item failed; later items are skipped and
                ``pending`` keeps every entry.
        """

        if pending.is_empty():
            self._logger.info(
                "Nothing to paste",
                extra={"staging_event": StagingEvent.COMMIT_EMPTY.value},
            )
            raise EmptyPendingSetError()

        target_dir = absolute_path(target_dir)
        self._filesystem.check_target(target_dir)

        items = pending.snapshot()
        total = len(items)
        started = time.perf_counter()
        self._logger.debug(
            "Pasting %d item(s) into %s",
            total,
            target_dir,
            extra={
                "staging_event": StagingEvent.COMMIT_START.value,
                "target_dir": str(target_dir),
                "item_count": total,
            },
        )

        copied: list[Path] = []
        last_basename: str | None = None
        for sequence, item in enumerate(items, start=1):
            destination = target_dir / item.name
            self._logger.debug(
                "Copying %s -> %s",
                item,
                destination,
                extra={
                    "staging_event": StagingEvent.COMMIT_COPY.value,
                    "sequence": sequence,
                    "total_items": total,
                    "source_path": str(item),
                    "source_base_path": str(item.parent),
                    "target_path": str(destination),
                    "target_dir": str(target_dir),
                },
            )
            try:
                self._copy_item(item, destination)
            except (OSError, ValueError) as exc:
                self._logger.error(
                    "Failed to copy %s: %s",
                    item,
                    exc,
                    extra={
                        "staging_event": StagingEvent.COMMIT_ERROR.value,
                        "sequence": sequence,
                        "total_items": total,
                        "source_path": str(item),
                        "source_base_path": str(item.parent),
                        "error_message": str(exc) or exc.__class__.__name__,
                    },
                )
                raise CopyFailureError(
                    item,
                    exc,
                    copied_count=len(copied),
                    completed=copied,
                ) from exc
            copied.append(destination)
            last_basename = item.name

        pending.clear()
        self._logger.info(
            "Pasted %d item(s) into %s",
            len(copied),
            target_dir,
            extra={
                "staging_event": StagingEvent.COMMIT_COMPLETE.value,
                "target_dir": str(target_dir),
                "item_count": len(copied),
                "duration_seconds": round(time.perf_counter() - started, 4),
            },
        )

        cursor_placed = self._reveal(target_dir, last_basename)
        self._pulse(copied)

        return CommitResult(
            copied_count=len(copied),
            target_dir=target_dir,
            last_basename=last_basename,
            single_item=total == 1,
            cursor_placed=cursor_placed,
        )

    def _copy_item(self, item: Path, destination: Path) -> None:
        if destination == item:
            raise shutil.SameFileError(f"{item} would be copied onto itself")
        if self._filesystem.is_dir(item):
            if destination.is_relative_to(item):
                raise ValueError(f"Cannot copy directory {item} into itself")
            self._filesystem.copy_tree(item, destination)
            return
        if self._filesystem.is_dir(destination):
            raise IsADirectoryError(
                errno.EISDIR, "Cannot overwrite a directory with a file", str(destination)
            )
        self._filesystem.copy_file(item, destination)

    def _reveal(self, target_dir: Path, last_basename: str | None) -> bool:
        if self._view is None or last_basename is None:
            return False
        try:
            refresh_signal = self._view.refresh(target_dir)
        except Exception as exc:
            self._logger.warning(
                "Listing refresh failed after paste: %s",
                exc,
                extra={
                    "staging_event": StagingEvent.CURSOR_MISSED.value,
                    "target_dir": str(target_dir),
                    "error_message": str(exc) or exc.__class__.__name__,
                },
            )
            return False
        return place_cursor(
            self._view,
            target_dir / last_basename,
            refresh_signal=refresh_signal,
            attempts=self._poll_attempts,
            interval=self._poll_interval,
            sleep=self._sleep,
            logger=self._logger,
        )

    def _pulse(self, copied: list[Path]) -> None:
        if self._feedback is None:
            return
        try:
            self._feedback.pulse(copied)
        except Exception as exc:
            self._logger.warning("Paste feedback failed: %s", exc)


__all__ = ["CommitEngine"]
