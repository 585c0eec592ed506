"""Best-effort cursor placement on a freshly pasted entry."""

from __future__ import annotations

import time
from collections.abc import Callable
from concurrent.futures import CancelledError, Future
from logging import Logger, getLogger
from pathlib import Path

from .events import StagingEvent
from .ports import ListingView


def place_cursor(
    view: ListingView,
    path: Path,
    *,
    refresh_signal: Future[None] | None,
    attempts: int,
    interval: float,
    sleep: Callable[[float], None] = time.sleep,
    logger: Logger | None = None,
) -> bool:
    """Move the view cursor onto ``path`` once the refreshed listing shows it.

    With a refresh future the wait is bounded by ``attempts * interval``
    and the entry is looked up once. Without one the listing is polled up
    to ``attempts`` times. Giving up, including on an error raised by the
    view, is silent apart from a log record.
    """

    log = logger or getLogger(__name__)
    attempts = max(attempts, 1)

    if refresh_signal is not None:
        try:
            refresh_signal.result(timeout=attempts * interval)
        except TimeoutError:
            _log_missed(log, path, attempts, "listing refresh timed out")
            return False
        except CancelledError:
            _log_missed(log, path, attempts, "listing refresh cancelled")
            return False
        except Exception as exc:
            _log_view_failure(log, path, "Listing refresh failed before cursor placement", exc)
            return False
        try:
            found = view.locate(path)
        except Exception as exc:
            _log_view_failure(log, path, "Listing lookup failed", exc)
            return False
        if found:
            _log_placed(log, path, 1)
            return True
        _log_missed(log, path, 1, "entry not in refreshed listing")
        return False

    for attempt in range(1, attempts + 1):
        try:
            found = view.locate(path)
        except Exception as exc:
            _log_view_failure(log, path, "Listing lookup failed", exc)
            return False
        if found:
            _log_placed(log, path, attempt)
            return True
        if attempt < attempts:
            sleep(interval)

    _log_missed(log, path, attempts, "entry never appeared")
    return False


def _log_placed(log: Logger, path: Path, attempts: int) -> None:
    log.debug(
        "Cursor placed on %s after %d attempt(s)",
        path,
        attempts,
        extra={
            "staging_event": StagingEvent.CURSOR_PLACED.value,
            "source_path": str(path),
            "source_base_path": str(path.parent),
            "attempts": attempts,
        },
    )


def _log_missed(log: Logger, path: Path, attempts: int, reason: str) -> None:
    log.debug(
        "Cursor not placed on %s: %s",
        path,
        reason,
        extra={
            "staging_event": StagingEvent.CURSOR_MISSED.value,
            "source_path": str(path),
            "source_base_path": str(path.parent),
            "attempts": attempts,
            "error_message": reason,
        },
    )


def _log_view_failure(log: Logger, path: Path, message: str, exc: Exception) -> None:
    log.warning(
        "%s: %s",
        message,
        exc,
        extra={
            "staging_event": StagingEvent.CURSOR_MISSED.value,
            "source_path": str(path),
            "source_base_path": str(path.parent),
            "error_message": str(exc) or exc.__class__.__name__,
        },
    )


__all__ = ["place_cursor"]
