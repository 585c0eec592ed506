"""Use cases that stage listing entries on the copy list."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from logging import Logger, getLogger
from pathlib import Path

from ..domain.models import AddOutcome, PendingSet
from .events import StagingEvent
from .ports import FeedbackEmitter, SelectionSource


class CollectMode(StrEnum):
    """How a smart copy staged the selection."""

    MARKED = "marked"
    CURRENT = "current"
    NOTHING = "nothing"


@dataclass(slots=True, frozen=True)
class CollectResult:
    """Outcome of a smart copy, carrying what status messages need."""

    mode: CollectMode
    count: int
    outcome: AddOutcome | None = None

    @property
    def duplicate(self) -> bool:
        return self.outcome is not None and not self.outcome.added


class CollectService:
    """Stage marked entries, or the entry under the cursor, on a copy list."""

    _feedback: FeedbackEmitter | None
    _logger: Logger

    def __init__(
        self,
        *,
        feedback: FeedbackEmitter | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._feedback = feedback
        self._logger = logger or getLogger(__name__)

    def smart_copy(self, pending: PendingSet, selection: SelectionSource) -> CollectResult:
        """Replace the list with marked entries, or append the current one."""

        marked = list(selection.marked_items())
        if marked:
            count = self.add_marked(pending, marked)
            return CollectResult(mode=CollectMode.MARKED, count=count)

        current = selection.current_item()
        if current is None:
            return CollectResult(mode=CollectMode.NOTHING, count=0)

        outcome = self.add_current(pending, current)
        return CollectResult(mode=CollectMode.CURRENT, count=1 if outcome.added else 0, outcome=outcome)

    def add_marked(self, pending: PendingSet, paths: Sequence[Path]) -> int:
        count = pending.add_all(paths)
        self._logger.info(
            "Copy list replaced with %d item(s)",
            count,
            extra={"staging_event": StagingEvent.REPLACE.value, "item_count": count},
        )
        if self._feedback is not None:
            self._feedback.pulse(pending.snapshot())
        return count

    def add_current(self, pending: PendingSet, path: Path) -> AddOutcome:
        outcome = pending.add_one(path)
        event = StagingEvent.ADD if outcome.added else StagingEvent.ADD_DUPLICATE
        self._logger.info(
            "%s %s",
            "Added" if outcome.added else "Already in copy list:",
            outcome.path,
            extra={
                "staging_event": event.value,
                "source_path": str(outcome.path),
                "source_base_path": str(outcome.path.parent),
            },
        )
        if outcome.added and self._feedback is not None:
            self._feedback.pulse([outcome.path])
        return outcome

    def clear(self, pending: PendingSet) -> None:
        pending.clear()
        self._logger.info(
            "Copy list cleared",
            extra={"staging_event": StagingEvent.CLEAR.value},
        )


def describe_pending(pending: PendingSet, base: Path) -> list[str]:
    """Render staged paths relative to ``base`` for display.

    Entries outside ``base`` keep ``..`` segments; entries on another
    drive fall back to the absolute path.
    """

    lines: list[str] = []
    for item in pending.snapshot():
        try:
            lines.append(os.path.relpath(item, base))
        except ValueError:
            lines.append(str(item))
    return lines


__all__ = [
    "CollectMode",
    "CollectResult",
    "CollectService",
    "describe_pending",
]
