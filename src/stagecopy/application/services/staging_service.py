"""Application service owning one copy list for a session."""

from __future__ import annotations

import threading
from logging import Logger, getLogger
from pathlib import Path
from typing import Final, final

from stagecopy.config.settings import CURSOR_POLL_ATTEMPTS, CURSOR_POLL_INTERVAL
from stagecopy.features.staging import (
    AddOutcome,
    CollectResult,
    CollectService,
    CommitEngine,
    CommitResult,
    PendingSet,
    describe_pending,
)
from stagecopy.features.staging.adapters import LocalFileSystemGateway, NullFeedback
from stagecopy.features.staging.usecases.ports import (
    FeedbackEmitter,
    FileSystemGateway,
    ListingView,
    SelectionSource,
)


@final
class StagingSession:
    """Application façade wiring adapters into the collect and paste use cases.

    Every operation holds the session lock, so one session may be shared
    between threads of a host application.
    """

    pending: Final[PendingSet]
    _collector: CollectService
    _engine: CommitEngine
    _lock: Final[threading.RLock]

    def __init__(
        self,
        *,
        pending: PendingSet | None = None,
        filesystem: FileSystemGateway | None = None,
        view: ListingView | None = None,
        feedback: FeedbackEmitter | None = None,
        poll_attempts: int = CURSOR_POLL_ATTEMPTS,
        poll_interval: float = CURSOR_POLL_INTERVAL,
        logger: Logger | None = None,
    ) -> None:
        service_logger = logger or getLogger(__name__)
        emitter = feedback or NullFeedback()

        self.pending = pending if pending is not None else PendingSet()
        self._lock = threading.RLock()
        self._collector = CollectService(feedback=emitter, logger=service_logger)
        self._engine = CommitEngine(
            filesystem=filesystem or LocalFileSystemGateway(),
            view=view,
            feedback=emitter,
            poll_attempts=poll_attempts,
            poll_interval=poll_interval,
            logger=service_logger,
        )

    def smart_copy(self, selection: SelectionSource) -> CollectResult:
        """Stage marked entries when present, else the entry under the cursor."""

        with self._lock:
            return self._collector.smart_copy(self.pending, selection)

    def add_one(self, path: Path) -> AddOutcome:
        with self._lock:
            return self._collector.add_current(self.pending, path)

    def add_all(self, paths: list[Path]) -> int:
        with self._lock:
            return self._collector.add_marked(self.pending, paths)

    def clear(self) -> None:
        with self._lock:
            self._collector.clear(self.pending)

    def paste(self, target_dir: Path) -> CommitResult:
        """Copy the list into ``target_dir``; errors propagate from the engine."""

        with self._lock:
            return self._engine.commit(self.pending, target_dir)

    def describe(self, base: Path) -> list[str]:
        with self._lock:
            return describe_pending(self.pending, base)

    def size(self) -> int:
        with self._lock:
            return self.pending.size()


__all__ = ["StagingSession"]
