"""Public surface for the staging feature."""

from .domain import (
    AddOutcome,
    CommitResult,
    CopyFailureError,
    EmptyPendingSetError,
    InvalidTargetError,
    PendingSet,
    StagingError,
)
from .usecases import CollectMode, CollectResult, CollectService, CommitEngine, describe_pending

__all__ = [
    "AddOutcome",
    "CollectMode",
    "CollectResult",
    "CollectService",
    "CommitEngine",
    "CommitResult",
    "CopyFailureError",
    "EmptyPendingSetError",
    "InvalidTargetError",
    "PendingSet",
    "StagingError",
    "describe_pending",
]
