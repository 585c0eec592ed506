"""Domain types for the copy list."""

from .errors import CopyFailureError, EmptyPendingSetError, InvalidTargetError, StagingError
from .models import AddOutcome, CommitResult, PendingSet

__all__ = [
    "AddOutcome",
    "CommitResult",
    "CopyFailureError",
    "EmptyPendingSetError",
    "InvalidTargetError",
    "PendingSet",
    "StagingError",
]
