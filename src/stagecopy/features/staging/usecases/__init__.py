"""Use cases for staging and pasting the copy list."""

from .collect import CollectMode, CollectResult, CollectService, describe_pending
from .commit import CommitEngine
from .cursor import place_cursor
from .events import StagingEvent
from .ports import FeedbackEmitter, FileSystemGateway, ListingView, SelectionSource

__all__ = [
    "CollectMode",
    "CollectResult",
    "CollectService",
    "CommitEngine",
    "FeedbackEmitter",
    "FileSystemGateway",
    "ListingView",
    "SelectionSource",
    "StagingEvent",
    "describe_pending",
    "place_cursor",
]
