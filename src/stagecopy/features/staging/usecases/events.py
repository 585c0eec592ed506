"""Structured event identifiers for copy list logs."""

from __future__ import annotations

from enum import StrEnum


class StagingEvent(StrEnum):
    """Values carried in the ``staging_event`` log extra."""

    ADD = "staging.add"
    ADD_DUPLICATE = "staging.add.duplicate"
    REPLACE = "staging.replace"
    CLEAR = "staging.clear"
    COMMIT_START = "staging.commit.start"
    COMMIT_COPY = "staging.commit.copy"
    COMMIT_COMPLETE = "staging.commit.complete"
    COMMIT_ERROR = "staging.commit.error"
    COMMIT_EMPTY = "staging.commit.empty"
    CURSOR_PLACED = "staging.cursor.placed"
    CURSOR_MISSED = "staging.cursor.missed"


__all__ = ["StagingEvent"]
