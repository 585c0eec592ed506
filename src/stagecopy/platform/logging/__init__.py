"""Project logger, its setup helper, and the rich handler that renders staging events."""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, logger, setup_logger
from .handlers import StagingRichHandler

__all__ = [
    "DEFAULT_LOG_FILE",
    "StagingRichHandler",
    "logger",
    "setup_logger",
]
