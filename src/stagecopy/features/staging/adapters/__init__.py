"""Adapters wiring the staging ports to concrete implementations."""

from .feedback import ConsolePulse, NullFeedback
from .filesystem import LocalFileSystemGateway

__all__ = ["ConsolePulse", "LocalFileSystemGateway", "NullFeedback"]
