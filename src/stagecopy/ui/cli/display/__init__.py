"""Display management for CLI interface."""

from stagecopy.ui.cli.display.listing import ListingDisplay
from stagecopy.ui.cli.display.status import StatusDisplay

__all__ = ["ListingDisplay", "StatusDisplay"]
