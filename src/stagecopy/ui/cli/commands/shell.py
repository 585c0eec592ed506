"""Interactive shell command implementation for the CLI."""

from __future__ import annotations

from typing import final

from rich.console import Console

from stagecopy.application.services.staging_service import StagingSession
from stagecopy.config.settings import FEEDBACK_DELAY, FEEDBACK_ENABLED, FEEDBACK_ITERATIONS
from stagecopy.features.staging.adapters import ConsolePulse, NullFeedback
from stagecopy.features.staging.usecases.ports import FeedbackEmitter
from stagecopy.ui.cli.args.options import ShellArgs
from stagecopy.ui.cli.display.listing import ListingDisplay
from stagecopy.ui.cli.display.status import StatusDisplay
from stagecopy.ui.cli.shell import StagingShell, TerminalListing


@final
class ShellCommand:
    """Command that runs the interactive browsing shell."""

    def __init__(self, args: ShellArgs) -> None:
        self.args = args
        self.console = Console()
        self.listing = TerminalListing(args.start_path)
        self.session = StagingSession(view=self.listing, feedback=self._build_feedback())
        self.shell = StagingShell(
            listing=self.listing,
            session=self.session,
            status=StatusDisplay(self.console),
            listing_display=ListingDisplay(self.console),
            quiet=args.quiet,
        )

    def _build_feedback(self) -> FeedbackEmitter:
        if self.args.no_feedback or self.args.quiet or not FEEDBACK_ENABLED:
            return NullFeedback()
        return ConsolePulse(self.console, iterations=FEEDBACK_ITERATIONS, delay=FEEDBACK_DELAY)

    def execute(self) -> None:
        """Run the shell until the user quits."""

        self.shell.do_ls("")
        self.shell.cmdloop()


__all__ = ["ShellCommand"]
