"""One-shot copy command implementation for the CLI."""

from __future__ import annotations

from typing import final

from stagecopy.application.services.staging_service import StagingSession
from stagecopy.features.staging import CollectMode, CollectResult, CommitResult, StagingError
from stagecopy.ui.cli.args.options import CopyArgs
from stagecopy.ui.cli.display.status import StatusDisplay


@final
class CopyCommand:
    """Stage every source in order, then paste them into the target."""

    def __init__(self, args: CopyArgs) -> None:
        self.args = args
        self.session = StagingSession()
        self.display = StatusDisplay()

    def execute(self) -> CommitResult | None:
        """Execute the copy command.

        Returns:
            The paste result, or None when staging errors were reported.
        """

        for source in self.args.sources:
            outcome = self.session.add_one(source)
            if not outcome.added:
                self.display.show_collect(
                    CollectResult(mode=CollectMode.CURRENT, count=0, outcome=outcome),
                    quiet=self.args.quiet,
                )

        try:
            result = self.session.paste(self.args.target_path)
        except StagingError as exc:
            self.display.show_error(exc)
            return None

        self.display.show_paste(result, quiet=self.args.quiet)
        return result


__all__ = ["CopyCommand"]
