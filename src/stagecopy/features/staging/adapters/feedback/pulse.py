"""Highlight feedback adapters."""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from pathlib import Path

from rich.console import Console
from rich.live import Live
from rich.text import Text

from ...usecases.ports import FeedbackEmitter


class NullFeedback(FeedbackEmitter):
    """Feedback emitter that does nothing."""

    def pulse(self, paths: Sequence[Path]) -> None:
        return None


class ConsolePulse(FeedbackEmitter):
    """Blink the names of touched entries on a transient console line."""

    def __init__(
        self,
        console: Console,
        *,
        iterations: int,
        delay: float,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.console = console
        self.iterations = iterations
        self.delay = delay
        self._sleep = sleep

    def pulse(self, paths: Sequence[Path]) -> None:
        if not paths or self.iterations <= 0:
            return
        label = "  ".join(path.name for path in paths)
        with Live(Text(label), console=self.console, transient=True, auto_refresh=False) as live:
            for step in range(self.iterations * 2):
                style = "reverse bold" if step % 2 == 0 else ""
                live.update(Text(label, style=style), refresh=True)
                self._sleep(self.delay)


__all__ = ["ConsolePulse", "NullFeedback"]
