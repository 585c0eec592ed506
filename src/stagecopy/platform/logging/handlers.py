"""Rich console handler for staging events.

Where: platform/logging/handlers.py
What: Render structured ``staging_event`` log records with icons and compact paths.
Why: Keep console output scannable while the file log keeps the raw message.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class StagingRichHandler(RichHandler):
    """Rich handler that renders copy list events and paths in white."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "staging.add": ("➕", "cyan"),
        "staging.add.duplicate": ("↪️", "yellow"),
        "staging.replace": ("📋", "cyan"),
        "staging.clear": ("🧹", "yellow"),
        "staging.commit.start": ("🚀", "blue"),
        "staging.commit.copy": ("📦", "magenta"),
        "staging.commit.complete": ("✅", "green"),
        "staging.commit.error": ("⛔", "red"),
        "staging.commit.empty": ("ℹ️", "yellow"),
        "staging.cursor.placed": ("👉", "green"),
        "staging.cursor.missed": ("❔", "yellow"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "staging.add": "Added ",
        "staging.add.duplicate": "Already listed ",
        "staging.replace": "Copy list replaced",
        "staging.clear": "Copy list cleared",
        "staging.commit.start": "Pasting",
        "staging.commit.copy": "Copying ",
        "staging.commit.complete": "Pasted",
        "staging.commit.error": "Failed ",
        "staging.commit.empty": "Nothing to paste",
        "staging.cursor.placed": "Cursor on ",
        "staging.cursor.missed": "Cursor not placed ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def format_path(self, path: str, base: str | None = None) -> Text:
        """Format ``path`` relative to ``base`` with colored separators.

        Paths deeper than the segment limit keep only their trailing
        segments behind an ellipsis.
        """
        pure_path = self._to_pure_path(path)
        display_path: PurePath = pure_path
        if base:
            base_path = self._to_pure_path(base)
            try:
                relative = pure_path.relative_to(base_path)
            except ValueError:
                relative = None
            if relative is not None and str(relative) not in {"", "."}:
                display_path = relative

        is_windows = isinstance(display_path, PureWindowsPath)
        separator = "\\" if is_windows else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display = ""
        if anchor:
            display = anchor.rstrip("\\/") + separator if is_windows else separator
        if truncated:
            display += "…" + separator
        display += separator.join(body_parts)
        return self._style_path_string(display or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        text = Text()
        separator_chars = {separator, "…"}
        if separator == "\\":
            separator_chars.add("/")

        for char in path_string:
            color = "magenta" if char in separator_chars else "white"
            _ = text.append(char, style=Style(color=color))
        return text

    def _render_staging_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured staging events with dedicated styling."""

        event = getattr(record, "staging_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        sequence = getattr(record, "sequence", None)
        total = getattr(record, "total_items", None)
        if isinstance(sequence, int) and sequence > 0:
            if isinstance(total, int) and total > 0:
                _ = body.append(f"[{sequence}/{total}] ")
            else:
                _ = body.append(f"[{sequence}] ")

        _ = body.append(self._EVENT_LABELS.get(event, event))

        source_path = getattr(record, "source_path", None)
        target_path = getattr(record, "target_path", None)
        target_dir = getattr(record, "target_dir", None)
        if source_path:
            _ = body.append_text(
                self.format_path(str(source_path), base=getattr(record, "source_base_path", None))
            )
        if target_path:
            _ = body.append(" → ")
            _ = body.append_text(self.format_path(str(target_path), base=target_dir))
        elif target_dir and event != "staging.commit.copy":
            _ = body.append(" @ ")
            _ = body.append_text(self.format_path(str(target_dir)))

        metrics: list[str] = []
        count = getattr(record, "item_count", None)
        if isinstance(count, int):
            metrics.append(f"items={count}")
        duration = getattr(record, "duration_seconds", None)
        if isinstance(duration, (int, float)):
            metrics.append(f"duration={duration:.2f}s")
        attempts = getattr(record, "attempts", None)
        if isinstance(attempts, int):
            metrics.append(f"attempts={attempts}")
        error_message = getattr(record, "error_message", None)
        if error_message:
            metrics.append(str(error_message))
        if metrics:
            _ = body.append(" (" + ", ".join(metrics) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        staging_text = self._render_staging_message(record)
        if staging_text is not None:
            return staging_text
        return super().render_message(record, message)


__all__ = ["StagingRichHandler"]
