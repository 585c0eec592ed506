"""Where: src/stagecopy/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
"""

from __future__ import annotations

from stagecopy.config.config import (
    CURSOR_POLL_ATTEMPTS_DEFAULT,
    CURSOR_POLL_INTERVAL_DEFAULT,
    FEEDBACK_DELAY_DEFAULT,
    FEEDBACK_ITERATIONS_DEFAULT,
    config as app_config,
)


def _positive_int(value: object, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return default
    return value


def _non_negative_float(value: object, default: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
        return default
    return float(value)


# Feedback pulse ---------------------------------------------------------------

FEEDBACK_ENABLED: bool = bool(getattr(app_config, "feedback_enabled", True))

FEEDBACK_ITERATIONS: int = _positive_int(
    getattr(app_config, "feedback_iterations", FEEDBACK_ITERATIONS_DEFAULT),
    FEEDBACK_ITERATIONS_DEFAULT,
)

FEEDBACK_DELAY: float = _non_negative_float(
    getattr(app_config, "feedback_delay", FEEDBACK_DELAY_DEFAULT),
    FEEDBACK_DELAY_DEFAULT,
)


# Cursor placement -----------------------------------------------------------

# 30 attempts 0.1s apart bound the wait for the refreshed listing to ~3s.
CURSOR_POLL_ATTEMPTS: int = _positive_int(
    getattr(app_config, "cursor_poll_attempts", CURSOR_POLL_ATTEMPTS_DEFAULT),
    CURSOR_POLL_ATTEMPTS_DEFAULT,
)

CURSOR_POLL_INTERVAL: float = _non_negative_float(
    getattr(app_config, "cursor_poll_interval", CURSOR_POLL_INTERVAL_DEFAULT),
    CURSOR_POLL_INTERVAL_DEFAULT,
)


__all__ = [
    "FEEDBACK_ENABLED",
    "FEEDBACK_ITERATIONS",
    "FEEDBACK_DELAY",
    "CURSOR_POLL_ATTEMPTS",
    "CURSOR_POLL_INTERVAL",
]
