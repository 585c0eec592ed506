from .pulse import ConsolePulse, NullFeedback

__all__ = ["ConsolePulse", "NullFeedback"]
