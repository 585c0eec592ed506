"""stagecopy: collect files into a copy list and paste them in one batch."""

__version__ = "0.1.0"
