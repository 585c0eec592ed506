"""Build the ``stagecopy`` logger: a rich console handler plus an optional rotating file."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from stagecopy.config.paths import default_log_file

from .handlers import StagingRichHandler


LOGGER_NAME: Final[str] = "stagecopy"
DEFAULT_LOG_FILE: Final[Path] = default_log_file()
LOG_FILE_MAX_BYTES: Final[int] = 10 * 1024 * 1024
LOG_FILE_BACKUPS: Final[int] = 5
_FILE_FORMAT: Final[str] = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def _console_handler(level: int) -> StagingRichHandler:
    # stderr keeps log lines apart from the status output on stdout.
    handler = StagingRichHandler(console=Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    target = Path(log_file).expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        target,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)attach the handlers of the ``stagecopy`` logger.

    Handlers from an earlier call are closed first, so the CLI can call
    this again once it knows the configured log file.

    Args:
        log_file: Rotating log file; ``None`` logs to the console only.
        console_level: Threshold for the rich console handler.
        file_level: Threshold for the file handler.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_console_handler(console_level))
    if log_file is not None:
        logger.addHandler(_file_handler(log_file, file_level))
    return logger


# Console only until the CLI has read the configured log file.
logger: Final[logging.Logger] = setup_logger()


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "setup_logger", "logger"]
