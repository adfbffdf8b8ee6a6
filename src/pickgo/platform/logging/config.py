"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Build the ``pickgo`` logger with a Rich console handler and an optional rotating file log.
Why: The CLI reconfigures logging once it knows the verbosity flags and the configured log file.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final, override

from rich.console import Console

from pickgo.config.paths import default_log_file

from .handlers import ScaffoldRichHandler

LOGGER_NAME: Final[str] = "pickgo"
LOG_MAX_BYTES: Final[int] = 10 * 1024 * 1024
LOG_BACKUP_COUNT: Final[int] = 5
FILE_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

DEFAULT_LOG_FILE: Final[Path] = default_log_file()


class EventFormatter(logging.Formatter):
    """Plain-text formatter that appends the ``scaffold_event`` tag when present."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        event = getattr(record, "scaffold_event", None)
        if event is None:
            return message
        return f"{message} [event={event}]"


def _build_file_handler(log_file: Path, level: int) -> logging.Handler:
    resolved = log_file.expanduser().resolve()
    resolved.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        resolved,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(EventFormatter(FILE_LOG_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """Set up and configure the application logger.

    Calling this again replaces the previous handlers, so the CLI can start
    console-only and attach the file log after reading the configuration.

    Args:
        log_file: Path to the log file. If None, only console logging is enabled.
        console_level: Logging level for console output.
        file_level: Logging level for file output.

    Returns:
        logging.Logger: Configured ``pickgo`` logger.
    """

    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(logging.DEBUG)

    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    console_handler = ScaffoldRichHandler(console=Console(stderr=True, soft_wrap=True))
    console_handler.setLevel(console_level)
    app_logger.addHandler(console_handler)

    if log_file is None:
        return app_logger

    try:
        app_logger.addHandler(_build_file_handler(Path(log_file), file_level))
    except OSError as exc:
        # The file log is optional; generation still proceeds console-only.
        app_logger.warning("File logging disabled, cannot open %s: %s", log_file, exc)
    return app_logger


# Console-only until the CLI knows which log file the user configured.
logger: Final[logging.Logger] = setup_logger()


__all__ = [
    "DEFAULT_LOG_FILE",
    "EventFormatter",
    "LOGGER_NAME",
    "setup_logger",
    "logger",
]
