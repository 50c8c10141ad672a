"""Logging configuration for the fretshapes command line."""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

# Shared stderr handler, attached once to the package logger
_console_handler: logging.StreamHandler | None = None


def setup_logging(level: str = "WARNING") -> None:
    """Send ``fretshapes.*`` log records to stderr at the given level.

    Args:
        level: One of LOG_LEVELS (case-insensitive).

    Raises:
        ValueError: If the level name is unknown.
    """
    global _console_handler

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logger = logging.getLogger("fretshapes")
    if _console_handler is None:
        _console_handler = logging.StreamHandler(sys.stderr)
        _console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(_console_handler)
    else:
        # stderr may have been swapped since the handler was created
        _console_handler.setStream(sys.stderr)

    logger.setLevel(numeric_level)
    logger.propagate = False
