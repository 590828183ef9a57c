"""Logging setup for scan runs.

Console output goes to stdout at the requested level. A full scan over an
LRCLIB dump can run for hours, so the optional log file always records
DEBUG detail with timestamps regardless of the console level.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "lrcwpm"

_VERBOSE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_SHORT_FORMAT = "%(levelname)s: %(message)s"


def _parse_level(level: str) -> int:
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def setup_logging(
    level: str = "INFO", log_file: Optional[Path] = None, verbose: bool = False
) -> logging.Logger:
    """Configure the ``lrcwpm`` logger for one CLI run.

    Args:
        level: Console level name (DEBUG, INFO, ...)
        log_file: Optional file that receives every DEBUG record
        verbose: Use the timestamped format on the console too

    Returns:
        The configured package logger
    """
    console_level = _parse_level(level)

    logger = logging.getLogger(LOGGER_NAME)
    # repeated CLI invocations in one process must not stack handlers
    logger.handlers.clear()
    logger.setLevel(logging.DEBUG if log_file else console_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(
        logging.Formatter(_VERBOSE_FORMAT if verbose else _SHORT_FORMAT)
    )
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_VERBOSE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get a logger inside the ``lrcwpm`` namespace."""
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
