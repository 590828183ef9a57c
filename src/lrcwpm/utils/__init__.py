"""Utility modules."""

from .logging import setup_logging, get_logger
from .performance import PerformanceMonitor
from .validation import (
    validate_db_path,
    validate_window_size,
    validate_max_tries,
    validate_wpm_range,
    validate_threshold,
    validate_lookahead,
    validate_report_path,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "PerformanceMonitor",
    "validate_db_path",
    "validate_window_size",
    "validate_max_tries",
    "validate_wpm_range",
    "validate_threshold",
    "validate_lookahead",
    "validate_report_path",
]
