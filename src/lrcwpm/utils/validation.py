"""Validation utilities."""

import logging
from pathlib import Path
from typing import Tuple

from ..exceptions import ValidationError

logger = logging.getLogger(__name__)

# Rows per window above which track state can run to gigabytes
_LARGE_WINDOW = 2_000_000


def validate_db_path(path: str) -> Path:
    """Validate that the lyrics database exists."""
    if not path:
        raise ValidationError("Database path cannot be empty")
    db_path = Path(path)
    if not db_path.is_file():
        raise ValidationError(f"Database not found: {db_path}")
    return db_path


def validate_window_size(window_size: int) -> int:
    """Validate scan window size."""
    if window_size <= 0:
        raise ValidationError("Window size must be positive")
    if window_size > _LARGE_WINDOW:
        logger.warning(
            f"Window of {window_size} rows may need several GB of memory; "
            f"consider --window-size {_LARGE_WINDOW} or lower"
        )
    return window_size


def validate_max_tries(max_tries: int) -> int:
    """Validate the per-track attempt cap."""
    if max_tries <= 0:
        raise ValidationError("Max tries must be positive")
    return max_tries


def validate_wpm_range(min_wpm: int, max_wpm: int) -> Tuple[int, int]:
    """Validate tempo bounds."""
    if min_wpm < 0:
        raise ValidationError("Minimum WPM must be non-negative")
    if min_wpm >= max_wpm:
        raise ValidationError(
            f"Minimum WPM ({min_wpm}) must be lower than maximum WPM ({max_wpm})"
        )
    return min_wpm, max_wpm


def validate_threshold(threshold: float) -> float:
    """Validate similarity threshold."""
    if not 0.0 < threshold <= 1.0:
        raise ValidationError("Similarity threshold must be between 0 and 1")
    return threshold


def validate_lookahead(lookahead: int) -> int:
    """Validate duplicate filter look-ahead width."""
    if lookahead < 2:
        raise ValidationError("Look-ahead width must be at least 2")
    return lookahead


def validate_report_path(path: str) -> Path:
    """Validate and normalize report output path."""
    report_path = Path(path)

    # Check if parent directory exists or can be created
    try:
        report_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ValidationError(f"Cannot create output directory: {e}")

    if report_path.is_dir():
        raise ValidationError(f"Report path is a directory: {report_path}")

    return report_path
