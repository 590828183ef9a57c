"""Configuration settings for lrcwpm."""

import os
from pathlib import Path

from .exceptions import ConfigError

# Record store
DEFAULT_DB_PATH = Path(os.getenv("LRCWPM_DB_PATH", "db.sqlite3"))

# Estimator thresholds (can be overridden via environment variables)
# Repetition score is in [0.0, 1.0]:
#   1.0  - song is one line repeated
#   0.67 - song is two lines repeated (50/50)
#   0.3 to 0.1 - regular song with choruses
MAX_REPEATS = float(os.getenv("LRCWPM_MAX_REPEATS", "0.25"))
MIN_LINES = int(os.getenv("LRCWPM_MIN_LINES", "20"))  # filters out short songs
MIN_WPM = int(os.getenv("LRCWPM_MIN_WPM", "15"))
MAX_WPM = int(os.getenv("LRCWPM_MAX_WPM", "500"))

PEAK_COUNT = 5
CHARS_PER_WORD = 5
MIN_LINE_CHARS = 3  # shorter lines are left out of the math

# Scanning
# 2,000,000 rows is about 9 GB of track state when filters are loose.
# Lower is slower but uses less memory.
WINDOW_SIZE = int(os.getenv("LRCWPM_WINDOW_SIZE", "1000000"))
MAX_TRIES = int(os.getenv("LRCWPM_MAX_TRIES", "4"))
PROGRESS_INTERVAL = int(os.getenv("LRCWPM_PROGRESS_INTERVAL", "100000"))

# Duplicate filtering
# A wider look-ahead catches more duplicates but is quadratically slower.
SIMILARITY_THRESHOLD = float(os.getenv("LRCWPM_SIMILARITY_THRESHOLD", "0.6"))
LOOKAHEAD_WIDTH = int(os.getenv("LRCWPM_LOOKAHEAD_WIDTH", "100"))
MIN_REPORT_LINE_LENGTH = 20
MIN_KEY_LENGTH = 8


def validate_config() -> None:
    """Validate configuration values."""
    if MIN_WPM >= MAX_WPM:
        raise ConfigError("MIN_WPM must be lower than MAX_WPM")

    if not 0.0 < MAX_REPEATS <= 1.0:
        raise ConfigError("MAX_REPEATS must be in (0, 1]")

    if MIN_LINES < PEAK_COUNT:
        raise ConfigError(f"MIN_LINES must be at least {PEAK_COUNT}")

    if WINDOW_SIZE <= 0:
        raise ConfigError("Invalid window size")

    if MAX_TRIES <= 0:
        raise ConfigError("MAX_TRIES must be positive")

    if not 0.0 < SIMILARITY_THRESHOLD <= 1.0:
        raise ConfigError("SIMILARITY_THRESHOLD must be in (0, 1]")

    if LOOKAHEAD_WIDTH < 2:
        raise ConfigError("LOOKAHEAD_WIDTH must be at least 2")


def default_report_name(min_wpm: int = MIN_WPM, max_wpm: int = MAX_WPM) -> str:
    """Report file name for a tempo range, e.g. ``result15-500.txt``."""
    return f"result{min_wpm}-{max_wpm}.txt"


def get_report_path(min_wpm: int = MIN_WPM, max_wpm: int = MAX_WPM) -> Path:
    """Get report path from environment or default."""
    report_path = os.getenv("LRCWPM_REPORT_PATH")
    if report_path:
        return Path(report_path)
    return Path.cwd() / default_report_name(min_wpm, max_wpm)


# Validate config on import
validate_config()
