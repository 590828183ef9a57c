"""Words-per-minute estimation from synced lyric lines.

A record is scored line by line: each line's characters are spread over the
gap to the next timestamp (capped at one second per character), converted
to words per minute, and the fastest lines are averaged. Records that look
non-English, too short, or dominated by repeated lines are rejected.
"""

import math
import re
from collections import Counter
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..config import (
    CHARS_PER_WORD,
    MAX_REPEATS,
    MAX_WPM,
    MIN_LINE_CHARS,
    MIN_LINES,
    MIN_WPM,
    PEAK_COUNT,
)
from .lrc import parse_lyrics
from .models import LyricEntry, WpmResult

# Anything outside 7-bit ASCII counts as non-English
_NON_ASCII_RE = re.compile(r"[^\x00-\x7F]")

# A line can't be slower than one character per second
_SECONDS_PER_CHAR = 1.0


def is_strict_ascii(text: str) -> bool:
    return _NON_ASCII_RE.search(text) is None


def line_wpms(entries: Sequence[LyricEntry]) -> Optional[Tuple[List[float], int]]:
    """Per-line WPM samples and the raw repeat count for a record.

    Returns None as soon as a line with non-ASCII text is found.
    Lines shorter than MIN_LINE_CHARS add neither a sample nor repeats.
    """
    text_counts = Counter(entry.text for entry in entries)

    lengths: List[int] = []
    gaps: List[float] = []
    repeats = 0
    for current, following in zip(entries, entries[1:]):
        if not is_strict_ascii(current.text):
            return None
        if len(current.text) < MIN_LINE_CHARS:
            continue
        # exact matches against every other line
        repeats += text_counts[current.text] - 1
        lengths.append(len(current.text))
        gaps.append(following.time - current.time)

    if not lengths:
        return [], repeats

    chars = np.asarray(lengths, dtype=float)
    durations = np.minimum(chars * _SECONDS_PER_CHAR, np.asarray(gaps, dtype=float))
    timed = durations > 0
    cpm = chars[timed] / durations[timed] * 60
    return (cpm / CHARS_PER_WORD).tolist(), repeats


def repetition_score(repeats: int, entry_count: int) -> float:
    """Normalized repetition in [0, 1]; sqrt damps long songs."""
    if entry_count <= 0:
        return 0.0
    return math.sqrt(repeats) / entry_count


def average_wpm(sorted_wpms: Sequence[float], sample_size: int = MIN_LINES) -> float:
    """Mean of the fastest lines, falling back to the peaks on high spread.

    ``sorted_wpms`` must be in descending order.
    """
    peaks = sorted_wpms[:PEAK_COUNT]
    sample = sorted_wpms[:sample_size]
    # slowest sampled line under half the fastest: trust the peaks
    if sample[-1] * 2 < sample[0]:
        return float(np.mean(peaks))
    return float(np.mean(sample))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_wpm(
    content: str,
    *,
    min_lines: int = MIN_LINES,
    max_repeats: float = MAX_REPEATS,
    min_wpm: float = MIN_WPM,
    max_wpm: float = MAX_WPM,
) -> Optional[WpmResult]:
    """Estimate the singing tempo of one synced-lyrics record.

    Args:
        content: Raw LRC text
        min_lines: Records need more than this many timed lines
        max_repeats: Rejection threshold for the repetition score
        min_wpm: Exclusive lower bound for the average
        max_wpm: Exclusive upper bound for the average

    Returns:
        WpmResult, or None when the record is rejected
    """
    entries = parse_lyrics(content)
    if len(entries) < 2:
        return None

    scored = line_wpms(entries)
    if scored is None:
        return None
    wpms, repeats = scored

    score = repetition_score(repeats, len(entries))
    if len(wpms) <= min_lines or score >= max_repeats:
        return None

    ranked = sorted(wpms, reverse=True)
    average = average_wpm(ranked, min_lines)
    if not min_wpm < average < max_wpm:
        return None

    return WpmResult(
        average=_round_half_up(average),
        peaks=tuple(round(w, 2) for w in ranked[:PEAK_COUNT]),
        repeats=round(score, 2),
    )
