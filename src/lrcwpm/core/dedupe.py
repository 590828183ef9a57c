"""Near-duplicate removal over the sorted report.

Re-releases, remasters and credit variants of a song sort next to each
other, so each line is only compared with a bounded window of the lines
that follow it.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from ..config import (
    LOOKAHEAD_WIDTH,
    MIN_KEY_LENGTH,
    MIN_REPORT_LINE_LENGTH,
    SIMILARITY_THRESHOLD,
)
from ..exceptions import ReportError, ValidationError
from .report import ReportFile
from .text_utils import are_similar, normalize_name_key

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int], None]


@dataclass
class DedupeSummary:
    """Line counts before and after filtering."""

    lines_in: int
    lines_out: int

    @property
    def removed(self) -> int:
        return self.lines_in - self.lines_out


def _name_key(line: str) -> Optional[str]:
    try:
        return normalize_name_key(line)
    except ValidationError as e:
        logger.debug(f"Anomaly detected, not comparing line: {e}")
        return None


def comparable_key(line: str, min_key_length: int = MIN_KEY_LENGTH) -> Optional[str]:
    """Normalized key of a line, or None if it is too short or malformed."""
    key = _name_key(line)
    if key is None or len(key) < min_key_length:
        return None
    return key


def filter_duplicates(
    lines: Iterable[str],
    *,
    threshold: float = SIMILARITY_THRESHOLD,
    lookahead: int = LOOKAHEAD_WIDTH,
    min_line_length: int = MIN_REPORT_LINE_LENGTH,
    min_key_length: int = MIN_KEY_LENGTH,
    on_progress: Optional[ProgressCallback] = None,
) -> List[str]:
    """Sort report lines and drop later near-duplicates.

    Args:
        lines: Report lines in any order
        threshold: Minimum trigram similarity for two keys to match
        lookahead: Each line is compared with lines up to this many positions later
        min_line_length: Shorter lines are dropped as noise
        min_key_length: Lines with shorter keys are kept but never compared
        on_progress: Called with the whole percent done each time it advances

    Returns:
        Sorted list with duplicates removed
    """
    content = sorted(line for line in lines if len(line) >= min_line_length)
    keys = [_name_key(line) for line in content]
    malformed = keys.count(None)
    if malformed:
        logger.warning(f"⚠️  {malformed} malformed report lines kept without comparing")
    keys = [key if key and len(key) >= min_key_length else None for key in keys]

    percent = -1
    i = 0
    while i < len(content):
        if on_progress is not None:
            done = i * 100 // len(content)
            if done > percent:
                percent = done
                on_progress(percent)

        key = keys[i]
        if key is None:
            i += 1
            continue

        j = i + 1
        while j < min(i + lookahead, len(content)):
            other = keys[j]
            if other is not None and are_similar(key, other, threshold):
                logger.debug(f"Duplicate of {content[i]!r}: {content[j]!r}")
                # re-test the same position against the shifted window
                del content[j]
                del keys[j]
                continue
            j += 1
        i += 1

    return content


def dedupe_report(
    report: ReportFile,
    *,
    threshold: float = SIMILARITY_THRESHOLD,
    lookahead: int = LOOKAHEAD_WIDTH,
    on_progress: Optional[ProgressCallback] = None,
) -> Optional[DedupeSummary]:
    """Sort and deduplicate a report file in place.

    Returns None when the report could not be read or rewritten.
    """
    try:
        lines = [line for line in report.read_lines() if line]
        filtered = filter_duplicates(
            lines, threshold=threshold, lookahead=lookahead, on_progress=on_progress
        )
        report.rewrite(filtered)
    except ReportError as e:
        logger.warning(f"⚠️  Report was not sorted (file too large?): {e}")
        return None

    summary = DedupeSummary(lines_in=len(lines), lines_out=len(filtered))
    logger.info(
        f"Report sorted: {summary.lines_out} lines kept, {summary.removed} removed"
    )
    return summary
