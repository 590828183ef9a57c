"""LRC parsing for tempo estimation.

This module handles:
- LRC timestamp parsing
- Extracting lyric text from timestamped lines
"""

import re
from typing import Iterable, List, Optional

from .models import LyricEntry

# ----------------------
# LRC timestamp regex
# ----------------------
_LRC_TS_RE = re.compile(
    r"""
    \[                      # opening bracket
    (?P<min>\d{2})          # minutes
    :
    (?P<sec>\d{2}\.\d{2})   # seconds with hundredths
    \]                      # closing bracket
    """,
    re.VERBOSE,
)

_TEXT_SEPARATOR = "] "


def parse_lrc_timestamp(line: str) -> Optional[float]:
    """Parse the first [MM:SS.ss] tag found in a line to seconds."""
    if not line:
        return None
    match = _LRC_TS_RE.search(line)
    if not match:
        return None
    return int(match.group("min")) * 60 + float(match.group("sec"))


def extract_lyric_text(line: str) -> str:
    """Text after the first "] " separator, trimmed."""
    _, sep, text = line.partition(_TEXT_SEPARATOR)
    if not sep:
        return ""
    return text.strip()


def parse_lyric_lines(lines: Iterable[str]) -> List[LyricEntry]:
    """Convert raw LRC lines into timestamped entries.

    Lines without a recognizable timestamp are dropped.
    """
    entries: List[LyricEntry] = []
    for line in lines:
        timestamp = parse_lrc_timestamp(line)
        if timestamp is None:
            continue
        entries.append(LyricEntry(time=timestamp, text=extract_lyric_text(line)))
    return entries


def parse_lyrics(content: str) -> List[LyricEntry]:
    """Parse a full synced-lyrics document."""
    return parse_lyric_lines(content.split("\n"))
