"""Core estimation, resolution, scanning and duplicate filtering."""

from .models import (
    LyricEntry,
    CandidateRecord,
    TrackMetadata,
    WpmResult,
    Unresolved,
    Abandoned,
    Accepted,
    TrackState,
)
from .lrc import parse_lyrics, parse_lyric_lines, parse_lrc_timestamp
from .wpm import calculate_wpm
from .tracks import TrackResolver
from .store import RecordStore, SqliteRecordStore, PagingCursor, Page
from .report import ReportFile, format_report_line
from .scanner import BatchScanController, ScanProgress, ScanSummary
from .dedupe import filter_duplicates, dedupe_report

__all__ = [
    "LyricEntry",
    "CandidateRecord",
    "TrackMetadata",
    "WpmResult",
    "Unresolved",
    "Abandoned",
    "Accepted",
    "TrackState",
    "parse_lyrics",
    "parse_lyric_lines",
    "parse_lrc_timestamp",
    "calculate_wpm",
    "TrackResolver",
    "RecordStore",
    "SqliteRecordStore",
    "PagingCursor",
    "Page",
    "ReportFile",
    "format_report_line",
    "BatchScanController",
    "ScanProgress",
    "ScanSummary",
    "filter_duplicates",
    "dedupe_report",
]
