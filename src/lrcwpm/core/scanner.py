"""Windowed scan over the record store.

Each window of lyric rows gets its own TrackResolver, so the live state
mapping never grows beyond one window's tracks. After a window's rows are
exhausted, accepted tracks are joined with track metadata and appended to
the report.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..config import MAX_TRIES, PROGRESS_INTERVAL, WINDOW_SIZE
from ..exceptions import ValidationError
from .report import ReportFile, format_report_line
from .store import Page, PagingCursor, RecordStore
from .tracks import TrackResolver

logger = logging.getLogger(__name__)


@dataclass
class ScanProgress:
    offset: int
    rows_scanned: int
    tracks_found: int


@dataclass
class WindowResult:
    """Outcome of scanning one page of lyric rows."""

    page: Page
    rows: int = 0
    accepted: int = 0
    lines: List[str] = field(default_factory=list)
    skipped: int = 0
    written: bool = True


@dataclass
class ScanSummary:
    total_rows: int
    windows: int = 0
    rows: int = 0
    lines: int = 0
    skipped: int = 0
    failed_writes: int = 0


class BatchScanController:
    """Drives estimation over the whole record store, one page at a time."""

    def __init__(
        self,
        store: RecordStore,
        report: ReportFile,
        *,
        window_size: int = WINDOW_SIZE,
        max_tries: int = MAX_TRIES,
        resolver_factory: Optional[Callable[[], TrackResolver]] = None,
        on_progress: Optional[Callable[[ScanProgress], None]] = None,
        progress_interval: int = PROGRESS_INTERVAL,
    ):
        self.store = store
        self.report = report
        self.window_size = window_size
        self.resolver_factory = resolver_factory or (lambda: TrackResolver(max_tries))
        self.on_progress = on_progress
        self.progress_interval = progress_interval

    def _join(self, resolver: TrackResolver, result: WindowResult) -> None:
        for metadata in self.store.stream_track_metadata():
            wpm = resolver.result(metadata.id)
            if wpm is None:
                continue
            try:
                result.lines.append(format_report_line(metadata, wpm))
            except ValidationError as e:
                logger.warning(f"Skipping track {metadata.id}: {e}")
                result.skipped += 1

    def scan_window(self, page: Page) -> WindowResult:
        """Resolve every track in one page and append accepted lines."""
        logger.info(f"Started window at offset {page.offset}")
        resolver = self.resolver_factory()
        result = WindowResult(page=page)

        for record in self.store.stream_lyric_records(page.offset, page.limit):
            result.rows += 1
            if self.on_progress and result.rows % self.progress_interval == 0:
                self.on_progress(ScanProgress(page.offset, result.rows, len(resolver)))
            resolver.offer(record.track_id, record.raw_lyrics)

        counts = resolver.counts()
        result.accepted = counts["accepted"]
        logger.info(
            f"{result.rows} lyrics processed: {counts['accepted']} accepted, "
            f"{counts['abandoned']} abandoned, {counts['unresolved']} unresolved"
        )

        self._join(resolver, result)
        logger.info(f"{len(result.lines)} results after filters")

        result.written = self.report.append(result.lines)
        if result.written:
            logger.debug(f"Appended {len(result.lines)} lines to {self.report.path}")
        return result

    def run(self) -> ScanSummary:
        """Scan the full store into a freshly truncated report."""
        total = self.store.count_lyric_records()
        logger.info(f"{total} lyrics total")
        summary = ScanSummary(total_rows=total)

        self.report.truncate()
        for page in PagingCursor(total, self.window_size):
            window = self.scan_window(page)
            summary.windows += 1
            summary.rows += window.rows
            summary.lines += len(window.lines)
            summary.skipped += window.skipped
            if not window.written:
                summary.failed_writes += 1
            logger.info(f"Finished window at offset {page.offset}")
        return summary
