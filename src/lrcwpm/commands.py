"""Execution helpers for CLI commands."""

from pathlib import Path
from typing import Optional

import click

from .config import get_report_path
from .core.dedupe import DedupeSummary, dedupe_report
from .core.report import ReportFile, format_report_line
from .core.models import TrackMetadata
from .core.scanner import BatchScanController, ScanProgress, ScanSummary
from .core.store import SqliteRecordStore
from .core.tracks import TrackResolver
from .core.wpm import calculate_wpm
from .exceptions import ValidationError
from .utils.performance import PerformanceMonitor
from .utils.validation import (
    validate_db_path,
    validate_lookahead,
    validate_max_tries,
    validate_report_path,
    validate_threshold,
    validate_window_size,
    validate_wpm_range,
)


def _log_scan_progress(logger):
    def callback(progress: ScanProgress) -> None:
        logger.info(
            f"{progress.rows_scanned} filtered, {progress.tracks_found} found "
            f"(window at {progress.offset})"
        )

    return callback


def _log_dedupe_progress(logger):
    def callback(percent: int) -> None:
        if percent % 10 == 0:
            logger.info(f"{percent}% filtered")
        else:
            logger.debug(f"{percent}% filtered")

    return callback


def run_scan_command(
    *,
    logger,
    db,
    output,
    window_size,
    max_tries,
    min_wpm,
    max_wpm,
    threshold,
    lookahead,
    skip_scan=False,
    no_dedupe=False,
) -> Optional[ScanSummary]:
    """Execute the `scan` command implementation."""
    min_wpm, max_wpm = validate_wpm_range(min_wpm, max_wpm)
    window_size = validate_window_size(window_size)
    max_tries = validate_max_tries(max_tries)
    threshold = validate_threshold(threshold)
    lookahead = validate_lookahead(lookahead)
    report_path = validate_report_path(output or get_report_path(min_wpm, max_wpm))
    report = ReportFile(report_path)

    summary = None
    if not skip_scan:
        db_path = validate_db_path(db)

        def make_resolver() -> TrackResolver:
            return TrackResolver(
                max_tries=max_tries,
                estimator=lambda content: calculate_wpm(
                    content, min_wpm=min_wpm, max_wpm=max_wpm
                ),
            )

        with PerformanceMonitor("lyrics scan"), SqliteRecordStore(db_path) as store:
            controller = BatchScanController(
                store,
                report,
                window_size=window_size,
                resolver_factory=make_resolver,
                on_progress=_log_scan_progress(logger),
            )
            summary = controller.run()
        logger.info(
            f"Scanned {summary.rows} lyrics in {summary.windows} windows: "
            f"{summary.lines} results, {summary.skipped} skipped"
        )
        if summary.failed_writes:
            logger.warning(
                f"⚠️  {summary.failed_writes} windows could not be written to {report_path}"
            )

    if not no_dedupe:
        run_dedupe_command(
            logger=logger, report=report_path, threshold=threshold, lookahead=lookahead
        )
    logger.info(f"✅ Report written: {report_path}")
    return summary


def run_dedupe_command(*, logger, report, threshold, lookahead) -> Optional[DedupeSummary]:
    """Execute the `dedupe` command implementation."""
    threshold = validate_threshold(threshold)
    lookahead = validate_lookahead(lookahead)
    report_path = Path(report)
    if not report_path.is_file():
        raise ValidationError(f"Report not found: {report_path}")

    with PerformanceMonitor("duplicate filtering"):
        return dedupe_report(
            ReportFile(report_path),
            threshold=threshold,
            lookahead=lookahead,
            on_progress=_log_dedupe_progress(logger),
        )


def run_estimate_command(*, logger, lrc_file, min_wpm, max_wpm) -> bool:
    """Execute the `estimate` command implementation."""
    min_wpm, max_wpm = validate_wpm_range(min_wpm, max_wpm)
    path = Path(lrc_file)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ValidationError(f"Cannot read {path}: {e}")

    result = calculate_wpm(content, min_wpm=min_wpm, max_wpm=max_wpm)
    if result is None:
        logger.warning(f"Rejected: {path.name} did not pass the tempo filters")
        return False

    metadata = TrackMetadata(id=0, name=path.stem, artist="?")
    click.echo(format_report_line(metadata, result))
    return True
