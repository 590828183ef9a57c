"""Command-line interface using Click."""

import sys
from pathlib import Path

import click

from . import __version__
from . import config
from .commands import run_dedupe_command, run_estimate_command, run_scan_command
from .exceptions import LrcWpmError
from .utils.logging import setup_logging


def _fail(ctx, logger, error: Exception) -> None:
    if isinstance(error, LrcWpmError):
        logger.error(f"❌ {error}")
    else:
        logger.error(f"❌ Unexpected error: {error}")
        if ctx.obj.get("verbose"):
            import traceback
            traceback.print_exc()
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--log-file', type=click.Path(), help='Log to file')
@click.pass_context
def cli(ctx, verbose, log_file):
    """lrcwpm - Rank songs by singing speed from synced lyrics."""
    ctx.ensure_object(dict)
    logger = setup_logging(
        level="DEBUG" if verbose else "INFO",
        log_file=Path(log_file) if log_file else None,
        verbose=verbose
    )
    ctx.obj['logger'] = logger
    ctx.obj['verbose'] = verbose


@cli.command()
@click.option('--db', type=click.Path(), default=str(config.DEFAULT_DB_PATH),
              show_default=True, help='LRCLIB SQLite dump')
@click.option('-o', '--output', type=click.Path(),
              help='Report path (default: result<min>-<max>.txt)')
@click.option('--window-size', type=int, default=config.WINDOW_SIZE, show_default=True,
              help='Lyric rows per scan window (bounds memory)')
@click.option('--max-tries', type=int, default=config.MAX_TRIES, show_default=True,
              help='Rejected lyric versions before a track is abandoned')
@click.option('--min-wpm', type=int, default=config.MIN_WPM, show_default=True,
              help='Exclusive lower tempo bound')
@click.option('--max-wpm', type=int, default=config.MAX_WPM, show_default=True,
              help='Exclusive upper tempo bound')
@click.option('--threshold', type=float, default=config.SIMILARITY_THRESHOLD,
              show_default=True, help='Trigram similarity for duplicates')
@click.option('--lookahead', type=int, default=config.LOOKAHEAD_WIDTH,
              show_default=True, help='Duplicate filter look-ahead width')
@click.option('--skip-scan', is_flag=True,
              help='Only sort and deduplicate an existing report')
@click.option('--no-dedupe', is_flag=True,
              help='Leave the report unsorted and with duplicates')
@click.pass_context
def scan(ctx, db, output, window_size, max_tries, min_wpm, max_wpm,
         threshold, lookahead, skip_scan, no_dedupe):
    """Scan the lyrics database and write the tempo report."""
    logger = ctx.obj['logger']
    try:
        run_scan_command(
            logger=logger,
            db=db,
            output=output,
            window_size=window_size,
            max_tries=max_tries,
            min_wpm=min_wpm,
            max_wpm=max_wpm,
            threshold=threshold,
            lookahead=lookahead,
            skip_scan=skip_scan,
            no_dedupe=no_dedupe,
        )
    except Exception as e:
        _fail(ctx, logger, e)


@cli.command()
@click.argument('report', type=click.Path())
@click.option('--threshold', type=float, default=config.SIMILARITY_THRESHOLD,
              show_default=True, help='Trigram similarity for duplicates')
@click.option('--lookahead', type=int, default=config.LOOKAHEAD_WIDTH,
              show_default=True, help='Duplicate filter look-ahead width')
@click.pass_context
def dedupe(ctx, report, threshold, lookahead):
    """Sort a report and remove near-duplicate songs."""
    logger = ctx.obj['logger']
    try:
        summary = run_dedupe_command(
            logger=logger, report=report, threshold=threshold, lookahead=lookahead
        )
    except Exception as e:
        _fail(ctx, logger, e)
    if summary is None:
        sys.exit(1)


@cli.command()
@click.argument('lrc_file', type=click.Path())
@click.option('--min-wpm', type=int, default=config.MIN_WPM, show_default=True,
              help='Exclusive lower tempo bound')
@click.option('--max-wpm', type=int, default=config.MAX_WPM, show_default=True,
              help='Exclusive upper tempo bound')
@click.pass_context
def estimate(ctx, lrc_file, min_wpm, max_wpm):
    """Estimate the tempo of a single .lrc file."""
    logger = ctx.obj['logger']
    try:
        accepted = run_estimate_command(
            logger=logger, lrc_file=lrc_file, min_wpm=min_wpm, max_wpm=max_wpm
        )
    except Exception as e:
        _fail(ctx, logger, e)
    if not accepted:
        sys.exit(1)


if __name__ == '__main__':
    cli()
