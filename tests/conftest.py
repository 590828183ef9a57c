"""Test configuration and fixtures.

Provides reusable fixtures for:
- Logger cleanup between CLI runs
- Synced (LRC) lyric documents with controlled tempo
- LRCLIB-style SQLite record stores
"""

import logging
import sqlite3
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

import pytest


# =============================================================================
# Basic Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_lrcwpm_logger():
    """Drop handlers the CLI attaches to runner streams."""
    yield
    logger = logging.getLogger("lrcwpm")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


# =============================================================================
# LRC Fixtures
# =============================================================================


def format_timestamp(seconds: float) -> str:
    minutes = int(seconds // 60)
    return f"[{minutes:02d}:{seconds - minutes * 60:05.2f}]"


def build_lrc(lines: Sequence[Tuple[str, float]], start: float = 0.0) -> str:
    """Build an LRC document from (text, gap to next line) pairs."""
    out: List[str] = []
    t = start
    for text, gap in lines:
        out.append(f"{format_timestamp(t)} {text}")
        t += gap
    return "\n".join(out)


def steady_lines(count: int, gap: float = 2.5, offset: int = 0) -> List[Tuple[str, float]]:
    """Unique 25-character lines; a 2.5s gap gives exactly 120 WPM."""
    return [(f"we sing line {i + offset:02d} right now", gap) for i in range(count)]


@pytest.fixture
def lrc_builder():
    """Expose build_lrc to tests."""
    return build_lrc


@pytest.fixture
def line_factory():
    """Expose steady_lines to tests."""
    return steady_lines


@pytest.fixture
def steady_lrc():
    """30 unique lines at 120 WPM with no repeats."""
    return build_lrc(steady_lines(30))


@pytest.fixture
def fast_lrc():
    """30 unique lines at 150 WPM with no repeats."""
    return build_lrc(steady_lines(30, gap=2.0))


@pytest.fixture
def non_english_lrc():
    """Otherwise valid record with one accented line."""
    lines = steady_lines(30, gap=2.0)
    lines[3] = ("we sing a café line now!", 2.0)
    return build_lrc(lines)


# =============================================================================
# Record Store Fixtures
# =============================================================================


def create_lyrics_db(
    path: Path,
    lyrics: Iterable[Tuple[int, Optional[str]]],
    tracks: Iterable[Tuple[int, Optional[str], Optional[str]]],
) -> Path:
    """Create an LRCLIB-shaped SQLite database."""
    conn = sqlite3.connect(path)
    try:
        conn.executescript(
            """
            CREATE TABLE tracks (
                id INTEGER PRIMARY KEY,
                name TEXT,
                artist_name TEXT
            );
            CREATE TABLE lyrics (
                id INTEGER PRIMARY KEY,
                track_id INTEGER,
                synced_lyrics TEXT
            );
            """
        )
        conn.executemany(
            "INSERT INTO tracks (id, name, artist_name) VALUES (?, ?, ?)", list(tracks)
        )
        conn.executemany(
            "INSERT INTO lyrics (track_id, synced_lyrics) VALUES (?, ?)", list(lyrics)
        )
        conn.commit()
    finally:
        conn.close()
    return path


@pytest.fixture
def make_lyrics_db(tmp_path):
    """Factory fixture: make_lyrics_db(lyrics, tracks) -> db path."""

    def _make(lyrics, tracks, name: str = "db.sqlite3") -> Path:
        return create_lyrics_db(tmp_path / name, lyrics, tracks)

    return _make


@pytest.fixture
def sample_db(make_lyrics_db, steady_lrc, fast_lrc, non_english_lrc):
    """Three tracks: one accepted first try, one after a retry, one never accepted."""
    lyrics = [
        (1, steady_lrc),
        (2, non_english_lrc),
        (2, None),
        (2, fast_lrc),
        (3, non_english_lrc),
        (1, fast_lrc),
    ]
    tracks = [
        (1, "Steady Song", "Band One"),
        (2, "Fast Song", "Band Two"),
        (3, "Chanson", "Groupe Trois"),
    ]
    return make_lyrics_db(lyrics, tracks)
