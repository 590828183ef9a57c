"""Read-only access to the synced-lyrics record store.

The default backend is an LRCLIB database dump in SQLite, with a
``lyrics`` table (``track_id``, ``synced_lyrics``) and a ``tracks`` table
(``id``, ``name``, ``artist_name``).
"""

import logging
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Protocol, Union

from ..exceptions import RecordStoreError
from .models import CandidateRecord, TrackMetadata

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    """What the scanner needs from a lyrics store."""

    def count_lyric_records(self) -> int:
        ...

    def stream_lyric_records(self, offset: int, limit: int) -> Iterator[CandidateRecord]:
        ...

    def stream_track_metadata(self) -> Iterator[TrackMetadata]:
        ...


@dataclass(frozen=True)
class Page:
    """A window of lyric rows."""

    offset: int
    limit: int


class PagingCursor:
    """Iterates fixed-size pages over ``total`` rows."""

    def __init__(self, total: int, window_size: int):
        if window_size <= 0:
            raise ValueError("window_size must be positive")
        self.total = max(total, 0)
        self.window_size = window_size

    def __len__(self) -> int:
        return -(-self.total // self.window_size)

    def __iter__(self) -> Iterator[Page]:
        for offset in range(0, self.total, self.window_size):
            yield Page(offset=offset, limit=self.window_size)


class SqliteRecordStore:
    """Record store backed by an LRCLIB SQLite dump."""

    COUNT_SQL = "SELECT COUNT(*) FROM lyrics"
    LYRICS_SQL = (
        "SELECT track_id, synced_lyrics FROM lyrics ORDER BY rowid LIMIT ? OFFSET ?"
    )
    TRACKS_SQL = "SELECT id, name, artist_name FROM tracks"

    def __init__(self, db_path: Union[str, Path]):
        self.db_path = Path(db_path)
        self._conn: Optional[sqlite3.Connection] = None

    def __enter__(self) -> "SqliteRecordStore":
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def open(self) -> None:
        if self._conn is not None:
            return
        if not self.db_path.is_file():
            raise RecordStoreError(f"Database not found: {self.db_path}")
        try:
            # read-only: the scan never writes to the dump
            self._conn = sqlite3.connect(
                f"{self.db_path.resolve().as_uri()}?mode=ro", uri=True
            )
        except sqlite3.Error as e:
            raise RecordStoreError(f"Cannot open {self.db_path}: {e}") from e
        logger.debug(f"Opened record store {self.db_path}")

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    @property
    def conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RecordStoreError("Record store is not open")
        return self._conn

    def count_lyric_records(self) -> int:
        try:
            row = self.conn.execute(self.COUNT_SQL).fetchone()
        except sqlite3.Error as e:
            raise RecordStoreError(f"Failed to count lyrics: {e}") from e
        return int(row[0])

    def stream_lyric_records(self, offset: int, limit: int) -> Iterator[CandidateRecord]:
        try:
            cursor = self.conn.execute(self.LYRICS_SQL, (limit, offset))
            for track_id, synced_lyrics in cursor:
                yield CandidateRecord(track_id=track_id, raw_lyrics=synced_lyrics)
        except sqlite3.Error as e:
            raise RecordStoreError(
                f"Failed to read lyrics at offset {offset}: {e}"
            ) from e

    def stream_track_metadata(self) -> Iterator[TrackMetadata]:
        try:
            cursor = self.conn.execute(self.TRACKS_SQL)
            for track_id, name, artist_name in cursor:
                yield TrackMetadata(id=track_id, name=name, artist=artist_name)
        except sqlite3.Error as e:
            raise RecordStoreError(f"Failed to read tracks: {e}") from e
