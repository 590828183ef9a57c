"""Data models for tempo estimation and track resolution."""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class LyricEntry:
    """A single timestamped lyric line."""

    time: float
    text: str


@dataclass(frozen=True)
class CandidateRecord:
    """One stored version of a track's synced lyrics."""

    track_id: int
    raw_lyrics: Optional[str]


@dataclass(frozen=True)
class TrackMetadata:
    """Track name and artist from the record store."""

    id: int
    name: Optional[str]
    artist: Optional[str]


@dataclass(frozen=True)
class WpmResult:
    """Accepted tempo estimate for one lyric record."""

    average: int
    peaks: Tuple[float, ...]
    repeats: float


# ----------------------
# Track resolution states
# ----------------------
@dataclass(frozen=True)
class Unresolved:
    """Track still accepts candidates."""

    tries: int = 0


@dataclass(frozen=True)
class Abandoned:
    """Track ran out of attempts for this run."""

    tries: int


@dataclass(frozen=True)
class Accepted:
    """Track locked in its first accepted estimate."""

    result: WpmResult


TrackState = Union[Unresolved, Abandoned, Accepted]


def is_terminal(state: TrackState) -> bool:
    return isinstance(state, (Accepted, Abandoned))
