"""Per-track candidate selection with a bounded number of attempts."""

import logging
from collections import Counter
from typing import Callable, Dict, Iterator, Optional, Tuple

from ..config import MAX_TRIES
from .models import (
    Abandoned,
    Accepted,
    TrackState,
    Unresolved,
    WpmResult,
    is_terminal,
)
from .wpm import calculate_wpm

logger = logging.getLogger(__name__)

Estimator = Callable[[str], Optional[WpmResult]]


class TrackResolver:
    """Keeps the first accepted estimate for each track id.

    A track that collects ``max_tries`` rejected candidates is abandoned;
    later candidates for accepted or abandoned tracks are never estimated.
    """

    def __init__(self, max_tries: int = MAX_TRIES, estimator: Estimator = calculate_wpm):
        self.max_tries = max_tries
        self.estimator = estimator
        self.states: Dict[int, TrackState] = {}

    def __len__(self) -> int:
        return len(self.states)

    def state(self, track_id: int) -> TrackState:
        return self.states.get(track_id, Unresolved())

    def offer(self, track_id: int, raw_lyrics: Optional[str]) -> TrackState:
        """Feed one candidate record for a track and return its new state."""
        current = self.state(track_id)
        if not raw_lyrics or is_terminal(current):
            return current

        result = self.estimator(raw_lyrics)
        if result is not None:
            new_state: TrackState = Accepted(result)
        else:
            tries = current.tries + 1
            if tries >= self.max_tries:
                logger.debug(f"Track {track_id} abandoned after {tries} rejected records")
                new_state = Abandoned(tries)
            else:
                new_state = Unresolved(tries)

        self.states[track_id] = new_state
        return new_state

    def result(self, track_id: int) -> Optional[WpmResult]:
        state = self.states.get(track_id)
        if isinstance(state, Accepted):
            return state.result
        return None

    def accepted(self) -> Iterator[Tuple[int, WpmResult]]:
        for track_id, state in self.states.items():
            if isinstance(state, Accepted):
                yield track_id, state.result

    def counts(self) -> Dict[str, int]:
        """Number of tracks per state name."""
        tally = Counter(type(state).__name__.lower() for state in self.states.values())
        return {name: tally.get(name, 0) for name in ("accepted", "abandoned", "unresolved")}
