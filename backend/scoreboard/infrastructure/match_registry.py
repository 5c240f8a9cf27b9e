"""Match Registry - thread-safe in-memory store of live matches keyed by id.

Invariants:
    - At most one Match per match_id; save() replaces the entry in place
    - No business validation: the operations layer is the only caller and is trusted
    - Never raises domain errors: absence is None, deleting an unknown id is a no-op
    - Each call is atomic under a single lock; nothing is atomic ACROSS calls

Design Decisions:
    - Explicit owned object, constructed once and injected; no module-level singleton
    - find_all() copies values under the lock: consistent at the instant it is taken,
      stale as soon as it returns, iteration order is not part of the contract
"""

import logging
import threading

from scoreboard.core.domain_types import MatchId
from scoreboard.core.match import Match

logger = logging.getLogger(__name__)


class InMemoryMatchRegistry:
    """Implements MatchRepository over a dict guarded by a threading.Lock."""

    def __init__(self):
        self._matches: dict[MatchId, Match] = {}
        self._lock = threading.Lock()

    def save(self, match: Match) -> Match:
        with self._lock:
            self._matches[match.match_id] = match
        logger.debug(
            f"Saved match {match.match_id}", extra={"match_id": match.match_id},
        )
        return match

    def find_by_id(self, match_id: MatchId) -> Match | None:
        with self._lock:
            return self._matches.get(match_id)

    def find_all(self) -> list[Match]:
        with self._lock:
            return list(self._matches.values())

    def delete_by_id(self, match_id: MatchId) -> None:
        with self._lock:
            removed = self._matches.pop(match_id, None)
        if removed is not None:
            logger.debug(
                f"Deleted match {match_id}", extra={"match_id": match_id},
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._matches)

    def __contains__(self, match_id: object) -> bool:
        with self._lock:
            return match_id in self._matches
