"""Match - immutable value type for one fixture in progress.

Invariants:
    - match_id, home_team, away_team, start_time and sequence never change after creation
    - Score changes produce a new Match; the old value is never mutated
    - total_score is derived, never stored

Design Decisions:
    - Frozen dataclass + dataclasses.replace for "with"-style updates
    - Clock and id factory injectable so core stays deterministic under test
"""

import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Callable

from scoreboard.core.domain_types import MatchId


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_match_id() -> MatchId:
    return MatchId(str(uuid.uuid4()))


@dataclass(frozen=True)
class Match:
    """One in-progress match. Pure value, no IO."""

    match_id: MatchId
    home_team: str
    away_team: str
    home_score: int
    away_score: int
    start_time: datetime
    # Creation order; breaks ties on identical start_time
    sequence: int = 0

    @property
    def total_score(self) -> int:
        return self.home_score + self.away_score

    def with_home_score(self, home_score: int) -> "Match":
        return replace(self, home_score=home_score)

    def with_away_score(self, away_score: int) -> "Match":
        return replace(self, away_score=away_score)

    def with_score(self, home_score: int, away_score: int) -> "Match":
        """Return a copy with both scores replaced. Teams, id and timing kept."""
        return replace(self, home_score=home_score, away_score=away_score)

    def involves(self, team: str) -> bool:
        """True if team plays home or away here (case-insensitive)."""
        key = team.casefold()
        return self.home_team.casefold() == key or self.away_team.casefold() == key


def new_match(
    home_team: str,
    away_team: str,
    sequence: int = 0,
    clock: Callable[[], datetime] = utc_now,
    id_factory: Callable[[], MatchId] = new_match_id,
) -> Match:
    """Build a fresh 0-0 match stamped with the current time and a new id."""
    return Match(
        match_id=id_factory(),
        home_team=home_team,
        away_team=away_team,
        home_score=0,
        away_score=0,
        start_time=clock(),
        sequence=sequence,
    )
