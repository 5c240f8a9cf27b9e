"""Match Operations - the only caller-facing surface of the scoreboard.

Invariants:
    - Validation order: argument shape, then conflict/existence, then mutation
    - No failure path leaves partial state: every check runs before the registry is written
    - Always re-reads through the registry before mutating; never caches a Match
    - Domain errors returned inside OperationResult, logged at WARNING, never retried
    - A finished match id stays unknown: ids come from uuid4 and are never recycled

Design Decisions:
    - Pure checks from core.enforce_match, ranking from core.match_summary; this class only sequences IO
    - serialize_mutations holds one lock for a whole start/update/finish call so check-then-write
      sequences cannot interleave; with it off, two overlapping start_match calls may both succeed
"""

import contextlib
import itertools
import logging
import threading
from datetime import datetime
from typing import Callable

from scoreboard.core.domain_types import MatchField, MatchId, MatchState
from scoreboard.core.enforce_match import (
    check_score_update,
    check_teams,
    check_teams_available,
    check_text,
)
from scoreboard.core.errors import MatchNotFoundError, ScoreboardError
from scoreboard.core.match import Match, new_match, new_match_id, utc_now
from scoreboard.core.match_summary import build_summary
from scoreboard.core.repository_protocols import MatchRepository
from scoreboard.core.result import OperationResult

logger = logging.getLogger(__name__)


class MatchOperations:
    """Start, score, finish and rank live matches over a MatchRepository."""

    def __init__(
        self,
        repository: MatchRepository,
        serialize_mutations: bool = True,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], MatchId] = new_match_id,
    ):
        self._repository = repository
        self._clock = clock
        self._id_factory = id_factory
        self._mutation_lock = threading.Lock() if serialize_mutations else None
        self._sequence = itertools.count(1)
        self._sequence_lock = threading.Lock()

    def _mutating(self):
        if self._mutation_lock is None:
            return contextlib.nullcontext()
        return self._mutation_lock

    def _next_sequence(self) -> int:
        with self._sequence_lock:
            return next(self._sequence)

    def _failed(self, operation: str, error: ScoreboardError) -> OperationResult:
        logger.warning(
            f"{operation} rejected: {error.message}",
            extra={"error_code": error.code, "match_id": error.context.match_id},
        )
        return OperationResult.fail(error)

    def _lookup(self, match_id: MatchId) -> Match | MatchNotFoundError:
        match = self._repository.find_by_id(match_id)
        if match is None:
            return MatchNotFoundError(match_id)
        return match

    # ─── Lifecycle ───────────────────────────────────────────────

    def start_match(self, home_team: str, away_team: str) -> OperationResult[Match]:
        """Start a 0-0 match between two teams not currently playing."""
        logger.info(
            f"Starting match between {home_team} and {away_team}",
            extra={"home_team": home_team, "away_team": away_team},
        )
        error = check_teams(home_team, away_team)
        if error:
            return self._failed("start_match", error)

        with self._mutating():
            error = check_teams_available(
                self._repository.find_all(), home_team, away_team,
            )
            if error:
                return self._failed("start_match", error)

            match = self._repository.save(new_match(
                home_team,
                away_team,
                sequence=self._next_sequence(),
                clock=self._clock,
                id_factory=self._id_factory,
            ))

        logger.info(
            f"Match {MatchState.STARTED.value} with ID: {match.match_id}",
            extra={"match_id": match.match_id},
        )
        return OperationResult.ok(match)

    def update_match_score(
        self, match_id: MatchId, home_score: int, away_score: int,
    ) -> OperationResult[Match]:
        """Replace both scores of a live match. Teams, id and start time kept."""
        logger.info(
            f"Updating match {match_id} to {home_score}-{away_score}",
            extra={
                "match_id": match_id,
                "home_score": home_score,
                "away_score": away_score,
            },
        )
        error = check_score_update(match_id, home_score, away_score)
        if error:
            return self._failed("update_match_score", error)

        with self._mutating():
            found = self._lookup(match_id)
            if isinstance(found, MatchNotFoundError):
                return self._failed("update_match_score", found)
            match = self._repository.save(found.with_score(home_score, away_score))

        logger.info(
            f"Match score updated for match ID: {match.match_id}",
            extra={"match_id": match.match_id},
        )
        return OperationResult.ok(match)

    def finish_match(self, match_id: MatchId) -> OperationResult[Match]:
        """Remove a live match. Returns its final state."""
        logger.info(f"Finishing match {match_id}", extra={"match_id": match_id})
        error = check_text(match_id, MatchField.MATCH_ID)
        if error:
            return self._failed("finish_match", error)

        with self._mutating():
            found = self._lookup(match_id)
            if isinstance(found, MatchNotFoundError):
                return self._failed("finish_match", found)
            self._repository.delete_by_id(found.match_id)

        logger.info(
            f"Match {MatchState.FINISHED.value} for match ID: {found.match_id}",
            extra={"match_id": found.match_id},
        )
        return OperationResult.ok(found)

    # ─── Queries ─────────────────────────────────────────────────

    def get_match(self, match_id: MatchId) -> OperationResult[Match]:
        error = check_text(match_id, MatchField.MATCH_ID)
        if error:
            return self._failed("get_match", error)
        found = self._lookup(match_id)
        if isinstance(found, MatchNotFoundError):
            return self._failed("get_match", found)
        return OperationResult.ok(found)

    def get_match_summary(self) -> list[str]:
        """Ranked lines, highest total first. Empty list when nothing is live."""
        matches = self._repository.find_all()
        if not matches:
            logger.info("No active matches found.")
            return []
        logger.info(
            f"Formatting scoreboard for {len(matches)} matches.",
            extra={"match_count": len(matches)},
        )
        return build_summary(matches)
