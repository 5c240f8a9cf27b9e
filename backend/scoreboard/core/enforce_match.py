"""Match Enforcement - pure validation of match arguments and lifecycle rules.

Invariants:
    - Every check is PURE: returns an error descriptor or None, never raises, never mutates
    - Team names and ids: not None, text, not empty, not whitespace-only
    - Team names compared case-insensitively; stored and reported verbatim
    - Scores: int (bool rejected), >= 0

Design Decisions:
    - Shell decides what to do with the returned error (wrap it in OperationResult)
    - Check order inside each function is part of the contract: first failure wins
"""

from collections.abc import Iterable

from scoreboard.core.domain_types import MatchField
from scoreboard.core.errors import ConflictingStateError, InvalidArgumentError
from scoreboard.core.match import Match

BLANK_INPUT_MESSAGE = "Input string cannot be null, empty, or contain only whitespaces"
SAME_TEAMS_MESSAGE = "Home and Away teams cannot be the same"
NEGATIVE_SCORE_MESSAGE = "Score cannot be negative"
NON_INTEGER_SCORE_MESSAGE = "Score must be an integer"


def check_text(value: object, field: MatchField) -> InvalidArgumentError | None:
    """Reject None, non-text, empty and whitespace-only input."""
    if not isinstance(value, str) or not value.strip():
        return InvalidArgumentError(BLANK_INPUT_MESSAGE, field.value)
    return None


def check_teams(home_team: object, away_team: object) -> InvalidArgumentError | None:
    """Home first, then away, then the case-insensitive sameness rule."""
    error = check_text(home_team, MatchField.HOME_TEAM)
    if error:
        return error
    error = check_text(away_team, MatchField.AWAY_TEAM)
    if error:
        return error
    if home_team.casefold() == away_team.casefold():
        return InvalidArgumentError(SAME_TEAMS_MESSAGE, MatchField.AWAY_TEAM.value)
    return None


def check_score(score: object, field: MatchField) -> InvalidArgumentError | None:
    if isinstance(score, bool) or not isinstance(score, int):
        return InvalidArgumentError(NON_INTEGER_SCORE_MESSAGE, field.value)
    if score < 0:
        return InvalidArgumentError(NEGATIVE_SCORE_MESSAGE, field.value)
    return None


def check_score_update(
    match_id: object, home_score: object, away_score: object,
) -> InvalidArgumentError | None:
    """Scores are checked before the id."""
    return (
        check_score(home_score, MatchField.HOME_SCORE)
        or check_score(away_score, MatchField.AWAY_SCORE)
        or check_text(match_id, MatchField.MATCH_ID)
    )


def find_busy_teams(
    live_matches: Iterable[Match], home_team: str, away_team: str,
) -> list[str]:
    """Requested team names (verbatim) already playing in any live match."""
    busy = []
    matches = list(live_matches)
    for team in (home_team, away_team):
        if any(match.involves(team) for match in matches):
            busy.append(team)
    return busy


def check_teams_available(
    live_matches: Iterable[Match], home_team: str, away_team: str,
) -> ConflictingStateError | None:
    busy = find_busy_teams(live_matches, home_team, away_team)
    if busy:
        return ConflictingStateError(home_team, away_team, busy)
    return None
