"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - MatchId wraps the textual UUID assigned at creation; never reused
    - Score is a non-negative int (enforced by enforce_match, not by the type)
    - All lifecycle states encoded as an Enum, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

MatchId = NewType("MatchId", str)


# ─── Value Types ─────────────────────────────────────────────────

Score = NewType("Score", int)           # >= 0
TeamName = NewType("TeamName", str)     # non-blank, stored verbatim


# ─── Enums ───────────────────────────────────────────────────────

class MatchState(str, Enum):
    """Match lifecycle states. Score updates loop on STARTED."""
    STARTED = "started"
    FINISHED = "finished"


class MatchField(str, Enum):
    """Caller-supplied fields that validation can reject."""
    HOME_TEAM = "home_team"
    AWAY_TEAM = "away_team"
    MATCH_ID = "match_id"
    HOME_SCORE = "home_score"
    AWAY_SCORE = "away_score"
