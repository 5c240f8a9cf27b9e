"""Error Hierarchy - typed, categorized errors for every scoreboard failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries the offending field or match id in its ErrorContext
    - Errors are returned inside OperationResult; they are raised only by unwrap()
    - to_response() produces the envelope an external transport maps to its own status codes

Design Decisions:
    - Single hierarchy with ScoreboardError base: one isinstance check covers the taxonomy
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    match_id: str | None = None
    field: str | None = None
    home_team: str | None = None
    away_team: str | None = None
    debug_info: dict[str, Any] | None = None


class ScoreboardError(Exception):
    """Base exception for all scoreboard errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "match_id": self.context.match_id,
                    "field": self.context.field,
                    "home_team": self.context.home_team,
                    "away_team": self.context.away_team,
                },
            }
        }


# ─── Domain Errors ───────────────────────────────────────────────

class InvalidArgumentError(ScoreboardError):
    """Malformed input: blank name or id, identical teams, negative score."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = field
        super().__init__(
            message, "INVALID_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.field = field


class MatchNotFoundError(ScoreboardError):
    """No live match has the requested id."""
    def __init__(self, match_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.match_id = match_id
        super().__init__(
            f"Match with ID {match_id} not found",
            "MATCH_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.match_id = match_id


class ConflictingStateError(ScoreboardError):
    """A team named in start_match is already playing in a live match."""
    def __init__(
        self,
        home_team: str,
        away_team: str,
        busy_teams: list[str],
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.home_team = home_team
        ctx.away_team = away_team
        ctx.debug_info = {"busy_teams": busy_teams}
        super().__init__(
            "A match is already in progress involving one or both of the teams: "
            f"{', '.join(busy_teams)}",
            "TEAM_ALREADY_PLAYING", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )
        self.busy_teams = busy_teams
