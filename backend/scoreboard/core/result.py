"""Operation Result - success value or exactly one domain error.

Invariants:
    - Exactly one of value / error is meaningful: is_ok decides which
    - A failed result always carries a ScoreboardError
    - unwrap() is the only place a domain error is raised

Design Decisions:
    - Validation failures travel as values so callers branch on is_ok, not on except clauses
    - Errors stay Exception subclasses so a boundary can opt into raising via unwrap()
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from scoreboard.core.errors import ScoreboardError

T = TypeVar("T")


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Outcome of a Match Operations call."""

    value: T | None = None
    error: ScoreboardError | None = None

    @classmethod
    def ok(cls, value: T) -> "OperationResult[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, error: ScoreboardError) -> "OperationResult[T]":
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def error_code(self) -> str | None:
        return self.error.code if self.error else None

    def unwrap(self) -> T:
        """Return the value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value
