"""Boundary Protocols - contract between the operations layer and match storage.

Invariants:
    - Core NEVER imports from the shell; dependency arrows point inward only
    - Storage never raises domain errors: absence is None, deleting an unknown id is a no-op
    - Implementations provide per-call atomicity; nothing spans calls

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass a plain Mock or any store
    - Synchronous: the registry is in-memory, every call runs on the caller's thread
"""

from typing import Protocol

from scoreboard.core.domain_types import MatchId
from scoreboard.core.match import Match


class MatchRepository(Protocol):
    """Contract for live match storage, implemented by the shell."""
    def save(self, match: Match) -> Match: ...
    def find_by_id(self, match_id: MatchId) -> Match | None: ...
    def find_all(self) -> list[Match]: ...
    def delete_by_id(self, match_id: MatchId) -> None: ...
