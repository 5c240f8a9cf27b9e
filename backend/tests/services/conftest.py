"""Service test fixtures - isolated registry and operations per test.

Invariants:
    - Every test gets a fresh InMemoryMatchRegistry (no shared state between tests)
    - The clock ticks one second per call so start times are strictly increasing

Design Decisions:
    - Real registry instead of a mock for behavior tests; mocks only where call shape matters
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from scoreboard.core.repository_protocols import MatchRepository
from scoreboard.infrastructure.match_registry import InMemoryMatchRegistry
from scoreboard.services.match_operations import MatchOperations


class TickingClock:
    """Deterministic clock: each call is one second after the previous."""

    def __init__(self, start: datetime):
        self._now = start

    def __call__(self) -> datetime:
        current = self._now
        self._now += timedelta(seconds=1)
        return current


@pytest.fixture
def registry():
    return InMemoryMatchRegistry()


@pytest.fixture
def operations(registry):
    return MatchOperations(
        registry,
        clock=TickingClock(datetime(2024, 6, 14, 19, 0, tzinfo=timezone.utc)),
    )


@pytest.fixture
def mock_repository():
    repository = MagicMock(spec=MatchRepository)
    repository.find_all.return_value = []
    repository.find_by_id.return_value = None
    repository.save.side_effect = lambda match: match
    return repository
