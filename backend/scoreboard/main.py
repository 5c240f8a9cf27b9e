"""Scoreboard composition root - wires settings, logging, registry and operations.

Invariants:
    - Each call builds a fresh registry: no state shared between scoreboards
    - Logging configured from settings before the first operation runs

Design Decisions:
    - Plain factory function; transports (HTTP, CLI) call it and keep the returned object
"""

import logging

from scoreboard.config import Settings, get_settings
from scoreboard.infrastructure.match_registry import InMemoryMatchRegistry
from scoreboard.infrastructure.observability import setup_logging
from scoreboard.services.match_operations import MatchOperations

logger = logging.getLogger(__name__)


def create_scoreboard(settings: Settings | None = None) -> MatchOperations:
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    operations = MatchOperations(
        InMemoryMatchRegistry(),
        serialize_mutations=settings.serialize_mutations,
    )
    logger.info(
        "Scoreboard ready "
        f"(serialize_mutations={settings.serialize_mutations})",
    )
    return operations
