"""Infrastructure Layer - match storage and cross-cutting concerns.

Invariants:
    - Infrastructure imports core value types, never core validation or ranking logic
    - All shared mutable state lives here, behind a lock

Design Decisions:
    - One concern per module: storage in match_registry, logging in observability
"""
