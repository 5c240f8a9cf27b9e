"""Core Layer - pure match domain logic, no IO, no locks, no logging.

Invariants:
    - No module in core/ imports from services/ or infrastructure/
    - All functions are pure and deterministic given their inputs (clock and ids injected)

Design Decisions:
    - Functional core separated from the imperative shell that owns the registry and its locks
"""
