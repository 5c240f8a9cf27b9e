"""Live Scoreboard - in-memory tracking and ranking of football matches in progress.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
