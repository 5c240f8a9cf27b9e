"""Services Layer - match operations over the registry.

Invariants:
    - Services sequence IO around pure core checks; they hold no authoritative match state

Design Decisions:
    - One operations class owning the lifecycle and the summary query
"""
