"""Core Layer: pure computation, no IO, no async, no settings.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or config
    - All functions are pure, deterministic and total

Design Decisions:
    - Functional core separated from imperative shell (ADR: onion layering)
"""
