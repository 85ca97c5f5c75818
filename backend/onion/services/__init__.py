"""Services Layer: orchestration of IO-shaped steps around the pure core.

Invariants:
    - Services receive IO capabilities as parameters; they never import infrastructure/
    - Errors from capabilities are forwarded unchanged
"""
