"""API Layer: composition root exposing the public operation.

Invariants:
    - The only layer that knows both services/ and infrastructure/
    - Wires dependencies without adding logic
"""
