"""Pydantic Schemas: validated shapes for values crossing the process boundary.

Invariants:
    - Schemas hold data only; no IO, no calls into services/
"""
