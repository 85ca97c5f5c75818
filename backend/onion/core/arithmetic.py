"""Arithmetic: the pure innermost operation.

Invariants:
    - add never performs IO and never raises for int inputs
"""


def add(x: int, y: int) -> int:
    return x + y
