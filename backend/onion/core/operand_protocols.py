"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - The operand is reached only through FetchOperand
    - Implementations provided by infrastructure, bound in api/

Design Decisions:
    - Protocol over ABC: a plain coroutine function satisfies it structurally
      (ADR: no inheritance hierarchy for a single capability)
    - Async in Protocol: implementations do IO, so the capability returns an
      awaitable; the pure core that consumes the value is never async
"""

from typing import Awaitable, Protocol


class FetchOperand(Protocol):
    """Zero-argument capability yielding the external operand.

    Resolves to an int, or raises an OnionError (core/errors.py) when the
    data source cannot be reached.
    """
    def __call__(self) -> Awaitable[int]: ...
