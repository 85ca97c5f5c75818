"""Add Operand: fetch one operand through an injected capability, add with core.

Invariants:
    - fetch_x invoked exactly once per call and awaited (the only suspension point)
    - A failing fetch_x propagates its exception object unchanged; core is not reached
    - fetch_x is not retained past the call

Design Decisions:
    - Capability passed as a parameter instead of imported: the composition
      root (api/) decides which data source backs it (ADR: onion layering)
"""

import logging

from onion.core import arithmetic
from onion.core.operand_protocols import FetchOperand

logger = logging.getLogger(__name__)


async def add(fetch_x: FetchOperand, y: int) -> int:
    """Add y to the operand supplied by fetch_x."""
    x = await fetch_x()

    result = arithmetic.add(x, y)
    logger.debug(
        "Added fetched operand",
        extra={"operand": x, "y": y, "result": result},
    )
    return result
