"""Process entry point: add 3 to the stored operand and print the outcome.

Invariants:
    - No flags or arguments; configuration comes only from Settings
    - OnionError is printed as Err(...) with exit status 1; anything else propagates

Design Decisions:
    - The entry point is the only place errors are caught: services/ and api/
      forward them untouched
"""

import asyncio
import logging
import sys

from onion.api import add as api
from onion.config import get_settings
from onion.core.errors import OnionError
from onion.infrastructure.observability import setup_logging
from onion.schemas.outcome import AddOutcome

logger = logging.getLogger(__name__)

ENTRY_OPERAND = 3


async def run(y: int) -> AddOutcome:
    """Call the public add operation and capture its outcome."""
    try:
        value = await api.add(y)
    except OnionError as e:
        logger.error(
            f"OnionError: {e.message}",
            extra={"error_code": e.code, "y": y},
        )
        return AddOutcome(y=y, error=e.to_response()["error"])
    return AddOutcome(y=y, value=value)


def main() -> int:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    outcome = asyncio.run(run(ENTRY_OPERAND))
    print(describe(outcome, settings.operand_value))
    return 0 if outcome.ok else 1


def describe(outcome: AddOutcome, operand_value: int) -> str:
    """One-line report; the stored value is named only when it was fetched."""
    if not outcome.ok:
        return f"When we add {outcome.y} to the DB value, we get {outcome.render()}"
    return (
        f"When we add {outcome.y} to the DB value ({operand_value}), "
        f"we get {outcome.render()}"
    )


if __name__ == "__main__":
    sys.exit(main())
