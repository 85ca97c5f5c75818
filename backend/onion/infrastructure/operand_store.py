"""Operand Store: stubbed data source for the external operand.

Invariants:
    - fetch_x satisfies core.operand_protocols.FetchOperand
    - An unreachable source raises FetchError; no value is ever invented
    - Settings read per call, so each invocation sees current configuration

Design Decisions:
    - Stub returns a configured value instead of querying a database; a real
      store replaces the body of fetch_x and maps its driver errors to FetchError
"""

import logging

from onion.config import get_settings
from onion.core.errors import FetchError

logger = logging.getLogger(__name__)


async def fetch_x() -> int:
    """Read the operand from the configured source."""
    settings = get_settings()
    if not settings.operand_source_reachable:
        logger.error(
            f"Operand source {settings.operand_source} unreachable",
            extra={"source": settings.operand_source},
        )
        raise FetchError(settings.operand_source, "unreachable")

    # Stub: no query, the configured value stands in for the stored row
    logger.debug(
        "Fetched operand",
        extra={"source": settings.operand_source, "operand": settings.operand_value},
    )
    return settings.operand_value
