"""Public add operation: binds the operand store to the add service."""

from onion.infrastructure import operand_store
from onion.services import add_operand


async def add(y: int) -> int:
    """Add y to the stored operand. FetchError propagates to the caller."""
    return await add_operand.add(operand_store.fetch_x, y)
