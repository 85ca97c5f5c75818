"""API add: composition root wiring of the operand store into the add service."""

import pytest

from onion.api import add as api
from onion.core.errors import FetchError


async def test_adds_three_to_stub_value():
    assert await api.add(3) == 10


@pytest.mark.parametrize("y", [-7, 0, 1, 35, 10**12])
async def test_stub_seven_plus_y(y):
    assert await api.add(y) == 7 + y


async def test_fetch_failure_propagates_unchanged(unreachable_source, core_add_spy):
    with pytest.raises(FetchError) as exc_info:
        await api.add(3)
    assert exc_info.value.code == "FETCH_FAILED"
    assert core_add_spy == []


async def test_binds_operand_store_fetch(monkeypatch):
    raised = FetchError("operand-db", "unreachable")

    async def failing_fetch():
        raise raised

    monkeypatch.setattr("onion.infrastructure.operand_store.fetch_x", failing_fetch)

    with pytest.raises(FetchError) as exc_info:
        await api.add(5)
    assert exc_info.value is raised
