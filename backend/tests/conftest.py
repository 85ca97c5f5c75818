"""Root conftest: shared test configuration.

Invariants:
    - Every test starts from default Settings (cache cleared, operand env unset)
    - Environment changes go through monkeypatch, so they never leak
"""

import pytest

from onion.config import get_settings

_OPERAND_ENV = (
    "OPERAND_VALUE", "OPERAND_SOURCE", "OPERAND_SOURCE_REACHABLE",
    "LOG_LEVEL", "LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in _OPERAND_ENV:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def unreachable_source(monkeypatch):
    """Configure the operand store to fail with FetchError."""
    monkeypatch.setenv("OPERAND_SOURCE_REACHABLE", "false")
    get_settings.cache_clear()


@pytest.fixture
def core_add_spy(monkeypatch):
    """Wrap core.arithmetic.add and record every call."""
    import onion.core.arithmetic as arithmetic

    calls = []
    original = arithmetic.add

    def _spy(x, y):
        calls.append((x, y))
        return original(x, y)

    monkeypatch.setattr(arithmetic, "add", _spy)
    return calls
