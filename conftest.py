"""
Shared pytest fixtures.
"""

import pytest

from src.core.config import reset_config
from src.dice import DiceRoller, reset_default_roller


@pytest.fixture(autouse=True)
def fresh_globals(monkeypatch):
    """Each test sees its own config and default roller."""
    for name in ('DICE_SEED', 'LOG_LEVEL', 'LOG_FILE'):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    reset_default_roller()
    yield
    reset_config()
    reset_default_roller()


@pytest.fixture
def roller():
    """Seeded roller for deterministic rolls."""
    return DiceRoller(seed=42)
