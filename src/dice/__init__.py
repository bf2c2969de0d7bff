"""
Dice - a single die with a configurable number of sides.

Provides:
- Die: fixed side count (1-20), rolled on creation
- InvalidArgument: raised for unsupported side counts
- DiceRoller: injectable, thread-safe random source

Usage:
    from src.dice import Die, DiceRoller

    die = Die(20)
    die.roll()

    # Deterministic rolls for tests/replay
    seeded = Die(6, roller=DiceRoller(seed=42))
"""

from .die import Die, InvalidArgument, MIN_SIDES, MAX_SIDES
from .roller import DiceRoller, get_default_roller, reset_default_roller

__all__ = [
    'Die',
    'InvalidArgument',
    'MIN_SIDES',
    'MAX_SIDES',
    'DiceRoller',
    'get_default_roller',
    'reset_default_roller',
]
