"""
Random number source for dice rolls.

A DiceRoller wraps its own random.Random so dice can be given a seeded,
deterministic source in tests and a shared one in normal use.
"""

import logging
import random
import threading
from typing import List, Optional

logger = logging.getLogger(__name__)


class DiceRoller:
    """
    Uniform integer provider shared by any number of dice.

    All draws go through an internal lock, so one roller can be used
    from several threads at once.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize roller.

        Args:
            seed: Random seed for deterministic rolls (testing/replay)
        """
        self._lock = threading.Lock()
        self.rng = random.Random(seed)
        self.seed = seed

    def roll_die(self, sides: int) -> int:
        """
        Roll a single die.

        Args:
            sides: Number of sides, at least 1

        Returns:
            Uniformly distributed face in [1, sides]

        Raises:
            ValueError: If sides is less than 1
        """
        if sides < 1:
            raise ValueError(f"Cannot roll a die with {sides} sides")

        with self._lock:
            return self.rng.randint(1, sides)

    def roll_simple(self, count: int, sides: int) -> List[int]:
        """
        Roll several dice of the same size.

        Args:
            count: Number of dice
            sides: Number of sides per die

        Returns:
            List of individual rolls
        """
        if count < 0:
            raise ValueError(f"Cannot roll a negative number of dice ({count})")

        return [self.roll_die(sides) for _ in range(count)]

    def set_seed(self, seed: int):
        """Change random seed (for testing/replay)."""
        with self._lock:
            self.seed = seed
            self.rng = random.Random(seed)

    def __repr__(self) -> str:
        return f"DiceRoller(seed={self.seed!r})"


# Global roller instance (lazy-loaded)
_default_roller: Optional[DiceRoller] = None
_default_roller_lock = threading.Lock()


def get_default_roller() -> DiceRoller:
    """
    Get the process-wide roller used by dice created without one.

    Seeded from DICE_SEED when configured.

    Returns:
        Global DiceRoller instance
    """
    global _default_roller
    with _default_roller_lock:
        if _default_roller is None:
            from src.core.config import get_config

            seed = get_config().dice_seed
            _default_roller = DiceRoller(seed=seed)
            logger.debug(f"Created default roller (seed={seed})")
        return _default_roller


def reset_default_roller() -> None:
    """Drop the global roller; the next lookup creates a fresh one."""
    global _default_roller
    with _default_roller_lock:
        _default_roller = None


__all__ = ['DiceRoller', 'get_default_roller', 'reset_default_roller']
