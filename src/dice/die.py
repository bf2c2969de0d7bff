"""
Die entity: a single die with a fixed number of sides and a current face.
"""

import logging
import numbers
from typing import Any, Dict, Optional

from .roller import DiceRoller, get_default_roller

logger = logging.getLogger(__name__)

MIN_SIDES = 1
MAX_SIDES = 20


class InvalidArgument(ValueError):
    """Raised when a die is constructed with an unsupported argument."""

    def __init__(self, argument: str, value: Any, message: str):
        super().__init__(message)
        self.argument = argument
        self.value = value


class Die:
    """
    A die with between 1 and 20 sides.

    The side count is fixed at construction. The die is rolled once as it
    is created, so showing_value is always a valid face.

    Example:
        die = Die(6)
        die.number_of_sides  # 6
        die.roll()           # 1-6, also stored in die.showing_value
    """

    def __init__(self, num_sides: int, roller: Optional[DiceRoller] = None):
        """
        Create a die and roll it.

        Args:
            num_sides: Number of sides, 1 to 20 inclusive. Any integral type
                (int, numpy.int64, ...) is accepted and stored as int
            roller: Random source; the process-wide default if omitted

        Raises:
            InvalidArgument: If num_sides is not an integer in [1, 20]
        """
        # bool is an int subclass but never a side count
        if not isinstance(num_sides, numbers.Integral) or isinstance(num_sides, bool):
            logger.warning(f"Rejected die with non-integer side count {num_sides!r}")
            raise InvalidArgument(
                'num_sides', num_sides,
                f"num_sides must be an integer (got {type(num_sides).__name__})"
            )

        sides = int(num_sides)
        if sides < MIN_SIDES or sides > MAX_SIDES:
            logger.warning(f"Rejected die with {num_sides} sides")
            raise InvalidArgument(
                'num_sides', num_sides,
                f"num_sides must be greater than {MIN_SIDES - 1} and less than "
                f"{MAX_SIDES + 1} (got {num_sides})"
            )

        self._number_of_sides = sides
        self._roller = roller if roller is not None else get_default_roller()
        self._showing_value = self.roll()

    @property
    def number_of_sides(self) -> int:
        """Number of sides of the die."""
        return self._number_of_sides

    @property
    def showing_value(self) -> int:
        """Face shown by the most recent roll."""
        return self._showing_value

    def roll(self) -> int:
        """
        Roll the die.

        Returns:
            The new showing value, uniform in [1, number_of_sides]
        """
        self._showing_value = self._roller.roll_die(self._number_of_sides)
        logger.debug(f"d{self._number_of_sides} rolled {self._showing_value}")
        return self._showing_value

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for reporting."""
        return {
            'number_of_sides': self._number_of_sides,
            'showing_value': self._showing_value
        }

    def __repr__(self) -> str:
        return f"Die(sides={self._number_of_sides}, showing={self._showing_value})"
