from __future__ import annotations

from enum import Enum
from typing import Protocol


class RollType(str, Enum):
    """Advantage or disadvantage on a roll."""
    ADVANTAGE = "advantage"        # <- roll twice, keep the higher total
    DISADVANTAGE = "disadvantage"  # <- roll twice, keep the lower total
    REGULAR = "regular"            # <- roll once


class Operation(str, Enum):
    """Whether a dice total is added to or taken from the running total."""
    ADDITION = "+"
    SUBTRACTION = "-"


class RandomSource(Protocol):
    # random.Random, random.SystemRandom and the random module itself all fit.

    def randint(self, a: int, b: int) -> int:
        ...
