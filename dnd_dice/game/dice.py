from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional

from dnd_dice.errors import InvalidDiceError, UnknownDiceError
from dnd_dice.game.dice_result import RollResult
from dnd_dice.game.types import Operation, RandomSource, RollType
from dnd_dice.logger import get_logger
from dnd_dice.parser.dice_parser import DiceRollWithOp, ParsedOperation, ParsedRollType

logger = get_logger(__name__)


_ROLL_TYPES = {
    ParsedRollType.REGULAR: RollType.REGULAR,
    ParsedRollType.WITH_ADVANTAGE: RollType.ADVANTAGE,
    ParsedRollType.WITH_DISADVANTAGE: RollType.DISADVANTAGE,
}

_OPERATIONS = {
    ParsedOperation.ADDITION: Operation.ADDITION,
    ParsedOperation.SUBTRACTION: Operation.SUBTRACTION,
}


@dataclass(frozen=True)
class Dice:
    """
    A set of homogeneous dice, e.g. three d6.

    Totals are plain Python ints, so they never wrap no matter how many
    dice or sides are used. A negative count or a die with fewer than one
    side is rejected when the Dice is built.
    """
    number_of_dice_to_roll: int
    sides: int
    modifier: Optional[int] = None
    roll_type: RollType = RollType.REGULAR
    operation: Operation = Operation.ADDITION

    def __post_init__(self):
        if self.number_of_dice_to_roll < 0:
            raise InvalidDiceError(
                f"Number of dice must not be negative, got {self.number_of_dice_to_roll}")
        if self.sides < 1:
            raise InvalidDiceError(f"Dice need at least one side, got {self.sides}")

        # "advantage" and "+" are accepted, anything outside the enums is not
        try:
            object.__setattr__(self, "roll_type", RollType(self.roll_type))
            object.__setattr__(self, "operation", Operation(self.operation))
        except ValueError as exc:
            raise InvalidDiceError(str(exc)) from exc

    @classmethod
    def new(
        cls,
        number_of_dice: int,
        number_of_sides: int,
        modifier: Optional[int] = None,
        roll_type: RollType = RollType.REGULAR,
        operation: Operation = Operation.ADDITION,
    ) -> "Dice":
        # A single d20 with a plus five modifier and advantage:
        #   Dice.new(1, 20, 5, RollType.ADVANTAGE, Operation.ADDITION)
        return cls(
            number_of_dice_to_roll=number_of_dice,
            sides=number_of_sides,
            modifier=modifier,
            roll_type=roll_type,
            operation=operation,
        )

    @classmethod
    def from_parsed_dice_roll(cls, parsed_roll: DiceRollWithOp) -> "Dice":
        roll_type = _ROLL_TYPES.get(parsed_roll.dice_roll.roll_type)
        operation = _OPERATIONS.get(parsed_roll.operation)
        if roll_type is None or operation is None:
            logger.error(f"Parsed roll could not be mapped onto Dice: {parsed_roll!r}")
            raise UnknownDiceError(f"unmapped parsed roll {parsed_roll!r}")

        return cls(
            number_of_dice_to_roll=parsed_roll.dice_roll.number_of_dice_to_roll,
            sides=parsed_roll.dice_roll.dice_sides,
            modifier=parsed_roll.dice_roll.modifier,
            roll_type=roll_type,
            operation=operation,
        )

    def _draw(self, rng: RandomSource) -> List[int]:
        return [rng.randint(1, self.sides) for _ in range(self.number_of_dice_to_roll)]

    def evaluate(self, rng: Optional[RandomSource] = None) -> RollResult:
        """
        Roll the dice and produce a RollResult.

        rng is anything with an inclusive ``randint(a, b)``; pass a seeded
        ``random.Random`` to get repeatable rolls. Without one the module
        level ``random`` generator is used.
        """
        if rng is None:
            rng = random

        first_roll = self._draw(rng)
        modifier = self.modifier or 0

        if self.roll_type is RollType.REGULAR:
            return RollResult(first_roll, None, sum(first_roll) + modifier)

        # both candidates get the modifier before they are compared
        second_roll = self._draw(rng)
        first_total = sum(first_roll) + modifier
        second_total = sum(second_roll) + modifier

        if self.roll_type is RollType.ADVANTAGE:
            result = max(first_total, second_total)
        elif self.roll_type is RollType.DISADVANTAGE:
            result = min(first_total, second_total)
        else:
            raise UnknownDiceError(f"unhandled roll type {self.roll_type!r}")

        return RollResult(first_roll, second_roll, result)
