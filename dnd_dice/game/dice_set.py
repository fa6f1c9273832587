from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from dnd_dice.errors import ParseError, UnknownDiceError
from dnd_dice.game.dice import Dice
from dnd_dice.game.dice_result import DiceSetResults, RollResult
from dnd_dice.game.types import Operation, RandomSource
from dnd_dice.logger import get_logger
from dnd_dice.parser.dice_parser import DiceParserError, parse_line

logger = get_logger(__name__)


@dataclass(frozen=True)
class DiceSet:
    """
    Non-homogeneous dice rolled together into a single total, e.g. "2d6+2 - d4".

    Each Dice keeps its own modifier and roll type; its Operation decides
    whether its total is added to or taken from the set's total.
    """
    dice: Tuple[Dice, ...]

    def __init__(self, dice: Iterable[Dice]):
        object.__setattr__(self, "dice", tuple(dice))

    @classmethod
    def from_str(cls, text: str) -> "DiceSet":
        """
        Build a DiceSet from dice notation such as "3d6 + 1" or "d20 adv".

        Comma separated groups are flattened into the one set; use
        Roll.from_str to keep them apart. Raises ParseError on bad notation.
        """
        try:
            parsed = parse_line(text)
        except DiceParserError as exc:
            logger.warning(f"Rejected dice notation {text!r}: {exc}")
            raise ParseError(exc) from exc

        return cls(Dice.from_parsed_dice_roll(d) for group in parsed for d in group)

    def evaluate(self, rng: Optional[RandomSource] = None) -> DiceSetResults:
        # one source threaded through every dice, in order, so a seed
        # reproduces the whole set
        if rng is None:
            rng = random

        results: List[RollResult] = [d.evaluate(rng) for d in self.dice]

        total = 0
        for dice, roll in zip(self.dice, results):
            if dice.operation is Operation.ADDITION:
                total += roll.result
            elif dice.operation is Operation.SUBTRACTION:
                total -= roll.result
            else:
                raise UnknownDiceError(f"unhandled operation {dice.operation!r}")

        return DiceSetResults(results, total)
