from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from dnd_dice.errors import ParseError
from dnd_dice.game.dice import Dice
from dnd_dice.game.dice_result import DiceSetResults
from dnd_dice.game.dice_set import DiceSet
from dnd_dice.game.types import RandomSource
from dnd_dice.logger import get_logger
from dnd_dice.parser.dice_parser import DiceParserError, parse_line

logger = get_logger(__name__)


@dataclass(frozen=True)
class Roll:
    """
    One or more independent DiceSets, each reported on its own.

    "d6 + d4" is a Roll of a single DiceSet. "d100, d100, d100" (three rolls
    on a loot table) is a Roll of three DiceSets of one Dice each.
    """
    dice_sets: Tuple[DiceSet, ...]

    def __init__(self, dice_sets: Iterable[DiceSet]):
        object.__setattr__(self, "dice_sets", tuple(dice_sets))

    @classmethod
    def from_str(cls, text: str) -> "Roll":
        # "d100, d100, 3d6+2" -> three DiceSets
        try:
            parsed = parse_line(text)
        except DiceParserError as exc:
            logger.warning(f"Rejected dice notation {text!r}: {exc}")
            raise ParseError(exc) from exc

        return cls(
            DiceSet(Dice.from_parsed_dice_roll(d) for d in group)
            for group in parsed
        )

    def evaluate(self, rng: Optional[RandomSource] = None) -> List[DiceSetResults]:
        """
        Roll every DiceSet in order against one random source.

        Each set draws all of its dice before the next set starts, so a
        seeded source reproduces every set's results.
        """
        if rng is None:
            rng = random
        return [dice_set.evaluate(rng) for dice_set in self.dice_sets]
