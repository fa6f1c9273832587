from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from dnd_dice import config
from dnd_dice.logger import get_logger

logger = get_logger(__name__)


class ParsedRollType(str, Enum):
    REGULAR = "regular"
    WITH_ADVANTAGE = "with_advantage"
    WITH_DISADVANTAGE = "with_disadvantage"


class ParsedOperation(str, Enum):
    ADDITION = "addition"
    SUBTRACTION = "subtraction"


@dataclass(frozen=True)
class ParsedDiceRoll:
    number_of_dice_to_roll: int
    dice_sides: int
    modifier: Optional[int]
    roll_type: ParsedRollType


@dataclass(frozen=True)
class DiceRollWithOp:
    dice_roll: ParsedDiceRoll
    operation: ParsedOperation  # how this term joins the running total


class DiceParserError(ValueError):
    pass


# One dice term plus the operator joining it to the previous term, e.g.
#   "2d6+2"   " + d10+2"   " - 2d4-1"   "1d20+5 adv"
# A signed number right after a term is its modifier, unless it is the
# count of the next dice term ("d6 + 2d4").
TERM_RE = re.compile(
    r"""
    \s*
    (?P<op>[+-])?\s*
    (?P<count>\d+)?\s*d\s*(?P<sides>\d+)
    (?:\s*(?P<mod>[+-]\s*\d+)(?!\s*\d*\s*d\s*\d))?
    (?:\s+(?P<mode>advantage|disadvantage|adv|dis|a|d)(?![a-z0-9]))?
    \s*
    """,
    re.VERBOSE | re.IGNORECASE,
)

ADVANTAGE_WORDS = {"advantage", "adv", "a"}


def _roll_type(mode: Optional[str]):
    if mode is None:
        return ParsedRollType.REGULAR
    if mode.lower() in ADVANTAGE_WORDS:
        return ParsedRollType.WITH_ADVANTAGE
    return ParsedRollType.WITH_DISADVANTAGE


def _term_from_match(m: re.Match) -> DiceRollWithOp:
    count = int(m.group("count") or "1")
    sides = int(m.group("sides"))

    if count > config.MAX_DICE_COUNT:
        raise DiceParserError(f"Too many dice: {count} (max {config.MAX_DICE_COUNT})")
    if sides == 0:
        raise DiceParserError("Dice must have at least one side")
    if sides > config.MAX_DICE_SIDES:
        raise DiceParserError(f"Too many sides: {sides} (max {config.MAX_DICE_SIDES})")

    mod = m.group("mod")
    modifier = int(re.sub(r"\s+", "", mod)) if mod else None

    operation = ParsedOperation.SUBTRACTION if m.group("op") == "-" else ParsedOperation.ADDITION

    return DiceRollWithOp(
        dice_roll=ParsedDiceRoll(
            number_of_dice_to_roll=count,
            dice_sides=sides,
            modifier=modifier,
            roll_type=_roll_type(m.group("mode")),
        ),
        operation=operation,
    )


def parse_group(text: str) -> List[DiceRollWithOp]:
    # "2d6+2 + d10+2 - 2d4-1" -> three terms

    if not text.strip():
        raise DiceParserError("Empty dice group")

    terms: List[DiceRollWithOp] = []
    pos = 0
    while pos < len(text):
        m = TERM_RE.match(text, pos)
        if not m:
            raise DiceParserError(f"Invalid dice expression near {text[pos:].strip()!r}")
        if terms and m.group("op") is None:
            raise DiceParserError(f"Expected + or - before {m.group(0).strip()!r}")
        terms.append(_term_from_match(m))
        pos = m.end()

    return terms


def parse_line(line: str) -> List[List[DiceRollWithOp]]:
    """
    Parse a full dice line into comma separated groups of dice terms.

    "d100, d100"      -> two groups of one term each
    "2d6+2 - d4 adv"  -> one group of two terms
    """
    if not line or not line.strip():
        raise DiceParserError("No dice to roll")

    groups = [parse_group(group) for group in line.split(",")]
    logger.debug(f"Parsed {line!r} into {len(groups)} group(s)")
    return groups
