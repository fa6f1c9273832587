from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class RollResult:
    first_roll: List[int]               # present on every roll type
    second_roll: Optional[List[int]]    # only on advantage / disadvantage
    result: int

    def __str__(self) -> str:
        if self.second_roll is None:
            return f"{self.first_roll}"
        return f"[{self.first_roll}, {self.second_roll}]"


@dataclass
class DiceSetResults:
    """Every dice result of a DiceSet plus the signed total."""
    dice_results: List[RollResult]
    final_result: int
