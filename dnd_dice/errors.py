from __future__ import annotations

from typing import Optional


class DiceError(Exception):
    """Base class for everything the dice roller raises."""


class ParseError(DiceError):
    """The dice notation could not be parsed; wraps the parser's diagnostic."""

    def __init__(self, source: Exception):
        self.source = source
        super().__init__(f"Error parsing input: {source}")


class UnknownDiceError(DiceError):

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        super().__init__("An unknown error occurred")


class InvalidDiceError(DiceError, ValueError):
    """A Dice was built with a negative count or fewer than one side."""
