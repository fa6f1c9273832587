import random
import pytest


from dnd_dice.errors import InvalidDiceError, UnknownDiceError
from dnd_dice.game.dice import Dice
from dnd_dice.game.types import Operation, RollType
from dnd_dice.parser.dice_parser import DiceRollWithOp, ParsedDiceRoll, ParsedOperation, ParsedRollType

SEED = 42


def test_one_d6_regular(scripted_rng):
    dice = Dice.new(1, 6, None, RollType.REGULAR, Operation.ADDITION)
    result = dice.evaluate(scripted_rng([2, 6]))
    assert result.first_roll == [2]
    assert result.second_roll is None
    assert result.result == 2


def test_modifier_added_to_one_d6(scripted_rng):
    dice = Dice.new(1, 6, 4, RollType.REGULAR, Operation.ADDITION)
    result = dice.evaluate(scripted_rng([2]))
    assert result.first_roll == [2]
    assert result.result == 6


def test_one_d6_with_advantage_takes_higher(scripted_rng):
    dice = Dice.new(1, 6, None, RollType.ADVANTAGE, Operation.ADDITION)
    result = dice.evaluate(scripted_rng([2, 6]))
    assert result.first_roll == [2]
    assert result.second_roll == [6]
    assert result.result == 6


def test_one_d6_with_disadvantage_takes_lower(scripted_rng):
    dice = Dice.new(1, 6, None, RollType.DISADVANTAGE, Operation.ADDITION)
    result = dice.evaluate(scripted_rng([2, 6]))
    assert result.first_roll == [2]
    assert result.second_roll == [6]
    assert result.result == 2


def test_three_d6_plus_two(scripted_rng):
    dice = Dice.new(3, 6, 2, RollType.REGULAR, Operation.ADDITION)
    result = dice.evaluate(scripted_rng([2, 6, 5]))
    assert result.first_roll == [2, 6, 5]
    assert result.result == 15


def test_advantage_compares_modified_group_totals(scripted_rng):
    # 2d6-1: first pair 1+6 = 7, second pair 4+4 = 8
    dice = Dice.new(2, 6, -1, RollType.ADVANTAGE)
    rng = scripted_rng([1, 6, 4, 4])
    result = dice.evaluate(rng)
    assert result.first_roll == [1, 6]
    assert result.second_roll == [4, 4]
    assert result.result == 7
    assert rng.calls == [(1, 6)] * 4

    dice = Dice.new(2, 6, -1, RollType.DISADVANTAGE)
    assert dice.evaluate(scripted_rng([1, 6, 4, 4])).result == 6


def test_zero_dice_rolls_nothing(scripted_rng):
    rng = scripted_rng([])
    result = Dice.new(0, 6, 3).evaluate(rng)
    assert result.first_roll == []
    assert result.result == 3
    assert rng.calls == []

    result = Dice.new(0, 6, None, RollType.ADVANTAGE).evaluate(rng)
    assert result.first_roll == []
    assert result.second_roll == []
    assert result.result == 0


def test_default_rng_uses_random_module(monkeypatch, rand_int):
    monkeypatch.setattr(random, "randint", rand_int([4, 5]))
    result = Dice.new(2, 6, 3).evaluate()
    assert result.first_roll == [4, 5]
    assert result.result == 12


def test_seeded_rolls_repeat():
    dice = Dice.new(4, 8, 1, RollType.ADVANTAGE)
    first = dice.evaluate(random.Random(SEED))
    second = dice.evaluate(random.Random(SEED))
    assert first == second
    assert len(first.first_roll) == 4
    assert len(first.second_roll) == 4


def test_roll_dice_within_range():
    dice = Dice.new(1, 20)
    seen = set()

    for _ in range(100_000):
        result = dice.evaluate()
        assert 1 <= result.result <= 20
        assert all(1 <= face <= 20 for face in result.first_roll)
        seen.add(result.result)

    assert seen == set(range(1, 21))


def test_advantage_rolls_within_range():
    dice = Dice.new(1, 20, None, RollType.ADVANTAGE)

    for _ in range(100_000):
        result = dice.evaluate()
        assert all(1 <= face <= 20 for face in result.first_roll)
        assert len(result.second_roll) == 1
        assert all(1 <= face <= 20 for face in result.second_roll)
        assert 1 <= result.result <= 20


def test_from_parsed_dice_roll_maps_fields():
    parsed = DiceRollWithOp(
        dice_roll=ParsedDiceRoll(
            number_of_dice_to_roll=2,
            dice_sides=10,
            modifier=-3,
            roll_type=ParsedRollType.WITH_DISADVANTAGE,
        ),
        operation=ParsedOperation.SUBTRACTION,
    )
    dice = Dice.from_parsed_dice_roll(parsed)
    assert dice == Dice(2, 10, -3, RollType.DISADVANTAGE, Operation.SUBTRACTION)


def test_from_parsed_dice_roll_unknown_type():
    parsed = DiceRollWithOp(
        dice_roll=ParsedDiceRoll(1, 6, None, "sideways"),
        operation=ParsedOperation.ADDITION,
    )
    with pytest.raises(UnknownDiceError):
        Dice.from_parsed_dice_roll(parsed)


@pytest.mark.parametrize("count,sides", [(1, 0), (1, -4), (-1, 6)])
def test_invalid_dice_rejected(count, sides):
    with pytest.raises(InvalidDiceError):
        Dice.new(count, sides)


def test_plain_string_modes_are_coerced(scripted_rng):
    dice = Dice.new(1, 6, None, "advantage")
    assert dice.roll_type is RollType.ADVANTAGE
    assert dice.evaluate(scripted_rng([2, 6])).result == 6

    dice = Dice(1, 6, None, "regular", "+")
    assert dice.roll_type is RollType.REGULAR
    assert dice.operation is Operation.ADDITION
    result = dice.evaluate(scripted_rng([2, 6]))
    assert result.second_roll is None
    assert result.result == 2


@pytest.mark.parametrize("roll_type,operation", [("sideways", "+"), ("regular", "*"), (None, "-")])
def test_unknown_mode_or_operation_rejected(roll_type, operation):
    with pytest.raises(InvalidDiceError):
        Dice.new(1, 6, None, roll_type, operation)
    with pytest.raises(ValueError):
        Dice.new(1, 6, None, roll_type, operation)
