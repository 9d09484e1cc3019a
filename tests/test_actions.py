import random

import pytest

from _01_puzzle import actions, arith, rules
from _01_puzzle.actions import Action, ActionKind
from _01_puzzle.exceptions import InvalidParametersError


class FixedRandom:
    """Deterministic stand-in for the shared random source."""

    def __init__(self, multiplier: int = 2, order=None):
        self.multiplier = multiplier
        self.order = order
        self.calls: list[tuple[int, int]] = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.multiplier

    def shuffle(self, x):
        if self.order is None:
            x.reverse()
        else:
            x[:] = [x[i] for i in self.order]

    def sample(self, population, k):
        return list(population)[:k]


def make(kind: ActionKind, *params: int) -> Action:
    return Action("x", kind, params)


@pytest.mark.parametrize(
    "action, value, expected",
    [
        (actions.add("a", 5), 1, 6),
        (actions.subtract("s", 3), 1, -2),
        (actions.multiply("m", 2), 12, 24),
        (actions.divide("d", 2), 7, 3),
        (actions.divide("d", 2), -7, -3),
        (make(ActionKind.APPEND_LAST_DIGIT), 22, 222),
        (make(ActionKind.ADD_LAST_TWO_DIGITS), 222, 244),
        (make(ActionKind.SUBTRACT_LAST_DIGIT), 244, 240),
        (actions.append_digit("1", 1), 240, 2401),
        (actions.multiply("c", 100), 2401, 240100),
    ],
)
def test_deterministic_actions(action, value, expected):
    assert action.apply(value) == expected


def test_pure_actions_repeat_identically():
    pure = [
        actions.add("a", 10),
        actions.subtract("s", 5),
        actions.multiply("m", 10),
        actions.divide("d", 2),
        make(ActionKind.APPEND_LAST_DIGIT),
        make(ActionKind.ADD_LAST_TWO_DIGITS),
        make(ActionKind.SUBTRACT_LAST_DIGIT),
        actions.append_digit("3", 3),
    ]
    for action in pure:
        for value in (-1234, -7, 0, 1, 9, 58, 123456789):
            assert action.apply(value) == action.apply(value)


def test_divide_truncates_toward_zero():
    halve = actions.divide("d", 2)
    assert halve.apply(5) == 2
    assert halve.apply(-5) == -2
    assert actions.divide("d", -2).apply(5) == -2


def test_last_digit_operations_keep_sign_of_value():
    assert make(ActionKind.APPEND_LAST_DIGIT).apply(-17) == -177
    assert make(ActionKind.SUBTRACT_LAST_DIGIT).apply(-17) == -10
    assert make(ActionKind.ADD_LAST_TWO_DIGITS).apply(-117) == -134


def test_reverse_drops_leading_zeros():
    reverse = make(ActionKind.REVERSE_DIGITS)
    assert reverse.apply(1200) == 21
    assert reverse.apply(123) == 321
    assert reverse.apply(-45) == -54
    assert reverse.apply(0) == 0


def test_shuffle_uses_random_source():
    shuffle = make(ActionKind.SHUFFLE_DIGITS)
    assert shuffle.apply(1234, FixedRandom()) == 4321
    assert shuffle.apply(102, FixedRandom(order=[1, 0, 2])) == 12


def test_shuffle_keeps_digit_multiset_when_no_zero():
    shuffle = make(ActionKind.SHUFFLE_DIGITS)
    rng = random.Random(3)
    for _ in range(50):
        result = shuffle.apply(987654321, rng)
        assert sorted(str(result)) == sorted("987654321")


def test_random_multiply_draws_from_inclusive_range():
    action = actions.random_multiply("r")
    rng = FixedRandom(multiplier=6)
    assert action.apply(7, rng) == 42
    assert rng.calls == [(rules.RANDOM_MULTIPLY_MIN, rules.RANDOM_MULTIPLY_MAX)]


def test_random_actions_require_random_source():
    with pytest.raises(InvalidParametersError, match="random source"):
        actions.random_multiply("r").apply(3)
    with pytest.raises(InvalidParametersError, match="random source"):
        make(ActionKind.SHUFFLE_DIGITS).apply(3)


def test_multiplication_wraps_at_64_bits():
    big = actions.multiply("m", 100)
    value = rules.INT64_MAX // 10
    assert big.apply(value) == arith.wrap_int64(value * 100)
    assert rules.INT64_MIN <= big.apply(value) <= rules.INT64_MAX
    assert actions.add("a", 1).apply(rules.INT64_MAX) == rules.INT64_MIN


def test_describe_mentions_parameters():
    assert actions.add("➕", 5).describe() == "Adds 5 to the number"
    assert "random value from 2 to 6" in actions.random_multiply("🎲").describe()
    assert "digit 4" in actions.append_digit("4️⃣", 4).describe()


@pytest.mark.parametrize(
    "kind, params",
    [
        (ActionKind.ADD, ()),
        (ActionKind.DIVIDE, (0,)),
        (ActionKind.APPEND_DIGIT, (10,)),
        (ActionKind.APPEND_DIGIT, (-1,)),
        (ActionKind.REVERSE_DIGITS, (1,)),
        (ActionKind.RANDOM_MULTIPLY, (6, 2)),
    ],
)
def test_invalid_parameters_rejected(kind, params):
    with pytest.raises(InvalidParametersError):
        Action("x", kind, params)


def test_empty_symbol_rejected():
    with pytest.raises(InvalidParametersError):
        actions.add("", 1)


def test_actions_are_immutable():
    action = actions.add("a", 1)
    with pytest.raises(AttributeError):
        action.symbol = "b"
