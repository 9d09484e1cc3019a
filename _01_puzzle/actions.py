"""Action definitions for the Emoji Math puzzle.

Every action belongs to one :class:`ActionKind`. The kind set is closed; the
integer payload in :attr:`Action.params` is interpreted by
:func:`apply_action`, which is the single place where the transformation
rules live.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from . import arith, rules
from .exceptions import InvalidParametersError

if TYPE_CHECKING:
    from .randomness import RandomSource


class ActionKind(Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    APPEND_LAST_DIGIT = "append_last_digit"
    SHUFFLE_DIGITS = "shuffle_digits"
    REVERSE_DIGITS = "reverse_digits"
    ADD_LAST_TWO_DIGITS = "add_last_two_digits"
    SUBTRACT_LAST_DIGIT = "subtract_last_digit"
    RANDOM_MULTIPLY = "random_multiply"
    APPEND_DIGIT = "append_digit"


# Number of integer parameters each kind expects.
_ARITY: dict[ActionKind, int] = {
    ActionKind.ADD: 1,
    ActionKind.SUBTRACT: 1,
    ActionKind.MULTIPLY: 1,
    ActionKind.DIVIDE: 1,
    ActionKind.APPEND_LAST_DIGIT: 0,
    ActionKind.SHUFFLE_DIGITS: 0,
    ActionKind.REVERSE_DIGITS: 0,
    ActionKind.ADD_LAST_TWO_DIGITS: 0,
    ActionKind.SUBTRACT_LAST_DIGIT: 0,
    ActionKind.RANDOM_MULTIPLY: 2,
    ActionKind.APPEND_DIGIT: 1,
}


@dataclass(frozen=True)
class Action:
    """A symbol-keyed transformation of the current value."""

    symbol: str
    kind: ActionKind
    params: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if not self.symbol:
            raise InvalidParametersError("Action symbol must be a non-empty string")
        expected = _ARITY[self.kind]
        if len(self.params) != expected:
            raise InvalidParametersError(
                f"{self.kind.value} expects {expected} parameter(s), got {len(self.params)}"
            )
        if self.kind is ActionKind.DIVIDE and self.params[0] == 0:
            raise InvalidParametersError("Divide requires a nonzero divisor")
        if self.kind is ActionKind.APPEND_DIGIT and not (0 <= self.params[0] <= 9):
            raise InvalidParametersError("Appended digit must be in range 0-9")
        if self.kind is ActionKind.RANDOM_MULTIPLY and self.params[0] > self.params[1]:
            raise InvalidParametersError("Random multiply range is empty")

    def apply(self, value: int, rng: RandomSource | None = None) -> int:
        return apply_action(self, value, rng)

    def describe(self) -> str:
        return describe(self)


def add(symbol: str, delta: int) -> Action:
    return Action(symbol, ActionKind.ADD, (delta,))


def subtract(symbol: str, delta: int) -> Action:
    return Action(symbol, ActionKind.SUBTRACT, (delta,))


def multiply(symbol: str, factor: int) -> Action:
    return Action(symbol, ActionKind.MULTIPLY, (factor,))


def divide(symbol: str, divisor: int) -> Action:
    return Action(symbol, ActionKind.DIVIDE, (divisor,))


def append_digit(symbol: str, digit: int) -> Action:
    return Action(symbol, ActionKind.APPEND_DIGIT, (digit,))


def random_multiply(
    symbol: str,
    low: int = rules.RANDOM_MULTIPLY_MIN,
    high: int = rules.RANDOM_MULTIPLY_MAX,
) -> Action:
    return Action(symbol, ActionKind.RANDOM_MULTIPLY, (low, high))


def simple(symbol: str, kind: ActionKind) -> Action:
    """Build a parameterless action."""
    return Action(symbol, kind)


def apply_action(action: Action, value: int, rng: RandomSource | None = None) -> int:
    """Return the result of applying ``action`` to ``value``.

    Arithmetic wraps at 64 bits. Digit operations work on the decimal digits
    of ``abs(value)`` and keep the sign; leading zeros produced by reordering
    are dropped on re-parse, so the digit count can shrink.
    """

    kind = action.kind
    params = action.params

    if kind is ActionKind.ADD:
        result = value + params[0]
    elif kind is ActionKind.SUBTRACT:
        result = value - params[0]
    elif kind is ActionKind.MULTIPLY:
        result = value * params[0]
    elif kind is ActionKind.DIVIDE:
        result = arith.trunc_div(value, params[0])
    elif kind is ActionKind.APPEND_LAST_DIGIT:
        result = value * 10 + arith.trunc_mod(value, 10)
    elif kind is ActionKind.SHUFFLE_DIGITS:
        digits = arith.digits_of(value)
        _require_rng(action, rng).shuffle(digits)
        result = arith.from_digits(digits, negative=value < 0)
    elif kind is ActionKind.REVERSE_DIGITS:
        digits = arith.digits_of(value)
        digits.reverse()
        result = arith.from_digits(digits, negative=value < 0)
    elif kind is ActionKind.ADD_LAST_TWO_DIGITS:
        result = value + arith.trunc_mod(value, 100)
    elif kind is ActionKind.SUBTRACT_LAST_DIGIT:
        result = value - arith.trunc_mod(value, 10)
    elif kind is ActionKind.RANDOM_MULTIPLY:
        low, high = params
        result = value * _require_rng(action, rng).randint(low, high)
    elif kind is ActionKind.APPEND_DIGIT:
        result = value * 10 + params[0]
    else:  # pragma: no cover - the kind set is closed
        raise InvalidParametersError(f"Unsupported action kind: {kind}")

    return arith.wrap_int64(result)


def describe(action: Action) -> str:
    """Return the human-readable description shown in help text."""

    kind = action.kind
    params = action.params
    if kind is ActionKind.ADD:
        return f"Adds {params[0]} to the number"
    if kind is ActionKind.SUBTRACT:
        return f"Subtracts {params[0]} from the number"
    if kind is ActionKind.MULTIPLY:
        return f"Multiplies the number by {params[0]}"
    if kind is ActionKind.DIVIDE:
        return f"Divides the number by {params[0]}"
    if kind is ActionKind.APPEND_LAST_DIGIT:
        return "Appends the last digit of the number to its end"
    if kind is ActionKind.SHUFFLE_DIGITS:
        return "Shuffles the digits of the number"
    if kind is ActionKind.REVERSE_DIGITS:
        return "Reverses the number"
    if kind is ActionKind.ADD_LAST_TWO_DIGITS:
        return "Adds the last two digits of the number to it"
    if kind is ActionKind.SUBTRACT_LAST_DIGIT:
        return "Subtracts the last digit of the number from it"
    if kind is ActionKind.RANDOM_MULTIPLY:
        return f"Multiplies the number by a random value from {params[0]} to {params[1]}"
    if kind is ActionKind.APPEND_DIGIT:
        return f"Appends the digit {params[0]} to the end of the number"
    raise InvalidParametersError(f"Unsupported action kind: {kind}")  # pragma: no cover


def _require_rng(action: Action, rng: RandomSource | None) -> RandomSource:
    if rng is None:
        raise InvalidParametersError(f"Action {action.symbol!r} needs a random source")
    return rng


__all__ = [
    "Action",
    "ActionKind",
    "add",
    "append_digit",
    "apply_action",
    "describe",
    "divide",
    "multiply",
    "random_multiply",
    "simple",
    "subtract",
]
