"""Fixed-width integer helpers used by the action catalog.

Values wrap around on overflow exactly like a signed 64-bit register would;
they are never promoted to arbitrary precision. Division and remainder
truncate toward zero, so ``trunc_mod(-17, 10) == -7``.
"""

from __future__ import annotations

from . import rules

_MASK = (1 << rules.INT64_BITS) - 1


def wrap_int64(value: int) -> int:
    """Reduce ``value`` into the signed 64-bit range with two's-complement wraparound."""

    value &= _MASK
    if value > rules.INT64_MAX:
        value -= 1 << rules.INT64_BITS
    return value


def trunc_div(value: int, divisor: int) -> int:
    """Integer division truncating toward zero."""

    if divisor == 0:
        raise ZeroDivisionError("divisor must be nonzero")
    quotient = abs(value) // abs(divisor)
    if (value < 0) != (divisor < 0):
        quotient = -quotient
    return wrap_int64(quotient)


def trunc_mod(value: int, divisor: int) -> int:
    """Remainder matching :func:`trunc_div`; takes the sign of ``value``."""

    remainder = abs(value) % abs(divisor)
    return -remainder if value < 0 else remainder


def digits_of(value: int) -> list[str]:
    """Return the decimal digits of ``abs(value)``, most significant first."""

    return list(str(abs(value)))


def from_digits(digits: list[str], *, negative: bool = False) -> int:
    """Re-parse a digit sequence, dropping leading zeros, and wrap to 64 bits."""

    magnitude = int("".join(digits)) if digits else 0
    return wrap_int64(-magnitude if negative else magnitude)


__all__ = ["digits_of", "from_digits", "trunc_div", "trunc_mod", "wrap_int64"]
