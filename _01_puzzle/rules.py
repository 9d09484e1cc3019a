"""Core rule constants for the Emoji Math puzzle."""

from __future__ import annotations

# Every game starts from this value.
SEED_VALUE = 1

# A submitted combination must contain exactly this many distinct symbols.
COMBINATION_LENGTH = 8

# Number of catalog symbols shown to a player when a game starts.
OFFERED_COUNT = 15

# Inclusive bounds for the random multiplier action.
RANDOM_MULTIPLY_MIN = 2
RANDOM_MULTIPLY_MAX = 6

# Values are carried as fixed-width signed 64-bit integers.
INT64_BITS = 64
INT64_MIN = -(1 << (INT64_BITS - 1))
INT64_MAX = (1 << (INT64_BITS - 1)) - 1

LEADERBOARD_SIZE = 10

if COMBINATION_LENGTH > OFFERED_COUNT:
    raise ValueError("Offered symbols must cover a full combination")

__all__ = [
    "COMBINATION_LENGTH",
    "INT64_BITS",
    "INT64_MAX",
    "INT64_MIN",
    "LEADERBOARD_SIZE",
    "OFFERED_COUNT",
    "RANDOM_MULTIPLY_MAX",
    "RANDOM_MULTIPLY_MIN",
    "SEED_VALUE",
]
