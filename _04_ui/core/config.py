"""Configuration constants for the Emoji Math web API."""

from __future__ import annotations

from _01_puzzle import rules

# Rate limiting configuration for combination submissions
RATE_LIMIT_REQUESTS = 30  # requests per window
RATE_LIMIT_WINDOW = 60  # window in seconds

# Only accept symbols offered for the current game (False accepts the full catalog)
VALIDATE_AGAINST_OFFERED = False

DEFAULT_LEADERBOARD_SIZE = rules.LEADERBOARD_SIZE
MAX_LEADERBOARD_SIZE = 100

# Callback payload prefix for the "play again" affordance
RESTART_CALLBACK_PREFIX = "restart:"
