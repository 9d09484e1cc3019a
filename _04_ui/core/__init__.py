"""Core components for the Emoji Math web API."""

from _04_ui.core.config import (
    DEFAULT_LEADERBOARD_SIZE,
    MAX_LEADERBOARD_SIZE,
    RATE_LIMIT_REQUESTS,
    RATE_LIMIT_WINDOW,
    RESTART_CALLBACK_PREFIX,
    VALIDATE_AGAINST_OFFERED,
)
from _04_ui.core.rate_limiter import RateLimiter

__all__ = [
    "DEFAULT_LEADERBOARD_SIZE",
    "MAX_LEADERBOARD_SIZE",
    "RATE_LIMIT_REQUESTS",
    "RATE_LIMIT_WINDOW",
    "RESTART_CALLBACK_PREFIX",
    "VALIDATE_AGAINST_OFFERED",
    "RateLimiter",
]
