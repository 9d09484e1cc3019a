"""Custom exception classes for the Emoji Math puzzle."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Stable identifiers for the ways a combination can be rejected."""

    NO_ACTIVE_GAME = "NoActiveGame"
    WRONG_LENGTH = "WrongLength"
    UNKNOWN_SYMBOL = "UnknownSymbol"
    DUPLICATE_SUBMISSION = "DuplicateSubmission"
    ALREADY_USED = "AlreadyUsed"


class EmojiMathError(Exception):
    """Base exception for all Emoji Math errors."""


class InvalidParametersError(EmojiMathError):
    """Raised when an action is built with parameters that do not fit its kind."""


class DuplicateSymbolError(EmojiMathError):
    """Raised when a catalog registers the same symbol twice."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Symbol {symbol!r} is already registered")


class CombinationError(EmojiMathError):
    """Base class for a rejected combination. Never mutates game state."""

    code: ErrorCode

    def __init__(self, message: str, symbol: str | None = None) -> None:
        self.symbol = symbol
        super().__init__(message)


class NoActiveGameError(CombinationError):
    """Raised when a player submits before starting a game."""

    code = ErrorCode.NO_ACTIVE_GAME

    def __init__(self, player_id: str) -> None:
        self.player_id = player_id
        super().__init__(f"Player {player_id!r} has no active game; start one first")


class WrongLengthError(CombinationError):
    """Raised when a combination does not have the required number of symbols."""

    code = ErrorCode.WRONG_LENGTH

    def __init__(self, length: int, expected: int) -> None:
        self.length = length
        self.expected = expected
        super().__init__(f"Combination must contain exactly {expected} symbols, got {length}")


class UnknownSymbolError(CombinationError):
    """Raised when a submitted symbol is not available in this game."""

    code = ErrorCode.UNKNOWN_SYMBOL

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Symbol {symbol!r} is not allowed in this game", symbol)


class DuplicateSubmissionError(CombinationError):
    """Raised when a symbol repeats inside a single combination."""

    code = ErrorCode.DUPLICATE_SUBMISSION

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Symbol {symbol!r} is used more than once", symbol)


class AlreadyUsedError(CombinationError):
    """Raised when a symbol was already consumed earlier in the same game."""

    code = ErrorCode.ALREADY_USED

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Symbol {symbol!r} was already used in this game", symbol)


__all__ = [
    "AlreadyUsedError",
    "CombinationError",
    "DuplicateSubmissionError",
    "DuplicateSymbolError",
    "EmojiMathError",
    "ErrorCode",
    "InvalidParametersError",
    "NoActiveGameError",
    "UnknownSymbolError",
    "WrongLengthError",
]
