"""Session state and the result types returned by the engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from . import rules
from .exceptions import CombinationError, ErrorCode


@dataclass
class Session:
    """Mutable per-player game state. Only touched under the player's lock."""

    offered_symbols: tuple[str, ...]
    current_value: int = rules.SEED_VALUE
    used_symbols: set[str] = field(default_factory=set)

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            current_value=self.current_value,
            used_symbols=frozenset(self.used_symbols),
            offered_symbols=self.offered_symbols,
        )


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only copy of a session, safe to hand to callers."""

    current_value: int
    used_symbols: frozenset[str]
    offered_symbols: tuple[str, ...]


@dataclass(frozen=True)
class GameStart:
    seed_value: int
    offered_symbols: tuple[str, ...]


@dataclass(frozen=True)
class TraceEntry:
    """One applied action: the value before and after it."""

    symbol: str
    before: int
    after: int


@dataclass(frozen=True)
class SubmissionResult:
    trace: tuple[TraceEntry, ...]
    final_value: int
    is_new_record: bool
    record: int


@dataclass(frozen=True)
class Rejection:
    """Typed validation failure returned in place of a result."""

    code: ErrorCode
    message: str
    symbol: str | None = None

    @classmethod
    def from_error(cls, error: CombinationError) -> Rejection:
        return cls(code=error.code, message=str(error), symbol=error.symbol)


@dataclass(frozen=True)
class LeaderboardEntry:
    player_id: str
    record: int


__all__ = [
    "GameStart",
    "LeaderboardEntry",
    "Rejection",
    "Session",
    "SessionSnapshot",
    "SubmissionResult",
    "TraceEntry",
]
