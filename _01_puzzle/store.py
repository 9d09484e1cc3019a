"""In-memory session and record storage with per-player isolation."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from threading import Lock

from .state import Session


class SessionStore:
    """Thread-safe store of sessions and best values keyed by player id.

    Sessions live for the lifetime of the store; starting a new game replaces
    the player's session but never removes it. The store-wide lock only
    guards map membership. Read-validate-apply-write sequences for one player
    run under that player's lock, so different players never wait on each
    other.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}
        self._records: dict[str, int] = {}
        self._player_locks: dict[str, Lock] = {}
        self._lock = Lock()

    @contextmanager
    def player_lock(self, player_id: str) -> Iterator[None]:
        """Serialize all session and record mutation for ``player_id``.

        Creates the player's lock on first use; only game start should call this.
        """
        with self._lock:
            lock = self._player_locks.setdefault(player_id, Lock())
        with lock:
            yield

    def existing_lock(self, player_id: str) -> Lock | None:
        """Return the player's lock, or ``None`` if the player never started a game."""
        with self._lock:
            return self._player_locks.get(player_id)

    def get_session(self, player_id: str) -> Session | None:
        with self._lock:
            return self._sessions.get(player_id)

    def set_session(self, player_id: str, session: Session) -> None:
        """Install ``session`` for the player, replacing any game in progress."""
        with self._lock:
            self._sessions[player_id] = session

    def get_record(self, player_id: str) -> int | None:
        with self._lock:
            return self._records.get(player_id)

    def set_record(self, player_id: str, value: int) -> None:
        with self._lock:
            self._records[player_id] = value

    def records(self) -> list[tuple[str, int]]:
        """Return ``(player_id, record)`` pairs in order of first record."""
        with self._lock:
            return list(self._records.items())

    def lock_count(self) -> int:
        with self._lock:
            return len(self._player_locks)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


__all__ = ["SessionStore"]
