"""Ranked view over the best values held in a :class:`SessionStore`."""

from __future__ import annotations

from . import rules
from .state import LeaderboardEntry
from .store import SessionStore


class Leaderboard:
    def __init__(self, store: SessionStore) -> None:
        self._store = store

    def top(self, n: int = rules.LEADERBOARD_SIZE) -> list[LeaderboardEntry]:
        """Return up to ``n`` entries by descending record.

        Ties keep the order in which players first set a record.
        """
        if n <= 0:
            return []
        ranked = sorted(self._store.records(), key=lambda item: item[1], reverse=True)
        return [LeaderboardEntry(player_id, record) for player_id, record in ranked[:n]]


__all__ = ["Leaderboard"]
