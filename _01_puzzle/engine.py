"""Game engine entry points.

The engine owns the session lifecycle: start a game, validate and apply a
combination, and report records. It never raises for a bad combination;
validation failures come back as :class:`~_01_puzzle.state.Rejection`.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from . import rules
from .catalog import ActionCatalog, default_catalog
from .exceptions import (
    AlreadyUsedError,
    CombinationError,
    DuplicateSubmissionError,
    NoActiveGameError,
    UnknownSymbolError,
    WrongLengthError,
)
from .leaderboard import Leaderboard
from .randomness import RandomSource, SharedRandom
from .state import (
    GameStart,
    LeaderboardEntry,
    Rejection,
    Session,
    SessionSnapshot,
    SubmissionResult,
    TraceEntry,
)
from .store import SessionStore

logger = logging.getLogger(__name__)


class GameEngine:
    """Coordinates the catalog, the session store and the random source.

    Args:
        catalog: Actions available to players. Defaults to the reference catalog.
        store: Session and record storage. A fresh store is created when omitted.
        rng: Shared random source for offers and impure actions.
        restrict_to_offered: When true, only symbols offered for the current
            game are accepted; otherwise any catalog symbol is.
    """

    def __init__(
        self,
        catalog: ActionCatalog | None = None,
        store: SessionStore | None = None,
        rng: RandomSource | None = None,
        *,
        restrict_to_offered: bool = False,
    ) -> None:
        self.catalog = catalog if catalog is not None else default_catalog()
        if len(self.catalog) < rules.OFFERED_COUNT:
            raise ValueError(
                f"Catalog must hold at least {rules.OFFERED_COUNT} actions, has {len(self.catalog)}"
            )
        self.store = store if store is not None else SessionStore()
        self.rng = rng if rng is not None else SharedRandom()
        self.restrict_to_offered = restrict_to_offered
        self.leaderboard = Leaderboard(self.store)

    def start_game(self, player_id: str, *, rng: RandomSource | None = None) -> GameStart:
        """Reset the player's session and offer a fresh random set of symbols.

        Any game in progress for ``player_id`` is discarded.
        """
        source = rng if rng is not None else self.rng
        offered = tuple(source.sample(self.catalog.symbols, rules.OFFERED_COUNT))
        with self.store.player_lock(player_id):
            self.store.set_session(player_id, Session(offered_symbols=offered))
        logger.info("Started game for %s, offered %s", player_id, " ".join(offered))
        return GameStart(seed_value=rules.SEED_VALUE, offered_symbols=offered)

    def submit_combination(
        self, player_id: str, symbols: Sequence[str]
    ) -> SubmissionResult | Rejection:
        """Validate ``symbols`` and apply them in order to the player's value."""
        symbols = tuple(symbols)
        lock = self.store.existing_lock(player_id)
        if lock is None:
            return self._reject(player_id, NoActiveGameError(player_id))
        with lock:
            session = self.store.get_session(player_id)
            try:
                if session is None:
                    raise NoActiveGameError(player_id)
                self.validate_combination(session, symbols)
            except CombinationError as exc:
                return self._reject(player_id, exc)

            trace = self._run(session.current_value, symbols)
            final_value = trace[-1].after
            session.current_value = final_value
            session.used_symbols.update(symbols)

            record = self.store.get_record(player_id)
            is_new_record = record is None or final_value > record
            if is_new_record:
                record = final_value
                self.store.set_record(player_id, final_value)

        logger.info("Player %s reached %d", player_id, final_value)
        if is_new_record:
            logger.info("New record for %s: %d", player_id, record)
        return SubmissionResult(
            trace=trace,
            final_value=final_value,
            is_new_record=is_new_record,
            record=record,
        )

    def validate_combination(self, session: Session, symbols: Sequence[str]) -> None:
        """Raise the first :class:`CombinationError` that ``symbols`` trigger."""
        if len(symbols) != rules.COMBINATION_LENGTH:
            raise WrongLengthError(len(symbols), rules.COMBINATION_LENGTH)

        allowed = session.offered_symbols if self.restrict_to_offered else self.catalog
        for symbol in symbols:
            if symbol not in allowed:
                raise UnknownSymbolError(symbol)

        seen: set[str] = set()
        for symbol in symbols:
            if symbol in seen:
                raise DuplicateSubmissionError(symbol)
            seen.add(symbol)

        for symbol in symbols:
            if symbol in session.used_symbols:
                raise AlreadyUsedError(symbol)

    def get_leaderboard(self, limit: int = rules.LEADERBOARD_SIZE) -> list[LeaderboardEntry]:
        return self.leaderboard.top(limit)

    def describe_catalog(self) -> list[tuple[str, str]]:
        return self.catalog.describe()

    def get_record(self, player_id: str) -> int | None:
        return self.store.get_record(player_id)

    def snapshot(self, player_id: str) -> SessionSnapshot | None:
        """Return a copy of the player's session, or ``None`` if no game was started."""
        lock = self.store.existing_lock(player_id)
        if lock is None:
            return None
        with lock:
            session = self.store.get_session(player_id)
            return session.snapshot() if session is not None else None

    def _reject(self, player_id: str, error: CombinationError) -> Rejection:
        logger.info("Rejected combination from %s: %s (%s)", player_id, error.code.value, error)
        return Rejection.from_error(error)

    def _run(self, value: int, symbols: tuple[str, ...]) -> tuple[TraceEntry, ...]:
        trace: list[TraceEntry] = []
        for symbol in symbols:
            after = self.catalog[symbol].apply(value, self.rng)
            trace.append(TraceEntry(symbol=symbol, before=value, after=after))
            value = after
        return tuple(trace)


__all__ = ["GameEngine"]
