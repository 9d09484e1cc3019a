"""The fixed catalog of actions available to players."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from . import actions
from .actions import Action, ActionKind
from .exceptions import DuplicateSymbolError


class ActionCatalog(Mapping[str, Action]):
    """Immutable, ordered mapping of symbol to :class:`Action`.

    Iteration follows registration order, which is also the order used for
    help text.
    """

    def __init__(self, entries: Iterable[Action]) -> None:
        registered: dict[str, Action] = {}
        for action in entries:
            if action.symbol in registered:
                raise DuplicateSymbolError(action.symbol)
            registered[action.symbol] = action
        self._actions = registered
        self._symbols = tuple(registered)

    def __getitem__(self, symbol: str) -> Action:
        return self._actions[symbol]

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self) -> str:
        return f"ActionCatalog({list(self._symbols)!r})"

    @property
    def symbols(self) -> tuple[str, ...]:
        return self._symbols

    def describe(self) -> list[tuple[str, str]]:
        """Return ``(symbol, description)`` pairs in registration order."""
        return [(symbol, self._actions[symbol].describe()) for symbol in self._symbols]


def default_actions() -> tuple[Action, ...]:
    return (
        actions.add("➕", 5),
        actions.subtract("➖", 3),
        actions.multiply("✖️", 2),
        actions.divide("➗", 2),
        actions.add("🔼", 10),
        actions.subtract("🔽", 5),
        actions.simple("🔢", ActionKind.APPEND_LAST_DIGIT),
        actions.simple("🔀", ActionKind.SHUFFLE_DIGITS),
        actions.simple("🔄", ActionKind.REVERSE_DIGITS),
        actions.simple("📈", ActionKind.ADD_LAST_TWO_DIGITS),
        actions.simple("📉", ActionKind.SUBTRACT_LAST_DIGIT),
        actions.random_multiply("🎲"),
        actions.multiply("💯", 100),
        actions.multiply("🔟", 10),
        actions.append_digit("1️⃣", 1),
        actions.append_digit("2️⃣", 2),
        actions.append_digit("3️⃣", 3),
        actions.append_digit("4️⃣", 4),
        actions.append_digit("5️⃣", 5),
    )


def default_catalog() -> ActionCatalog:
    """Return the reference catalog of 19 actions."""
    return ActionCatalog(default_actions())


__all__ = ["ActionCatalog", "default_actions", "default_catalog"]
