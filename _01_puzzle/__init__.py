"""Core engine for the Emoji Math puzzle."""

from . import (
    actions,
    arith,
    catalog,
    engine,
    exceptions,
    formatting,
    leaderboard,
    randomness,
    rules,
    state,
    store,
)
from .catalog import ActionCatalog, default_catalog
from .engine import GameEngine
from .store import SessionStore

__all__ = [
    "ActionCatalog",
    "GameEngine",
    "SessionStore",
    "actions",
    "arith",
    "catalog",
    "default_catalog",
    "engine",
    "exceptions",
    "formatting",
    "leaderboard",
    "randomness",
    "rules",
    "state",
    "store",
]
