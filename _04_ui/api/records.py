"""Leaderboard and catalog API routes."""

from __future__ import annotations

from fastapi import APIRouter, Query

from _01_puzzle.engine import GameEngine  # noqa: TC001
from _04_ui.core.config import DEFAULT_LEADERBOARD_SIZE, MAX_LEADERBOARD_SIZE
from _04_ui.services.serializer import serialize_catalog, serialize_leaderboard

router = APIRouter(prefix="/api", tags=["records"])

# Engine reference - will be set by app factory
_engine: GameEngine | None = None


def set_engine(engine: GameEngine) -> None:
    """Set the engine for this router."""
    global _engine
    _engine = engine


def get_engine() -> GameEngine:
    """Get the game engine."""
    if _engine is None:
        raise RuntimeError("Engine not initialized")
    return _engine


@router.get("/leaderboard")
def api_leaderboard(
    limit: int = Query(default=DEFAULT_LEADERBOARD_SIZE, ge=0, le=MAX_LEADERBOARD_SIZE),
) -> list[dict]:
    """Get the top records, best first."""
    return serialize_leaderboard(get_engine().get_leaderboard(limit))


@router.get("/catalog")
def api_catalog() -> list[dict]:
    """Get every symbol with its description."""
    return serialize_catalog(get_engine().describe_catalog())
