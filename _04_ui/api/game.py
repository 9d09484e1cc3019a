"""Game-related API routes."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from _01_puzzle.engine import GameEngine  # noqa: TC001
from _04_ui.core.rate_limiter import RateLimiter
from _04_ui.models.requests import CombinationPayload, NewGameRequest
from _04_ui.services.game import (
    get_client_id,
    parse_restart_callback,
    start_game,
    submit_combination,
)
from _04_ui.services.serializer import serialize_snapshot

router = APIRouter(prefix="/api", tags=["game"])

# Engine and limiter references - set by app factory
_engine: GameEngine | None = None
_rate_limiter: RateLimiter | None = None


def set_engine(engine: GameEngine, rate_limiter: RateLimiter | None = None) -> None:
    """Set the engine (and optional submission limiter) for this router."""
    global _engine, _rate_limiter
    _engine = engine
    _rate_limiter = rate_limiter


def get_engine() -> GameEngine:
    """Get the game engine."""
    if _engine is None:
        raise RuntimeError("Engine not initialized")
    return _engine


@router.post("/players/{player_id}/games")
def api_new_game(player_id: str, request: NewGameRequest | None = None) -> dict:
    """Start a new game, discarding any game in progress."""
    seed = request.seed if request is not None else None
    return start_game(get_engine(), player_id, seed)


@router.post("/players/{player_id}/combination")
def api_combination(player_id: str, payload: CombinationPayload, request: Request) -> dict:
    """Apply a combination of symbols to the player's current game."""
    if _rate_limiter is not None and not _rate_limiter.is_allowed(get_client_id(request)):
        raise HTTPException(status_code=429, detail="Too many submissions, slow down")
    return submit_combination(get_engine(), player_id, payload.to_symbols())


@router.post("/restart/{callback_data}")
def api_restart(callback_data: str) -> dict:
    """Handle the "play again" callback for a player."""
    player_id = parse_restart_callback(callback_data)
    return start_game(get_engine(), player_id)


@router.get("/players/{player_id}")
def api_player(player_id: str) -> dict:
    """Get the player's current game and record."""
    engine = get_engine()
    snapshot = engine.snapshot(player_id)
    if snapshot is None:
        raise HTTPException(status_code=404, detail="No active game")
    return serialize_snapshot(snapshot, engine.get_record(player_id))
