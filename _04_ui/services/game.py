"""Game orchestration helpers for the Emoji Math web API."""

from __future__ import annotations

import random

from fastapi import HTTPException, Request

from _01_puzzle.engine import GameEngine  # noqa: TC001
from _01_puzzle.exceptions import ErrorCode
from _01_puzzle.state import Rejection
from _04_ui.core.config import RESTART_CALLBACK_PREFIX
from _04_ui.services.serializer import serialize_rejection, serialize_result, serialize_start


def start_game(engine: GameEngine, player_id: str, seed: int | None = None) -> dict:
    """Start a game, optionally with a reproducible symbol offer."""
    rng = random.Random(seed) if seed is not None else None
    game = engine.start_game(player_id, rng=rng)
    return serialize_start(game, engine.describe_catalog())


def submit_combination(engine: GameEngine, player_id: str, symbols: list[str]) -> dict:
    """Apply a combination or raise an HTTP error carrying the rejection."""
    outcome = engine.submit_combination(player_id, symbols)
    if isinstance(outcome, Rejection):
        status = 404 if outcome.code is ErrorCode.NO_ACTIVE_GAME else 400
        raise HTTPException(status_code=status, detail=serialize_rejection(outcome))
    return serialize_result(outcome, player_id)


def parse_restart_callback(data: str) -> str:
    """Extract the player id from a ``restart:<player_id>`` callback payload."""
    if not data.startswith(RESTART_CALLBACK_PREFIX):
        raise HTTPException(status_code=400, detail="Unsupported callback")
    player_id = data[len(RESTART_CALLBACK_PREFIX):]
    if not player_id:
        raise HTTPException(status_code=400, detail="Callback is missing a player id")
    return player_id


def get_client_id(request: Request) -> str:
    """Identify the calling client by its network address."""
    if request.client is None:
        return "unknown"
    return request.client.host
