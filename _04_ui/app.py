"""FastAPI application exposing the Emoji Math puzzle."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from _01_puzzle.engine import GameEngine
from _01_puzzle.store import SessionStore
from _04_ui.api import game, records
from _04_ui.core.config import VALIDATE_AGAINST_OFFERED
from _04_ui.core.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


def create_app(
    engine: GameEngine | None = None,
    rate_limiter: RateLimiter | None = None,
) -> FastAPI:
    """Build the application around ``engine`` (a fresh one by default)."""
    if engine is None:
        engine = GameEngine(
            store=SessionStore(),
            restrict_to_offered=VALIDATE_AGAINST_OFFERED,
        )
    if rate_limiter is None:
        rate_limiter = RateLimiter()

    app = FastAPI(title="Emoji Math", version="0.1.0")
    game.set_engine(engine, rate_limiter)
    records.set_engine(engine)
    app.include_router(game.router)
    app.include_router(records.router)

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    return app


__all__ = ["create_app"]
