"""API routers for the Emoji Math web API."""

from _04_ui.api.game import router as game_router
from _04_ui.api.records import router as records_router

__all__ = [
    "game_router",
    "records_router",
]
