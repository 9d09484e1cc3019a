"""Pydantic models for the Emoji Math web API."""

from _04_ui.models.requests import (
    CombinationPayload,
    NewGameRequest,
)

__all__ = [
    "CombinationPayload",
    "NewGameRequest",
]
