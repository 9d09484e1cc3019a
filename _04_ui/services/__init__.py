"""Service layer for the Emoji Math web API."""

from _04_ui.services.game import (
    get_client_id,
    parse_restart_callback,
    start_game,
    submit_combination,
)
from _04_ui.services.serializer import (
    play_again_button,
    serialize_catalog,
    serialize_leaderboard,
    serialize_rejection,
    serialize_result,
    serialize_snapshot,
    serialize_start,
    serialize_trace_entry,
)

__all__ = [
    "get_client_id",
    "parse_restart_callback",
    "play_again_button",
    "serialize_catalog",
    "serialize_leaderboard",
    "serialize_rejection",
    "serialize_result",
    "serialize_snapshot",
    "serialize_start",
    "serialize_trace_entry",
    "start_game",
    "submit_combination",
]
