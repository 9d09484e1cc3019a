"""Serialization functions for the Emoji Math web API."""

from __future__ import annotations

from _01_puzzle import formatting
from _01_puzzle.state import (  # noqa: TC001
    GameStart,
    LeaderboardEntry,
    Rejection,
    SessionSnapshot,
    SubmissionResult,
    TraceEntry,
)
from _04_ui.core.config import RESTART_CALLBACK_PREFIX


def serialize_start(game: GameStart, catalog: list[tuple[str, str]]) -> dict:
    """Serialize a freshly started game."""
    return {
        "seedValue": game.seed_value,
        "offeredSymbols": list(game.offered_symbols),
        "catalog": serialize_catalog(catalog),
        "text": formatting.start_text(game),
    }


def serialize_result(result: SubmissionResult, player_id: str) -> dict:
    """Serialize an accepted combination."""
    return {
        "trace": [serialize_trace_entry(entry) for entry in result.trace],
        "finalValue": result.final_value,
        "isNewRecord": result.is_new_record,
        "record": result.record,
        "text": formatting.result_text(result),
        "playAgain": play_again_button(player_id),
    }


def serialize_trace_entry(entry: TraceEntry) -> dict:
    return {"symbol": entry.symbol, "before": entry.before, "after": entry.after}


def serialize_rejection(rejection: Rejection) -> dict:
    return {
        "code": rejection.code.value,
        "symbol": rejection.symbol,
        "message": rejection.message,
    }


def serialize_catalog(catalog: list[tuple[str, str]]) -> list[dict]:
    return [{"symbol": symbol, "description": description} for symbol, description in catalog]


def serialize_leaderboard(entries: list[LeaderboardEntry]) -> list[dict]:
    return [{"playerId": entry.player_id, "record": entry.record} for entry in entries]


def serialize_snapshot(snapshot: SessionSnapshot, record: int | None) -> dict:
    """Serialize the player's current game."""
    return {
        "currentValue": snapshot.current_value,
        "usedSymbols": sorted(snapshot.used_symbols),
        "offeredSymbols": list(snapshot.offered_symbols),
        "record": record,
    }


def play_again_button(player_id: str) -> dict:
    """Build the inline "play again" affordance for a player."""
    return {"label": "Play again", "action": f"{RESTART_CALLBACK_PREFIX}{player_id}"}
