"""Plain-text rendering for game output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from . import rules

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .state import GameStart, LeaderboardEntry, Rejection, SubmissionResult


def trace_lines(result: SubmissionResult) -> list[str]:
    """
    Format each applied action as one line.

    Args:
        result: The accepted submission to render

    Returns:
        Lines like "➕: 1 → 6"
    """
    return [f"{entry.symbol}: {entry.before} → {entry.after}" for entry in result.trace]


def result_text(result: SubmissionResult) -> str:
    start = result.trace[0].before if result.trace else result.final_value
    lines = [f"🔢 Starting number: {start}", ""]
    lines.extend(trace_lines(result))
    lines.append("")
    lines.append(f"🎉 Final number: {result.final_value}")
    if result.is_new_record:
        lines.append("🏆 New record!")
    else:
        lines.append(f"Current record: {result.record}")
    return "\n".join(lines)


def welcome_text() -> str:
    return (
        "🎮 Welcome to Emoji Math! 🎮\n\n"
        "Rules:\n"
        "1. You get a starting number and a set of symbols.\n"
        "2. Each symbol performs a math operation on the number.\n"
        f"3. Build a combination of {rules.COMBINATION_LENGTH} symbols to reach the largest number you can.\n"
        "4. Each symbol can be used only once per game.\n\n"
        "Use /play to start a new game.\n"
        "Use /records to see the top records."
    )


def start_text(game: GameStart) -> str:
    offered = " ".join(game.offered_symbols)
    example = " ".join(game.offered_symbols[:8])
    return (
        f"🔢 Starting number: {game.seed_value}\n\n"
        f"Available symbols:\n{offered}\n\n"
        "Send a combination of 8 symbols, for example:\n"
        f"Combination: {example}"
    )


def help_text(entries: Iterable[tuple[str, str]]) -> str:
    """
    Format the catalog as a help listing.

    Args:
        entries: ``(symbol, description)`` pairs in display order

    Returns:
        A multi-line listing with one "symbol - description" row per action
    """
    lines = ["📚 Available symbols and what they do:", ""]
    lines.extend(f"{symbol} - {description}" for symbol, description in entries)
    return "\n".join(lines)


def leaderboard_text(entries: list[LeaderboardEntry]) -> str:
    if not entries:
        return "No records yet. Play the first game!"
    lines = ["🏆 Top records:", ""]
    for rank, entry in enumerate(entries, start=1):
        lines.append(f"{rank}. ID: {entry.player_id} - {entry.record}")
    return "\n".join(lines)


def rejection_text(rejection: Rejection) -> str:
    return f"⚠️ {rejection.message}"


__all__ = [
    "help_text",
    "leaderboard_text",
    "rejection_text",
    "result_text",
    "start_text",
    "trace_lines",
    "welcome_text",
]
