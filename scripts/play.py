#!/usr/bin/env python
"""Play Emoji Math interactively in the terminal.

Usage:
    python scripts/play.py
    python scripts/play.py --player alice --seed 7
    python scripts/play.py --log-level DEBUG

Commands:
    /play      start a new game
    /records   show the top records
    /help      list every symbol and what it does
    /start     show the welcome message and rules
    /quit      leave

Anything else is read as a combination of 8 symbols separated by spaces,
optionally prefixed with "Combination:".
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from _01_puzzle import formatting, rules
from _01_puzzle.engine import GameEngine
from _01_puzzle.logging_config import get_logger, setup_logging
from _01_puzzle.randomness import SharedRandom
from _01_puzzle.state import Rejection

logger = get_logger(__name__)

_PREFIX = "Combination:"
_UNKNOWN_COMMAND = "Unknown command. Use /play to start a game."


def handle_line(engine: GameEngine, player_id: str, line: str) -> str | None:
    """Run one command and return the text to show, or ``None`` to quit."""
    text = line.strip()
    if text == "/quit":
        return None
    if text == "/start":
        return formatting.welcome_text()
    if text == "/play":
        game = engine.start_game(player_id)
        return formatting.start_text(game) + "\n\n" + formatting.help_text(engine.describe_catalog())
    if text == "/records":
        return formatting.leaderboard_text(engine.get_leaderboard(rules.LEADERBOARD_SIZE))
    if text == "/help":
        return formatting.help_text(engine.describe_catalog())
    if not text or text.startswith("/"):
        return _UNKNOWN_COMMAND

    if text.startswith(_PREFIX):
        text = text[len(_PREFIX):]
    outcome = engine.submit_combination(player_id, text.split())
    if isinstance(outcome, Rejection):
        return formatting.rejection_text(outcome)
    return formatting.result_text(outcome) + "\n\nType /play to play again."


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Play Emoji Math in the terminal")
    parser.add_argument("--player", default="local", help="Player id used for records")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible games")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    engine = GameEngine(rng=SharedRandom(args.seed))
    logger.debug("Starting terminal session for %s", args.player)

    print(formatting.welcome_text())
    while True:
        try:
            line = input("> ")
        except EOFError:
            break
        output = handle_line(engine, args.player, line)
        if output is None:
            break
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
