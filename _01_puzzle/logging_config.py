"""Logging configuration for the Emoji Math puzzle."""

from __future__ import annotations

import logging
import sys

_HANDLER_NAME = "emoji-math"


def setup_logging(level: str = "INFO", format_json: bool = False) -> None:
    """
    Configure logging for the application.

    Calling this again replaces the handler installed by a previous call
    instead of stacking a second one.

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: Whether to output one JSON object per line
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    if format_json:
        formatter = logging.Formatter(
            '{"time":"%(asctime)s","level":"%(levelname)s","name":"%(name)s","message":"%(message)s"}'
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    handler.setFormatter(formatter)

    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)
    logging.root.setLevel(log_level)
    logging.root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The logger name (usually __name__)

    Returns:
        A configured logger instance
    """
    return logging.getLogger(name)


__all__ = ["get_logger", "setup_logging"]
