"""Web API for the Emoji Math puzzle."""

from _04_ui.app import create_app

__all__ = ["create_app"]
