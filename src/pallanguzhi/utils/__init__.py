"""Utility modules for the terminal front end."""

from .rich_display import GameDisplay, setup_rich_logging

__all__ = [
    "GameDisplay",
    "setup_rich_logging",
]
