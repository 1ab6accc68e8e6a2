"""AI difficulty levels and their search depths."""

import logging
from enum import Enum
from typing import Union

logger = logging.getLogger(__name__)


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def depth(self) -> int:
        """Search depth in plies."""
        return SEARCH_DEPTHS[self]

    @classmethod
    def parse(cls, value: Union["Difficulty", str, None]) -> "Difficulty":
        """
        Resolve a difficulty from user input.

        Unknown values fall back to MEDIUM.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        logger.warning(f"Unknown difficulty {value!r}, using {DEFAULT_DIFFICULTY.value}")
        return DEFAULT_DIFFICULTY


SEARCH_DEPTHS = {
    Difficulty.EASY: 2,
    Difficulty.MEDIUM: 4,
    Difficulty.HARD: 6,
}

DEFAULT_DIFFICULTY = Difficulty.MEDIUM
