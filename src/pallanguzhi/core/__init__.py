"""Core game state representation and rules."""

from .errors import IllegalMoveError
from .game_state import (
    NUM_PITS,
    PITS_PER_SIDE,
    TOTAL_STONES,
    GameState,
    Side,
    Winner,
    pit_owner,
)
from .rules import (
    Capture,
    MoveRecord,
    create_starting_state,
    generate_legal_moves,
    is_legal_move,
    apply_move,
    is_terminal,
    finish_game,
    get_adjacent_pits,
    get_next_pit,
    get_game_result,
)
from .engine import RulesEngine, MoveResult, HistoryEntry

__all__ = [
    "IllegalMoveError",
    "NUM_PITS",
    "PITS_PER_SIDE",
    "TOTAL_STONES",
    "GameState",
    "Side",
    "Winner",
    "pit_owner",
    "Capture",
    "MoveRecord",
    "create_starting_state",
    "generate_legal_moves",
    "is_legal_move",
    "apply_move",
    "is_terminal",
    "finish_game",
    "get_adjacent_pits",
    "get_next_pit",
    "get_game_result",
    "RulesEngine",
    "MoveResult",
    "HistoryEntry",
]
