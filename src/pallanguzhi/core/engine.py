"""
Stateful rules engine for one game session.

RulesEngine owns the authoritative GameState and the move history. The
only way to change the state is apply_move(); everything else is a query.
Search code works on fork()s and never touches the live engine.
"""

import logging
from typing import List, Optional, Tuple
from dataclasses import dataclass

from .game_state import GameState, Side, Winner
from .rules import (
    MoveRecord,
    apply_move,
    create_starting_state,
    generate_legal_moves,
    get_game_result,
    is_legal_move,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    """Outcome of one executed (or simulated) move."""

    success: bool
    record: MoveRecord
    captured: int
    bonus_turn: bool
    finished: bool
    winner: Optional[Winner]
    state: GameState  # State after the move


@dataclass(frozen=True)
class HistoryEntry:
    """One played move with the position it produced."""

    side: Side
    record: MoveRecord
    board: Tuple[int, ...]
    score_player: int
    score_ai: int


class RulesEngine:
    """
    Rules engine for a single Pallanguzhi game.

    Each game session creates its own engine; nothing is shared between
    instances, so any number of games can run side by side.
    """

    def __init__(self, state: Optional[GameState] = None):
        """
        Initialize the engine.

        Args:
            state: Position to start from (default: standard opening)
        """
        self._state = state if state is not None else create_starting_state()
        self._history: List[HistoryEntry] = []

    @classmethod
    def new_game(cls) -> "RulesEngine":
        """Create an engine holding the standard starting position."""
        return cls()

    def reset(self) -> None:
        """Start a new game on this engine, discarding history."""
        self._state = create_starting_state()
        self._history = []
        logger.info("New game started")

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Tuple[int, ...]:
        return self._state.board

    @property
    def score_player(self) -> int:
        return self._state.score_player

    @property
    def score_ai(self) -> int:
        return self._state.score_ai

    @property
    def turn(self) -> Side:
        return self._state.turn

    @property
    def finished(self) -> bool:
        return self._state.finished

    @property
    def winner(self) -> Optional[Winner]:
        return self._state.winner

    @property
    def history(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._history)

    @property
    def last_move(self) -> Optional[HistoryEntry]:
        return self._history[-1] if self._history else None

    def score(self, side: Side) -> int:
        return self._state.score(side)

    def is_legal_move(self, pit: int) -> bool:
        """Check if the side to move may play a pit. Never raises."""
        return is_legal_move(self._state, pit)

    def legal_moves(self, side: Optional[Side] = None) -> List[int]:
        """
        Get non-empty pits of a side, ascending.

        Args:
            side: Side to query (default: side to move)
        """
        return generate_legal_moves(self._state, side)

    def apply_move(self, pit: int) -> MoveResult:
        """
        Play a pit for the side to move.

        Args:
            pit: Pit index to sow from

        Returns:
            MoveResult describing the move

        Raises:
            IllegalMoveError: if the pit can't be played (state unchanged)
        """
        mover = self._state.turn
        next_state, record = apply_move(self._state, pit)

        self._state = next_state
        self._history.append(
            HistoryEntry(
                side=mover,
                record=record,
                board=next_state.board,
                score_player=next_state.score_player,
                score_ai=next_state.score_ai,
            )
        )

        logger.debug(
            f"{mover.label} played pit {pit}: sowed {record.stones_sown}, "
            f"captured {record.captured}, bonus={record.bonus_turn}"
        )
        if next_state.finished:
            logger.info(f"Game over: {get_game_result(next_state)}")

        return MoveResult(
            success=True,
            record=record,
            captured=record.captured,
            bonus_turn=record.bonus_turn,
            finished=next_state.finished,
            winner=next_state.winner,
            state=next_state,
        )

    def fork(self) -> "RulesEngine":
        """
        Create an independent copy of this game.

        Moves applied to the fork never affect this engine. The fork starts
        with an empty history.
        """
        return RulesEngine(self._state)

    def simulate_move(self, pit: int) -> MoveResult:
        """
        Work out what a move would do without playing it.

        Raises:
            IllegalMoveError: if the pit can't be played
        """
        return self.fork().apply_move(pit)

    def debug_dump(self) -> None:
        """Log the full game state at DEBUG level."""
        logger.debug(f"Board: {list(self._state.board)}")
        logger.debug(
            f"Scores: player={self._state.score_player} ai={self._state.score_ai}"
        )
        logger.debug(f"Turn: {self._state.turn.label}")
        logger.debug(
            f"Finished: {self._state.finished} winner={self._state.winner}"
        )
        logger.debug(f"Legal moves: {self.legal_moves()}")

    def __str__(self) -> str:
        return str(self._state)
