"""
Decision engine: picks moves for the AI and hints for the human.

Reads positions from a RulesEngine (or a bare GameState) and only ever
works on forks; the caller applies the returned move to its own engine.
"""

import logging
from typing import Optional, Union
from dataclasses import dataclass

from ..core import GameState, RulesEngine, Side, generate_legal_moves
from .difficulty import DEFAULT_DIFFICULTY, Difficulty
from .evaluation import evaluate
from .explain import Hint, MoveExplanation, explain_move, hint_for_move
from .minimax import MinimaxSearch

logger = logging.getLogger(__name__)

Position = Union[GameState, RulesEngine]


@dataclass(frozen=True)
class MoveChoice:
    """A chosen move (pit is None when there is nothing to play)."""

    pit: Optional[int]
    explanation: MoveExplanation
    score: Optional[float] = None
    nodes: int = 0

    @property
    def has_move(self) -> bool:
        return self.pit is not None


@dataclass(frozen=True)
class Suggestion:
    """A hint for the human player."""

    pit: Optional[int]
    hint: Hint
    score: Optional[float] = None

    @property
    def has_move(self) -> bool:
        return self.pit is not None


def _snapshot(position: Position) -> GameState:
    if isinstance(position, RulesEngine):
        return position.fork().state
    return position


class DecisionEngine:
    """
    Game-tree opponent.

    Each game session owns its own DecisionEngine; the last explanation it
    produced is kept for display.
    """

    def __init__(self, difficulty: Union[Difficulty, str] = DEFAULT_DIFFICULTY):
        """
        Initialize decision engine.

        Args:
            difficulty: Difficulty level (unknown strings mean MEDIUM)
        """
        self.difficulty = Difficulty.parse(difficulty)
        self.last_explanation: Optional[MoveExplanation] = None

    @property
    def max_depth(self) -> int:
        return self.difficulty.depth

    def set_difficulty(self, difficulty: Union[Difficulty, str]) -> None:
        self.difficulty = Difficulty.parse(difficulty)
        logger.info(
            f"Difficulty set to {self.difficulty.value} (depth {self.max_depth})"
        )

    def choose_move(
        self, position: Position, maximizing_side: Optional[Side] = None
    ) -> MoveChoice:
        """
        Choose the best move for the side to move.

        Args:
            position: Current game (never modified)
            maximizing_side: Side to play for (default: side to move)

        Returns:
            MoveChoice with pit and explanation; pit is None if no move exists
        """
        state = _snapshot(position)
        side = maximizing_side if maximizing_side is not None else state.turn

        legal_moves = [] if state.finished else generate_legal_moves(state)

        if not legal_moves:
            choice = MoveChoice(pit=None, explanation=MoveExplanation(side=side, pit=None))
        elif len(legal_moves) == 1:
            pit = legal_moves[0]
            choice = MoveChoice(
                pit=pit,
                explanation=MoveExplanation(
                    side=side, pit=pit, stones=state.board[pit], forced=True
                ),
            )
        else:
            result = MinimaxSearch(side).search(state, self.max_depth)
            choice = MoveChoice(
                pit=result.best_move,
                explanation=explain_move(state, result.best_move, self.difficulty),
                score=result.score,
                nodes=result.nodes,
            )
            logger.info(
                f"{side.label} ({self.difficulty.value}) chose pit {result.best_move} "
                f"score={result.score} after {result.nodes} nodes"
            )

        self.last_explanation = choice.explanation
        return choice

    def suggest_move(self, position: Position) -> Suggestion:
        """
        Suggest a move for the human player.

        Every legal move is tried once and scored from the player's point of
        view; no deeper search is done. Ties go to the lowest pit.
        """
        state = _snapshot(position)

        if not state.finished and state.turn is not Side.PLAYER:
            return Suggestion(pit=None, hint=Hint(pit=None, message="It is not the player's turn."))

        best_pit = None
        best_score = float("-inf")
        legal_moves = [] if state.finished else generate_legal_moves(state, Side.PLAYER)
        for pit in legal_moves:
            child = RulesEngine(state)
            child.apply_move(pit)
            score = evaluate(child.state, Side.PLAYER)
            if score > best_score:
                best_score = score
                best_pit = pit

        if best_pit is None:
            return Suggestion(pit=None, hint=Hint(pit=None))

        logger.debug(f"Hint: pit {best_pit} score={best_score}")
        return Suggestion(pit=best_pit, hint=hint_for_move(state, best_pit), score=best_score)

    def evaluate(self, position: Position, perspective: Side) -> int:
        """Static evaluation of a position for one side."""
        return evaluate(_snapshot(position), perspective)
