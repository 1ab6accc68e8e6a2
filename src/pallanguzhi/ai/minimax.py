"""
Depth-limited minimax search with alpha-beta pruning.

Explores the game tree from a position, scoring leaves with the heuristic
evaluator. Because a move can earn a bonus turn, plies don't strictly
alternate: whether a node maximizes or minimizes is read from the turn of
the position itself.

Positions are immutable GameState snapshots, so every child is an
independent fork and the caller's position is never modified.
"""

import logging
from typing import Optional, Tuple
from dataclasses import dataclass

from ..core import GameState, Side, apply_move, generate_legal_moves
from .evaluation import evaluate

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """Result of a search from one root position."""

    best_move: Optional[int]
    score: float
    depth: int
    nodes: int = 0
    cutoffs: int = 0


class MinimaxSearch:
    """
    Minimax searcher for one side.

    Set prune=False to walk the full tree; the chosen move and score are
    the same either way, only the amount of work differs.
    """

    def __init__(self, maximizing_side: Side, prune: bool = True):
        """
        Initialize searcher.

        Args:
            maximizing_side: Side whose evaluation is maximized
            prune: Enable alpha-beta cutoffs
        """
        self.maximizing_side = maximizing_side
        self.prune = prune
        self.nodes = 0
        self.cutoffs = 0

    def search(self, state: GameState, depth: int) -> SearchResult:
        """
        Search a position to a fixed depth.

        Ties keep the first best move in ascending pit order.

        Args:
            state: Root position
            depth: Search depth in plies

        Returns:
            SearchResult with best move and its backed-up score
        """
        self.nodes = 0
        self.cutoffs = 0

        score, best_move = self._minimax(state, depth, float("-inf"), float("inf"))

        logger.debug(
            f"Search depth={depth} side={self.maximizing_side.label}: "
            f"move={best_move} score={score} nodes={self.nodes} cutoffs={self.cutoffs}"
        )

        return SearchResult(
            best_move=best_move,
            score=score,
            depth=depth,
            nodes=self.nodes,
            cutoffs=self.cutoffs,
        )

    def _minimax(
        self, state: GameState, depth: int, alpha: float, beta: float
    ) -> Tuple[float, Optional[int]]:
        """
        Recursive minimax.

        Returns:
            (score, best_move)
        """
        self.nodes += 1

        if depth == 0 or state.finished:
            return evaluate(state, self.maximizing_side), None

        legal_moves = generate_legal_moves(state)
        if not legal_moves:
            return evaluate(state, self.maximizing_side), None

        is_maximizing = state.turn is self.maximizing_side

        best_value = float("-inf") if is_maximizing else float("inf")
        best_move = None

        for move in legal_moves:
            child, _ = apply_move(state, move)
            child_value, _ = self._minimax(child, depth - 1, alpha, beta)

            # Update best (strict comparison keeps the earliest move on ties)
            if is_maximizing:
                if child_value > best_value:
                    best_value = child_value
                    best_move = move
                alpha = max(alpha, child_value)
            else:
                if child_value < best_value:
                    best_value = child_value
                    best_move = move
                beta = min(beta, child_value)

            if self.prune and beta <= alpha:
                self.cutoffs += 1
                break

        return best_value, best_move


def minimax(
    state: GameState, depth: int, maximizing_side: Side, prune: bool = True
) -> SearchResult:
    """Convenience wrapper around MinimaxSearch.search()."""
    return MinimaxSearch(maximizing_side, prune=prune).search(state, depth)
