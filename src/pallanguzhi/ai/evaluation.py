"""
Heuristic position evaluation.

Scores a position from one side's point of view; higher is better for
that side. Finished games score +/-WIN_SCORE (or 0 for a tie), which
dominates every heuristic term.
"""

from dataclasses import replace

from ..core import GameState, Side, Winner, apply_move, generate_legal_moves

WIN_SCORE = 1000

SCORE_WEIGHT = 10
BOARD_STONES_WEIGHT = 2
MOBILITY_WEIGHT = 5
MIDDLE_PIT_WEIGHT = 2
CORNER_PIT_WEIGHT = 1
EMPTY_PIT_PENALTY = 3
CAPTURE_WEIGHT = 15


def evaluate(state: GameState, perspective: Side) -> int:
    """
    Evaluate a position for one side.

    Args:
        state: Position to evaluate
        perspective: Side the score is for

    Returns:
        Heuristic score (positive = good for perspective)
    """
    if state.finished:
        if state.winner is Winner.TIE:
            return 0
        return WIN_SCORE if state.winner is Winner.for_side(perspective) else -WIN_SCORE

    opponent = perspective.opponent

    score = (state.score(perspective) - state.score(opponent)) * SCORE_WEIGHT
    score += (
        state.stones_on_side(perspective) - state.stones_on_side(opponent)
    ) * BOARD_STONES_WEIGHT
    score += (
        len(generate_legal_moves(state, perspective))
        - len(generate_legal_moves(state, opponent))
    ) * MOBILITY_WEIGHT
    score += evaluate_strategic_positions(state, perspective)
    score += evaluate_capture_opportunities(state, perspective)

    return score


def evaluate_strategic_positions(state: GameState, perspective: Side) -> int:
    """Reward stones in middle and corner pits, punish empty pits."""
    opponent = perspective.opponent
    board = state.board
    score = 0

    # Middle pits give the most distribution options
    score += board[perspective.middle_pit] * MIDDLE_PIT_WEIGHT
    score -= board[opponent.middle_pit] * MIDDLE_PIT_WEIGHT

    # Corner pits set up captures
    score += sum(board[pit] for pit in perspective.corner_pits) * CORNER_PIT_WEIGHT
    score -= sum(board[pit] for pit in opponent.corner_pits) * CORNER_PIT_WEIGHT

    # Empty pits mean less mobility
    score -= sum(1 for pit in perspective.pits if board[pit] == 0) * EMPTY_PIT_PENALTY
    score += sum(1 for pit in opponent.pits if board[pit] == 0) * EMPTY_PIT_PENALTY

    return score


def evaluate_capture_opportunities(state: GameState, perspective: Side) -> int:
    """
    One-ply lookahead: what could perspective capture right now?

    Every playable pit is tried as if it were perspective's turn, and the
    stones each move would capture are summed.
    """
    if state.finished:
        return 0

    as_mover = state if state.turn is perspective else replace(state, turn=perspective)

    score = 0
    for pit in generate_legal_moves(as_mover, perspective):
        _, record = apply_move(as_mover, pit)
        score += record.captured * CAPTURE_WEIGHT

    return score
