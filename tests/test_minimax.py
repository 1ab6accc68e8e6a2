"""Tests for minimax search with alpha-beta pruning."""

import random

import pytest
from pallanguzhi.core import (
    GameState,
    Side,
    apply_move,
    create_starting_state,
    generate_legal_moves,
)
from pallanguzhi.ai import WIN_SCORE, MinimaxSearch, evaluate, minimax


def reference_minimax(state, depth, side):
    """Plain exhaustive minimax, roles taken from the side to move."""
    if depth == 0 or state.finished:
        return evaluate(state, side)
    moves = generate_legal_moves(state)
    if not moves:
        return evaluate(state, side)
    values = [reference_minimax(apply_move(state, m)[0], depth - 1, side) for m in moves]
    return max(values) if state.turn is side else min(values)


def reference_best(state, depth):
    """Best root move (first on ties) and its value for the side to move."""
    side = state.turn
    moves = generate_legal_moves(state)
    values = [reference_minimax(apply_move(state, m)[0], depth - 1, side) for m in moves]
    best = max(values)
    return moves[values.index(best)], best


def random_positions(count, seed=11):
    """Mid-game positions reached by random play."""
    rng = random.Random(seed)
    positions = []
    while len(positions) < count:
        state = create_starting_state()
        for _ in range(rng.randint(4, 14)):
            if state.finished:
                break
            state, _ = apply_move(state, rng.choice(generate_legal_moves(state)))
        if not state.finished and len(generate_legal_moves(state)) > 1:
            positions.append(state)
    return positions


def winning_capture_position():
    """AI to move with three options; only pit 13 ends the game in AI's favour."""
    return GameState(
        board=(0, 2, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 1),
        score_player=45,
        score_ai=46,
        turn=Side.AI,
    )


def test_depth_two_finds_strictly_best_move():
    """The single winning move is chosen over the other two."""
    state = winning_capture_position()
    assert generate_legal_moves(state) == [7, 9, 13]

    result = minimax(state, depth=2, maximizing_side=Side.AI)

    assert result.best_move == 13
    assert result.score == WIN_SCORE


def test_depth_zero_returns_static_evaluation():
    """No search at depth 0, just the evaluator."""
    state = create_starting_state()

    result = minimax(state, depth=0, maximizing_side=Side.PLAYER)

    assert result.best_move is None
    assert result.score == evaluate(state, Side.PLAYER)
    assert result.nodes == 1


@pytest.mark.parametrize("depth", [1, 2, 3])
def test_pruning_matches_exhaustive_search(depth):
    """Alpha-beta picks the same move and score as full minimax."""
    for state in [create_starting_state(), winning_capture_position()] + random_positions(6):
        side = state.turn
        pruned = MinimaxSearch(side, prune=True).search(state, depth)
        full = MinimaxSearch(side, prune=False).search(state, depth)

        assert pruned.best_move == full.best_move
        assert pruned.score == full.score
        assert pruned.nodes <= full.nodes
        assert full.cutoffs == 0


@pytest.mark.parametrize("depth", [1, 2, 3])
def test_search_matches_reference_minimax(depth):
    """Search agrees with an independent minimax, bonus turns included."""
    for state in random_positions(6, seed=23):
        result = minimax(state, depth, state.turn)

        assert (result.best_move, result.score) == reference_best(state, depth)


def test_ties_keep_lowest_pit():
    """Equal-scoring moves resolve to the first in ascending pit order."""
    # Pits 8 and 11 each step one stone into an empty inner pit;
    # the two resulting positions evaluate the same
    state = GameState(
        board=(5, 5, 5, 5, 5, 5, 5, 0, 1, 0, 0, 1, 0, 0),
        turn=Side.AI,
    )
    after_8, _ = apply_move(state, 8)
    after_11, _ = apply_move(state, 11)
    assert evaluate(after_8, Side.AI) == evaluate(after_11, Side.AI)

    result = minimax(state, depth=1, maximizing_side=Side.AI)

    assert result.best_move == 8


def test_bonus_turn_keeps_maximizing_role():
    """After a bonus turn the same side moves again at the next ply."""
    # AI pit 12 (1 stone) lands on pit 13 making it 2: bonus turn
    state = GameState(
        board=(0, 3, 0, 0, 0, 0, 3, 4, 4, 4, 4, 4, 1, 1),
        turn=Side.AI,
    )
    child, record = apply_move(state, 12)
    assert record.bonus_turn is True
    assert child.turn is Side.AI

    assert minimax(state, 2, Side.AI).score == reference_best(state, 2)[1]


def test_search_does_not_mutate_root():
    """The root position is unchanged after searching."""
    state = create_starting_state()
    before = (state.board, state.score_player, state.score_ai, state.turn, state.finished)

    minimax(state, depth=3, maximizing_side=Side.PLAYER)

    assert (state.board, state.score_player, state.score_ai, state.turn, state.finished) == before
