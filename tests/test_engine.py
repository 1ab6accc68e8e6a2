"""Tests for the stateful rules engine."""

import pytest
from pallanguzhi.core import (
    GameState,
    IllegalMoveError,
    RulesEngine,
    Side,
    Winner,
    create_starting_state,
)


def test_new_game():
    """New engines start from the standard position with empty history."""
    engine = RulesEngine.new_game()

    assert engine.state == create_starting_state()
    assert engine.turn is Side.PLAYER
    assert engine.score_player == 0
    assert engine.score_ai == 0
    assert engine.finished is False
    assert engine.winner is None
    assert engine.history == ()
    assert engine.last_move is None


def test_engines_are_independent():
    """Two sessions never share state."""
    first = RulesEngine.new_game()
    second = RulesEngine.new_game()

    first.apply_move(0)

    assert second.state == create_starting_state()


def test_apply_move_result():
    """Move results carry the record, captures and status."""
    engine = RulesEngine.new_game()

    result = engine.apply_move(0)

    assert result.success is True
    assert result.record.start_pit == 0
    assert result.record.path == (0, 1, 2, 3, 4, 5, 6)
    assert result.captured == 0
    assert result.bonus_turn is False
    assert result.finished is False
    assert result.winner is None
    assert result.state is engine.state
    assert engine.turn is Side.AI


def test_history_records_moves():
    """Each move is appended to history with the position it produced."""
    engine = RulesEngine.new_game()

    engine.apply_move(0)
    engine.apply_move(7)

    assert len(engine.history) == 2
    first, second = engine.history
    assert first.side is Side.PLAYER
    assert first.record.start_pit == 0
    assert second.side is Side.AI
    assert second.board == engine.board
    assert engine.last_move is second


def test_legal_moves_by_side():
    """Legal moves can be listed for either side."""
    engine = RulesEngine.new_game()

    assert engine.legal_moves() == [0, 1, 2, 3, 4, 5, 6]
    assert engine.legal_moves(Side.AI) == [7, 8, 9, 10, 11, 12, 13]
    assert engine.is_legal_move(3) is True
    assert engine.is_legal_move(10) is False


def test_illegal_move_leaves_state_unchanged():
    """Illegal moves raise and leave state and history untouched."""
    engine = RulesEngine.new_game()
    engine.apply_move(0)
    before = engine.state
    history = engine.history

    for pit in (0, 3, 14, -2):  # wrong side / off board
        with pytest.raises(IllegalMoveError):
            engine.apply_move(pit)
        assert engine.state == before
        assert engine.history == history


def test_fork_isolation():
    """Moves on a fork never reach the original."""
    engine = RulesEngine.new_game()
    engine.apply_move(1)
    before = engine.state

    fork = engine.fork()
    fork.apply_move(8)
    fork.apply_move(fork.legal_moves()[0])

    assert engine.state == before
    assert len(engine.history) == 1
    assert fork.state != before


def test_simulate_move_does_not_mutate():
    """simulate_move reports the outcome without playing it."""
    state = GameState(
        board=(6, 6, 6, 12, 6, 6, 1, 0, 5, 6, 12, 6, 6, 6),
        score_player=6,
        score_ai=6,
    )
    engine = RulesEngine(state)

    result = engine.simulate_move(6)

    assert result.captured == 6
    assert result.state.score_player == 12
    assert engine.state is state
    assert engine.history == ()


def test_game_end_through_engine():
    """Finishing move sets finished and winner on the engine."""
    state = GameState(
        board=(0, 0, 0, 0, 0, 0, 1, 3, 4, 5, 6, 7, 8, 9),
        score_player=30,
        score_ai=23,
    )
    engine = RulesEngine(state)

    result = engine.apply_move(6)

    assert result.finished is True
    assert result.winner is Winner.AI
    assert engine.finished is True
    assert engine.legal_moves() == []
    assert engine.is_legal_move(7) is False


def test_reset():
    """reset() returns to the opening and clears history."""
    engine = RulesEngine.new_game()
    engine.apply_move(2)

    engine.reset()

    assert engine.state == create_starting_state()
    assert engine.history == ()
