"""Tests for the decision engine facade."""

from pallanguzhi.core import GameState, RulesEngine, Side, Winner, apply_move, generate_legal_moves
from pallanguzhi.ai import DecisionEngine, Difficulty, evaluate


def test_difficulty_depths():
    """Difficulty maps to a fixed search depth."""
    assert Difficulty.EASY.depth == 2
    assert Difficulty.MEDIUM.depth == 4
    assert Difficulty.HARD.depth == 6


def test_difficulty_parse():
    """Strings are case-insensitive; unknown values mean medium."""
    assert Difficulty.parse("hard") is Difficulty.HARD
    assert Difficulty.parse(" Easy ") is Difficulty.EASY
    assert Difficulty.parse(Difficulty.EASY) is Difficulty.EASY
    assert Difficulty.parse("impossible") is Difficulty.MEDIUM
    assert Difficulty.parse(None) is Difficulty.MEDIUM


def test_set_difficulty():
    """Difficulty can be changed on a live engine."""
    ai = DecisionEngine("easy")
    assert ai.max_depth == 2

    ai.set_difficulty("hard")
    assert ai.difficulty is Difficulty.HARD
    assert ai.max_depth == 6

    ai.set_difficulty("???")
    assert ai.max_depth == 4


def test_no_move_when_finished():
    """Finished games return the no-move sentinel."""
    state = GameState(
        board=tuple([0] * 14), score_player=50, score_ai=46, finished=True, winner=Winner.PLAYER
    )

    choice = DecisionEngine().choose_move(state)

    assert choice.pit is None
    assert choice.has_move is False
    assert choice.explanation.text == "No valid moves available."


def test_forced_move_skips_search():
    """A single legal move is returned without searching."""
    state = GameState(
        board=(4, 4, 4, 4, 4, 4, 4, 0, 0, 0, 0, 3, 0, 0),
        turn=Side.AI,
    )

    choice = DecisionEngine("hard").choose_move(state)

    assert choice.pit == 11
    assert choice.nodes == 0
    assert choice.score is None
    assert choice.explanation.forced is True
    assert choice.explanation.text == "Only one move available from pit 5."


def test_choose_winning_move():
    """Easy (depth 2) finds the only move that wins."""
    state = GameState(
        board=(0, 2, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 1),
        score_player=45,
        score_ai=46,
        turn=Side.AI,
    )
    ai = DecisionEngine(Difficulty.EASY)

    choice = ai.choose_move(state)

    assert choice.pit == 13
    assert choice.explanation.captured == 3
    assert ai.last_explanation is choice.explanation


def test_choose_move_leaves_engine_untouched():
    """Searching from a live engine never changes it."""
    engine = RulesEngine.new_game()
    engine.apply_move(0)
    before = engine.state
    history = engine.history

    choice = DecisionEngine("medium").choose_move(engine)

    assert engine.is_legal_move(choice.pit)
    assert engine.state is before
    assert engine.history == history


def test_suggest_not_player_turn():
    """No hint is given on the AI's turn."""
    engine = RulesEngine.new_game()
    engine.apply_move(0)

    suggestion = DecisionEngine().suggest_move(engine)

    assert suggestion.pit is None
    assert suggestion.hint.text == "It is not the player's turn."


def test_suggest_picks_best_single_ply_move():
    """Hint is the first move with the best one-ply evaluation."""
    engine = RulesEngine.new_game()

    suggestion = DecisionEngine().suggest_move(engine)

    scores = [
        evaluate(apply_move(engine.state, pit)[0], Side.PLAYER)
        for pit in generate_legal_moves(engine.state)
    ]
    assert suggestion.pit == scores.index(max(scores))
    assert suggestion.score == max(scores)


def test_suggest_capture_hint():
    """A game-winning capture is suggested and described."""
    state = GameState(
        board=(1, 0, 0, 0, 0, 0, 1, 0, 5, 0, 0, 0, 0, 0),
        score_player=44,
        score_ai=45,
    )

    suggestion = DecisionEngine().suggest_move(state)

    assert suggestion.pit == 6
    assert suggestion.hint.captured == 6
    assert suggestion.hint.text == "Consider playing pit 7. This move will capture 6 stones!"


def test_suggest_when_finished():
    """Finished games have nothing to suggest."""
    state = GameState(
        board=tuple([0] * 14), score_player=48, score_ai=48, finished=True, winner=Winner.TIE
    )

    suggestion = DecisionEngine().suggest_move(state)

    assert suggestion.pit is None
    assert suggestion.hint.text == "No valid moves available."
