"""Game-tree search, evaluation and move explanations."""

from .difficulty import Difficulty, DEFAULT_DIFFICULTY
from .evaluation import evaluate, WIN_SCORE
from .minimax import MinimaxSearch, SearchResult, minimax
from .explain import Hint, MoveExplanation, Remark, explain_move, hint_for_move
from .decision import DecisionEngine, MoveChoice, Suggestion

__all__ = [
    "Difficulty",
    "DEFAULT_DIFFICULTY",
    "evaluate",
    "WIN_SCORE",
    "MinimaxSearch",
    "SearchResult",
    "minimax",
    "Hint",
    "MoveExplanation",
    "Remark",
    "explain_move",
    "hint_for_move",
    "DecisionEngine",
    "MoveChoice",
    "Suggestion",
]
