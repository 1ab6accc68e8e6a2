"""
Move explanations and hints.

Explanations are built deterministically from what a move does: how many
stones were sown, what was captured, whether a bonus turn was earned, and
at MEDIUM/HARD one strategic remark picked by a fixed priority order.
"""

from enum import Enum
from typing import List, Optional
from dataclasses import dataclass

from ..core import PITS_PER_SIDE, GameState, Side, apply_move
from .difficulty import Difficulty

SCORE_SWING_THRESHOLD = 5
BOARD_ADVANTAGE_THRESHOLD = 10


class Remark(Enum):
    """Strategic remarks, in priority order."""

    SIGNIFICANT_IMPROVEMENT = "This move significantly improves {side}'s position."
    MIDDLE_PIT = "Playing from the middle pit provides maximum distribution options."
    CORNER_PIT = "Corner pit moves can create capture opportunities."
    MAINTAINS_ADVANTAGE = "This maintains {side}'s stone advantage on the board."
    GOOD_POSITION = "This move maintains good strategic position."

    def render(self, side: Side) -> str:
        return self.value.format(side=side.label)


def pit_number(pit: int) -> int:
    """1-based pit number within its own side, as shown to players."""
    return pit % PITS_PER_SIDE + 1


@dataclass(frozen=True)
class MoveExplanation:
    """What a chosen move does, plus its rendered text."""

    side: Side
    pit: Optional[int]
    stones: int = 0
    captured: int = 0
    bonus_turn: bool = False
    remark: Optional[Remark] = None
    capture_detail: bool = False
    forced: bool = False

    @property
    def text(self) -> str:
        if self.pit is None:
            return "No valid moves available."
        if self.forced:
            return f"Only one move available from pit {pit_number(self.pit)}."

        parts = [f"{self.side.label} chose pit {pit_number(self.pit)} ({self.stones} stones)."]
        if self.captured > 0:
            parts.append(f"This move captures {self.captured} stones!")
            if self.capture_detail:
                parts.append(
                    "The stones landed in an empty opponent pit, "
                    "allowing capture of adjacent pits."
                )
        if self.bonus_turn:
            parts.append(
                "Earned a bonus turn by landing the last stone in own pit with even number."
            )
        if self.remark is not None:
            parts.append(self.remark.render(self.side))
        return " ".join(parts)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Hint:
    """A move suggestion addressed to the human player."""

    pit: Optional[int]
    captured: int = 0
    bonus_turn: bool = False
    message: Optional[str] = None

    @property
    def text(self) -> str:
        if self.message is not None:
            return self.message
        if self.pit is None:
            return "No valid moves available."

        parts = [f"Consider playing pit {pit_number(self.pit)}."]
        if self.captured > 0:
            parts.append(f"This move will capture {self.captured} stones!")
        if self.bonus_turn:
            parts.append("You'll get a bonus turn.")
        if self.captured == 0 and not self.bonus_turn:
            parts.append("This move maintains good board position and mobility.")
        return " ".join(parts)

    def __str__(self) -> str:
        return self.text


def strategic_remark(before: GameState, pit: int, after: GameState) -> Remark:
    """
    Pick the single remark that best describes a move.

    Rules are checked in order and the first match wins.
    """
    side = before.turn
    opponent = side.opponent

    swing_before = before.score(side) - before.score(opponent)
    swing_after = after.score(side) - after.score(opponent)
    if swing_after > swing_before + SCORE_SWING_THRESHOLD:
        return Remark.SIGNIFICANT_IMPROVEMENT

    if pit == side.middle_pit:
        return Remark.MIDDLE_PIT

    if pit in side.corner_pits:
        return Remark.CORNER_PIT

    if after.stones_on_side(side) > after.stones_on_side(opponent) + BOARD_ADVANTAGE_THRESHOLD:
        return Remark.MAINTAINS_ADVANTAGE

    return Remark.GOOD_POSITION


def explain_move(before: GameState, pit: int, difficulty: Difficulty) -> MoveExplanation:
    """
    Explain a move the side to move is about to play.

    Args:
        before: Position before the move
        pit: Chosen pit (must be legal)
        difficulty: Controls how much strategy is described

    Returns:
        MoveExplanation
    """
    after, record = apply_move(before, pit)

    remark = None
    if difficulty in (Difficulty.MEDIUM, Difficulty.HARD):
        remark = strategic_remark(before, pit, after)

    return MoveExplanation(
        side=before.turn,
        pit=pit,
        stones=before.board[pit],
        captured=record.captured,
        bonus_turn=record.bonus_turn,
        remark=remark,
        capture_detail=difficulty is Difficulty.HARD,
    )


def hint_for_move(before: GameState, pit: int) -> Hint:
    """Describe a suggested move to the human player."""
    _, record = apply_move(before, pit)
    return Hint(pit=pit, captured=record.captured, bonus_turn=record.bonus_turn)


def summarize(explanations: List[MoveExplanation]) -> str:
    """Join several explanations (e.g. a bonus-turn chain) into one message."""
    return " ".join(explanation.text for explanation in explanations)
