"""
Game state representation for Pallanguzhi.

A game consists of:
- 14 pits holding stones (no stores on the board)
- One accumulated score per side
- Current player turn, plus end-of-game status

Board layout:
           AI Pits (13-7)
    [13][12][11][10][ 9][ 8][ 7]
    [ 0][ 1][ 2][ 3][ 4][ 5][ 6]
          Player Pits (0-6)

Sowing runs 0 -> 13 and wraps back to 0. Pits 3 and 10 are the
middle pits and start with twice the usual stones.
"""

from enum import Enum, IntEnum
from typing import List, Optional, Tuple
from dataclasses import dataclass

NUM_PITS = 14
PITS_PER_SIDE = 7
STONES_PER_PIT = 6
MIDDLE_PIT_STONES = 12
TOTAL_STONES = 96


class Side(IntEnum):
    """A player's half of the board."""

    PLAYER = 0  # Human side, pits 0-6
    AI = 1  # Computer side, pits 7-13

    @property
    def opponent(self) -> "Side":
        return Side.AI if self is Side.PLAYER else Side.PLAYER

    @property
    def first_pit(self) -> int:
        return 0 if self is Side.PLAYER else PITS_PER_SIDE

    @property
    def last_pit(self) -> int:
        return self.first_pit + PITS_PER_SIDE - 1

    @property
    def pits(self) -> range:
        """Pit indices owned by this side, ascending."""
        return range(self.first_pit, self.last_pit + 1)

    @property
    def middle_pit(self) -> int:
        return self.first_pit + 3

    @property
    def corner_pits(self) -> Tuple[int, int]:
        """The two boundary pits of this side's range."""
        return (self.first_pit, self.last_pit)

    @property
    def label(self) -> str:
        return "Player" if self is Side.PLAYER else "AI"

    def owns(self, pit: int) -> bool:
        return self.first_pit <= pit <= self.last_pit


class Winner(Enum):
    """Final outcome of a finished game."""

    PLAYER = "player"
    AI = "ai"
    TIE = "tie"

    @classmethod
    def for_side(cls, side: Side) -> "Winner":
        return cls.PLAYER if side is Side.PLAYER else cls.AI


def pit_owner(pit: int) -> Side:
    """Get the side a pit belongs to."""
    if not 0 <= pit < NUM_PITS:
        raise ValueError(f"Pit {pit} is off the board")
    return Side.PLAYER if pit < PITS_PER_SIDE else Side.AI


@dataclass(frozen=True)
class GameState:
    """
    Immutable snapshot of a game.

    Because the snapshot is immutable, copying it is free: forks of a game
    share the same GameState until one of them plays a move, at which point
    that fork gets a brand new GameState.
    """

    board: Tuple[int, ...]  # Stones in each pit (immutable)
    score_player: int = 0
    score_ai: int = 0
    turn: Side = Side.PLAYER
    finished: bool = False
    winner: Optional[Winner] = None

    def __post_init__(self) -> None:
        """Validate state invariants."""
        if len(self.board) != NUM_PITS:
            raise ValueError(
                f"Board size {len(self.board)} doesn't match expected {NUM_PITS}"
            )
        if not isinstance(self.turn, Side):
            raise ValueError(f"Invalid turn {self.turn!r}, must be a Side")
        if any(stones < 0 for stones in self.board):
            raise ValueError("Negative stone count not allowed")
        if self.score_player < 0 or self.score_ai < 0:
            raise ValueError("Negative score not allowed")
        if self.winner is not None and not self.finished:
            raise ValueError("Only a finished game can have a winner")

    @property
    def stones_on_board(self) -> int:
        """Stones still in pits."""
        return sum(self.board)

    @property
    def total_stones(self) -> int:
        """Stones on the board plus both scores (constant within a game)."""
        return sum(self.board) + self.score_player + self.score_ai

    def score(self, side: Side) -> int:
        """Get accumulated score for a side."""
        return self.score_player if side is Side.PLAYER else self.score_ai

    def stones_on_side(self, side: Side) -> int:
        """Stones currently sitting in a side's pits."""
        return sum(self.board[side.first_pit : side.last_pit + 1])

    def side_is_empty(self, side: Side) -> bool:
        return all(self.board[pit] == 0 for pit in side.pits)

    def get_player_pits(self, side: Side) -> List[int]:
        """Get non-empty pit indices for a side, regardless of whose turn it is."""
        return [pit for pit in side.pits if self.board[pit] > 0]

    def __str__(self) -> str:
        """Human-readable board representation."""
        ai_pits = list(reversed(self.board[PITS_PER_SIDE:]))
        player_pits = list(self.board[:PITS_PER_SIDE])

        pit_width = 3
        ai_str = " ".join(f"{s:>{pit_width}}" for s in ai_pits)
        player_str = " ".join(f"{s:>{pit_width}}" for s in player_pits)

        if self.finished:
            status = f"Game over: {self.winner.value}"
        else:
            status = f"{self.turn.label}'s turn"

        board_str = f"""
AI: {self.score_ai:>2}
      {ai_str}
      {player_str}
Player: {self.score_player:>2}

{status}
"""
        return board_str
