"""
Pallanguzhi game rules implementation.

Implements the rules used by this engine:
- Sowing runs strictly around the ring (0 -> 13 -> 0), across both sides
- Capture when the last stone lands in an empty opponent pit next to stones
- Bonus turn when the last stone makes an own pit even
- Game ends when one side is empty; each side keeps its own leftovers
"""

from typing import List, Optional, Tuple
from dataclasses import dataclass

from .errors import IllegalMoveError
from .game_state import (
    MIDDLE_PIT_STONES,
    NUM_PITS,
    STONES_PER_PIT,
    GameState,
    Side,
    Winner,
)


@dataclass(frozen=True)
class Capture:
    """Stones removed from one pit by a capture."""

    pit: int
    stones: int


@dataclass(frozen=True)
class MoveRecord:
    """
    Everything that happened during one move.

    path[0] is the start pit, followed by every pit a stone was dropped into.
    """

    start_pit: int
    path: Tuple[int, ...]
    captures: Tuple[Capture, ...]
    bonus_turn: bool

    @property
    def stones_sown(self) -> int:
        return len(self.path) - 1

    @property
    def last_pit(self) -> int:
        return self.path[-1]

    @property
    def captured(self) -> int:
        """Total stones captured by this move."""
        return sum(capture.stones for capture in self.captures)


def create_starting_state() -> GameState:
    """
    Create the initial game state.

    Every pit holds 6 stones except the two middle pits, which hold 12.

    Returns:
        Starting GameState
    """
    board = [STONES_PER_PIT] * NUM_PITS
    board[Side.PLAYER.middle_pit] = MIDDLE_PIT_STONES
    board[Side.AI.middle_pit] = MIDDLE_PIT_STONES

    return GameState(board=tuple(board), turn=Side.PLAYER)


def get_next_pit(pit: int) -> int:
    """Successor of a pit in sowing order, wrapping 13 -> 0."""
    return pit + 1 if pit < NUM_PITS - 1 else 0


def get_adjacent_pits(pit: int) -> List[int]:
    """
    Get the left and right neighbours of a pit on the circular board.

    Args:
        pit: Pit index

    Returns:
        [left, right] neighbour indices
    """
    return [(pit - 1) % NUM_PITS, (pit + 1) % NUM_PITS]


def illegal_move_reason(state: GameState, pit: int) -> Optional[str]:
    """
    Explain why a pit can't be played, or None if it can.

    A move is legal if:
    - The game isn't over
    - The pit belongs to the side to move
    - The pit holds at least one stone
    """
    if state.finished:
        return "game is finished"
    if not isinstance(pit, int) or not 0 <= pit < NUM_PITS:
        return "pit is off the board"
    if not state.turn.owns(pit):
        return f"pit belongs to {state.turn.opponent.label}"
    if state.board[pit] == 0:
        return "pit is empty"
    return None


def is_legal_move(state: GameState, pit: int) -> bool:
    """Check whether the side to move may play a pit. Never raises."""
    return illegal_move_reason(state, pit) is None


def generate_legal_moves(state: GameState, side: Optional[Side] = None) -> List[int]:
    """
    Generate the playable pits for a side.

    Args:
        state: Current game state
        side: Side to list moves for (default: side to move)

    Returns:
        Non-empty pit indices of that side, ascending
    """
    if side is None:
        side = state.turn
    return state.get_player_pits(side)


def _sow(board: List[int], pit: int) -> List[int]:
    """Empty a pit and drop its stones one by one around the ring."""
    stones_in_hand = board[pit]
    board[pit] = 0

    path = [pit]
    current_pos = pit
    while stones_in_hand > 0:
        current_pos = get_next_pit(current_pos)
        board[current_pos] += 1
        stones_in_hand -= 1
        path.append(current_pos)

    return path


def _capture(board: List[int], last_pit: int, mover: Side) -> List[Capture]:
    """
    Apply the neighbour capture rule in place.

    Triggers only when the last stone landed in a previously empty opponent
    pit. Both neighbours are taken if they hold stones; the landing stone
    goes too, but only if at least one neighbour was taken.
    """
    if mover.owns(last_pit) or board[last_pit] != 1:
        return []

    captures = []
    for neighbour in get_adjacent_pits(last_pit):
        if board[neighbour] > 0:
            captures.append(Capture(pit=neighbour, stones=board[neighbour]))
            board[neighbour] = 0

    if captures:
        captures.append(Capture(pit=last_pit, stones=board[last_pit]))
        board[last_pit] = 0

    return captures


def apply_move(state: GameState, pit: int) -> Tuple[GameState, MoveRecord]:
    """
    Apply a move and return the resulting state.

    Implements the full rules:
    1. Pick up all stones from the chosen pit
    2. Sow them one per pit along the ring, crossing sides freely
    3. Capture around an emptied opponent pit (see _capture)
    4. Bonus turn if the last pit is the mover's own and now nonzero even
    5. End the game if either side has no stones left

    Args:
        state: Current game state
        pit: Pit index to move from

    Returns:
        (new GameState, MoveRecord)

    Raises:
        IllegalMoveError: if the pit can't be played; nothing is changed
    """
    reason = illegal_move_reason(state, pit)
    if reason is not None:
        raise IllegalMoveError(pit, reason)

    # Create mutable board copy
    board = list(state.board)
    mover = state.turn

    path = _sow(board, pit)
    last_pit = path[-1]

    captures = _capture(board, last_pit, mover)
    captured = sum(capture.stones for capture in captures)

    score_player = state.score_player
    score_ai = state.score_ai
    if mover is Side.PLAYER:
        score_player += captured
    else:
        score_ai += captured

    bonus_turn = (
        mover.owns(last_pit)
        and board[last_pit] > 0
        and board[last_pit] % 2 == 0
    )
    next_turn = mover if bonus_turn else mover.opponent

    record = MoveRecord(
        start_pit=pit,
        path=tuple(path),
        captures=tuple(captures),
        bonus_turn=bonus_turn,
    )

    next_state = GameState(
        board=tuple(board),
        score_player=score_player,
        score_ai=score_ai,
        turn=next_turn,
    )
    if is_terminal(next_state):
        next_state = finish_game(next_state)

    return next_state, record


def is_terminal(state: GameState) -> bool:
    """
    Check if the game has ended.

    Game ends when either side's pits are all empty.

    Args:
        state: Game state to check

    Returns:
        True if game is over
    """
    return (
        state.finished
        or state.side_is_empty(Side.PLAYER)
        or state.side_is_empty(Side.AI)
    )


def decide_winner(score_player: int, score_ai: int) -> Winner:
    """Compare final scores."""
    if score_player > score_ai:
        return Winner.PLAYER
    elif score_ai > score_player:
        return Winner.AI
    else:
        return Winner.TIE


def finish_game(state: GameState) -> GameState:
    """
    Close out a terminal position.

    Remaining stones on each side go to that side's own score, the board is
    cleared, and the winner is decided on the final scores.

    Args:
        state: Terminal game state

    Returns:
        Finished GameState
    """
    if not is_terminal(state):
        raise ValueError("Cannot finish a game that is still in progress")
    if state.finished:
        return state

    score_player = state.score_player + state.stones_on_side(Side.PLAYER)
    score_ai = state.score_ai + state.stones_on_side(Side.AI)

    return GameState(
        board=tuple([0] * NUM_PITS),
        score_player=score_player,
        score_ai=score_ai,
        turn=state.turn,
        finished=True,
        winner=decide_winner(score_player, score_ai),
    )


def get_game_result(state: GameState) -> Optional[str]:
    """
    Get human-readable game result.

    Args:
        state: Game state

    Returns:
        Result string or None if not finished
    """
    if not state.finished:
        return None

    margin = abs(state.score_player - state.score_ai)

    if state.winner is Winner.PLAYER:
        return f"Player wins {state.score_player}-{state.score_ai} (by {margin})"
    elif state.winner is Winner.AI:
        return f"AI wins {state.score_ai}-{state.score_player} (by {margin})"
    else:
        return f"Tie game, {state.score_player} each"
