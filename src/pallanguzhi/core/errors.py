"""Exceptions raised by the rules engine."""


class IllegalMoveError(ValueError):
    """
    Raised when a move is attempted from a pit that is not playable.

    The game state is guaranteed untouched when this is raised, so the
    caller can simply ask for another pit.
    """

    def __init__(self, pit: int, reason: str):
        self.pit = pit
        self.reason = reason
        super().__init__(f"Illegal move from pit {pit}: {reason}")
