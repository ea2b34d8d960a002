"""
outcome.py - Result types returned by GameEngine.drop_token
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

from connectfour.utils import Player, GameStatus

Position = Tuple[int, int]


class MoveOutcome(Enum):
    """What happened to a drop attempt."""
    ACCEPTED = auto()
    INVALID_COLUMN = auto()     # column index out of range (caller bug)
    COLUMN_FULL = auto()
    GAME_ALREADY_OVER = auto()

    @property
    def is_rejection(self) -> bool:
        return self != MoveOutcome.ACCEPTED


@dataclass(frozen=True)
class MoveResult:
    """
    Complete description of one drop_token call.

    Rejected moves carry row=None and leave status and next_player equal to
    the state before the call.

    Attributes:
        outcome: Whether the move was accepted, or why it was rejected
        column: The column that was requested, None if it was not an integer
        row: Row the token settled in, None when rejected
        player: Player who moved (or tried to)
        status: Game status after the call
        next_player: Current player after the call
        winning_line: Cells of the winning line if this move won, else empty
    """
    outcome: MoveOutcome
    column: Optional[int]
    row: Optional[int]
    player: Player
    status: GameStatus
    next_player: Player
    winning_line: Tuple[Position, ...] = ()

    @property
    def accepted(self) -> bool:
        return self.outcome == MoveOutcome.ACCEPTED

    @property
    def position(self) -> Optional[Position]:
        if self.row is None:
            return None
        return (self.row, self.column)

    @property
    def winner(self) -> Optional[Player]:
        return self.status.winner

    @property
    def is_game_over(self) -> bool:
        return self.status.is_game_over()

    def describe(self) -> str:
        """Short human-readable summary, used by the CLI and in logs."""
        if self.outcome == MoveOutcome.INVALID_COLUMN:
            if self.column is None:
                return "Column must be an integer"
            return f"Column {self.column} is not on the board"
        if self.outcome == MoveOutcome.COLUMN_FULL:
            return f"Column {self.column} is full"
        if self.outcome == MoveOutcome.GAME_ALREADY_OVER:
            return "The game is already over"

        text = f"Player {self.player.name} dropped into column {self.column}, landing on row {self.row}"
        if self.winner is not None:
            return f"{text}; player {self.winner.name} wins"
        if self.status == GameStatus.DRAW:
            return f"{text}; the game is a draw"
        return f"{text}; player {self.next_player.name} to move"
