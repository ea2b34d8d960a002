"""
utils.py - Constants, enumerations and helpers for the Connect Four engine

This module provides the default board dimensions, the player and game
status enumerations, the axis direction vectors used by the win scan, and
ASCII rendering of a board grid.
"""

from enum import Enum, auto
from typing import Optional

import numpy as np

# Game constants (defaults; every engine can override them)
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    def __str__(self):
        if self == Player.EMPTY:
            return "."
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class GameStatus(Enum):
    """Enumeration representing the state of a game."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameStatus.IN_PROGRESS

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None if nobody has won."""
        if self == GameStatus.PLAYER_ONE_WIN:
            return Player.ONE
        if self == GameStatus.PLAYER_TWO_WIN:
            return Player.TWO
        return None

    @classmethod
    def won_by(cls, player: Player) -> 'GameStatus':
        """Get the win status for a player."""
        if player == Player.ONE:
            return cls.PLAYER_ONE_WIN
        if player == Player.TWO:
            return cls.PLAYER_TWO_WIN
        raise ValueError(f"{player!r} cannot win a game")


class Direction(Enum):
    """The four axes scanned for a win."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN = auto()  # top-left to bottom-right
    DIAGONAL_UP = auto()    # bottom-left to top-right


# Direction vectors (row, col) for each axis; the scan also walks the negation.
# Order matters: it decides which line is reported when one move wins twice.
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (1, -1)
}


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a board grid as ASCII art.

    Args:
        grid: 2D array of Player values, row 0 at the top

    Returns:
        ASCII representation of the board with column numbers underneath
    """
    rows, cols = grid.shape
    symbols = {player.value: str(player) for player in Player}

    border = "+" + "-" * (cols * 2 + 1) + "+"
    lines = [border]
    for row in range(rows):
        cells = " ".join(symbols[int(value)] for value in grid[row])
        lines.append(f"| {cells} |")
    lines.append(border)

    # Column labels only stay aligned for single-digit indices
    labels = " ".join(str(col % 10) for col in range(cols))
    lines.append(f"  {labels}  ")

    return "\n".join(lines)
