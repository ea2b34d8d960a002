"""
board.py - Board representation for Connect Four

This module implements the Board class, which stores the grid of cells,
resolves where a dropped token lands, and provides the directional run scan
that win detection is built on. It knows nothing about turns or results;
that bookkeeping lives in the engine.
"""

from typing import List, Optional, Tuple

import numpy as np

from connectfour.debug import debug
from connectfour.exceptions import EngineConfigError, EngineInvariantError
from connectfour.utils import ROWS, COLS, Player, render_board_ascii

Position = Tuple[int, int]


class Board:
    """
    A fixed-size Connect Four grid.

    Row 0 is the top of the board, so gravity moves tokens towards the
    highest row index. Cells hold Player values.
    """

    def __init__(self, rows: int = ROWS, columns: int = COLS):
        """
        Create an empty board.

        Args:
            rows: Number of rows
            columns: Number of columns

        Raises:
            EngineConfigError: If either dimension is not a positive integer
        """
        for name, value in (("rows", rows), ("columns", columns)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
                raise EngineConfigError(f"{name} must be a positive integer, got {value!r}")

        self.rows = int(rows)
        self.columns = int(columns)
        self.grid = np.zeros((self.rows, self.columns), dtype=np.int8)
        debug.trace(f"Created {self.rows}x{self.columns} board", "board")

    def clear(self) -> None:
        """Empty every cell."""
        self.grid.fill(Player.EMPTY.value)

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if a position is on the board."""
        return 0 <= row < self.rows and 0 <= col < self.columns

    def cell(self, row: int, col: int) -> Player:
        """
        Get the contents of a cell.

        Raises:
            EngineInvariantError: If the position is off the board. Callers
                check bounds first, so this only fires on an engine bug.
        """
        if not self.in_bounds(row, col):
            raise EngineInvariantError(
                f"Cell ({row}, {col}) is outside the {self.rows}x{self.columns} board")
        return Player(int(self.grid[row, col]))

    def place(self, row: int, col: int, player: Player) -> None:
        """Write a player's mark into an empty cell."""
        if player == Player.EMPTY:
            raise EngineInvariantError("Cannot place an EMPTY token")
        if self.cell(row, col) != Player.EMPTY:
            raise EngineInvariantError(f"Cell ({row}, {col}) is already occupied")
        self.grid[row, col] = player.value

    def is_column_full(self, column: int) -> bool:
        """A column is full once its top cell is occupied."""
        return self.cell(0, column) != Player.EMPTY

    def landing_row(self, column: int) -> Optional[int]:
        """
        Find the row a token dropped into a column would settle in.

        Returns:
            The lowest empty row index, or None if the column is full
        """
        for row in range(self.rows - 1, -1, -1):
            if self.cell(row, column) == Player.EMPTY:
                return row
        return None

    def column_height(self, column: int) -> int:
        """Number of tokens stacked in a column."""
        row = self.landing_row(column)
        if row is None:
            return self.rows
        return self.rows - 1 - row

    def occupied_count(self) -> int:
        """Number of tokens on the board."""
        return int(np.count_nonzero(self.grid != Player.EMPTY.value))

    def is_full(self) -> bool:
        """Check if no empty cell remains."""
        return not np.any(self.grid == Player.EMPTY.value)

    def scan(self, row: int, col: int, dr: int, dc: int) -> List[Position]:
        """
        Collect the run of same-player cells next to a position.

        Walks from (row, col) in steps of (dr, dc), excluding the start cell,
        and stops at the first cell that is off the board or holds a
        different mark than the start cell.

        Args:
            row, col: Start position (must hold a player's token)
            dr, dc: Step direction

        Returns:
            Positions of the run, nearest first
        """
        player = self.cell(row, col)
        run = []
        r, c = row + dr, col + dc
        while self.in_bounds(r, c) and self.cell(r, c) == player:
            run.append((r, c))
            r += dr
            c += dc
        return run

    def line_through(self, row: int, col: int, dr: int, dc: int) -> List[Position]:
        """
        Get the full contiguous line of same-player cells through a position.

        The same scan runs forward and backward along the axis.

        Returns:
            Positions ordered from the backward end to the forward end
        """
        backward = self.scan(row, col, -dr, -dc)
        forward = self.scan(row, col, dr, dc)
        return backward[::-1] + [(row, col)] + forward

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            A copy of the grid of Player values
        """
        return self.grid.copy()

    def snapshot(self) -> Tuple[Tuple[Player, ...], ...]:
        """Immutable grid of Player members, row 0 first."""
        return tuple(tuple(Player(int(value)) for value in row) for row in self.grid)

    def render(self) -> str:
        """Render the board as a string."""
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()
