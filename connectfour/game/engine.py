"""
engine.py - Turn-enforcing game engine for Connect Four

This module implements GameEngine, which owns a Board together with the
turn and status bookkeeping. Every move goes through drop_token, which
returns a MoveResult describing exactly what happened; rejected moves are
reported in that result rather than raised.
"""

import threading
import time
from typing import Callable, List, Optional, Tuple

import numpy as np

from connectfour.debug import debug
from connectfour.exceptions import EngineConfigError, EngineInvariantError
from connectfour.game.board import Board, Position
from connectfour.game.outcome import MoveOutcome, MoveResult
from connectfour.utils import ROWS, COLS, CONNECT_N, Player, GameStatus, DIRECTION_VECTORS

MoveListener = Callable[[MoveResult], None]


class GameEngine:
    """
    A single Connect Four game.

    Holds the board, whose turn it is and the game status. Engines share
    no state, so any number of games can run side by side. drop_token and
    the grid queries hold the engine lock, so a move is never observed half
    done; current_player, status, winning_line and last_move are plain
    attributes replaced whole at the end of a move.
    """

    def __init__(self, rows: int = ROWS, columns: int = COLS,
                 win_length: int = CONNECT_N, starting_player: Player = Player.ONE):
        """
        Initialize a new game.

        Args:
            rows: Number of board rows
            columns: Number of board columns
            win_length: Tokens in a row needed to win
            starting_player: Player who moves first

        Raises:
            EngineConfigError: If any setting is invalid
        """
        if isinstance(win_length, bool) or not isinstance(win_length, (int, np.integer)) or win_length < 1:
            raise EngineConfigError(f"win_length must be a positive integer, got {win_length!r}")
        if starting_player not in (Player.ONE, Player.TWO):
            raise EngineConfigError(f"starting_player must be Player.ONE or Player.TWO, got {starting_player!r}")

        self.board = Board(rows, columns)
        self.win_length = int(win_length)
        self.starting_player = starting_player
        self._lock = threading.RLock()
        self._listeners: List[MoveListener] = []
        debug.debug(f"Initializing GameEngine ({self.rows}x{self.columns}, "
                    f"connect {self.win_length}, {starting_player.name} starts)", "engine")
        self._start()

    def _start(self) -> None:
        self.current_player = self.starting_player
        self.status = GameStatus.IN_PROGRESS
        self.winning_line: Tuple[Position, ...] = ()
        self.last_move: Optional[Position] = None
        self._moves: List[int] = []

    def reset(self) -> None:
        """
        Start a new game on this engine with the same settings.

        Listeners are not notified; callers that reset should redraw from
        snapshot() themselves.
        """
        with self._lock:
            debug.debug("Resetting game", "engine")
            self.board.clear()
            self._start()

    @property
    def rows(self) -> int:
        return self.board.rows

    @property
    def columns(self) -> int:
        return self.board.columns

    @property
    def moves_made(self) -> List[int]:
        """Columns of every accepted move, oldest first (a copy)."""
        with self._lock:
            return list(self._moves)

    @property
    def winner(self) -> Optional[Player]:
        return self.status.winner

    def is_game_over(self) -> bool:
        return self.status.is_game_over()

    def is_valid_column(self, column) -> bool:
        """Check that a column index is an integer on the board."""
        if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
            return False
        return 0 <= column < self.columns

    def get_valid_moves(self) -> List[int]:
        """
        Get the columns that currently accept a token.

        Returns:
            Column indices in ascending order, empty once the game is over
        """
        with self._lock:
            if self.is_game_over():
                return []
            return [col for col in range(self.columns) if not self.board.is_column_full(col)]

    def column_height(self, column: int) -> int:
        """Number of tokens in a column; raises ValueError for a bad index."""
        if not self.is_valid_column(column):
            raise ValueError(f"Column {column!r} is not on the board")
        with self._lock:
            return self.board.column_height(column)

    def get_state(self) -> np.ndarray:
        """Copy of the grid as a numpy array of Player values."""
        with self._lock:
            return self.board.get_state()

    def snapshot(self):
        """Immutable grid of Player members for renderers."""
        with self._lock:
            return self.board.snapshot()

    def add_listener(self, listener: MoveListener) -> None:
        """
        Register a callback that receives the MoveResult of every drop.

        Callbacks run after the engine lock is released. With several threads
        dropping at once, results can reach a listener in a different order
        than the moves were applied; MoveResult.status and next_player always
        describe the state right after that particular move.
        """
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def remove_listener(self, listener: MoveListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def drop_token(self, column: int) -> MoveResult:
        """
        Drop the current player's token into a column.

        Args:
            column: Column index, 0-based

        Returns:
            MoveResult describing the placement, or the reason it was
            rejected (invalid column, game over, column full). Rejections
            leave the game untouched.
        """
        with self._lock:
            result = self._apply(column)
            listeners = list(self._listeners)

        for listener in listeners:
            try:
                listener(result)
            except Exception as e:
                debug.error(f"Move listener {listener!r} failed: {e}", "engine")

        return result

    def _reject(self, column, outcome: MoveOutcome) -> MoveResult:
        debug.debug(f"Rejected move in column {column!r} for player "
                    f"{self.current_player.name}: {outcome.name}", "engine")
        return MoveResult(
            outcome=outcome,
            column=column,
            row=None,
            player=self.current_player,
            status=self.status,
            next_player=self.current_player,
        )

    def _apply(self, column) -> MoveResult:
        if not self.is_valid_column(column):
            # Only integers go into the result; anything else may be unhashable
            integral = isinstance(column, (int, np.integer)) and not isinstance(column, bool)
            return self._reject(int(column) if integral else None, MoveOutcome.INVALID_COLUMN)
        column = int(column)
        if self.is_game_over():
            return self._reject(column, MoveOutcome.GAME_ALREADY_OVER)
        if self.board.is_column_full(column):
            return self._reject(column, MoveOutcome.COLUMN_FULL)

        row = self.board.landing_row(column)
        if row is None:
            raise EngineInvariantError(f"Column {column} has an empty top cell but no landing row")

        player = self.current_player
        self.board.place(row, column, player)
        self.last_move = (row, column)
        self._moves.append(column)
        debug.trace(f"Player {player.name} placed at ({row}, {column})", "engine")

        started = time.perf_counter()
        line = self._find_winning_line(row, column)
        debug.trace(f"Win check took {time.perf_counter() - started:.6f} seconds", "engine")

        if line:
            self.status = GameStatus.won_by(player)
            self.winning_line = line
            debug.info(f"Player {player.name} wins after move at {self.last_move}", "engine")
        elif self.board.is_full():
            self.status = GameStatus.DRAW
            debug.info("Game ends in a draw", "engine")
        else:
            self.current_player = player.other()

        return MoveResult(
            outcome=MoveOutcome.ACCEPTED,
            column=column,
            row=row,
            player=player,
            status=self.status,
            next_player=self.current_player,
            winning_line=self.winning_line,
        )

    def _find_winning_line(self, row: int, col: int) -> Tuple[Position, ...]:
        """
        Check the four axes through a freshly placed token.

        Returns:
            Exactly win_length positions containing (row, col) on the first
            winning axis, or an empty tuple if the move did not win
        """
        for direction, (dr, dc) in DIRECTION_VECTORS.items():
            line = self.board.line_through(row, col, dr, dc)
            if len(line) < self.win_length:
                continue

            # Slide the window as far back as possible while still covering the new token
            placed_at = line.index((row, col))
            start = max(0, placed_at - self.win_length + 1)
            debug.trace(f"{direction.name} run of {len(line)} through ({row}, {col})", "engine")
            return tuple(line[start:start + self.win_length])

        return ()

    def render(self) -> str:
        with self._lock:
            return self.board.render()

    def __str__(self) -> str:
        return self.render()
