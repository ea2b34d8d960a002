"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation, the move result types
and the game engine that enforces turn order and detects wins and draws.
"""

from connectfour.game.board import Board
from connectfour.game.outcome import MoveOutcome, MoveResult
from connectfour.game.engine import GameEngine

__all__ = ['Board', 'MoveOutcome', 'MoveResult', 'GameEngine']
