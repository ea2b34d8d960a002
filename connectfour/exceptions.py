"""
exceptions.py - Exception types raised by the Connect Four engine

Rejected moves are not exceptions: they come back as a MoveResult.
The classes here cover bad construction arguments and engine bugs.
"""


class ConnectFourError(Exception):
    """Base class for all connectfour exceptions."""


class EngineConfigError(ConnectFourError, ValueError):
    """Raised when an engine or board is constructed with invalid settings."""


class EngineInvariantError(ConnectFourError, RuntimeError):
    """
    Raised when the engine detects an internal inconsistency.

    This never happens through valid API usage; it indicates a bug in
    the bounds or gravity bookkeeping.
    """
