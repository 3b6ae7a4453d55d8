"""
Errors raised by the TicTacToe game logic.

All of these point at a bug in the caller (the display let a click through,
an unknown difficulty was configured, ...). They are not meant to be retried.
"""


class TicTacToeError(Exception):
    """Base class for all game logic errors."""


class InvalidMove(TicTacToeError):
    """A mark was placed on an occupied cell, outside the board, or out of turn."""


class ConfigurationError(TicTacToeError):
    """An unrecognized difficulty value was given."""


class EmptyMoveRequest(TicTacToeError):
    """The computer was asked for a move on a board with no empty cells."""
