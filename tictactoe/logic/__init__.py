"""
Logic module for TicTacToe.
Handles board state, rules, and the computer opponent.
"""

from .errors import TicTacToeError, InvalidMove, ConfigurationError, EmptyMoveRequest
from .marks import BOARD_CELLS, Mark, Turn
from .game_state import GameState
from .move_validator import MoveValidator
from .win_checker import WinChecker, WINNING_LINES
from .move_selector import Difficulty, MoveSelector, select_move
