"""
Marks and turns for TicTacToe.

Positions are integers 0-8 indexing the 3x3 grid row by row:

     0 | 1 | 2
    ---+---+---
     3 | 4 | 5
    ---+---+---
     6 | 7 | 8
"""

from enum import Enum

# Number of cells on the 3x3 board
BOARD_CELLS = 9


class Mark(Enum):
    """What a single cell holds."""
    EMPTY = "empty"
    PLAYER = "player"
    COMPUTER = "computer"


class Turn(Enum):
    """Whose turn it is."""
    PLAYER = "player"
    COMPUTER = "computer"
