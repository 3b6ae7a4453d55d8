"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, and the game result.
"""

import logging
from typing import Optional, List
from dataclasses import dataclass, field

from ..config import GameConfig
from .errors import InvalidMove
from .marks import BOARD_CELLS, Mark, Turn
from .move_validator import MoveValidator
from .win_checker import Line, WinChecker

logger = logging.getLogger(__name__)

_validator = MoveValidator()
_win_checker = WinChecker()

# Characters used by render_text()
TEXT_SYMBOLS = {
    Mark.PLAYER: GameConfig.PLAYER_SYMBOL,
    Mark.COMPUTER: GameConfig.COMPUTER_SYMBOL,
}


def _empty_cells() -> List[Mark]:
    return [Mark.EMPTY] * BOARD_CELLS


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The 9 board cells (index = position, row-major)
    - Whose turn it is
    - Game result (winner / draw), after which the board is frozen

    The state holds plain data only. Displays read it to draw the board,
    and the move selector places and removes speculative marks on it.
    """

    cells: List[Mark] = field(default_factory=_empty_cells)

    # Whose turn it is; the human always opens
    turn: Turn = Turn.PLAYER

    # Game result
    winner: Optional[Mark] = None
    is_game_over: bool = False

    def reset(self) -> None:
        """Clear every cell and give the first move to the player."""
        for position in range(BOARD_CELLS):
            self.cells[position] = Mark.EMPTY
        self.turn = Turn.PLAYER
        self.winner = None
        self.is_game_over = False

    def available_positions(self) -> List[int]:
        """
        Get all empty positions.

        Returns:
            Empty positions in ascending order. An empty list means the board is full.
        """
        return [position for position, mark in enumerate(self.cells) if mark is Mark.EMPTY]

    def place(self, position: int, mark: Mark) -> None:
        """
        Put ``mark`` on an empty cell.

        Raises:
            InvalidMove: if the cell is taken, out of range, or the game is over.
        """
        result = _validator.validate_place(self.cells, position, mark, self.is_game_over)
        if not result.is_valid:
            raise InvalidMove(result.error_message)
        self.cells[position] = mark

    def remove(self, position: int) -> None:
        """
        Clear a cell again. Used by the search to undo speculative moves.

        Raises:
            InvalidMove: if the cell is out of range or already empty.
        """
        result = _validator.validate_remove(self.cells, position)
        if not result.is_valid:
            raise InvalidMove(result.error_message)
        self.cells[position] = Mark.EMPTY

    def check_win(self, mark: Mark) -> bool:
        """True if ``mark`` fills any winning line."""
        return _win_checker.check_win(self.cells, mark)

    def is_draw(self) -> bool:
        """True if the board is full and nobody has won."""
        return _win_checker.check_draw(self.cells)

    def is_empty(self, position: int) -> bool:
        return self.cells[position] is Mark.EMPTY

    def update_result(self) -> "GameState":
        """
        Record the winner or the draw and freeze the board if the game ended.

        Returns:
            This game state, for chaining.
        """
        winner = _win_checker.check_winner(self.cells)

        if winner is not None:
            self.winner = winner
            self.is_game_over = True
            logger.info("Game over: %s wins", winner.value)
        elif _win_checker.check_draw(self.cells):
            self.is_game_over = True
            logger.info("Game over: draw")

        return self

    def winning_line(self) -> Optional[Line]:
        """The completed line as a position triple, or None."""
        return _win_checker.get_winning_line(self.cells)

    def copy(self) -> "GameState":
        """Create an independent copy of the game state."""
        return GameState(
            cells=list(self.cells),
            turn=self.turn,
            winner=self.winner,
            is_game_over=self.is_game_over
        )

    def render_text(self) -> str:
        """
        Draw the board as text. Empty cells show their 1-based number
        so a console player knows what to type.
        """
        rows = []
        for row in range(3):
            symbols = []
            for col in range(3):
                position = row * 3 + col
                mark = self.cells[position]
                symbols.append(str(position + 1) if mark is Mark.EMPTY else TEXT_SYMBOLS[mark])
            rows.append(" " + " | ".join(symbols))
        return "\n---+---+---\n".join(rows)

    @classmethod
    def from_positions(cls, player=(), computer=(), turn: Turn = Turn.COMPUTER) -> "GameState":
        """
        Build a state with marks already on the board.

        Args:
            player: Positions holding the player's mark.
            computer: Positions holding the computer's mark.
            turn: Whose turn it is.
        """
        state = cls(turn=turn)
        for position in player:
            state.place(position, Mark.PLAYER)
        for position in computer:
            state.place(position, Mark.COMPUTER)
        return state
