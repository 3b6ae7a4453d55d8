"""
Move validator for TicTacToe.
Validates that placing or removing a mark follows the rules.
"""

from typing import Optional, Sequence
from dataclasses import dataclass

from .marks import BOARD_CELLS, Mark


@dataclass(frozen=True)
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


# Shared result for the common case, the search validates a lot of moves
VALID = ValidationResult(is_valid=True)


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Positions must be 0-8
    2. Can only place on empty cells, and only a real mark
    3. Nothing can be placed once the game is over
    4. Only occupied cells can be cleared
    """

    def validate_place(
        self,
        cells: Sequence[Mark],
        position: int,
        mark: Mark,
        is_game_over: bool = False
    ) -> ValidationResult:
        """
        Validate placing ``mark`` at ``position``.

        Args:
            cells: Current board cells.
            position: Cell index (0-8).
            mark: The mark to place.
            is_game_over: True once a win or draw has been recorded.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if mark is Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message="Cannot place an empty mark; use remove() instead"
            )

        range_check = self._check_range(position)
        if not range_check.is_valid:
            return range_check

        if cells[position] is not Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {position} is already occupied by {cells[position].value}"
            )

        return VALID

    def validate_remove(self, cells: Sequence[Mark], position: int) -> ValidationResult:
        """Validate clearing the mark at ``position``."""
        range_check = self._check_range(position)
        if not range_check.is_valid:
            return range_check

        if cells[position] is Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {position} is already empty"
            )

        return VALID

    def _check_range(self, position: int) -> ValidationResult:
        if not isinstance(position, int) or not 0 <= position < BOARD_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {position!r}. Must be 0-{BOARD_CELLS - 1}."
            )
        return VALID
