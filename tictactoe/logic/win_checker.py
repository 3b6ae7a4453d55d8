"""
Win checker for TicTacToe.
Checks if a mark has won or if the game is a draw.
"""

from typing import Optional, Sequence, Tuple

from .marks import Mark

Line = Tuple[int, int, int]

# All possible winning lines (as position triples)
WINNING_LINES: Tuple[Line, ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells holding the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def check_win(self, cells: Sequence[Mark], mark: Mark) -> bool:
        """
        Check if ``mark`` fills any winning line.

        Args:
            cells: The 9 board cells.
            mark: The mark to test (PLAYER or COMPUTER).

        Returns:
            True if some line is fully occupied by ``mark``.
        """
        # Hot path for the minimax search, keep it flat
        for a, b, c in self.WINNING_LINES:
            if cells[a] is mark and cells[b] is mark and cells[c] is mark:
                return True
        return False

    def check_winner(self, cells: Sequence[Mark]) -> Optional[Mark]:
        """Return the winning mark, or None if nobody has won yet."""
        for mark in (Mark.PLAYER, Mark.COMPUTER):
            if self.check_win(cells, mark):
                return mark
        return None

    def check_draw(self, cells: Sequence[Mark]) -> bool:
        """
        Check if the game is a draw.

        A draw means every cell is filled and neither side has a line.
        Callers check for a win first, so a full board with a winning
        line is never reported as a draw.
        """
        if Mark.EMPTY in cells:
            return False
        return self.check_winner(cells) is None

    def get_winning_line(self, cells: Sequence[Mark]) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as a position triple, or None.
        """
        for line in self.WINNING_LINES:
            a, b, c = line
            if cells[a] is not Mark.EMPTY and cells[a] is cells[b] is cells[c]:
                return line
        return None
