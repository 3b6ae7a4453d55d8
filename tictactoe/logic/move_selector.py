"""
Computer opponent for TicTacToe.
Picks the computer's move at one of three difficulty levels.
"""

import logging
import random
from enum import Enum
from typing import Optional, Union

from .errors import ConfigurationError, EmptyMoveRequest
from .game_state import GameState
from .marks import Mark

logger = logging.getLogger(__name__)


class Difficulty(Enum):
    """Computer difficulty levels."""
    EASY = "easy"        # Random moves
    NORMAL = "normal"    # Win, then block, then random
    HARD = "hard"        # Full minimax

    @classmethod
    def parse(cls, value: Union["Difficulty", str]) -> "Difficulty":
        """
        Turn a difficulty name into a Difficulty.

        Raises:
            ConfigurationError: for anything other than easy, normal or hard.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value.strip().lower())
        except (AttributeError, ValueError):
            choices = ", ".join(level.value for level in cls)
            raise ConfigurationError(
                f"Unknown difficulty {value!r}. Choose one of: {choices}"
            ) from None


# Terminal scores, seen from the computer's side.
# No depth bonus: a win is a win however long it takes.
WIN_SCORE = 1
LOSS_SCORE = -1
DRAW_SCORE = 0


class MoveSelector:
    """
    Chooses the computer's move.

    - EASY picks any empty cell at random.
    - NORMAL takes a winning cell, otherwise blocks the player's winning
      cell, otherwise plays randomly.
    - HARD runs a full minimax search and never loses.

    Every strategy tries moves by placing a mark on the given state and
    removing it again, so the board is unchanged when a move is returned.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize the move selector.

        Args:
            rng: Random source for EASY moves and the NORMAL fallback.
        """
        self.rng = rng or random.Random()

        # How many positions the last HARD search visited (for debugging)
        self.positions_evaluated = 0

    def select_move(self, game_state: GameState, difficulty: Union[Difficulty, str]) -> int:
        """
        Get the computer's move for the current position.

        Args:
            game_state: Current game state.
            difficulty: Difficulty level (or its name).

        Returns:
            The position (0-8) the computer should play.

        Raises:
            ConfigurationError: if the difficulty is not recognized.
            EmptyMoveRequest: if the board has no empty cells or the game
                is already won.
        """
        difficulty = Difficulty.parse(difficulty)

        if not game_state.available_positions():
            raise EmptyMoveRequest("No empty cells left for the computer to play")
        if (game_state.is_game_over
                or game_state.check_win(Mark.COMPUTER)
                or game_state.check_win(Mark.PLAYER)):
            raise EmptyMoveRequest("Game is already over, there is no move to make")

        if difficulty is Difficulty.EASY:
            move = self.get_easy_move(game_state)
        elif difficulty is Difficulty.NORMAL:
            move = self.get_normal_move(game_state)
        else:
            move = self.get_hard_move(game_state)

        logger.debug("Computer (%s) plays %d", difficulty.value, move)
        return move

    def get_easy_move(self, game_state: GameState) -> int:
        """Get a random empty cell."""
        return self.rng.choice(game_state.available_positions())

    def get_normal_move(self, game_state: GameState) -> int:
        """Win if possible, otherwise block, otherwise play randomly."""
        winning_move = self.find_winning_move(game_state, Mark.COMPUTER)
        if winning_move is not None:
            return winning_move

        blocking_move = self.find_winning_move(game_state, Mark.PLAYER)
        if blocking_move is not None:
            return blocking_move

        return self.get_easy_move(game_state)

    def find_winning_move(self, game_state: GameState, mark: Mark) -> Optional[int]:
        """
        Find the first empty cell where ``mark`` would complete a line.

        Args:
            game_state: Current game state.
            mark: Whose win to look for.

        Returns:
            The lowest such position, or None.
        """
        for position in game_state.available_positions():
            # Try this move, then take it back
            game_state.place(position, mark)
            wins = game_state.check_win(mark)
            game_state.remove(position)

            if wins:
                return position
        return None

    def get_hard_move(self, game_state: GameState) -> int:
        """
        Get the best move using minimax.

        Ties go to the lowest position, since only a strictly better
        score replaces the current best.
        """
        self.positions_evaluated = 0

        best_score = float('-inf')
        best_move = None

        for position in game_state.available_positions():
            game_state.place(position, Mark.COMPUTER)
            score = self._minimax(game_state, is_maximizing=False)
            game_state.remove(position)

            if score > best_score:
                best_score = score
                best_move = position

        logger.debug(
            "Minimax evaluated %d positions. Best move: %d (score: %d)",
            self.positions_evaluated, best_move, best_score
        )
        return best_move

    def _minimax(self, game_state: GameState, is_maximizing: bool) -> int:
        """
        Minimax over the full game tree, no depth limit and no pruning.

        Args:
            game_state: Current state to evaluate.
            is_maximizing: True if it is the computer's turn.

        Returns:
            The score of the position: WIN_SCORE, LOSS_SCORE or DRAW_SCORE.
        """
        self.positions_evaluated += 1

        # Check terminal states
        if game_state.check_win(Mark.COMPUTER):
            return WIN_SCORE
        if game_state.check_win(Mark.PLAYER):
            return LOSS_SCORE
        if game_state.is_draw():
            return DRAW_SCORE

        if is_maximizing:
            max_score = LOSS_SCORE - 1
            for position in game_state.available_positions():
                game_state.place(position, Mark.COMPUTER)
                score = self._minimax(game_state, False)
                game_state.remove(position)
                max_score = max(max_score, score)
            return max_score
        else:
            min_score = WIN_SCORE + 1
            for position in game_state.available_positions():
                game_state.place(position, Mark.PLAYER)
                score = self._minimax(game_state, True)
                game_state.remove(position)
                min_score = min(min_score, score)
            return min_score


def select_move(
    game_state: GameState,
    difficulty: Union[Difficulty, str],
    rng: Optional[random.Random] = None
) -> int:
    """Shortcut for ``MoveSelector(rng).select_move(game_state, difficulty)``."""
    return MoveSelector(rng).select_move(game_state, difficulty)


# Quick test
if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    selector = MoveSelector()

    # Player (O) is about to win with 2, computer (X) must block
    game = GameState.from_positions(player=[0, 1], computer=[4])
    print(game.render_text())
    move = selector.select_move(game, Difficulty.HARD)
    print(f"\nComputer blocks at {move}")
    assert move == 2, f"Expected 2, got {move}"
