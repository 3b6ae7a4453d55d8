"""
Turn orchestration for TicTacToe.

This module ties together:
- The game state (board, turn, result)
- The move selector (computer opponent)
- A display that shows the board and forwards the player's clicks

Game flow:
1. Player picks an empty cell
2. Controller places the player's mark and checks for a win or draw
3. Display pauses, then the controller asks the move selector for a reply
4. Controller places the computer's mark and checks again
5. Repeat until someone wins or it's a draw
"""

import functools
import logging
import random
from enum import Enum
from typing import Callable, Optional, Union

from .config import GameConfig
from .logic.errors import InvalidMove
from .logic.game_state import GameState
from .logic.marks import Mark, Turn
from .logic.move_selector import Difficulty, MoveSelector

logger = logging.getLogger(__name__)


class Status(Enum):
    """Messages announced to the display."""
    PLAYER_TURN = "player's turn"
    COMPUTER_TURN = "computer's turn"
    PLAYER_WINS = "player wins"
    COMPUTER_WINS = "computer wins"
    DRAW = "draw"


class Display:
    """
    What the controller needs from a display.

    Subclasses draw the board however they like and call the controller's
    ``on_*`` methods when the player does something.
    """

    def render(self, game_state: GameState) -> None:
        """Show the current mark at each position."""
        raise NotImplementedError

    def announce_status(self, status: Status) -> None:
        """Show whose turn it is or how the game ended."""
        raise NotImplementedError

    def set_interactable(self, enabled: bool) -> None:
        """Allow or block the player's clicks."""
        raise NotImplementedError

    def defer(self, callback: Callable[[], None]) -> None:
        """
        Run ``callback`` after the display's pause before the computer moves.
        The callback must always run eventually.
        """
        raise NotImplementedError


class GameController:
    """
    Runs one game after another between the player and the computer.

    The controller is the only writer of the game state. The display blocks
    the player's clicks while the computer is thinking.
    """

    def __init__(
        self,
        display: Display,
        difficulty: Union[Difficulty, str] = GameConfig.DEFAULT_DIFFICULTY,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the controller.

        Args:
            display: Where to show the game.
            difficulty: Starting difficulty level.
            rng: Random source for the computer (seed it in tests).

        Raises:
            ConfigurationError: if the difficulty is not recognized.
        """
        self.display = display
        self.difficulty = Difficulty.parse(difficulty)
        self.game_state = GameState()
        self.selector = MoveSelector(rng)

        # Bumped by start(); a deferred reply from an older game is ignored
        self._game_id = 0

    # ------------------------------------------------------------------
    # Inbound events (display -> core)
    # ------------------------------------------------------------------
    def start(self) -> None:
        """Start a fresh game."""
        self._game_id += 1
        self.game_state.reset()
        logger.info("New game (difficulty: %s)", self.difficulty.value)

        self.display.render(self.game_state)
        self.display.announce_status(Status.PLAYER_TURN)
        self.display.set_interactable(True)

    def on_reset_requested(self) -> None:
        """Abandon the current game and start a new one."""
        self.start()

    def on_difficulty_changed(self, level: Union[Difficulty, str]) -> None:
        """
        Switch difficulty and start over.

        Raises:
            ConfigurationError: if the level is not recognized.
        """
        self.difficulty = Difficulty.parse(level)
        logger.info("Difficulty set to: %s", self.difficulty.value)
        self.start()

    def on_player_chooses_position(self, position: int) -> None:
        """
        Handle the player's click on a cell.

        Raises:
            InvalidMove: if it's not the player's turn, the game is over,
                or the cell is taken.
        """
        if self.game_state.is_game_over:
            raise InvalidMove("Game is already over!")
        if self.game_state.turn is not Turn.PLAYER:
            raise InvalidMove("It's not the player's turn!")

        self.game_state.place(position, Mark.PLAYER)
        logger.debug("Player plays %d", position)

        if self._finish_move(Mark.PLAYER):
            return

        self.game_state.turn = Turn.COMPUTER
        self.display.announce_status(Status.COMPUTER_TURN)
        self.display.set_interactable(False)
        self.display.defer(functools.partial(self.play_computer_turn, self._game_id))

    def play_computer_turn(self, game_id: Optional[int] = None) -> None:
        """
        Place the computer's reply. Called by the display after its pause.

        Args:
            game_id: The game the reply was scheduled in. A reply from a
                game that has since been reset does nothing.
        """
        if game_id is not None and game_id != self._game_id:
            logger.debug("Computer turn skipped, game was reset while waiting")
            return
        if self.game_state.is_game_over or self.game_state.turn is not Turn.COMPUTER:
            logger.debug("Computer turn skipped, not waiting on the computer")
            return

        move = self.selector.select_move(self.game_state, self.difficulty)
        self.game_state.place(move, Mark.COMPUTER)

        if self._finish_move(Mark.COMPUTER):
            return

        self.game_state.turn = Turn.PLAYER
        self.display.announce_status(Status.PLAYER_TURN)
        self.display.set_interactable(True)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _finish_move(self, mark: Mark) -> bool:
        """
        Render the board and end the game if ``mark`` just won or filled it.

        Returns:
            True if the game is over.
        """
        self.display.render(self.game_state)
        self.game_state.update_result()

        if not self.game_state.is_game_over:
            return False

        if self.game_state.winner is None:
            self.display.announce_status(Status.DRAW)
        elif mark is Mark.PLAYER:
            self.display.announce_status(Status.PLAYER_WINS)
        else:
            self.display.announce_status(Status.COMPUTER_WINS)
        self.display.set_interactable(False)
        return True
