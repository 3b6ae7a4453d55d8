"""
Text display for TicTacToe.
Plays the game in a terminal: type 1-9 to place your mark.
"""

import sys
import time
from typing import Callable, Optional, TextIO

from .config import GameConfig
from .game import Display, GameController, Status
from .logic.errors import InvalidMove
from .logic.game_state import GameState

HELP_TEXT = "Commands: 1-9 place mark, e/n/h difficulty, r reset, q quit"

DIFFICULTY_KEYS = {
    "e": "easy",
    "n": "normal",
    "h": "hard",
}


class ConsoleDisplay(Display):
    """
    Display that prints to a text stream and reads commands from another.
    """

    def __init__(
        self,
        delay_ms: int = GameConfig.COMPUTER_DELAY_MS,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None
    ):
        """
        Args:
            delay_ms: Pause before the computer's move is shown.
            stdin: Where commands are read from (default: sys.stdin).
            stdout: Where the board is printed (default: sys.stdout).
        """
        self.delay_ms = delay_ms
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.interactable = False
        self.controller: Optional[GameController] = None

    def attach(self, controller: GameController) -> None:
        self.controller = controller

    # ------------------------------------------------------------------
    # Display interface
    # ------------------------------------------------------------------
    def render(self, game_state: GameState) -> None:
        self._print("")
        self._print(game_state.render_text())
        self._print("")

    def announce_status(self, status: Status) -> None:
        self._print(f">> {status.value}")

    def set_interactable(self, enabled: bool) -> None:
        self.interactable = enabled

    def defer(self, callback: Callable[[], None]) -> None:
        if self.delay_ms > 0:
            time.sleep(self.delay_ms / 1000)
        callback()

    # ------------------------------------------------------------------
    # Input loop
    # ------------------------------------------------------------------
    def run(self) -> None:
        """Read commands until 'q' or end of input."""
        if self.controller is None:
            raise RuntimeError("ConsoleDisplay.run() called before attach()")

        self._print(HELP_TEXT)
        self.controller.start()

        for line in self.stdin:
            command = line.strip().lower()
            if command == "q":
                break
            self.handle_command(command)

        self._print("Bye!")

    def handle_command(self, command: str) -> None:
        """Forward one typed command to the controller."""
        if not command:
            return

        if command == "r":
            self.controller.on_reset_requested()
        elif command in DIFFICULTY_KEYS:
            self._print(f"Difficulty: {DIFFICULTY_KEYS[command]}")
            self.controller.on_difficulty_changed(DIFFICULTY_KEYS[command])
        elif command.isdecimal() and command.isascii():
            if not self.interactable:
                self._print("Game over. Press r to play again.")
                return
            try:
                self.controller.on_player_chooses_position(int(command) - 1)
            except InvalidMove as e:
                # Typed input can name a taken cell, a click never can
                self._print(f"Can't play there: {e}")
        else:
            self._print(HELP_TEXT)

    def _print(self, text: str) -> None:
        print(text, file=self.stdout)


def run_console(difficulty: str, delay_ms: int) -> None:
    """Play in the terminal."""
    display = ConsoleDisplay(delay_ms=delay_ms)
    controller = GameController(display, difficulty)
    display.attach(controller)
    display.run()
