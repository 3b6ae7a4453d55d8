"""
TicTacToe UI
A graphical interface for playing TicTacToe against the computer using Tkinter.

Shows:
- The 3x3 board (O for the player, X for the computer)
- Game status
- Difficulty level selection
- Reset and Quit buttons
"""

import logging
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from .config import GameConfig
from .game import Display, GameController, Status
from .logic.game_state import GameState
from .logic.marks import Mark

logger = logging.getLogger(__name__)

# Status label text
STATUS_TEXT = {
    Status.PLAYER_TURN: f"Your turn ({GameConfig.PLAYER_SYMBOL})",
    Status.COMPUTER_TURN: f"Computer's turn ({GameConfig.COMPUTER_SYMBOL})",
    Status.PLAYER_WINS: "🏆 You win!",
    Status.COMPUTER_WINS: "🤖 Computer wins!",
    Status.DRAW: "🤝 It's a draw!",
}


class TicTacToeUI(Display):
    """
    Main UI class for TicTacToe.
    """

    def __init__(self, delay_ms: int = GameConfig.COMPUTER_DELAY_MS):
        """
        Initialize the UI.

        Args:
            delay_ms: Pause before the computer's move is shown.
        """
        self.delay_ms = delay_ms
        self.controller: Optional[GameController] = None
        self.interactable = False
        self.game_state: Optional[GameState] = None

        # Create UI
        self._create_ui()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(GameConfig.WINDOW_TITLE)
        self.root.configure(bg=GameConfig.BG_COLOR)
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=GameConfig.BG_COLOR)
        style.configure('TLabel', background=GameConfig.BG_COLOR, foreground='white')
        style.configure('Title.TLabel', font=GameConfig.TITLE_FONT, foreground='#00d4ff')
        style.configure('Status.TLabel', font=GameConfig.STATUS_FONT, foreground='#ffd700')

        ttk.Label(main_frame, text="🎮 TicTacToe", style='Title.TLabel').pack(pady=(0, 10))

        # Board (3x3 grid of buttons)
        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)

        self.board_cells = []
        for position in range(9):
            cell = tk.Button(
                board_frame,
                text="",
                font=GameConfig.CELL_FONT,
                width=3,
                height=1,
                bg=GameConfig.CELL_COLOR,
                fg='white',
                activebackground=GameConfig.CELL_COLOR,
                relief='ridge',
                borderwidth=2,
                command=lambda p=position: self._on_cell_click(p)
            )
            cell.grid(row=position // 3, column=position % 3, padx=2, pady=2)
            self.board_cells.append(cell)

        # Legend
        legend_frame = ttk.Frame(main_frame)
        legend_frame.pack(pady=5)
        ttk.Label(
            legend_frame, text=f"{GameConfig.PLAYER_SYMBOL} = You  ",
            foreground=GameConfig.PLAYER_COLOR
        ).pack(side=tk.LEFT)
        ttk.Label(
            legend_frame, text=f"{GameConfig.COMPUTER_SYMBOL} = Computer",
            foreground=GameConfig.COMPUTER_COLOR
        ).pack(side=tk.LEFT)

        # Game status
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        # Difficulty section
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        ttk.Label(main_frame, text="⚙️ Difficulty", style='Title.TLabel').pack()

        diff_frame = ttk.Frame(main_frame)
        diff_frame.pack(pady=10)

        self.diff_buttons = {}
        for text, value, color in GameConfig.DIFFICULTY_BUTTONS:
            btn = tk.Button(
                diff_frame,
                text=text,
                font=GameConfig.BUTTON_FONT,
                width=8,
                bg='#2d3748',
                fg='white',
                activebackground=color,
                command=lambda v=value: self._set_difficulty(v)
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.diff_buttons[value] = (btn, color)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="🔄 Reset",
            font=GameConfig.BUTTON_FONT,
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="✕ Quit",
            font=GameConfig.BUTTON_FONT,
            bg='#ef4444',
            fg='white',
            width=12,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def attach(self, controller: GameController):
        """Connect the controller and highlight its difficulty."""
        self.controller = controller
        self._highlight_difficulty(controller.difficulty.value)

    # ------------------------------------------------------------------
    # Display interface
    # ------------------------------------------------------------------
    def render(self, game_state: GameState) -> None:
        """Update the board grid."""
        self.game_state = game_state
        winning_line = game_state.winning_line() or ()

        for position, cell in enumerate(self.board_cells):
            mark = game_state.cells[position]

            if mark is Mark.PLAYER:
                symbol, fg_color = GameConfig.PLAYER_SYMBOL, GameConfig.PLAYER_COLOR
            elif mark is Mark.COMPUTER:
                symbol, fg_color = GameConfig.COMPUTER_SYMBOL, GameConfig.COMPUTER_COLOR
            else:
                symbol, fg_color = "", 'white'

            bg_color = GameConfig.HIGHLIGHT_COLOR if position in winning_line else GameConfig.CELL_COLOR
            cell.configure(text=symbol, fg=fg_color, disabledforeground=fg_color, bg=bg_color)

        self._update_cell_states()

    def announce_status(self, status: Status) -> None:
        self.status_label.configure(text=STATUS_TEXT[status])

    def set_interactable(self, enabled: bool) -> None:
        self.interactable = enabled
        self._update_cell_states()

    def defer(self, callback: Callable[[], None]) -> None:
        self.root.after(self.delay_ms, callback)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def _on_cell_click(self, position: int):
        """Forward a click on an empty cell to the controller."""
        if not self.interactable or self.game_state is None:
            return
        if not self.game_state.is_empty(position):
            return
        self.controller.on_player_chooses_position(position)

    def _set_difficulty(self, value: str):
        """Set the computer difficulty level and start a new game."""
        self._highlight_difficulty(value)
        self.controller.on_difficulty_changed(value)

    def _highlight_difficulty(self, value: str):
        for name, (btn, color) in self.diff_buttons.items():
            if name == value:
                btn.configure(bg=color, fg='black')
            else:
                btn.configure(bg='#2d3748', fg='white')

    def _update_cell_states(self):
        """Only empty cells accept clicks, and only on the player's turn."""
        for position, cell in enumerate(self.board_cells):
            clickable = (
                self.interactable
                and self.game_state is not None
                and self.game_state.is_empty(position)
            )
            cell.configure(state='normal' if clickable else 'disabled')

    def _reset_game(self):
        """Reset the game."""
        logger.info("Resetting game...")
        self.controller.on_reset_requested()

    def _quit(self):
        """Quit the application."""
        logger.info("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Start the first game and run the UI main loop."""
        self.controller.start()
        self.root.mainloop()


def run_ui(difficulty: str, delay_ms: int) -> None:
    """Play in a Tkinter window."""
    ui = TicTacToeUI(delay_ms=delay_ms)
    controller = GameController(ui, difficulty)
    ui.attach(controller)
    ui.run()
