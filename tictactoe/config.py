"""
Configuration for the TicTacToe game.
Defaults for the computer opponent and the look of the displays.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Command line flags override the difficulty and the delay.
    """

    # ==================== COMPUTER SETTINGS ====================
    # One of "easy", "normal", "hard"
    DEFAULT_DIFFICULTY = "normal"

    # Pause before the computer's move is shown (milliseconds)
    COMPUTER_DELAY_MS = 800

    # ==================== SYMBOLS ====================
    PLAYER_SYMBOL = "O"
    COMPUTER_SYMBOL = "X"

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "TicTacToe"

    BG_COLOR = '#1a1a2e'
    CELL_COLOR = '#16213e'
    PLAYER_COLOR = '#10b981'
    COMPUTER_COLOR = '#f87171'
    HIGHLIGHT_COLOR = '#ffd700'

    FONT_FAMILY = 'Segoe UI'
    CELL_FONT = (FONT_FAMILY, 28, 'bold')
    TITLE_FONT = (FONT_FAMILY, 16, 'bold')
    STATUS_FONT = (FONT_FAMILY, 12)
    BUTTON_FONT = (FONT_FAMILY, 10, 'bold')

    # Difficulty buttons: (label, value, color)
    DIFFICULTY_BUTTONS = [
        ("Easy", "easy", "#4ade80"),
        ("Normal", "normal", "#fbbf24"),
        ("Hard", "hard", "#f87171"),
    ]
