"""
Tests for turn orchestration, the text display and the command line.
"""

import io
import random

import pytest

from tictactoe.console import ConsoleDisplay
from tictactoe.game import Display, GameController, Status
from tictactoe.logic import ConfigurationError, Difficulty, GameState, InvalidMove, Mark, Turn
from tictactoe.main import build_parser, main


class RecordingDisplay(Display):
    """Display that records what the controller told it."""

    def __init__(self, hold_computer_turn: bool = False):
        self.hold_computer_turn = hold_computer_turn
        self.statuses = []
        self.renders = 0
        self.interactable = None
        self.pending = []

    def render(self, game_state):
        self.renders += 1

    def announce_status(self, status):
        self.statuses.append(status)

    def set_interactable(self, enabled):
        self.interactable = enabled

    def defer(self, callback):
        if self.hold_computer_turn:
            self.pending.append(callback)
        else:
            callback()

    def run_pending(self):
        callbacks, self.pending = self.pending, []
        for callback in callbacks:
            callback()


def make_controller(difficulty="hard", hold=False):
    display = RecordingDisplay(hold_computer_turn=hold)
    controller = GameController(display, difficulty, rng=random.Random(7))
    controller.start()
    return controller, display


# ==================== CONTROLLER ====================

def test_start_announces_player_turn():
    controller, display = make_controller()

    assert display.statuses == [Status.PLAYER_TURN]
    assert display.interactable is True
    assert display.renders == 1
    assert controller.game_state.cells == [Mark.EMPTY] * 9


def test_unknown_difficulty_is_rejected():
    with pytest.raises(ConfigurationError):
        GameController(RecordingDisplay(), "medium")


def test_player_move_gets_a_computer_reply():
    controller, display = make_controller("hard")

    controller.on_player_chooses_position(0)

    cells = controller.game_state.cells
    assert cells[0] is Mark.PLAYER
    assert cells[4] is Mark.COMPUTER
    assert cells.count(Mark.EMPTY) == 7
    assert display.statuses[-2:] == [Status.COMPUTER_TURN, Status.PLAYER_TURN]
    assert display.interactable is True
    assert controller.game_state.turn is Turn.PLAYER


def test_board_is_locked_while_computer_waits():
    controller, display = make_controller(hold=True)

    controller.on_player_chooses_position(4)

    assert display.statuses[-1] is Status.COMPUTER_TURN
    assert display.interactable is False
    assert controller.game_state.turn is Turn.COMPUTER
    assert len(display.pending) == 1

    with pytest.raises(InvalidMove):
        controller.on_player_chooses_position(0)

    display.run_pending()

    assert display.statuses[-1] is Status.PLAYER_TURN
    assert display.interactable is True
    assert controller.game_state.cells.count(Mark.COMPUTER) == 1


def test_reset_during_pause_drops_the_computer_move():
    controller, display = make_controller(hold=True)
    controller.on_player_chooses_position(4)

    controller.on_reset_requested()
    display.run_pending()

    assert controller.game_state.cells == [Mark.EMPTY] * 9
    assert controller.game_state.turn is Turn.PLAYER
    assert display.statuses[-1] is Status.PLAYER_TURN
    assert display.interactable is True


def test_reply_from_before_a_reset_does_not_move_in_the_new_game():
    controller, display = make_controller(hold=True)
    controller.on_player_chooses_position(4)
    controller.on_reset_requested()
    controller.on_player_chooses_position(0)
    stale_reply, fresh_reply = display.pending

    stale_reply()

    assert controller.game_state.cells.count(Mark.COMPUTER) == 0
    assert controller.game_state.turn is Turn.COMPUTER
    assert display.interactable is False

    fresh_reply()

    assert controller.game_state.cells.count(Mark.COMPUTER) == 1
    assert controller.game_state.turn is Turn.PLAYER
    assert display.statuses[-1] is Status.PLAYER_TURN


def test_reply_from_before_a_difficulty_change_is_ignored():
    controller, display = make_controller("easy", hold=True)
    controller.on_player_chooses_position(4)
    controller.on_difficulty_changed("hard")
    controller.on_player_chooses_position(0)

    display.pending[0]()

    assert controller.game_state.cells.count(Mark.COMPUTER) == 0

    display.pending[1]()

    assert controller.game_state.cells[4] is Mark.COMPUTER


def test_player_win_ends_the_game():
    controller, display = make_controller(hold=True)
    controller.game_state = GameState.from_positions(player=[0, 1], computer=[3, 4], turn=Turn.PLAYER)

    controller.on_player_chooses_position(2)

    assert display.statuses[-1] is Status.PLAYER_WINS
    assert display.interactable is False
    assert display.pending == []
    assert controller.game_state.is_game_over
    assert controller.game_state.winner is Mark.PLAYER

    with pytest.raises(InvalidMove):
        controller.on_player_chooses_position(5)


def test_computer_win_ends_the_game():
    controller, display = make_controller("normal")
    controller.game_state = GameState.from_positions(player=[0, 1], computer=[3, 4], turn=Turn.PLAYER)

    controller.on_player_chooses_position(8)

    assert controller.game_state.cells[5] is Mark.COMPUTER
    assert display.statuses[-1] is Status.COMPUTER_WINS
    assert display.interactable is False
    assert controller.game_state.winner is Mark.COMPUTER


def test_filling_the_board_is_a_draw():
    controller, display = make_controller(hold=True)
    controller.game_state = GameState.from_positions(
        player=[0, 2, 3, 7], computer=[1, 4, 5, 6], turn=Turn.PLAYER
    )

    controller.on_player_chooses_position(8)

    assert display.statuses[-1] is Status.DRAW
    assert display.interactable is False
    assert display.pending == []
    assert controller.game_state.is_game_over
    assert controller.game_state.winner is None


def test_computer_reply_can_draw():
    controller, display = make_controller("hard")
    # O X O / O X _ / X O _ with the player about to take 8
    controller.game_state = GameState.from_positions(
        player=[0, 2, 3, 7], computer=[1, 4, 6], turn=Turn.PLAYER
    )

    controller.on_player_chooses_position(8)

    assert controller.game_state.cells[5] is Mark.COMPUTER
    assert display.statuses[-1] is Status.DRAW


def test_occupied_cell_is_an_invalid_move():
    controller, _ = make_controller(hold=True)
    controller.game_state = GameState.from_positions(player=[0], computer=[4], turn=Turn.PLAYER)

    with pytest.raises(InvalidMove):
        controller.on_player_chooses_position(4)


def test_difficulty_change_starts_a_new_game():
    controller, display = make_controller("easy", hold=True)
    controller.on_player_chooses_position(0)

    controller.on_difficulty_changed("hard")

    assert controller.difficulty is Difficulty.HARD
    assert controller.game_state.cells == [Mark.EMPTY] * 9
    assert display.statuses[-1] is Status.PLAYER_TURN


def test_bad_difficulty_change_keeps_the_game():
    controller, _ = make_controller("easy")
    controller.on_player_chooses_position(0)
    before = controller.game_state.copy()

    with pytest.raises(ConfigurationError):
        controller.on_difficulty_changed("expert")

    assert controller.difficulty is Difficulty.EASY
    assert controller.game_state == before


def test_hard_controller_never_loses_a_full_game():
    for seed in range(10):
        rng = random.Random(seed)
        controller, display = make_controller("hard")

        while not controller.game_state.is_game_over:
            controller.on_player_chooses_position(rng.choice(controller.game_state.available_positions()))

        assert display.statuses[-1] in (Status.COMPUTER_WINS, Status.DRAW)


# ==================== CONSOLE ====================

def run_console(commands, difficulty="hard"):
    stdout = io.StringIO()
    display = ConsoleDisplay(delay_ms=0, stdin=io.StringIO(commands), stdout=stdout)
    controller = GameController(display, difficulty, rng=random.Random(3))
    display.attach(controller)
    display.run()
    return controller, stdout.getvalue()


def test_console_plays_a_move():
    controller, output = run_console("1\nq\n")

    assert controller.game_state.cells[0] is Mark.PLAYER
    assert controller.game_state.cells[4] is Mark.COMPUTER
    assert ">> computer's turn" in output
    assert output.rstrip().endswith("Bye!")


def test_console_reports_taken_cell():
    controller, output = run_console("5\n5\n")

    assert "Can't play there" in output
    assert controller.game_state.cells.count(Mark.PLAYER) == 1


def test_console_reports_bad_number():
    _, output = run_console("0\n10\n")

    assert output.count("Can't play there") == 2


def test_console_treats_non_ascii_digits_as_unknown():
    controller, output = run_console("\u00b2\n\u0665\nq\n")

    assert output.count("Commands:") == 3
    assert controller.game_state.cells == [Mark.EMPTY] * 9
    assert output.rstrip().endswith("Bye!")


def test_console_changes_difficulty_and_resets():
    controller, output = run_console("e\n5\nr\n")

    assert controller.difficulty is Difficulty.EASY
    assert "Difficulty: easy" in output
    assert controller.game_state.cells == [Mark.EMPTY] * 9


def test_console_unknown_command_shows_help():
    _, output = run_console("what\n")

    assert output.count("Commands:") == 2


def test_console_refuses_moves_after_game_over():
    # Type every cell twice; hard wins early and the rest are refused
    controller, output = run_console("1\n2\n3\n4\n5\n6\n7\n8\n9\n" * 2)

    assert controller.game_state.is_game_over
    assert "Game over. Press r to play again." in output


def test_console_run_requires_attach():
    with pytest.raises(RuntimeError):
        ConsoleDisplay(stdin=io.StringIO("")).run()


# ==================== COMMAND LINE ====================

def test_parser_defaults():
    args = build_parser().parse_args([])

    assert args.difficulty == "normal"
    assert args.delay == 800
    assert not args.text


def test_parser_rejects_unknown_difficulty():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--difficulty", "medium"])


def test_main_rejects_negative_delay():
    with pytest.raises(SystemExit):
        main(["--text", "--delay", "-5"])


def test_main_text_mode(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\nq\n"))

    main(["--text", "--delay", "0", "--difficulty", "hard"])

    output = capsys.readouterr().out
    assert "Difficulty: hard" in output
    assert ">> player's turn" in output
    assert "Bye!" in output
