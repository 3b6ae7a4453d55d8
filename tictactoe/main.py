"""
Main entry point for TicTacToe.

Run this to play against the computer, in a window or in the terminal:

    tictactoe --difficulty hard
    tictactoe --text --delay 0
"""

import argparse
import logging

from . import __version__
from .config import GameConfig
from .logic.move_selector import Difficulty


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="TicTacToe against the computer")
    parser.add_argument(
        "--difficulty",
        choices=[level.value for level in Difficulty],
        default=GameConfig.DEFAULT_DIFFICULTY,
        help="Computer difficulty (default: %(default)s)"
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=GameConfig.COMPUTER_DELAY_MS,
        metavar="MS",
        help="Pause before the computer's move, in milliseconds (default: %(default)s)"
    )
    parser.add_argument(
        "--text",
        action="store_true",
        help="Play in the terminal instead of a window"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log search statistics and every move"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.delay < 0:
        build_parser().error("--delay must not be negative")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    print("\n" + "="*60)
    print("   TicTacToe")
    print("="*60)
    print(f"   Mode: {'Text' if args.text else 'Window'}")
    print(f"   Difficulty: {args.difficulty}")
    print("="*60 + "\n")

    if args.text:
        from .console import run_console
        run_console(args.difficulty, args.delay)
    else:
        from .ui import run_ui
        run_ui(args.difficulty, args.delay)


if __name__ == "__main__":
    main()
