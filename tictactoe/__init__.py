"""
TicTacToe vs Computer
=====================
A tic-tac-toe game where a human plays against the computer.
The computer has three difficulty levels: easy (random moves),
normal (win, then block, then random) and hard (full minimax search).

The human always plays O and moves first; the computer plays X.
"""

__version__ = "1.0.0"
