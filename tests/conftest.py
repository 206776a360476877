"""Shared fixtures."""

import random

import pytest

from connectfour.core.board import Board
from connectfour.core.rules import winner
from connectfour.types import other

# Full board with no four-in-a-row anywhere.
DRAW_ROWS = [
    "XOXOXOX",
    "XOXOXOX",
    "OXOXOXO",
    "OXOXOXO",
    "XOXOXOX",
    "XOXOXOX",
]


@pytest.fixture
def draw_rows():
    return list(DRAW_ROWS)


@pytest.fixture
def random_board():
    """Factory: a position reached by `plies` random legal moves, never a finished game."""

    def make(seed: int, plies: int):
        rng = random.Random(seed)
        board = Board()
        player = "X"
        for _ in range(plies):
            moves = board.legal_columns()
            rng.shuffle(moves)
            for c in moves:
                board.place(c, player)
                if winner(board) is None:
                    break
                board.remove_top(c)
            else:
                break
            player = other(player)
        return board, player

    return make
