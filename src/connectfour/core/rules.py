from __future__ import annotations
from typing import Optional, List, Tuple

from connectfour.core.board import Board
from connectfour.core.lines import Coord, WINDOWS
from connectfour.types import Column, Player


def winner_with_line(board: Board) -> Optional[Tuple[Player, List[Coord]]]:
    g = board.grid
    for window in WINDOWS:
        (r0, c0), (r1, c1), (r2, c2), (r3, c3) = window
        p = g[r0][c0]
        if p and p == g[r1][c1] == g[r2][c2] == g[r3][c3]:
            return p, list(window)
    return None


def winner(board: Board) -> Optional[Player]:
    res = winner_with_line(board)
    return res[0] if res else None


def is_draw(board: Board) -> bool:
    return not board.legal_columns() and winner(board) is None


def legal_columns(board: Board) -> List[Column]:
    return board.legal_columns()
