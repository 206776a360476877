from __future__ import annotations
from dataclasses import dataclass
from typing import List

from connectfour.config import CENTER_COL
from connectfour.core.board import Board
from connectfour.core.lines import WINDOWS
from connectfour.core.rules import winner
from connectfour.types import Cell, Player, other

WIN_SCORE = 100_000


@dataclass(frozen=True, slots=True)
class ScoreWeights:
    """
    Positional weights. Keep four >> three > two, and three_block >= three
    so an open opponent three costs more than our own three earns.
    """
    center: int = 6
    two: int = 5
    three: int = 16
    three_block: int = 18
    four: int = 1000


DEFAULT_WEIGHTS = ScoreWeights()


def score_window(cells: List[Cell], player: Player, weights: ScoreWeights = DEFAULT_WEIGHTS) -> int:
    opp = other(player)
    p_count = cells.count(player)
    o_count = cells.count(opp)
    e_count = cells.count(None)

    # mixed window: nobody can complete it
    if p_count and o_count:
        return 0

    if p_count == 4:
        return weights.four
    if p_count == 3 and e_count == 1:
        return weights.three
    if p_count == 2 and e_count == 2:
        return weights.two

    if o_count == 4:
        return -weights.four
    if o_count == 3 and e_count == 1:
        return -weights.three_block
    if o_count == 2 and e_count == 2:
        return -weights.two

    return 0


def score(board: Board, player: Player, weights: ScoreWeights = DEFAULT_WEIGHTS) -> int:
    """Desirability of `board` for `player` (the maximizer)."""
    w = winner(board)
    if w == player:
        return WIN_SCORE
    if w is not None:
        return -WIN_SCORE

    g = board.grid
    opp = other(player)
    total = 0

    # center column preference
    for r in range(board.rows):
        cell = g[r][CENTER_COL]
        if cell == player:
            total += weights.center
        elif cell == opp:
            total -= weights.center

    for window in WINDOWS:
        total += score_window([g[r][c] for (r, c) in window], player, weights)

    return total
