"""Tests for the alpha-beta search."""

import random
from math import inf

import pytest

from connectfour.ai.search import (
    SearchStats,
    center_out,
    iterative_search,
    order_columns,
    search,
    search_root,
    terminal_score,
)
from connectfour.core.board import Board
from connectfour.core.scoring import WIN_SCORE, ScoreWeights, score


O_WINS_AT_2 = [
    ".......",
    ".......",
    ".......",
    ".......",
    "...X...",
    "OO.OXX.",
]


def test_center_out_order():
    assert center_out(list(range(7))) == [3, 2, 4, 1, 5, 0, 6]
    assert center_out([0, 6, 5]) == [5, 0, 6]


def test_order_columns_policies():
    cols = list(range(7))
    assert order_columns(cols, "natural", random.Random(0)) == cols
    assert order_columns(cols, "center", random.Random(0)) == [3, 2, 4, 1, 5, 0, 6]

    a = order_columns(cols, "shuffle", random.Random(42))
    b = order_columns(cols, "shuffle", random.Random(42))
    assert a == b
    assert sorted(a) == cols


def test_depth_zero_returns_heuristic(random_board):
    board, _ = random_board(1, plies=8)
    assert search(board, 0, -inf, inf, True, "O") == score(board, "O")


def test_terminal_scores_prefer_fast_wins_and_slow_losses():
    board = Board()
    for _ in range(4):
        board.place(0, "X")
    assert terminal_score(board, "X", 3) == WIN_SCORE + 3
    assert terminal_score(board, "X", 3) > terminal_score(board, "X", 1)
    assert terminal_score(board, "O", 1) == -(WIN_SCORE + 1)
    assert terminal_score(board, "O", 1) > terminal_score(board, "O", 3)
    assert terminal_score(Board(), "X", 3) is None


@pytest.mark.parametrize("seed", range(6))
@pytest.mark.parametrize("ordering", ["natural", "center"])
def test_alpha_beta_matches_plain_minimax(random_board, seed, ordering):
    board, to_move = random_board(seed, plies=8 + seed)
    for maximizing in (True, False):
        ai = to_move if maximizing else ("O" if to_move == "X" else "X")
        pruned_stats = SearchStats()
        full_stats = SearchStats()
        pruned = search(board, 3, -inf, inf, maximizing, ai, ordering=ordering, stats=pruned_stats)
        full = search(board, 3, -inf, inf, maximizing, ai, ordering=ordering, stats=full_stats, prune=False)
        assert pruned == full
        assert pruned_stats.nodes <= full_stats.nodes
        assert full_stats.cutoffs == 0


def test_search_root_finds_immediate_win():
    board = Board.from_rows(O_WINS_AT_2)
    for depth in (1, 2, 3):
        res = search_root(board, depth, "natural", ai="O")
        assert res.column == 2
        # the win is found with depth - 1 plies still to go
        assert res.score == WIN_SCORE + depth - 1


def test_search_root_blocks_threat():
    board = Board.from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        "O......",
        "XXX.O..",
    ])
    res = search_root(board, 2, "center", ai="O")
    assert res.column == 3


def test_ties_go_to_first_column_in_order():
    flat = ScoreWeights(center=0)
    assert search_root(Board(), 1, "natural", ai="O", weights=flat).column == 0
    assert search_root(Board(), 1, "center", ai="O", weights=flat).column == 3


def test_center_is_preferred_on_empty_board():
    res = search_root(Board(), 1, "natural", ai="X")
    assert res.column == 3


def test_shuffle_is_reproducible_with_seeded_rng(random_board):
    board, to_move = random_board(9, plies=6)
    a = search_root(board, 2, "shuffle", ai=to_move, rng=random.Random(11))
    b = search_root(board, 2, "shuffle", ai=to_move, rng=random.Random(11))
    assert a == b


def test_search_does_not_mutate_board(random_board):
    board, to_move = random_board(2, plies=10)
    before = [row[:] for row in board.grid]
    search_root(board, 3, "center", ai=to_move)
    assert board.grid == before


def test_search_root_preconditions(draw_rows):
    with pytest.raises(ValueError):
        search_root(Board.from_rows(draw_rows), 3)
    with pytest.raises(ValueError):
        search_root(Board(), 0)


def test_full_board_returns_heuristic(draw_rows):
    board = Board.from_rows(draw_rows)
    assert search(board, 3, -inf, inf, True, "X") == score(board, "X")


def test_iterative_search_without_budget_matches_fixed_depth(random_board):
    board, to_move = random_board(4, plies=10)
    fixed = search_root(board, 3, "center", ai=to_move)
    deep = iterative_search(board, 3, "center", ai=to_move)
    assert deep.depth == 3
    assert (deep.score, deep.column) == (fixed.score, fixed.column)


def test_iterative_search_stops_at_budget(random_board):
    board, to_move = random_board(4, plies=10)
    res = iterative_search(board, 7, "center", ai=to_move, time_limit_sec=1e-9)
    assert res.depth == 1
    assert res.column in board.legal_columns()
