"""Tests for GameSession: turns, outcomes and undo."""

import random

import pytest

from connectfour.core.board import Board
from connectfour.core.errors import ColumnFull
from connectfour.game.session import GameSession


def test_new_session_defaults():
    s = GameSession()
    assert s.mode == "hva"
    assert s.current == "X"
    assert s.history == []
    assert not s.over
    assert s.human_player == "X"


def test_first_player_is_honoured():
    s = GameSession(mode="hvh", first="O")
    assert s.current == "O"
    s.play(3)
    assert s.current == "X"


def test_turns_alternate_and_history_grows():
    s = GameSession(mode="hvh")
    s.play(0)
    s.play(0)
    s.play(1)
    assert [m.player for m in s.history] == ["X", "O", "X"]
    assert [(m.column, m.row) for m in s.history] == [(0, 5), (0, 4), (1, 5)]
    assert s.current == "O"


def test_full_column_keeps_the_turn():
    s = GameSession(mode="hvh")
    for _ in range(6):
        s.play(2)
    before = s.current
    with pytest.raises(ColumnFull):
        s.play(2)
    assert s.current == before
    assert len(s.history) == 6


def test_out_of_range_column():
    s = GameSession(mode="hvh")
    with pytest.raises(ValueError):
        s.play(7)
    assert s.history == []


def test_vertical_win_ends_game():
    s = GameSession(mode="hvh")
    for c in (0, 1, 0, 1, 0, 1, 0):
        s.play(c)
    assert s.outcome == "X"
    assert s.over
    # winner keeps the turn marker
    assert s.current == "X"
    with pytest.raises(ValueError):
        s.play(5)


def test_last_disc_makes_a_draw(draw_rows):
    draw_rows[0] = draw_rows[0][:6] + "."
    s = GameSession(mode="hvh", board=Board.from_rows(draw_rows), current="X")
    s.play(6)
    assert s.outcome == "draw"
    assert s.over
    assert s.legal_columns() == []


def test_undo_hvh_takes_back_one_move():
    s = GameSession(mode="hvh")
    s.play(3)
    s.play(4)
    removed = s.undo()
    assert [m.column for m in removed] == [4]
    assert s.current == "O"
    assert s.board.grid[5][4] is None
    assert s.board.grid[5][3] == "X"


def test_undo_on_empty_history_is_a_no_op():
    s = GameSession(mode="hvh")
    assert s.undo() == []
    assert s.current == "X"


def test_undo_hva_takes_back_ai_and_human_moves():
    s = GameSession(mode="hva", ai_player="O")
    s.play(3)  # human
    s.play(2)  # ai
    s.play(4)  # human
    s.play(4)  # ai
    removed = s.undo()
    assert [m.player for m in removed] == ["O", "X"]
    assert len(s.history) == 2
    assert s.current == "X"
    assert s.board.discs() == 2


def test_undo_hva_after_lone_ai_opening_returns_to_first():
    s = GameSession(mode="hva", first="O", ai_player="O")
    s.play(3)
    removed = s.undo()
    assert len(removed) == 1
    assert s.history == []
    assert s.current == "O"
    assert s.is_ai_turn()


def test_undo_reopens_a_finished_game():
    s = GameSession(mode="hvh")
    for c in (0, 1, 0, 1, 0, 1, 0):
        s.play(c)
    assert s.over
    s.undo()
    assert s.outcome is None
    assert s.current == "X"
    s.play(6)
    assert not s.over


def test_is_ai_turn():
    s = GameSession(mode="hva", ai_player="O")
    assert not s.is_ai_turn()
    s.play(0)
    assert s.is_ai_turn()
    assert not GameSession(mode="hvh", first="O").is_ai_turn()


def test_reset_clears_everything():
    s = GameSession(mode="hvh", first="O")
    s.play(0)
    s.play(1)
    s.reset()
    assert s.board.discs() == 0
    assert s.history == []
    assert s.outcome is None
    assert s.current == "O"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"mode": "ava"},
        {"difficulty": "impossible"},
        {"first": "Z"},
        {"ai_player": "."},
    ],
)
def test_invalid_settings(kwargs):
    with pytest.raises(ValueError):
        GameSession(**kwargs)


def test_ai_move_is_reproducible_with_seed():
    moves = []
    for _ in range(2):
        s = GameSession(mode="hva", difficulty="medium", ai_player="O")
        s.play(3)
        moves.append(s.ai_move(random.Random(11)))
    assert moves[0] == moves[1]
    assert moves[0].player == "O"


def test_ai_move_takes_the_win():
    rows = [
        ".......",
        ".......",
        ".......",
        "......X",
        "X.....X",
        "XOOO..X",
    ]
    s = GameSession(mode="hva", difficulty="hard", board=Board.from_rows(rows), current="O")
    move = s.ai_move()
    assert (move.column, move.row) == (4, 5)
    assert s.outcome == "O"


def test_ai_move_on_the_human_turn():
    s = GameSession(mode="hva", ai_player="O")
    with pytest.raises(ValueError):
        s.ai_move()
    with pytest.raises(ValueError):
        GameSession(mode="hvh").ai_move()
    assert s.history == []
