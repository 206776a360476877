# src/connectfour/types.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional, NewType

Player = Literal["X", "O"]
Cell = Optional[Player]
Column = NewType("Column", int)   # column index 0..6

Difficulty = Literal["easy", "medium", "hard", "extreme"]
Mode = Literal["hva", "hvh"]       # human vs AI, human vs human
Outcome = Literal["X", "O", "draw"]


@dataclass(frozen=True, slots=True)
class Move:
    column: int
    row: int
    player: Player


def other(player: Player) -> Player:
    return "O" if player == "X" else "X"
