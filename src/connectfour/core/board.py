# src/connectfour/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import ClassVar, Iterable, List, Optional

from connectfour.config import ROWS, COLS
from connectfour.core.errors import ColumnFull
from connectfour.types import Cell, Column, Move, Player, other

_SYMBOLS = {".": None, "X": "X", "O": "O"}


@dataclass(slots=True)
class Board:
    """
    6x7 grid, row 0 is the top and row 5 the bottom.

    Discs always sit on the bottom or on another disc; every mutation goes
    through place() / remove_top() so that stays true.
    """
    rows: ClassVar[int] = ROWS
    cols: ClassVar[int] = COLS
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Board":
        """
        Build a board from text rows, top row first, using '.', 'X' and 'O'.
        Spaces are ignored. Floating discs are rejected.
        """
        lines = [r.replace(" ", "") for r in rows]
        if len(lines) != cls.rows or any(len(r) != cls.cols for r in lines):
            raise ValueError(f"Expected {cls.rows} rows of {cls.cols} cells.")

        grid: List[List[Cell]] = []
        for line in lines:
            try:
                grid.append([_SYMBOLS[ch] for ch in line.upper()])
            except KeyError as e:
                raise ValueError(f"Unknown cell symbol: {e.args[0]!r}") from None

        for c in range(cls.cols):
            seen_disc = False
            for r in range(cls.rows):
                if grid[r][c] is not None:
                    seen_disc = True
                elif seen_disc:
                    raise ValueError(f"Floating disc in column {c + 1}.")

        return cls(grid=grid)

    def copy(self) -> "Board":
        return Board(grid=[row[:] for row in self.grid])

    clone = copy

    def swapped(self) -> "Board":
        """Copy with every X and O exchanged."""
        return Board(grid=[[None if p is None else other(p) for p in row] for row in self.grid])

    def _check_col(self, col: int) -> int:
        c = int(col)
        if c < 0 or c >= self.cols:
            raise ValueError("Column out of range.")
        return c

    def lowest_open_row(self, col: int) -> Optional[int]:
        c = self._check_col(col)
        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][c] is None:
                return r
        return None

    def legal_columns(self) -> List[Column]:
        return [Column(c) for c in range(self.cols) if self.grid[0][c] is None]

    def is_full(self) -> bool:
        return all(self.grid[0][c] is not None for c in range(self.cols))

    def place(self, col: int, player: Player) -> Move:
        r = self.lowest_open_row(col)
        if r is None:
            raise ColumnFull(int(col))
        c = int(col)
        self.grid[r][c] = player
        return Move(column=c, row=r, player=player)

    def remove_top(self, col: int) -> Optional[Move]:
        """
        Clear the most recently dropped disc in a column.
        An empty column is left alone and None is returned.
        """
        c = self._check_col(col)
        for r in range(self.rows):
            p = self.grid[r][c]
            if p is not None:
                self.grid[r][c] = None
                return Move(column=c, row=r, player=p)
        return None

    def discs(self) -> int:
        return sum(1 for row in self.grid for p in row if p is not None)

    def __str__(self) -> str:
        return "\n".join("".join(p or "." for p in row) for row in self.grid)
