from __future__ import annotations
from typing import Optional, Iterable, Set

from connectfour.config import CLEAR_SCREEN
from connectfour.core.board import Board
from connectfour.core.lines import Coord
from connectfour.types import Cell
from connectfour.ui.colors import c, color_enabled, BOLD, DIM, FG_CYAN, FG_GRAY, FG_RED, FG_YELLOW, RESET, REVERSE


def _piece(cell: Cell) -> str:
    if cell is None:
        return c("·", FG_GRAY)
    if cell == "X":
        return c("X", FG_RED)
    return c("O", FG_YELLOW)


def _highlight(piece: str, cell: Cell) -> str:
    if color_enabled():
        return f"{REVERSE}{piece}{RESET}"
    # no colour: mark winning discs in lower case
    return (cell or "·").lower()


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(board: Board, highlight: Optional[Iterable[Coord]] = None) -> list[str]:
    hl: Set[Coord] = set(highlight) if highlight else set()

    out = [c("   " + " ".join(str(i + 1) for i in range(board.cols)), DIM)]
    for r in range(board.rows):
        parts = []
        for col in range(board.cols):
            cell = board.grid[r][col]
            p = _piece(cell)
            if (r, col) in hl:
                p = _highlight(p, cell)
            parts.append(p)
        out.append(" | " + " ".join(parts) + " |")
    out.append(c("   " + "—" * (2 * board.cols - 1), DIM))
    return out


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(c("CONNECT 4", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    for line in board_lines(board, highlight):
        print(line)

    print(c(f"   Enter 1-{board.cols} to drop, u to undo, n for a new game, q to quit.", DIM))
