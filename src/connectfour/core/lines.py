from __future__ import annotations
from typing import List, Tuple

from connectfour.config import ROWS, COLS, CONNECT_N

Coord = Tuple[int, int]  # (row, col)
Window = Tuple[Coord, ...]

# (name, row step, col step)
DIRECTIONS = (
    ("horizontal", 0, 1),
    ("vertical", 1, 0),
    ("diag_down", 1, 1),   # ↘
    ("diag_up", -1, 1),    # ↗
)


def _build_windows() -> List[Window]:
    out: List[Window] = []
    for _, dr, dc in DIRECTIONS:
        for r in range(ROWS):
            for c in range(COLS):
                end_r = r + dr * (CONNECT_N - 1)
                end_c = c + dc * (CONNECT_N - 1)
                if 0 <= end_r < ROWS and 0 <= end_c < COLS:
                    out.append(tuple((r + dr * i, c + dc * i) for i in range(CONNECT_N)))
    return out


# Every 4-cell run on the board, in all four orientations (69 on 6x7).
# Board geometry only; no board state lives here.
WINDOWS: Tuple[Window, ...] = tuple(_build_windows())
