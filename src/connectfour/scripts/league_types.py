from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class Team:
    name: str
    make: Callable[[], object]  # must be picklable (use functools.partial, not lambda)
    difficulty: str = ""


@dataclass
class Agg:
    games: int = 0
    points: float = 0.0
    wins: int = 0
    losses: int = 0
    draws: int = 0

    moves: int = 0
    time_ms: int = 0
    nodes: int = 0
    depth_sum: int = 0

    def add_side_stats(self, side: dict) -> None:
        self.moves += side["moves"]
        self.time_ms += side["time_ms"]
        self.nodes += side["nodes"]
        self.depth_sum += side["depth"]
