from __future__ import annotations

from dataclasses import dataclass, field
import random
from typing import Optional

from connectfour.ai.difficulty import get_config
from connectfour.ai.selector import choose_move_with_info
from connectfour.game.session import GameSession
from connectfour.types import Column, Difficulty


@dataclass(slots=True)
class TieredAgent:
    """
    Computer player for one difficulty tier.
    Knobs:
      - difficulty: easy / medium / hard / extreme
      - time_limit_sec: optional wall-clock budget (iterative deepening up to the tier depth)
      - rng: seed it for reproducible games
    """
    difficulty: Difficulty = "medium"
    name: str = ""
    time_limit_sec: Optional[float] = None
    rng: random.Random = field(default_factory=random.Random)

    last_info: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        get_config(self.difficulty)
        if not self.name:
            self.name = f"AI ({self.difficulty})"

    def choose_move(self, session: GameSession) -> Column:
        choice = choose_move_with_info(
            session.board,
            self.difficulty,
            ai=session.current,
            rng=self.rng,
            time_limit_sec=self.time_limit_sec,
        )

        self.last_info = {
            "depth": choice.depth,
            "nodes": choice.nodes,
            "cutoffs": choice.cutoffs,
            "eval": int(choice.score) if choice.score is not None else None,
            "reason": choice.reason,
            "move_col": int(choice.column) + 1,
            "time_ms": choice.time_ms,
        }
        return choice.column
