from __future__ import annotations

from functools import partial
from typing import List, Sequence

from connectfour.ai.difficulty import LEVELS
from connectfour.ai.tiered_agent import TieredAgent

from .league_types import Team


def _team(name: str, difficulty: str, **kwargs) -> Team:
    return Team(name, partial(TieredAgent, difficulty=difficulty, name=name, **kwargs), difficulty)


def build_roster(levels: Sequence[str] = LEVELS, time_limits_ms: Sequence[int] = ()) -> List[Team]:
    """
    One team per difficulty tier. Each entry of `time_limits_ms` adds a
    time-capped copy of the searching tiers (iterative deepening under that budget).
    """
    teams: List[Team] = [_team(f"AI {lvl}", lvl) for lvl in levels]

    for ms in time_limits_ms:
        for lvl in levels:
            if lvl == "easy":
                continue
            teams.append(_team(f"AI {lvl} t{ms}ms", lvl, time_limit_sec=ms / 1000.0))

    return teams
