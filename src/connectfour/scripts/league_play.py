from __future__ import annotations

import random
from typing import Dict, List, Tuple

from connectfour.game.session import GameSession

from .league_types import Agg

# Random plies played before the agents take over, so repeated pairings
# between deterministic tiers do not replay the same game.
OPENING_PLIES = 2


def seed_agent(agent, seed: int) -> None:
    rng = getattr(agent, "rng", None)
    if rng is not None:
        rng.seed(seed)


def play_headless(agent_x, agent_o, seed_base: int = 0, opening_plies: int = OPENING_PLIES) -> Tuple[str, Dict[str, Dict[str, int]]]:
    """
    Play one game without any UI.
    Returns ("X" | "O" | "D", per-side stats).
    """
    session = GameSession(mode="hvh", first="X")
    stats = {
        "X": {"moves": 0, "time_ms": 0, "nodes": 0, "depth": 0},
        "O": {"moves": 0, "time_ms": 0, "nodes": 0, "depth": 0},
    }

    seed_agent(agent_x, seed_base + 101)
    seed_agent(agent_o, seed_base + 202)

    rng = random.Random(seed_base)
    for _ in range(opening_plies):
        moves = session.legal_columns()
        if not moves or session.over:
            break
        session.play(rng.choice(moves))

    while not session.over:
        agent = agent_x if session.current == "X" else agent_o
        side_stats = stats[session.current]

        move = agent.choose_move(session)

        info = getattr(agent, "last_info", None) or {}
        side_stats["moves"] += 1
        side_stats["time_ms"] += max(1, int(info.get("time_ms", 0)))
        side_stats["nodes"] += int(info.get("nodes", 0))
        side_stats["depth"] += int(info.get("depth", 0))

        session.play(move)

    outcome = "D" if session.outcome == "draw" else str(session.outcome)
    return outcome, stats


def add_result(agg_a: Agg, agg_b: Agg, outcome: str, a_is_x: bool) -> None:
    agg_a.games += 1
    agg_b.games += 1

    if outcome == "D":
        agg_a.draws += 1
        agg_b.draws += 1
        agg_a.points += 0.5
        agg_b.points += 0.5
        return

    a_won = (outcome == "X") == a_is_x
    if a_won:
        agg_a.wins += 1
        agg_b.losses += 1
        agg_a.points += 1.0
    else:
        agg_b.wins += 1
        agg_a.losses += 1
        agg_b.points += 1.0


def run_pairings_batch(args) -> List[tuple]:
    """Worker entry point: play every game of a batch of pairings, alternating colours."""
    (batch_items, games_per_pair) = args
    out = []
    for (a_name, b_name, a_make, b_make, base_seed) in batch_items:
        for g in range(games_per_pair):
            if g % 2 == 0:
                outcome, stats = play_headless(a_make(), b_make(), seed_base=(base_seed + g))
                out.append((a_name, b_name, True, outcome, stats))
            else:
                outcome, stats = play_headless(b_make(), a_make(), seed_base=(base_seed + g))
                out.append((a_name, b_name, False, outcome, stats))
    return out


def chunked(lst, size: int):
    for i in range(0, len(lst), size):
        yield lst[i : i + size]
