
from __future__ import annotations

import csv
import logging
import os
import shutil
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from connectfour.ui.colors import A

from .league_play import add_result, chunked, run_pairings_batch
from .league_scoring import (
    avg_depth,
    avg_ms_per_move,
    efficiency_score,
    ppg,
    strength_score,
)
from .league_types import Agg, Team

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "name", "difficulty",
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "efficiency_score",
    "moves", "time_ms", "nodes", "avg_depth",
]


# -----------------------------
# Stable terminal formatting
# -----------------------------
def term_width(default: int = 120) -> int:
    return shutil.get_terminal_size(fallback=(default, 24)).columns


def hr(char: str = "─", width: int | None = None) -> str:
    w = width or term_width()
    return char * max(10, w)


def clamp(s: str, width: int) -> str:
    if width <= 0:
        return ""
    if len(s) <= width:
        return s
    if width <= 1:
        return s[:width]
    return s[: width - 1] + "…"


@dataclass(frozen=True)
class Col:
    title: str
    width: int
    align: str = "left"  # "left" | "right"


def _fmt_row(values: Sequence[str], cols: Sequence[Col]) -> str:
    out: List[str] = []
    for v, c in zip(values, cols):
        s = clamp(str(v), c.width)
        out.append(s.rjust(c.width) if c.align == "right" else s.ljust(c.width))
    return "  ".join(out)


def print_table(title: str, cols: Sequence[Col], rows: Iterable[Sequence[str]], *, width: int) -> None:
    print(A.cyan(A.bold(title)))
    print(A.dim(_fmt_row([c.title for c in cols], cols)))
    print(A.dim(hr("─", width)))
    for r in rows:
        print(_fmt_row(r, cols))
    print(A.dim(hr("─", width)))


def print_standings(title: str, teams: List[Team], agg: Dict[str, Agg], z: float) -> None:
    w = term_width(120)
    ranking = sorted(teams, key=lambda t: strength_score(agg[t.name], z), reverse=True)

    cols = [
        Col("rk", 3, "right"),
        Col("agent", 24),
        Col("strength", 9, "right"),
        Col("ppg", 5, "right"),
        Col("g", 4, "right"),
        Col("W-D-L", 9, "right"),
        Col("ms/mv", 8, "right"),
        Col("depth", 5, "right"),
        Col("nodes", 10, "right"),
    ]
    rows = []
    for i, t in enumerate(ranking, start=1):
        a = agg[t.name]
        rows.append([
            str(i),
            t.name,
            f"{strength_score(a, z):.4f}",
            f"{ppg(a):.3f}",
            str(a.games),
            f"{a.wins}-{a.draws}-{a.losses}",
            f"{avg_ms_per_move(a):.1f}",
            f"{avg_depth(a):.2f}",
            str(a.nodes),
        ])
    print_table(title, cols, rows, width=min(w, 100))


def round_robin_items(teams: Sequence[Team], seed: int) -> List[tuple]:
    items = []
    n = len(teams)
    for i in range(n):
        for j in range(i + 1, n):
            base_seed = seed + i * 10_000 + j * 100
            items.append((teams[i].name, teams[j].name, teams[i].make, teams[j].make, base_seed))
    return items


def write_csv(out_path: Path, teams: Sequence[Team], agg: Dict[str, Agg], z: float) -> Path:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_COLUMNS)
        for t in teams:
            a = agg[t.name]
            w.writerow([
                t.name, t.difficulty,
                a.games, a.wins, a.draws, a.losses,
                a.points, round(ppg(a), 6),
                round(strength_score(a, z), 6),
                round(avg_ms_per_move(a), 3),
                round(efficiency_score(a, z), 6),
                a.moves, a.time_ms, a.nodes, round(avg_depth(a), 3),
            ])
    return out_path


def run_league(
    teams: List[Team],
    games_per_pair: int = 2,
    seed: int = 1234,
    max_workers: int | None = None,
    batch_pairings: int = 1,
    z: float = 1.28,
    results_dir: Optional[Path] = None,
    quiet: bool = False,
) -> Dict[str, Agg]:
    """
    Round-robin between all teams, each pairing played `games_per_pair`
    times with colours alternating. max_workers=1 plays in-process.
    Writes league_results_<timestamp>.csv under `results_dir` when given.
    """
    if len(teams) < 2:
        raise ValueError("A league needs at least two teams.")

    agg: Dict[str, Agg] = {t.name: Agg() for t in teams}

    def apply_game_result(a_name: str, b_name: str, a_is_x: bool, outcome: str, stats) -> None:
        add_result(agg[a_name], agg[b_name], outcome, a_is_x=a_is_x)
        agg[a_name].add_side_stats(stats["X"] if a_is_x else stats["O"])
        agg[b_name].add_side_stats(stats["O"] if a_is_x else stats["X"])

    if max_workers is None:
        max_workers = min(os.cpu_count() or 2, 6)

    items = round_robin_items(teams, seed)
    batches = [(chunk, games_per_pair) for chunk in chunked(items, max(1, batch_pairings))]
    logger.info("league: %d teams, %d pairings, %d games/pair, workers=%d",
                len(teams), len(items), games_per_pair, max_workers)

    if not quiet:
        print(A.bold(f"Roster: {len(teams)} teams | pairings={len(items)} | games/pair={games_per_pair} | workers={max_workers}"))

    if max_workers <= 1:
        for batch in batches:
            for res in run_pairings_batch(batch):
                apply_game_result(*res)
    else:
        with ProcessPoolExecutor(max_workers=max_workers) as ex:
            futures = [ex.submit(run_pairings_batch, batch) for batch in batches]
            for done, fut in enumerate(as_completed(futures), start=1):
                for res in fut.result():
                    apply_game_result(*res)
                logger.info("league: batch %d/%d complete", done, len(futures))

    if not quiet:
        print_standings("Tier league standings", teams, agg, z)

    if results_dir is not None:
        ts = time.strftime("%Y%m%d_%H%M%S")
        out_path = write_csv(Path(results_dir) / f"league_results_{ts}.csv", teams, agg, z)
        logger.info("league: wrote %s", out_path)
        if not quiet:
            print(f"Wrote CSV: {out_path}")

    return agg
