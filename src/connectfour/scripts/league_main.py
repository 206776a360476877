from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path

from connectfour.ai.difficulty import LEVELS
from connectfour.config import RESULTS_DIR
from connectfour.ui.colors import A

from .league_core import run_league
from .league_roster import build_roster


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connectfour-league", description="Play the difficulty tiers against each other.")
    ap.add_argument("--levels", nargs="+", default=list(LEVELS), choices=list(LEVELS), help="Tiers to enter")
    ap.add_argument("--time-limits-ms", nargs="*", type=int, default=[], help="Also enter time-capped copies of the searching tiers")
    ap.add_argument("--games-per-pair", type=int, default=2, help="Games per pairing (colours alternate)")
    ap.add_argument("--seed", type=int, default=1234)
    ap.add_argument("--workers", type=int, default=None, help="Worker processes (default = cpu cores, capped at 6; 1 = in-process)")
    ap.add_argument("--batch-pairings", type=int, default=1, help="Pairings per worker task")
    ap.add_argument("--z", type=float, default=1.28, help="Z for the Wilson lower bound")
    ap.add_argument("--results-dir", type=str, default=RESULTS_DIR, help="Where league_results_*.csv is written")
    ap.add_argument("--no-csv", action="store_true", help="Skip the CSV export")
    ap.add_argument("--log-level", default="INFO")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    roster = build_roster(args.levels, args.time_limits_ms)
    start = time.perf_counter()

    run_league(
        roster,
        games_per_pair=args.games_per_pair,
        seed=args.seed,
        max_workers=args.workers,
        batch_pairings=args.batch_pairings,
        z=args.z,
        results_dir=None if args.no_csv else Path(args.results_dir),
    )

    elapsed = time.perf_counter() - start
    h = int(elapsed // 3600)
    m = int((elapsed % 3600) // 60)
    s = elapsed % 60
    print(A.bold(f"Total runtime: {h}:{m:02d}:{s:06.3f}"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
