# src/connectfour_analysis/cli/make_figures.py
from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import LoadSpec, load_latest_from_dir, load_results
from ..plots.tiers import TierPlotConfig, make_tier_figures


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="connectfour_analysis figures",
        description="Generate per-tier figures and a summary table from league_results_*.csv",
    )
    ap.add_argument(
        "--csv",
        type=str,
        default=None,
        help="Path to a specific results CSV. If omitted, uses latest CSV in --results-dir matching --pattern.",
    )
    ap.add_argument("--results-dir", type=str, default="data/results")
    ap.add_argument("--pattern", type=str, default="league_results_*.csv")
    ap.add_argument("--figures-dir", type=str, default="data/figures", help="Output directory.")
    ap.add_argument("--min-games", type=int, default=0, help="Filter out agents with fewer than this many games (0 disables).")
    ap.add_argument("--no-bar-labels", action="store_true", help="Do not print values on the bars.")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = load_latest_from_dir(Path(args.results_dir), pattern=args.pattern)

    df = load_results(LoadSpec(csv_path=csv_path))

    cfg = TierPlotConfig(min_games=args.min_games, bar_labels=not args.no_bar_labels)

    figures_dir = Path(args.figures_dir)
    created = make_tier_figures(df, figures_dir, cfg)

    print(f"Loaded: {csv_path}")
    print(f"Wrote {len(created)} outputs under: {figures_dir.resolve()}")
    for k, p in created.items():
        print(f"- {k}: {p}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
