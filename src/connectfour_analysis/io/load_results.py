from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pandas as pd


# everything league_core writes except the name / difficulty labels
NUMERIC_COLS = [
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "efficiency_score",
    "moves", "time_ms", "nodes", "avg_depth",
]


@dataclass(frozen=True)
class LoadSpec:
    csv_path: Path
    required: tuple[str, ...] = ("name",)


def load_results(spec: LoadSpec) -> pd.DataFrame:
    """
    Read a league_results CSV into one row per agent.

    Numeric columns that fail to parse become NaN. Files written before the
    difficulty column existed get it back from "AI <tier>..." agent names.
    """
    if not spec.csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {spec.csv_path}")

    df = pd.read_csv(spec.csv_path).rename(columns=str.strip)

    missing = [c for c in spec.required if c not in df.columns]
    if missing:
        raise ValueError(f"CSV missing required columns {missing}. Columns: {list(df.columns)}")

    present = [c for c in NUMERIC_COLS if c in df.columns]
    if present:
        df[present] = df[present].apply(pd.to_numeric, errors="coerce")

    df["name"] = df["name"].astype(str).str.strip()
    df = df[df["name"] != ""].copy()

    if "difficulty" not in df.columns:
        df = df.assign(difficulty=df["name"].str.extract(r"^AI\s+(\w+)", expand=False))
    df["difficulty"] = df["difficulty"].fillna("").astype(str)

    return df.reset_index(drop=True)


def load_latest_from_dir(results_dir: Path, pattern: str = "league_results_*.csv") -> Path:
    if not results_dir.exists():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    # league_results_<YYYYmmdd_HHMMSS>.csv sorts by time
    files = sorted(results_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {results_dir}")
    return files[-1]
