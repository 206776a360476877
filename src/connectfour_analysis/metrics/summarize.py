from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Literal

import pandas as pd

from ..io.load_results import NUMERIC_COLS

MetricKey = Literal[
    "ppg",
    "strength_wilson_lcb",
    "efficiency_score",
    "avg_ms_per_move",
    "wins",
    "points",
]

TIER_ORDER = ["easy", "medium", "hard", "extreme"]

# league columns worth describing; raw counters are left out
PROFILE_COLS = ["ppg", "strength_wilson_lcb", "efficiency_score", "avg_ms_per_move", "avg_depth", "nodes"]


@dataclass(frozen=True)
class SummaryConfig:
    metric: MetricKey = "strength_wilson_lcb"
    top_n: int = 20
    min_games: int = 0


def require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def filter_rows(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    """Agents with at least `min_games` games (all of them when min_games is 0)."""
    if cfg.min_games <= 0:
        return df.copy()
    require_cols(df, ["games"])
    return df[df["games"].fillna(0) >= cfg.min_games].copy()


def top_table(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    require_cols(df, ["name", cfg.metric])

    # lower is better only for avg_ms_per_move
    ranked = filter_rows(df, cfg).sort_values(cfg.metric, ascending=(cfg.metric == "avg_ms_per_move"))

    cols = [
        "name", "difficulty",
        "games", "wins", "draws", "losses",
        "ppg",
        "strength_wilson_lcb",
        "avg_ms_per_move",
        "nodes", "avg_depth",
    ]
    if cfg.metric not in cols:
        cols.append(cfg.metric)

    out = ranked[[c for c in cols if c in ranked.columns]].head(cfg.top_n).reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def tier_summary(df: pd.DataFrame) -> pd.DataFrame:
    """One row per difficulty tier, easiest first."""
    require_cols(df, ["difficulty", "name", "games", "ppg", "strength_wilson_lcb", "avg_ms_per_move"])

    d = df.copy()
    if "nodes" not in d.columns:
        d["nodes"] = float("nan")
    if "moves" not in d.columns:
        d["moves"] = float("nan")

    grp = (
        d.groupby("difficulty", dropna=False)
        .agg(
            agents=("name", "count"),
            total_games=("games", "sum"),
            mean_ppg=("ppg", "mean"),
            mean_strength=("strength_wilson_lcb", "mean"),
            mean_ms=("avg_ms_per_move", "mean"),
            total_nodes=("nodes", "sum"),
            total_moves=("moves", "sum"),
        )
        .reset_index()
    )
    grp["nodes_per_move"] = grp["total_nodes"] / grp["total_moves"].where(grp["total_moves"] > 0)

    order = {t: i for i, t in enumerate(TIER_ORDER)}
    grp["_rk"] = grp["difficulty"].map(order).fillna(len(order))
    return grp.sort_values(["_rk", "difficulty"]).drop(columns="_rk").reset_index(drop=True)


def _profile_cols(df: pd.DataFrame) -> list[str]:
    return [c for c in PROFILE_COLS if c in df.columns and pd.api.types.is_numeric_dtype(df[c])]


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    """count / mean / min / quartiles / max for each league metric, one row per metric."""
    cols = _profile_cols(df)
    if not cols:
        return pd.DataFrame()
    return df[cols].describe().T


def top_correlations(df: pd.DataFrame, top_k: int = 10) -> pd.DataFrame:
    """Metric pairs ranked by |Pearson r|, e.g. how strength tracks ms per move across tiers."""
    cols = _profile_cols(df)
    rows = []
    for a, b in combinations(cols, 2):
        r = df[a].corr(df[b])
        if pd.notna(r):
            rows.append({"a": a, "b": b, "corr": r, "abs": abs(r)})

    if not rows:
        return pd.DataFrame(columns=["a", "b", "corr", "abs"])
    return pd.DataFrame(rows).sort_values("abs", ascending=False).head(top_k).reset_index(drop=True)
