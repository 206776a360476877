from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt

from ..metrics.summarize import require_cols, tier_summary


@dataclass(frozen=True)
class TierPlotConfig:
    min_games: int = 0
    title_size: int = 16
    label_size: int = 12
    bar_labels: bool = True


def _apply_mpl_style(cfg: TierPlotConfig) -> None:
    plt.rcParams.update(
        {
            "figure.figsize": (9, 6),
            "axes.titlesize": cfg.title_size,
            "axes.labelsize": cfg.label_size,
            "axes.grid": True,
            "grid.alpha": 0.25,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "legend.frameon": False,
        }
    )


def _filter(df: pd.DataFrame, cfg: TierPlotConfig) -> pd.DataFrame:
    out = df.copy()
    if cfg.min_games > 0 and "games" in out.columns:
        out = out[out["games"].fillna(0) >= cfg.min_games].copy()
    return out


def plot_strength_by_tier(summary: pd.DataFrame, outpath: Path, cfg: TierPlotConfig) -> None:
    _apply_mpl_style(cfg)
    fig, ax = plt.subplots()
    ax.bar(summary["difficulty"].astype(str), summary["mean_strength"].astype(float))
    ax.set_title("Strength by Difficulty Tier")
    ax.set_xlabel("difficulty")
    ax.set_ylabel("strength_wilson_lcb (higher is stronger)")
    if cfg.bar_labels:
        for i, v in enumerate(summary["mean_strength"].astype(float).tolist()):
            ax.text(i, v, f"{v:.3f}", ha="center", va="bottom", fontsize=9)
    fig.tight_layout()
    fig.savefig(outpath, dpi=240, bbox_inches="tight")
    plt.close(fig)


def plot_cost_by_tier(summary: pd.DataFrame, outpath: Path, cfg: TierPlotConfig) -> None:
    """ms per move and nodes per move on a log axis; each tier should cost clearly more than the last."""
    _apply_mpl_style(cfg)
    fig, ax = plt.subplots()
    x = summary["difficulty"].astype(str)
    ax.plot(x, summary["mean_ms"].astype(float).clip(lower=1e-3), marker="o", label="ms / move")
    ax.plot(x, summary["nodes_per_move"].astype(float).clip(lower=1e-3), marker="s", label="nodes / move")
    ax.set_yscale("log")
    ax.set_title("Search Cost by Difficulty Tier")
    ax.set_xlabel("difficulty")
    ax.set_ylabel("per move (log scale)")
    ax.legend()
    fig.tight_layout()
    fig.savefig(outpath, dpi=240, bbox_inches="tight")
    plt.close(fig)


def plot_strength_vs_speed(df: pd.DataFrame, outpath: Path, cfg: TierPlotConfig) -> None:
    _apply_mpl_style(cfg)
    d = df.dropna(subset=["avg_ms_per_move", "strength_wilson_lcb"])

    fig, ax = plt.subplots()
    for tier, sub in d.groupby("difficulty", dropna=False):
        ax.scatter(sub["avg_ms_per_move"], sub["strength_wilson_lcb"], s=60, label=str(tier))
    for _, r in d.iterrows():
        ax.annotate(str(r["name"]), (float(r["avg_ms_per_move"]), float(r["strength_wilson_lcb"])),
                    fontsize=8, xytext=(6, 4), textcoords="offset points")
    ax.set_title("Playing Strength vs Move-Time Cost")
    ax.set_xlabel("avg_ms_per_move (lower is faster)")
    ax.set_ylabel("strength_wilson_lcb (higher is stronger)")
    ax.legend()
    fig.tight_layout()
    fig.savefig(outpath, dpi=240, bbox_inches="tight")
    plt.close(fig)


def make_tier_figures(df: pd.DataFrame, figures_dir: Path, cfg: TierPlotConfig) -> dict[str, Path]:
    require_cols(df, ["name", "difficulty", "games", "ppg", "strength_wilson_lcb", "avg_ms_per_move"])

    out: dict[str, Path] = {}
    figures_dir.mkdir(parents=True, exist_ok=True)

    base = _filter(df, cfg)
    summary = tier_summary(base)

    p = figures_dir / "strength_by_tier.png"
    plot_strength_by_tier(summary, p, cfg)
    out["strength_by_tier"] = p

    p = figures_dir / "cost_by_tier.png"
    plot_cost_by_tier(summary, p, cfg)
    out["cost_by_tier"] = p

    p = figures_dir / "strength_vs_speed.png"
    plot_strength_vs_speed(base, p, cfg)
    out["strength_vs_speed"] = p

    p = figures_dir / "tier_summary.csv"
    summary.to_csv(p, index=False)
    out["tier_summary_csv"] = p

    return out
