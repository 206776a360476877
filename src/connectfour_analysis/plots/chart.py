from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outpath: Path, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outpath.parent)
    fig.savefig(outpath, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return outpath


def plot_histograms(df: pd.DataFrame, outdir: Path, cols: Iterable[str], *, show: bool) -> list[Path]:
    num_cols = [c for c in cols if c in df.columns and pd.api.types.is_numeric_dtype(df[c])]
    written: list[Path] = []

    for c in num_cols:
        fig = plt.figure()
        plt.hist(df[c].dropna(), bins=min(30, max(1, len(df))))
        plt.title(f"Histogram: {c}")
        plt.xlabel(c)
        plt.ylabel("count")
        p = _finish(fig, outdir / f"hist_{c}.png", show=show)
        if p is not None:
            written.append(p)
    return written


def plot_scatter(df: pd.DataFrame, outdir: Path, x: str, y: str, *, show: bool, label_col: str = "name") -> Path | None:
    if x not in df.columns or y not in df.columns:
        return None
    if not (pd.api.types.is_numeric_dtype(df[x]) and pd.api.types.is_numeric_dtype(df[y])):
        return None

    fig = plt.figure()
    plt.scatter(df[x], df[y], alpha=0.7)
    # few agents per league, so every point gets a label
    if label_col in df.columns:
        for _, r in df.iterrows():
            plt.annotate(str(r[label_col]), (float(r[x]), float(r[y])), fontsize=8,
                         xytext=(6, 4), textcoords="offset points")
    plt.title(f"{y} vs {x}")
    plt.xlabel(x)
    plt.ylabel(y)
    return _finish(fig, outdir / f"scatter_{y}_vs_{x}.png", show=show)


def plot_top_bar(df: pd.DataFrame, outdir: Path, metric: str, top_n: int, *, show: bool) -> Path | None:
    if "name" not in df.columns or metric not in df.columns:
        return None
    if not pd.api.types.is_numeric_dtype(df[metric]):
        return None

    top = df[["name", metric]].dropna().sort_values(metric, ascending=False).head(top_n)
    fig = plt.figure(figsize=(10, 5))
    plt.bar(top["name"].astype(str), top[metric].astype(float))
    plt.title(f"Top {min(top_n, len(top))}: {metric}")
    plt.xlabel("agent")
    plt.ylabel(metric)
    plt.xticks(rotation=45, ha="right")
    return _finish(fig, outdir / f"top_{top_n}_{metric}.png", show=show)
