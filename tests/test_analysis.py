import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from connectfour_analysis.__main__ import main as analysis_main
from connectfour_analysis.io.load_results import LoadSpec, load_latest_from_dir, load_results
from connectfour_analysis.metrics.summarize import (
    PROFILE_COLS,
    SummaryConfig,
    numeric_summary,
    tier_summary,
    top_correlations,
    top_table,
)
from connectfour_analysis.plots import TierPlotConfig, make_tier_figures, plot_histograms

ROWS = [
    # name, difficulty, games, wins, draws, losses, points, ppg, lcb, ms, eff, moves, time_ms, nodes, depth
    ("AI extreme", "extreme", 6, 5, 1, 0, 5.5, 0.917, 0.70, 120.0, 0.55, 60, 7200, 900000, 6.4),
    ("AI hard", "hard", 6, 4, 0, 2, 4.0, 0.667, 0.45, 30.0, 0.38, 62, 1860, 120000, 4.6),
    ("AI medium", "medium", 6, 2, 1, 3, 2.5, 0.417, 0.22, 4.0, 0.20, 64, 256, 9000, 2.7),
    ("AI easy", "easy", 6, 0, 0, 6, 0.0, 0.0, 0.0, 1.0, 0.0, 58, 58, 0, 0.0),
    ("AI hard t50ms", "hard", 4, 2, 0, 2, 2.0, 0.5, 0.20, 25.0, 0.17, 40, 1000, 60000, 4.1),
]
COLUMNS = [
    "name", "difficulty", "games", "wins", "draws", "losses", "points", "ppg",
    "strength_wilson_lcb", "avg_ms_per_move", "efficiency_score",
    "moves", "time_ms", "nodes", "avg_depth",
]


@pytest.fixture
def results_csv(tmp_path):
    path = tmp_path / "league_results_20260101_120000.csv"
    pd.DataFrame(ROWS, columns=COLUMNS).to_csv(path, index=False)
    return path


def test_load_results_coerces_numbers(results_csv):
    df = load_results(LoadSpec(csv_path=results_csv))
    assert len(df) == 5
    assert df["games"].dtype.kind in "if"
    assert list(df["difficulty"]) == ["extreme", "hard", "medium", "easy", "hard"]


def test_load_results_recovers_tier_from_name(tmp_path):
    path = tmp_path / "old.csv"
    pd.DataFrame(ROWS, columns=COLUMNS).drop(columns="difficulty").to_csv(path, index=False)
    df = load_results(LoadSpec(csv_path=path))
    assert list(df["difficulty"]) == ["extreme", "hard", "medium", "easy", "hard"]


def test_load_results_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_results(LoadSpec(csv_path=tmp_path / "missing.csv"))
    bad = tmp_path / "bad.csv"
    bad.write_text("agent,games\nx,1\n")
    with pytest.raises(ValueError):
        load_results(LoadSpec(csv_path=bad))


def test_latest_file_wins(tmp_path, results_csv):
    newer = tmp_path / "league_results_20260202_090000.csv"
    newer.write_text(results_csv.read_text())
    assert load_latest_from_dir(tmp_path) == newer
    with pytest.raises(FileNotFoundError):
        load_latest_from_dir(tmp_path / "nowhere")


def test_top_table_ranks_by_metric(results_csv):
    df = load_results(LoadSpec(csv_path=results_csv))
    top = top_table(df, SummaryConfig(top_n=3))
    assert list(top["rk"]) == [1, 2, 3]
    assert list(top["name"]) == ["AI extreme", "AI hard", "AI medium"]

    fastest = top_table(df, SummaryConfig(metric="avg_ms_per_move", top_n=1))
    assert fastest.loc[0, "name"] == "AI easy"

    seasoned = top_table(df, SummaryConfig(min_games=5))
    assert "AI hard t50ms" not in set(seasoned["name"])


def test_tier_summary_orders_tiers(results_csv):
    df = load_results(LoadSpec(csv_path=results_csv))
    summary = tier_summary(df)
    assert list(summary["difficulty"]) == ["easy", "medium", "hard", "extreme"]
    hard = summary.set_index("difficulty").loc["hard"]
    assert hard["agents"] == 2
    assert hard["total_games"] == 10
    assert hard["nodes_per_move"] == pytest.approx(180000 / 102)
    assert summary.set_index("difficulty").loc["easy", "nodes_per_move"] == 0


def test_make_tier_figures(results_csv, tmp_path):
    df = load_results(LoadSpec(csv_path=results_csv))
    out = make_tier_figures(df, tmp_path / "figs", TierPlotConfig())
    assert set(out) == {"strength_by_tier", "cost_by_tier", "strength_vs_speed", "tier_summary_csv"}
    for path in out.values():
        assert path.exists()
    assert len(pd.read_csv(out["tier_summary_csv"])) == 4


def test_histograms_skip_missing_columns(results_csv, tmp_path):
    df = load_results(LoadSpec(csv_path=results_csv))
    paths = plot_histograms(df, tmp_path / "h", ["ppg", "not_a_column"], show=False)
    assert len(paths) == 1
    assert paths[0].exists()


def test_analyze_cli_tables_only(results_csv, capsys):
    assert analysis_main(["analyze", "--csv", str(results_csv), "--no-plots"]) == 0
    out = capsys.readouterr().out
    assert "=== Top table ===" in out
    assert "=== By tier ===" in out
    assert "AI extreme" in out


def test_figures_cli(results_csv, tmp_path, capsys):
    figs = tmp_path / "figures"
    assert analysis_main(["figures", "--csv", str(results_csv), "--figures-dir", str(figs)]) == 0
    assert (figs / "strength_by_tier.png").exists()


def test_unknown_subcommand():
    assert analysis_main(["bogus"]) == 2
    assert analysis_main(["--help"]) == 0


def test_numeric_summary_covers_league_metrics(results_csv):
    df = load_results(LoadSpec(csv_path=results_csv))
    desc = numeric_summary(df)
    assert list(desc.index) == PROFILE_COLS
    assert desc.loc["ppg", "count"] == 5
    assert desc.loc["avg_ms_per_move", "max"] == 120.0


def test_top_correlations_pairs(results_csv):
    df = load_results(LoadSpec(csv_path=results_csv))
    corrs = top_correlations(df, top_k=3)
    assert len(corrs) == 3
    assert (corrs["a"] != corrs["b"]).all()
    assert corrs["abs"].is_monotonic_decreasing
    # strength and ms per move both climb with the tier
    full = top_correlations(df, top_k=100)
    pair = full[(full["a"] == "strength_wilson_lcb") & (full["b"] == "avg_ms_per_move")]
    assert pair["corr"].iloc[0] > 0.5


def test_top_table_keeps_requested_metric_column(results_csv):
    df = load_results(LoadSpec(csv_path=results_csv))
    top = top_table(df, SummaryConfig(metric="efficiency_score", top_n=2))
    assert list(top["name"]) == ["AI extreme", "AI hard"]
    assert "efficiency_score" in top.columns
