from .chart import (
    plot_histograms,
    plot_scatter,
    plot_top_bar,
)
from .tiers import TierPlotConfig, make_tier_figures

__all__ = [
    "plot_histograms",
    "plot_scatter",
    "plot_top_bar",
    "TierPlotConfig",
    "make_tier_figures",
]
