"""Visualization subpackage exports."""

from guess_sharpe.viz.cumulative import make_cumulative_figure, plot_cumulative_returns

__all__ = [
    "make_cumulative_figure",
    "plot_cumulative_returns",
]
