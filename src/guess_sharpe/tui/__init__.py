"""Terminal front end for the guessing game."""

from guess_sharpe.tui.chart import ChartGrid, rasterize
from guess_sharpe.tui.keys import map_key
from guess_sharpe.tui.terminal import run_terminal

__all__ = [
    "ChartGrid",
    "rasterize",
    "map_key",
    "run_terminal",
]
