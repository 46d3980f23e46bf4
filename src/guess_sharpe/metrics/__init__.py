"""Metrics subpackage exports."""

from guess_sharpe.metrics.returns import (
    ANNUALIZATION_FACTOR,
    DAYS,
    compute_cumulative_returns,
    generate_return_series,
    sample_min_max,
)
from guess_sharpe.metrics.sharpe import (
    GUESS_TOLERANCE_MULTIPLIER,
    MAX_ABS_SHARPE,
    SharpeStats,
    compute_sample_sharpe,
    compute_sharpe_error,
    draw_actual_sharpe,
    generate_round,
    summarize_stats,
    tolerance_band_coverage,
)

__all__ = [
    "DAYS",
    "ANNUALIZATION_FACTOR",
    "MAX_ABS_SHARPE",
    "GUESS_TOLERANCE_MULTIPLIER",
    "SharpeStats",
    "draw_actual_sharpe",
    "generate_return_series",
    "compute_sample_sharpe",
    "compute_sharpe_error",
    "sample_min_max",
    "compute_cumulative_returns",
    "generate_round",
    "summarize_stats",
    "tolerance_band_coverage",
]
