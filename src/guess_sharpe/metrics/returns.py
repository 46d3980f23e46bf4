"""Synthetic daily return series and derived views."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt
import pandas as pd

DAYS = 504  # two years of trading days
ANNUALIZATION_FACTOR = 252



def generate_return_series(
    actual_sharpe: float,
    rng: np.random.Generator,
    days: int = DAYS,
) -> npt.NDArray[np.float64]:
    """Draw daily returns whose annualized Sharpe ratio is ``actual_sharpe``.

    Annual volatility is fixed at 1.0, so the annual mean equals the Sharpe
    ratio. In daily terms that is a mean of ``sharpe / 252`` and a standard
    deviation of ``1 / sqrt(252)``.
    """
    if days <= 1:
        raise ValueError("days must be > 1.")
    mu_daily = actual_sharpe / ANNUALIZATION_FACTOR
    sigma_daily = 1.0 / np.sqrt(ANNUALIZATION_FACTOR)
    return np.asarray(rng.normal(mu_daily, sigma_daily, size=days), dtype=np.float64)



def sample_min_max(returns: npt.ArrayLike) -> tuple[float, float]:
    """Return the smallest and largest daily return."""
    arr = as_return_array(returns)
    return float(arr.min()), float(arr.max())



def compute_cumulative_returns(returns: npt.ArrayLike) -> pd.Series:
    """Running sum of daily returns indexed by day number."""
    arr = as_return_array(returns)
    index = pd.RangeIndex(len(arr), name="day")
    return pd.Series(np.cumsum(arr), index=index, name="cumulative_return")



def as_return_array(returns: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Coerce returns to a non-empty 1-D float array or raise ``ValueError``."""
    arr = np.asarray(returns, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError("returns must be one-dimensional.")
    if arr.size == 0:
        raise ValueError("returns is empty.")
    return arr
