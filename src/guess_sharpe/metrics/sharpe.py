"""Sharpe ratio draws, estimation and standard error."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass

import numpy as np
import numpy.typing as npt
from scipy import stats

from guess_sharpe.metrics.returns import (
    ANNUALIZATION_FACTOR,
    DAYS,
    as_return_array,
    generate_return_series,
    sample_min_max,
)

LOGGER = logging.getLogger(__name__)

MAX_ABS_SHARPE = 3.0
# Roughly the central 10% of a standard normal around the target.
GUESS_TOLERANCE_MULTIPLIER = 0.12


@dataclass(frozen=True)
class SharpeStats:
    """Statistics of one generated round."""

    actual_sharpe: float
    sample_sharpe: float
    sharpe_error: float
    sample_mean: float
    sample_min: float
    sample_max: float



def draw_actual_sharpe(rng: np.random.Generator) -> float:
    """Draw the generating Sharpe ratio uniformly from [-3, 3]."""
    return float(rng.uniform(-MAX_ABS_SHARPE, MAX_ABS_SHARPE))



def compute_sample_sharpe(returns: npt.ArrayLike) -> float:
    """Annualized Sharpe ratio of a daily return series.

    Uses the population variance (divides by the number of observations).
    A zero-variance series yields ``inf``, ``-inf`` or ``nan``.
    """
    arr = as_return_array(returns)
    mean = arr.mean()
    std = np.sqrt(arr.var(ddof=0))
    with np.errstate(divide="ignore", invalid="ignore"):
        ratio = (mean * ANNUALIZATION_FACTOR) / (std * np.sqrt(ANNUALIZATION_FACTOR))
    return float(ratio)



def compute_sharpe_error(sample_sharpe: float, days: int = DAYS) -> float:
    """Asymptotic standard error of the annualized Sharpe estimator."""
    if days <= 0:
        raise ValueError("days must be positive.")
    variance = (1.0 + sample_sharpe**2 / 2.0) / days
    return float(np.sqrt(variance) * np.sqrt(ANNUALIZATION_FACTOR))



def generate_round(rng: np.random.Generator) -> tuple[npt.NDArray[np.float64], SharpeStats]:
    """Generate one round: a return series and its statistics.

    Consumes one uniform draw and ``DAYS`` normal draws from ``rng``, so a
    seeded generator reproduces the same sequence of rounds.
    """
    actual_sharpe = draw_actual_sharpe(rng)
    returns = generate_return_series(actual_sharpe, rng)
    sample_sharpe = compute_sample_sharpe(returns)
    sample_min, sample_max = sample_min_max(returns)

    result = SharpeStats(
        actual_sharpe=actual_sharpe,
        sample_sharpe=sample_sharpe,
        sharpe_error=compute_sharpe_error(sample_sharpe, days=len(returns)),
        sample_mean=float(returns.mean()),
        sample_min=sample_min,
        sample_max=sample_max,
    )
    LOGGER.debug(
        "Generated round actual=%.4f sample=%.4f error=%.4f",
        result.actual_sharpe,
        result.sample_sharpe,
        result.sharpe_error,
    )
    return returns, result



def tolerance_band_coverage(multiplier: float = GUESS_TOLERANCE_MULTIPLIER) -> float:
    """Probability that a standard normal lands within ``±multiplier``."""
    if multiplier < 0:
        raise ValueError("multiplier must be non-negative.")
    return float(stats.norm.cdf(multiplier) - stats.norm.cdf(-multiplier))



def summarize_stats(result: SharpeStats) -> dict[str, float]:
    """Flatten round statistics for text or JSON reporting."""
    summary = asdict(result)
    summary["tolerance"] = GUESS_TOLERANCE_MULTIPLIER * result.sharpe_error
    return summary
