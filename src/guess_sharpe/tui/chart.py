"""Character-cell line chart of the cumulative-return path."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class ChartGrid:
    """Rasterized chart body plus axis labels."""

    rows: list[str]
    y_labels: tuple[str, str, str]
    x_labels: tuple[str, str, str]



def axis_labels(plot_data: pd.Series) -> tuple[tuple[str, str, str], tuple[str, str, str]]:
    """Y labels (min, mid, max) and X labels (0, half, length)."""
    values = plot_data.to_numpy(dtype=float)
    finite = values[np.isfinite(values)]
    if finite.size:
        y_min, y_max = float(finite.min()), float(finite.max())
    else:
        y_min = y_max = float("nan")
    n = len(values)
    y_labels = (f"{y_min:.3f}", f"{(y_min + y_max) / 2.0:.3f}", f"{y_max:.3f}")
    x_labels = ("0", f"{n / 2.0:.0f}", f"{n}")
    return y_labels, x_labels



def rasterize(plot_data: pd.Series, width: int, height: int, marker: str = "*") -> ChartGrid:
    """Scale the series into ``height`` rows of ``width`` characters.

    Row 0 is the top of the chart. Consecutive columns are joined vertically
    so steep moves read as a continuous line. Non-finite points are skipped.
    """
    if len(marker) != 1:
        raise ValueError("marker must be a single character.")
    y_labels, x_labels = axis_labels(plot_data)
    if width <= 0 or height <= 0 or plot_data.empty:
        return ChartGrid(rows=[], y_labels=y_labels, x_labels=x_labels)

    values = plot_data.to_numpy(dtype=float)
    finite = values[np.isfinite(values)]
    cells = [[" "] * width for _ in range(height)]
    if finite.size == 0:
        return ChartGrid(rows=["".join(r) for r in cells], y_labels=y_labels, x_labels=x_labels)

    y_min, y_max = float(finite.min()), float(finite.max())
    span = y_max - y_min
    positions = np.linspace(0, len(values) - 1, num=width).round().astype(int)

    previous_row: int | None = None
    for col, pos in enumerate(positions):
        value = values[pos]
        if not np.isfinite(value):
            previous_row = None
            continue
        if span == 0:
            row = height // 2
        else:
            row = int(round((y_max - value) / span * (height - 1)))
        if previous_row is None:
            low, high = row, row
        else:
            low, high = min(row, previous_row), max(row, previous_row)
        for r in range(low, high + 1):
            cells[r][col] = marker
        previous_row = row

    return ChartGrid(rows=["".join(r) for r in cells], y_labels=y_labels, x_labels=x_labels)
