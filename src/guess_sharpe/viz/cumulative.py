"""Cumulative-return figures for a generated round."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd
import plotly.graph_objects as go

from guess_sharpe.metrics.sharpe import SharpeStats


def _stats_caption(stats: SharpeStats) -> str:
    return (
        f"actual Sharpe {stats.actual_sharpe:.4f}, "
        f"sample Sharpe {stats.sample_sharpe:.4f} ±{stats.sharpe_error:.4f}"
    )


def make_cumulative_figure(
    plot_data: pd.Series,
    stats: SharpeStats | None = None,
    theme: str = "plotly_white",
) -> go.Figure:
    """Create an interactive cumulative-return figure."""
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=plot_data.index,
            y=plot_data.values,
            mode="lines",
            name="Cumulative return",
            line=dict(color="darkcyan"),
        )
    )
    title = "Cumulative Returns"
    if stats is not None:
        title = f"{title}<br><sup>{_stats_caption(stats)}</sup>"
    fig.update_layout(title=title, template=theme, height=480)
    fig.update_xaxes(title_text="Day")
    fig.update_yaxes(title_text="Cum Ret")
    return fig


def plot_cumulative_returns(
    plot_data: pd.Series,
    stats: SharpeStats | None = None,
    title: str | None = None,
    show: bool = True,
    save_path: str | None = None,
    backend: str = "matplotlib",
):
    """Plot a round's cumulative-return path with either backend."""
    chart_title = title or "Cumulative Returns"

    if backend == "matplotlib":
        fig, ax = plt.subplots(figsize=(10, 4))
        ax.plot(plot_data.index, plot_data.values, color="darkcyan", label="Cumulative return")
        ax.axhline(0.0, color="gray", linewidth=0.8)
        ax.set_title(chart_title if stats is None else f"{chart_title}\n{_stats_caption(stats)}")
        ax.set_xlabel("Day")
        ax.set_ylabel("Cum Ret")
        ax.legend()
        fig.tight_layout()

        if save_path:
            fig.savefig(save_path)
        if show:
            plt.show()
        return fig

    if backend != "plotly":
        raise ValueError("backend must be 'matplotlib' or 'plotly'.")

    fig = make_cumulative_figure(plot_data, stats=stats)
    if title:
        fig.update_layout(title=title)

    if save_path:
        _save_plotly(fig, save_path)
    if show:
        fig.show()
    return fig


def _save_plotly(fig: go.Figure, save_path: str) -> None:
    out = Path(save_path)
    if out.suffix.lower() == ".html":
        fig.write_html(str(out))
    else:
        fig.write_image(str(out))
