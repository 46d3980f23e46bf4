import curses
from dataclasses import replace

import pandas as pd
import pytest

from guess_sharpe.game.events import (
    BACKSPACE,
    HEARTBEAT,
    NEXT_ROUND,
    QUIT,
    RECALCULATE,
    SUBMIT,
    TOGGLE_TARGET,
    AppEvent,
)
from guess_sharpe.tui.chart import rasterize
from guess_sharpe.tui.keys import map_key
from guess_sharpe.tui.render import (
    GUESSING_TITLE,
    STATS_TITLE,
    controls,
    segments_text,
    stats_panel,
)


@pytest.mark.parametrize(
    ("key", "event"),
    [
        (-1, HEARTBEAT),
        (27, QUIT),
        (ord("q"), QUIT),
        (ord("r"), RECALCULATE),
        (ord("n"), NEXT_ROUND),
        (ord("t"), TOGGLE_TARGET),
        (ord("5"), AppEvent.character("5")),
        (ord("-"), AppEvent.character("-")),
        (ord("x"), AppEvent.character("x")),
        (127, BACKSPACE),
        (curses.KEY_BACKSPACE, BACKSPACE),
        (10, SUBMIT),
        (curses.KEY_ENTER, SUBMIT),
        (curses.KEY_UP, HEARTBEAT),
    ],
)
def test_map_key(key, event):
    assert map_key(key) == event


def test_display_stats_panel(display_app):
    title, segments = stats_panel(display_app)
    text = segments_text(segments)
    stats = display_app.stats
    assert title == STATS_TITLE
    assert f"Actual Sharpe: {stats.actual_sharpe:.4f}" in text
    assert f"Sample Sharpe: {stats.sample_sharpe:.4f} ±{stats.sharpe_error:.4f}" in text
    assert f"Mean: {stats.sample_mean:.6f}" in text
    assert "'r'" in segments_text(controls(display_app))


def test_waiting_stats_panel_hides_statistics(guessing_app):
    guessing_app.guess.current_guess = "1.2"
    title, segments = stats_panel(guessing_app)
    text = segments_text(segments)
    assert title == GUESSING_TITLE
    assert "Your guess: 1.2" in text
    assert "Score: 0" in text
    assert "Target: Sample" in text
    assert "Sharpe" not in text
    assert "Enter" in segments_text(controls(guessing_app))


def test_result_stats_panel(guessing_app):
    guessing_app.guess.current_guess = "0.1"
    guessing_app.submit_guess()
    text = segments_text(stats_panel(guessing_app)[1])
    assert "Guess: 0.1000" in text
    assert ("CORRECT!" in text) != ("INCORRECT" in text)
    assert f"Band ±{guessing_app.tolerance:.4f}" in text
    assert "central ~10%" in text
    assert "'n'" in segments_text(controls(guessing_app))


def test_result_panel_formats_degenerate_values(guessing_app):
    guessing_app.stats = replace(guessing_app.stats, sample_sharpe=float("nan"))
    guessing_app.guess.current_guess = "1"
    guessing_app.submit_guess()
    text = segments_text(stats_panel(guessing_app)[1])
    assert "Sample: nan" in text


def test_rasterize_rising_line():
    grid = rasterize(pd.Series([0.0, 1.0, 2.0, 3.0]), width=4, height=4)
    assert grid.rows == ["   *", "  **", " ** ", "**  "]
    assert grid.y_labels == ("0.000", "1.500", "3.000")
    assert grid.x_labels == ("0", "2", "4")


def test_rasterize_flat_series_uses_middle_row():
    grid = rasterize(pd.Series([0.5] * 10), width=5, height=5, marker="#")
    assert grid.rows[2] == "#####"
    assert all(set(row) == {" "} for i, row in enumerate(grid.rows) if i != 2)


def test_rasterize_skips_non_finite_points():
    grid = rasterize(pd.Series([0.0, float("nan"), 2.0]), width=3, height=3)
    assert grid.rows == ["  *", "   ", "*  "]


def test_rasterize_edge_cases(display_app):
    assert rasterize(display_app.plot_data, width=0, height=5).rows == []
    with pytest.raises(ValueError):
        rasterize(display_app.plot_data, width=10, height=5, marker="**")

    grid = rasterize(display_app.plot_data, width=60, height=10)
    assert len(grid.rows) == 10
    assert all(len(row) == 60 for row in grid.rows)
    for col in range(60):
        assert any(row[col] == "*" for row in grid.rows)
