"""Curses event loop and screen drawing."""

from __future__ import annotations

import curses
import logging

from guess_sharpe.game.app import App
from guess_sharpe.game.events import dispatch
from guess_sharpe.tui.chart import axis_labels, rasterize
from guess_sharpe.tui.keys import map_key
from guess_sharpe.tui.render import CHART_TITLE, CONTROLS_TITLE, Segment, controls, stats_panel

LOGGER = logging.getLogger(__name__)

MIN_WIDTH = 40
MIN_HEIGHT = 12
PANEL_HEIGHT = 3

# style name -> (foreground colour, extra attributes)
STYLES: dict[str, tuple[int, int]] = {
    "plain": (curses.COLOR_WHITE, 0),
    "label": (curses.COLOR_YELLOW, 0),
    "positive": (curses.COLOR_GREEN, 0),
    "negative": (curses.COLOR_RED, 0),
    "accent": (curses.COLOR_CYAN, 0),
    "muted": (curses.COLOR_WHITE, curses.A_DIM),
    "input": (curses.COLOR_WHITE, curses.A_UNDERLINE),
    "score": (curses.COLOR_GREEN, curses.A_BOLD),
    "target": (curses.COLOR_MAGENTA, curses.A_BOLD),
    "correct": (curses.COLOR_GREEN, curses.A_BOLD),
    "incorrect": (curses.COLOR_RED, curses.A_BOLD),
    "key": (curses.COLOR_YELLOW, curses.A_BOLD),
    "chart": (curses.COLOR_CYAN, 0),
    "axis": (curses.COLOR_WHITE, curses.A_BOLD),
}



def run_terminal(app: App, poll_interval_ms: int = 100, marker: str = "*") -> None:
    """Run the interactive loop until the app stops; restores the terminal on exit."""
    curses.wrapper(_main_loop, app, poll_interval_ms, marker)



def _main_loop(stdscr: curses.window, app: App, poll_interval_ms: int, marker: str) -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        LOGGER.debug("Terminal cannot hide the cursor")
    stdscr.timeout(poll_interval_ms)
    attrs = _init_styles()
    LOGGER.info("Terminal loop started (poll=%dms)", poll_interval_ms)
    while app.running:
        draw(stdscr, app, attrs, marker)
        dispatch(app, map_key(stdscr.getch()))
    LOGGER.info("Terminal loop stopped")



def _init_styles() -> dict[str, int]:
    if not curses.has_colors():
        return {name: extra for name, (_, extra) in STYLES.items()}
    curses.start_color()
    curses.use_default_colors()
    attrs: dict[str, int] = {}
    pairs: dict[int, int] = {}
    for name, (colour, extra) in STYLES.items():
        if colour not in pairs:
            pair_id = len(pairs) + 1
            curses.init_pair(pair_id, colour, -1)
            pairs[colour] = pair_id
        attrs[name] = curses.color_pair(pairs[colour]) | extra
    return attrs



def draw(stdscr: curses.window, app: App, attrs: dict[str, int], marker: str = "*") -> None:
    stdscr.erase()
    height, width = stdscr.getmaxyx()
    if height < MIN_HEIGHT or width < MIN_WIDTH:
        _put(stdscr, 0, 0, "Terminal too small", width, attrs.get("negative", 0))
        stdscr.refresh()
        return

    title, stats_line = stats_panel(app)
    _draw_panel(stdscr, 0, height=PANEL_HEIGHT, width=width, title=title, segments=stats_line, attrs=attrs)
    _draw_chart(stdscr, PANEL_HEIGHT, height - 2 * PANEL_HEIGHT, width, app, attrs, marker)
    _draw_panel(
        stdscr,
        height - PANEL_HEIGHT,
        height=PANEL_HEIGHT,
        width=width,
        title=CONTROLS_TITLE,
        segments=controls(app),
        attrs=attrs,
    )
    stdscr.refresh()



def _draw_panel(
    stdscr: curses.window,
    top: int,
    height: int,
    width: int,
    title: str,
    segments: list[Segment],
    attrs: dict[str, int],
) -> None:
    win = stdscr.derwin(height, width, top, 0)
    win.box()
    _put(win, 0, 2, f" {title} ", width - 4, attrs["axis"])
    col = 2
    for text, style in segments:
        room = width - 2 - col
        if room <= 0:
            break
        _put(win, 1, col, text, room, attrs.get(style, 0))
        col += len(text)



def _draw_chart(
    stdscr: curses.window,
    top: int,
    height: int,
    width: int,
    app: App,
    attrs: dict[str, int],
    marker: str,
) -> None:
    win = stdscr.derwin(height, width, top, 0)
    win.box()
    _put(win, 0, 2, f" {CHART_TITLE} ", width - 4, attrs["axis"])

    y_labels, _ = axis_labels(app.plot_data)
    label_width = 1 + max(len(label) for label in y_labels)
    grid = rasterize(app.plot_data, width - 2 - label_width, height - 3, marker)
    y_min, y_mid, y_max = grid.y_labels
    body_rows = len(grid.rows)
    for idx, row in enumerate(grid.rows):
        _put(win, 1 + idx, 1 + label_width, row, len(row), attrs["chart"])
    if body_rows:
        _put(win, 1, 1, y_max.rjust(label_width - 1), label_width, attrs["axis"])
        _put(win, 1 + body_rows // 2, 1, y_mid.rjust(label_width - 1), label_width, attrs["axis"])
        _put(win, body_rows, 1, y_min.rjust(label_width - 1), label_width, attrs["axis"])

    x_start, x_mid, x_end = grid.x_labels
    axis_row = height - 2
    grid_width = width - 2 - label_width
    _put(win, axis_row, 1 + label_width, x_start, grid_width, attrs["axis"])
    _put(win, axis_row, 1 + label_width + grid_width // 2 - len(x_mid) // 2, x_mid, len(x_mid), attrs["axis"])
    _put(win, axis_row, width - 1 - len(x_end), x_end, len(x_end), attrs["axis"])



def _put(win: curses.window, y: int, x: int, text: str, room: int, attr: int) -> None:
    if room <= 0:
        return
    win.addstr(y, x, text[:room], attr)
