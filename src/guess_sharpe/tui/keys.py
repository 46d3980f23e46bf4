"""Translate curses key codes into game events."""

from __future__ import annotations

import curses

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

NO_KEY = -1
ESCAPE = 27

COMMAND_KEYS: dict[str, AppEvent] = {
    "q": QUIT,
    "r": RECALCULATE,
    "n": NEXT_ROUND,
    "t": TOGGLE_TARGET,
}
BACKSPACE_KEYS = frozenset({curses.KEY_BACKSPACE, 127, 8})
ENTER_KEYS = frozenset({curses.KEY_ENTER, 10, 13})



def map_key(key: int) -> AppEvent:
    """Map one ``getch`` result to an event; a poll timeout is a heartbeat."""
    if key == NO_KEY:
        return HEARTBEAT
    if key == ESCAPE:
        return QUIT
    if key in BACKSPACE_KEYS:
        return BACKSPACE
    if key in ENTER_KEYS:
        return SUBMIT
    if 32 <= key < 127:
        char = chr(key)
        return COMMAND_KEYS.get(char) or AppEvent.character(char)
    return HEARTBEAT
