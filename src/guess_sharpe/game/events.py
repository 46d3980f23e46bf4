"""Input events delivered to the game controller, and their dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from guess_sharpe.game.app import App


class EventKind(Enum):
    QUIT = "quit"
    RECALCULATE = "recalculate"
    CHARACTER_INPUT = "character_input"
    BACKSPACE = "backspace"
    SUBMIT = "submit"
    NEXT_ROUND = "next_round"
    TOGGLE_TARGET = "toggle_target"
    HEARTBEAT = "heartbeat"


@dataclass(frozen=True)
class AppEvent:
    """One discrete input symbol; ``char`` is set only for character input."""

    kind: EventKind
    char: str | None = None

    def __post_init__(self) -> None:
        if self.kind is EventKind.CHARACTER_INPUT and (self.char is None or len(self.char) != 1):
            raise ValueError("character input events carry exactly one character.")

    @classmethod
    def character(cls, char: str) -> AppEvent:
        return cls(EventKind.CHARACTER_INPUT, char)


QUIT = AppEvent(EventKind.QUIT)
RECALCULATE = AppEvent(EventKind.RECALCULATE)
BACKSPACE = AppEvent(EventKind.BACKSPACE)
SUBMIT = AppEvent(EventKind.SUBMIT)
NEXT_ROUND = AppEvent(EventKind.NEXT_ROUND)
TOGGLE_TARGET = AppEvent(EventKind.TOGGLE_TARGET)
HEARTBEAT = AppEvent(EventKind.HEARTBEAT)



def dispatch(app: App, event: AppEvent) -> None:
    """Apply one input event to ``app``."""
    kind = event.kind
    if kind is EventKind.QUIT:
        app.quit()
    elif kind is EventKind.RECALCULATE:
        app.recalc()
    elif kind is EventKind.CHARACTER_INPUT:
        app.add_char_to_guess(event.char)
    elif kind is EventKind.BACKSPACE:
        app.remove_char_from_guess()
    elif kind is EventKind.SUBMIT:
        app.submit_guess()
    elif kind is EventKind.NEXT_ROUND:
        app.next_round()
    elif kind is EventKind.TOGGLE_TARGET:
        app.toggle_guess_target()
    # heartbeat only triggers a redraw
