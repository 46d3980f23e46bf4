"""Guessing-game controller and state."""

from guess_sharpe.game.app import App
from guess_sharpe.game.events import AppEvent, EventKind, dispatch
from guess_sharpe.game.state import (
    AppMode,
    DisplayMode,
    Guess,
    GuessingMode,
    GuessState,
    GuessTarget,
)

__all__ = [
    "App",
    "AppMode",
    "AppEvent",
    "EventKind",
    "dispatch",
    "DisplayMode",
    "GuessingMode",
    "Guess",
    "GuessState",
    "GuessTarget",
]
