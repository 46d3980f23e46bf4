import pytest

from guess_sharpe.game.app import App
from guess_sharpe.game.events import (
    BACKSPACE,
    HEARTBEAT,
    NEXT_ROUND,
    QUIT,
    RECALCULATE,
    SUBMIT,
    TOGGLE_TARGET,
    AppEvent,
    EventKind,
    dispatch,
)
from guess_sharpe.game.state import DisplayMode, GuessState, GuessTarget


def test_character_event_requires_single_character():
    with pytest.raises(ValueError):
        AppEvent.character("12")
    with pytest.raises(ValueError):
        AppEvent(EventKind.CHARACTER_INPUT)


def test_heartbeat_changes_nothing(guessing_app):
    stats = guessing_app.stats
    dispatch(guessing_app, AppEvent.character("3"))
    dispatch(guessing_app, HEARTBEAT)
    assert guessing_app.stats is stats
    assert guessing_app.guess.current_guess == "3"
    assert guessing_app.running


def test_quit_event(guessing_app):
    dispatch(guessing_app, QUIT)
    assert guessing_app.running is False


def test_recalculate_event_in_display_mode():
    app = App(DisplayMode(), seed=3)
    stats = app.stats
    dispatch(app, RECALCULATE)
    assert app.stats != stats


def test_full_round_through_events(guessing_app):
    for char in "0.5x":
        dispatch(guessing_app, AppEvent.character(char))
    dispatch(guessing_app, BACKSPACE)
    assert guessing_app.guess.current_guess == "0."

    dispatch(guessing_app, TOGGLE_TARGET)
    assert guessing_app.guess.target is GuessTarget.ACTUAL

    dispatch(guessing_app, SUBMIT)
    assert guessing_app.guess.state is GuessState.SHOWING_RESULT
    assert guessing_app.guess.last_guess == 0.0

    dispatch(guessing_app, NEXT_ROUND)
    assert guessing_app.guess.state is GuessState.WAITING_FOR_GUESS
    assert guessing_app.guess.target is GuessTarget.ACTUAL
