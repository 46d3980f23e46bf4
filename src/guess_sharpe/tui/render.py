"""Screen text for the terminal front end (pure logic, testable without curses).

Every builder returns a list of ``(text, style)`` segments. Styles are names
the terminal layer maps onto colour pairs.
"""

from __future__ import annotations

from guess_sharpe.game.app import App
from guess_sharpe.game.state import GuessState
from guess_sharpe.metrics.sharpe import tolerance_band_coverage

Segment = tuple[str, str]

STATS_TITLE = "Statistics"
GUESSING_TITLE = "Guessing Game"
CONTROLS_TITLE = "Controls"
CHART_TITLE = "Cumulative Returns Plot"



def segments_text(segments: list[Segment]) -> str:
    """Plain text of a segment list."""
    return "".join(text for text, _ in segments)



def stats_panel(app: App) -> tuple[str, list[Segment]]:
    """Title and contents of the top panel for the current mode."""
    guess = app.guess
    if guess is None:
        return STATS_TITLE, display_stats(app)
    if guess.state is GuessState.WAITING_FOR_GUESS:
        return GUESSING_TITLE, waiting_stats(app)
    return GUESSING_TITLE, result_stats(app)



def display_stats(app: App) -> list[Segment]:
    stats = app.stats
    return [
        ("Actual Sharpe: ", "label"),
        (f"{stats.actual_sharpe:.4f}", "positive"),
        ("  ", "plain"),
        ("Sample Sharpe: ", "label"),
        (f"{stats.sample_sharpe:.4f}", "accent"),
        (f" ±{stats.sharpe_error:.4f}", "muted"),
        ("  ", "plain"),
        ("Mean: ", "label"),
        (f"{stats.sample_mean:.6f}", "plain"),
        ("  ", "plain"),
        ("Min: ", "label"),
        (f"{stats.sample_min:.4f}", "negative"),
        ("  ", "plain"),
        ("Max: ", "label"),
        (f"{stats.sample_max:.4f}", "positive"),
    ]



def waiting_stats(app: App) -> list[Segment]:
    guess = app.guess
    return [
        ("Your guess: ", "label"),
        (guess.current_guess, "input"),
        ("   ", "plain"),
        (f"Score: {guess.score}", "score"),
        ("   ", "plain"),
        ("Target: ", "label"),
        (guess.target.display_name, "target"),
    ]



def result_stats(app: App) -> list[Segment]:
    guess = app.guess
    stats = app.stats
    last_guess = guess.last_guess if guess.last_guess is not None else 0.0
    if guess.guess_was_correct:
        verdict: Segment = ("CORRECT!", "correct")
    else:
        verdict = ("INCORRECT", "incorrect")
    coverage = tolerance_band_coverage()
    return [
        ("Guess: ", "label"),
        (f"{last_guess:.4f}", "plain"),
        (" | ", "plain"),
        ("Target: ", "label"),
        (f"{app.target_value:.4f}", "target"),
        (f" ({guess.target.display_name}) ±{stats.sharpe_error:.4f}", "muted"),
        (" | ", "plain"),
        verdict,
        (" | ", "plain"),
        ("Actual: ", "label"),
        (f"{stats.actual_sharpe:.4f}", "accent"),
        (" | ", "plain"),
        ("Sample: ", "label"),
        (f"{stats.sample_sharpe:.4f}", "accent"),
        (" | ", "plain"),
        (f"Score: {guess.score}", "score"),
        (" | ", "plain"),
        (f"Band ±{app.tolerance:.4f} (central ~{coverage:.0%})", "muted"),
    ]



def controls(app: App) -> list[Segment]:
    """Key help for the bottom panel."""
    guess = app.guess
    if guess is None:
        return [
            ("Press ", "plain"),
            ("'r'", "key"),
            (" to recalculate, ", "plain"),
            ("'q'", "key"),
            (" to quit", "plain"),
        ]
    if guess.state is GuessState.WAITING_FOR_GUESS:
        return [
            ("Type your Sharpe ratio guess and press ", "plain"),
            ("Enter", "key"),
            (" to submit. Press ", "plain"),
            ("'t'", "key"),
            (" to toggle target, ", "plain"),
            ("'q'", "key"),
            (" to quit", "plain"),
        ]
    return [
        ("Press ", "plain"),
        ("'n'", "key"),
        (" for next round, ", "plain"),
        ("'q'", "key"),
        (" to quit", "plain"),
    ]
