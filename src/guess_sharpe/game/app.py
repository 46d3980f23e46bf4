"""Game controller holding the generator, round statistics and guess state."""

from __future__ import annotations

import logging

import numpy as np
import numpy.typing as npt
import pandas as pd

from guess_sharpe.game.state import AppMode, Guess, GuessingMode, GuessState, GuessTarget
from guess_sharpe.metrics.returns import compute_cumulative_returns
from guess_sharpe.metrics.sharpe import GUESS_TOLERANCE_MULTIPLIER, SharpeStats, generate_round

LOGGER = logging.getLogger(__name__)

GUESS_CHARACTERS = frozenset("0123456789.-")


class App:
    """Single game session.

    The generator is created once and carried through every ``recalc`` so a
    seeded session reproduces its whole sequence of rounds. ``seed=None``
    seeds from OS entropy.
    """

    def __init__(self, mode: AppMode, seed: int | None = None) -> None:
        self.running = True
        self.rng = np.random.default_rng(seed)
        self.mode = mode
        self.returns: npt.NDArray[np.float64]
        self.stats: SharpeStats
        self.plot_data: pd.Series
        self._generate()

    @property
    def guess(self) -> Guess | None:
        """Guess state when in guessing mode, else ``None``."""
        if isinstance(self.mode, GuessingMode):
            return self.mode.guess
        return None

    @property
    def tolerance(self) -> float:
        return GUESS_TOLERANCE_MULTIPLIER * self.stats.sharpe_error

    @property
    def target_value(self) -> float | None:
        """Value the active guess target is scored against."""
        guess = self.guess
        if guess is None:
            return None
        if guess.target is GuessTarget.SAMPLE:
            return self.stats.sample_sharpe
        return self.stats.actual_sharpe

    def quit(self) -> None:
        self.running = False

    def recalc(self) -> None:
        """Generate a new round; the score survives."""
        self._generate()
        guess = self.guess
        if guess is not None:
            guess.reset_round()
        LOGGER.debug("Recalculated round; score=%s", guess.score if guess else None)

    def add_char_to_guess(self, c: str) -> None:
        guess = self._waiting_guess()
        if guess is None:
            return
        if len(c) == 1 and c in GUESS_CHARACTERS:
            guess.current_guess += c

    def remove_char_from_guess(self) -> None:
        guess = self._waiting_guess()
        if guess is None:
            return
        guess.current_guess = guess.current_guess[:-1]

    def toggle_guess_target(self) -> None:
        guess = self._waiting_guess()
        if guess is None:
            return
        guess.target = guess.target.toggled()

    def submit_guess(self) -> None:
        """Score the typed guess.

        A buffer that does not parse as a number is left untouched so the
        user can keep editing it.
        """
        guess = self._waiting_guess()
        if guess is None:
            return
        try:
            parsed_guess = float(guess.current_guess)
        except ValueError:
            return

        guess.last_guess = parsed_guess
        target_value = self.target_value
        correct = abs(parsed_guess - target_value) <= self.tolerance
        if correct:
            guess.score += 1
        guess.guess_was_correct = correct
        guess.state = GuessState.SHOWING_RESULT
        LOGGER.debug(
            "Guess %.4f vs %s %.4f (tolerance %.4f): %s",
            parsed_guess,
            guess.target.display_name,
            target_value,
            self.tolerance,
            "correct" if correct else "incorrect",
        )

    def next_round(self) -> None:
        guess = self.guess
        if guess is not None and guess.state is GuessState.SHOWING_RESULT:
            self.recalc()

    def _waiting_guess(self) -> Guess | None:
        guess = self.guess
        if guess is None or guess.state is not GuessState.WAITING_FOR_GUESS:
            return None
        return guess

    def _generate(self) -> None:
        self.returns, self.stats = generate_round(self.rng)
        self.plot_data = compute_cumulative_returns(self.returns)
