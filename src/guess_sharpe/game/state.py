"""Game mode and guess-round state types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class GuessState(Enum):
    WAITING_FOR_GUESS = "waiting_for_guess"
    SHOWING_RESULT = "showing_result"


class GuessTarget(Enum):
    """Which statistic a guess is scored against."""

    SAMPLE = "Sample"
    ACTUAL = "Actual"

    @property
    def display_name(self) -> str:
        return self.value

    def toggled(self) -> GuessTarget:
        return GuessTarget.ACTUAL if self is GuessTarget.SAMPLE else GuessTarget.SAMPLE

    @classmethod
    def parse(cls, text: str) -> GuessTarget:
        """Resolve a case-insensitive target name such as ``"sample"``."""
        for member in cls:
            if member.value.lower() == text.strip().lower():
                return member
        raise ValueError(f"unknown guess target: {text!r}")


@dataclass
class Guess:
    """Mutable state of the guessing game.

    ``state``, ``current_guess``, ``last_guess`` and ``guess_was_correct``
    belong to the current round; ``score`` and ``target`` carry across rounds.
    """

    state: GuessState = GuessState.WAITING_FOR_GUESS
    target: GuessTarget = GuessTarget.SAMPLE
    current_guess: str = ""
    score: int = 0
    last_guess: float | None = None
    guess_was_correct: bool = False

    def reset_round(self) -> None:
        self.state = GuessState.WAITING_FOR_GUESS
        self.current_guess = ""
        self.last_guess = None
        self.guess_was_correct = False


@dataclass(frozen=True)
class DisplayMode:
    """Statistics are shown directly; no guessing."""


@dataclass(frozen=True)
class GuessingMode:
    """Statistics are hidden until the user submits a guess."""

    guess: Guess = field(default_factory=Guess)

    @classmethod
    def new(cls, target: GuessTarget = GuessTarget.SAMPLE) -> GuessingMode:
        return cls(guess=Guess(target=target))


AppMode = DisplayMode | GuessingMode
