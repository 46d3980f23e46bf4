import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from guess_sharpe.game.app import App
from guess_sharpe.game.state import DisplayMode, GuessingMode


@pytest.fixture()
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture()
def display_app() -> App:
    return App(DisplayMode(), seed=42)


@pytest.fixture()
def guessing_app() -> App:
    return App(GuessingMode.new(), seed=42)
