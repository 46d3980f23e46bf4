"""Play one scripted round of the guessing game without the terminal UI."""

from guess_sharpe.game import App, GuessingMode, dispatch
from guess_sharpe.game.events import SUBMIT, AppEvent


def main() -> None:
    app = App(GuessingMode.new(), seed=7)
    guess = f"{app.stats.sample_sharpe:.3f}"
    for char in guess:
        dispatch(app, AppEvent.character(char))
    dispatch(app, SUBMIT)

    print("actual sharpe:", round(app.stats.actual_sharpe, 4))
    print("sample sharpe:", round(app.stats.sample_sharpe, 4))
    print("tolerance:", round(app.tolerance, 4))
    print("guess:", app.guess.last_guess, "correct:", app.guess.guess_was_correct)
    print("score:", app.guess.score)


if __name__ == "__main__":
    main()
