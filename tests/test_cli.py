import json
import logging
from pathlib import Path

from typer.testing import CliRunner

from guess_sharpe.cli import app
from guess_sharpe.game.state import DisplayMode, GuessingMode, GuessTarget

runner = CliRunner()


def test_round_command_is_reproducible_with_seed():
    first = runner.invoke(app, ["round", "--seed", "7", "--format", "json"])
    second = runner.invoke(app, ["round", "--seed", "7", "--format", "json"])

    assert first.exit_code == 0
    assert first.stdout == second.stdout
    payload = json.loads(first.stdout)
    assert payload["sharpe_error"] >= 0
    assert payload["sample_min"] <= payload["sample_mean"] <= payload["sample_max"]
    assert "tolerance" in payload


def test_round_command_multiple_rounds():
    single = json.loads(runner.invoke(app, ["round", "--seed", "7", "--format", "json"]).stdout)
    result = runner.invoke(app, ["round", "--seed", "7", "--rounds", "3", "--format", "json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["round_count"] == 3
    assert len(payload["rounds"]) == 3
    assert payload["rounds"][0] == single
    assert payload["rounds"][1] != single


def test_round_command_text_format():
    result = runner.invoke(app, ["round", "--seed", "1"])
    assert result.exit_code == 0
    assert "sample_sharpe:" in result.stdout


def test_round_command_rejects_bad_options():
    assert runner.invoke(app, ["round", "--rounds", "0"]).exit_code != 0
    assert runner.invoke(app, ["round", "--format", "xml"]).exit_code != 0
    assert runner.invoke(app, ["round", "--seed", "-3"]).exit_code != 0


def test_play_command_starts_guessing_session(monkeypatch, tmp_path: Path):
    calls: list[dict] = []

    def _fake_run(game, poll_interval_ms, marker):
        calls.append({"game": game, "poll": poll_interval_ms, "marker": marker})
        game.guess.current_guess = repr(game.stats.actual_sharpe)
        game.submit_guess()
        game.quit()

    monkeypatch.setattr("guess_sharpe.cli.run_terminal", _fake_run)
    config_path = tmp_path / "config.yaml"
    config_path.write_text("ui:\n  poll_interval_ms: 250\n  chart_marker: o\n", encoding="utf-8")

    result = runner.invoke(
        app,
        ["play", "--guess", "--seed", "3", "--target", "actual", "--config", str(config_path)],
    )

    assert result.exit_code == 0
    assert calls
    game = calls[0]["game"]
    assert isinstance(game.mode, GuessingMode)
    assert game.guess.target is GuessTarget.ACTUAL
    assert calls[0]["poll"] == 250
    assert calls[0]["marker"] == "o"
    assert "Final score: 1" in result.stdout


def test_play_command_defaults_to_display_mode(monkeypatch):
    modes = []
    monkeypatch.setattr(
        "guess_sharpe.cli.run_terminal",
        lambda game, poll_interval_ms, marker: modes.append(game.mode),
    )
    result = runner.invoke(app, ["play"])
    assert result.exit_code == 0
    assert isinstance(modes[0], DisplayMode)
    assert "Final score" not in result.stdout


def test_play_command_rejects_unknown_target(monkeypatch):
    monkeypatch.setattr("guess_sharpe.cli.run_terminal", lambda *args, **kwargs: None)
    result = runner.invoke(app, ["play", "--guess", "--target", "median"])
    assert result.exit_code != 0


def test_plot_command_writes_files(tmp_path: Path):
    png_path = tmp_path / "out" / "round.png"
    result = runner.invoke(app, ["plot", "--output", str(png_path), "--seed", "5"])
    assert result.exit_code == 0
    assert png_path.exists()
    assert "Saved plot" in result.stdout

    html_path = tmp_path / "round.html"
    result = runner.invoke(
        app,
        ["plot", "--output", str(html_path), "--seed", "5", "--backend", "plotly"],
    )
    assert result.exit_code == 0
    assert html_path.exists()


def test_plot_command_rejects_unknown_backend(tmp_path: Path):
    result = runner.invoke(app, ["plot", "--output", str(tmp_path / "x.png"), "--backend", "bokeh"])
    assert result.exit_code != 0


def test_play_without_log_file_keeps_debug_records_off_the_screen(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    def _fake_run(game, poll_interval_ms, marker):
        game.recalc()

    monkeypatch.setattr("guess_sharpe.cli.run_terminal", _fake_run)
    result = runner.invoke(app, ["play", "--verbose", "--seed", "2"])

    assert result.exit_code == 0
    assert root.level == logging.ERROR
    assert "DEBUG" not in result.output
    assert "INFO" not in result.output


def test_play_with_log_file_honours_verbose(monkeypatch, tmp_path: Path):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    monkeypatch.setattr("guess_sharpe.cli.run_terminal", lambda game, poll_interval_ms, marker: game.recalc())

    log_path = tmp_path / "game.log"
    result = runner.invoke(app, ["play", "--verbose", "--seed", "2", "--log-file", str(log_path)])
    for handler in root.handlers:
        handler.close()

    assert result.exit_code == 0
    assert "Recalculated round" in log_path.read_text(encoding="utf-8")


def test_plot_command_rejects_plotly_image_output(tmp_path: Path):
    out = tmp_path / "round.png"
    result = runner.invoke(app, ["plot", "--output", str(out), "--seed", "5", "--backend", "plotly"])
    assert result.exit_code == 2
    assert not out.exists()
