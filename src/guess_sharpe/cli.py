"""Command line interface for the Sharpe guessing game."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
import typer

from guess_sharpe.config import AppConfig, build_config, deep_merge, merge_config
from guess_sharpe.game.app import App
from guess_sharpe.game.state import AppMode, DisplayMode, GuessingMode, GuessTarget
from guess_sharpe.metrics.sharpe import summarize_stats
from guess_sharpe.tui.terminal import run_terminal
from guess_sharpe.viz.cumulative import plot_cumulative_returns

app = typer.Typer(help="Visualize synthetic return series and guess their Sharpe ratios")
LOGGER = logging.getLogger(__name__)



def _configure_logging(
    verbose: bool,
    quiet: bool,
    log_file: str | None = None,
    default_level: int = logging.INFO,
) -> None:
    level = default_level
    if verbose:
        level = logging.DEBUG
    if quiet:
        level = logging.ERROR
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        filename=log_file,
    )



def _load_config(config_path: str | None) -> AppConfig:
    return build_config(config_path=config_path) if config_path else AppConfig()



def _apply_overrides(config: AppConfig, overrides: dict[str, Any]) -> AppConfig:
    return merge_config(config, overrides)



def _seed_override(seed: int | None) -> dict[str, Any]:
    if seed is None:
        return {}
    if seed < 0:
        raise typer.BadParameter("--seed must be a non-negative integer.")
    return {"game": {"seed": seed}}



def _emit(payload: Any, out_format: str) -> None:
    if out_format == "json":
        typer.echo(json.dumps(payload, indent=2, default=_json_default))
    else:
        if isinstance(payload, dict):
            for key, value in payload.items():
                typer.echo(f"{key}: {value}")
        else:
            typer.echo(str(payload))



def _json_default(value: Any) -> Any:
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, (np.floating, np.integer)):
        return value.item()
    raise TypeError(f"Object of type {type(value)} is not JSON serializable")


@app.command("play")
def play(
    guess: bool = typer.Option(False, "--guess", "-g", help="Enable guessing mode."),
    seed: int | None = typer.Option(None, help="Optional seed for reproducible rounds."),
    target: str | None = typer.Option(None, help="sample|actual starting guess target."),
    log_file: str | None = typer.Option(None, help="Write log records to this file."),
    config: str | None = typer.Option(None, help="Path to YAML config."),
    verbose: bool = typer.Option(False, "--verbose"),
    quiet: bool = typer.Option(False, "--quiet"),
) -> None:
    """Run the interactive terminal game."""
    if log_file:
        _configure_logging(verbose, quiet, log_file=log_file)
    else:
        # Log records on stderr would overwrite the curses screen.
        _configure_logging(verbose=False, quiet=True)
    cfg = _load_config(config)
    overrides = _seed_override(seed)
    if target is not None:
        if target.lower() not in {"sample", "actual"}:
            raise typer.BadParameter("--target must be one of: sample, actual")
        overrides = deep_merge(overrides, {"game": {"start_target": target.lower()}})
    cfg = _apply_overrides(cfg, overrides)

    mode: AppMode
    if guess:
        mode = GuessingMode.new(GuessTarget.parse(cfg.game.start_target))
    else:
        mode = DisplayMode()
    game = App(mode, seed=cfg.game.seed)
    LOGGER.info("Starting %s session", "guessing" if guess else "display")

    run_terminal(game, poll_interval_ms=cfg.ui.poll_interval_ms, marker=cfg.ui.chart_marker)

    if game.guess is not None:
        typer.echo(f"Final score: {game.guess.score}")


@app.command("round")
def generate_rounds(
    seed: int | None = typer.Option(None, help="Optional seed for reproducible rounds."),
    rounds: int = typer.Option(1, help="Number of consecutive rounds to generate."),
    out_format: str = typer.Option("text", "--format", help="text|json"),
    config: str | None = typer.Option(None, help="Path to YAML config."),
    verbose: bool = typer.Option(False, "--verbose"),
    quiet: bool = typer.Option(False, "--quiet"),
) -> None:
    """Generate rounds without the terminal UI and report their statistics."""
    _configure_logging(verbose, quiet)
    if rounds < 1:
        raise typer.BadParameter("--rounds must be >= 1.")
    if out_format not in {"text", "json"}:
        raise typer.BadParameter("--format must be one of: text, json")
    cfg = _apply_overrides(_load_config(config), _seed_override(seed))

    game = App(DisplayMode(), seed=cfg.game.seed)
    summaries = [summarize_stats(game.stats)]
    for _ in range(rounds - 1):
        game.recalc()
        summaries.append(summarize_stats(game.stats))

    if rounds == 1:
        _emit(summaries[0], out_format)
    else:
        _emit({"round_count": rounds, "rounds": summaries}, out_format)


@app.command("plot")
def plot_round(
    output: str = typer.Option(..., help="Output image path, or .html for the plotly backend."),
    seed: int | None = typer.Option(None, help="Optional seed for reproducible rounds."),
    backend: str = typer.Option("matplotlib", help="matplotlib|plotly"),
    config: str | None = typer.Option(None, help="Path to YAML config."),
    verbose: bool = typer.Option(False, "--verbose"),
    quiet: bool = typer.Option(False, "--quiet"),
) -> None:
    """Save the cumulative-return path of one generated round."""
    _configure_logging(verbose, quiet)
    if backend not in {"matplotlib", "plotly"}:
        raise typer.BadParameter("--backend must be one of: matplotlib, plotly")
    if backend == "plotly" and Path(output).suffix.lower() != ".html":
        raise typer.BadParameter("--backend plotly writes .html output only.")
    cfg = _apply_overrides(_load_config(config), _seed_override(seed))

    game = App(DisplayMode(), seed=cfg.game.seed)
    out_path = Path(output)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig = plot_cumulative_returns(
        game.plot_data,
        stats=game.stats,
        show=False,
        save_path=str(out_path),
        backend=backend,
    )
    if backend == "matplotlib":
        plt.close(fig)
    typer.echo(f"Saved plot: {out_path}")
    _emit(summarize_stats(game.stats), "text")


if __name__ == "__main__":
    app()
