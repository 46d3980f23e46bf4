"""Configuration models and helpers for the Sharpe guessing game."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field


StartTarget = Literal["sample", "actual"]


class GameConfig(BaseModel):
    """Round generation and scoring configuration."""

    model_config = ConfigDict(extra="forbid")

    seed: int | None = Field(default=None, ge=0)
    start_target: StartTarget = "sample"


class UIConfig(BaseModel):
    """Terminal front-end configuration."""

    model_config = ConfigDict(extra="forbid")

    poll_interval_ms: int = Field(default=100, gt=0)
    chart_marker: str = Field(default="*", min_length=1, max_length=1)


class AppConfig(BaseModel):
    """Top-level package configuration."""

    model_config = ConfigDict(extra="forbid")

    game: GameConfig = Field(default_factory=GameConfig)
    ui: UIConfig = Field(default_factory=UIConfig)


def load_yaml_config(path: str | Path) -> dict[str, Any]:
    """Load raw YAML config into a dictionary."""
    with Path(path).open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError("YAML configuration must decode to a mapping object.")
    return data


def build_config(config_path: str | Path | None = None, overrides: dict[str, Any] | None = None) -> AppConfig:
    """Build application config with precedence: overrides > YAML > defaults."""
    merged: dict[str, Any] = {}
    if config_path is not None:
        merged.update(load_yaml_config(config_path))
    if overrides:
        merged = deep_merge(merged, overrides)
    return AppConfig.model_validate(merged)


def merge_config(config: AppConfig, overrides: dict[str, Any]) -> AppConfig:
    """Return a validated copy of ``config`` with nested ``overrides`` applied."""
    return AppConfig.model_validate(deep_merge(config.model_dump(), overrides))


def deep_merge(base: dict[str, Any], patch: dict[str, Any]) -> dict[str, Any]:
    """Merge nested dictionaries recursively."""
    out = dict(base)
    for key, value in patch.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = deep_merge(out[key], value)
        else:
            out[key] = value
    return out
