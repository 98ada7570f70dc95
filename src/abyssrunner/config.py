"""
config.py

Typed game configuration.

- Validated with pydantic, every field has a default
- At most one UTF-8 JSON file is read; no other I/O
- ABYSSRUNNER_LOG_LEVEL overrides the file's log_level

Config file location, first match wins:
  1) the path passed on the command line (--config)
  2) ABYSSRUNNER_CONFIG_PATH
  3) ./abyssrunner_config.json
  4) <user config dir>/abyssrunner/abyssrunner_config.json
If none exists the defaults are used.

Example:
{
  "cell_size": 40,
  "player_speed": 4,
  "fps": 60,
  "game_over_restart_ms": 4000
}
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError, field_validator

from abyssrunner.infra.exceptions import ConfigError

CONFIG_FILENAME = "abyssrunner_config.json"
ENV_CONFIG_PATH = "ABYSSRUNNER_CONFIG_PATH"
ENV_LOG_LEVEL = "ABYSSRUNNER_LOG_LEVEL"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class GameConfig(BaseModel):
    cell_size: float = Field(default=40.0, gt=0, description="Side of one grid cell in world units.")
    player_radius: float = Field(default=10.0, gt=0)
    player_speed: float = Field(default=4.0, gt=0, description="World units moved per tick per held key.")
    hazard_hit_radius: float = Field(default=8.0, gt=0, description="Added to player_radius for hazard hits.")
    hazard_draw_radius: float = Field(default=8.0, gt=0)
    fps: int = Field(default=60, ge=1, le=240, description="Target tick rate of the loop.")
    game_over_restart_ms: int = Field(default=4000, ge=0, description="Delay before GAME_OVER returns to START.")
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        normalized = (value or "").strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError("log_level must be one of: " + ", ".join(sorted(_LOG_LEVELS)))
        return normalized


def _default_config_candidates() -> list[Path]:
    return [
        Path.cwd() / CONFIG_FILENAME,
        Path(user_config_dir("abyssrunner", appauthor=False)) / CONFIG_FILENAME,
    ]


def _resolve_config_path(explicit: Path | None) -> Path | None:
    if explicit is not None:
        return explicit

    env_text = os.environ.get(ENV_CONFIG_PATH, "").strip()
    if env_text:
        return Path(env_text)

    for candidate in _default_config_candidates():
        if candidate.exists():
            return candidate
    return None


def _read_json_object(path: Path) -> dict[str, Any]:
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to read config file {path}: {e}") from e

    try:
        parsed = json.loads(raw_text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file is not valid JSON: {path}: {e}") from e

    if not isinstance(parsed, dict):
        raise ConfigError(f"Config file must contain a JSON object: {path}")
    return parsed


def load_config(path: Path | None = None) -> GameConfig:
    config_path = _resolve_config_path(path)

    data: dict[str, Any] = {}
    if config_path is not None:
        data = _read_json_object(config_path)

    level_override = os.environ.get(ENV_LOG_LEVEL, "").strip()
    if level_override:
        data["log_level"] = level_override

    try:
        return GameConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config ({config_path or 'defaults'}): {e}") from e
