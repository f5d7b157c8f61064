"""Game configuration: defaults, optional JSON file, environment, overrides."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, model_validator

from huntgrid.sim.board import GenerationThresholds
from huntgrid.sim.contracts import Direction
from huntgrid.sim.player import DEFAULT_AMMO, DEFAULT_HEADING, DEFAULT_START

DEFAULT_CONFIG_PATH = Path("huntgrid.json")
DEFAULT_SIZE = 10

ENV_KEYS: dict[str, str] = {
    "HUNTGRID_SIZE": "size",
    "HUNTGRID_SEED": "seed",
    "HUNTGRID_AMMO": "starting_ammo",
}


class GameConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    size: int = Field(default=DEFAULT_SIZE, ge=1)
    thresholds: GenerationThresholds = Field(default_factory=GenerationThresholds)
    starting_ammo: int = Field(default=DEFAULT_AMMO, ge=0)
    start: tuple[int, int] = DEFAULT_START
    heading: Direction = DEFAULT_HEADING
    seed: int | None = None
    # True clears the start tile after generation; False keeps generation as is.
    safe_start: bool = False

    @model_validator(mode="after")
    def validate_start(self) -> "GameConfig":
        x, y = self.start
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise ValueError(
                f"start {self.start} is outside a {self.size}x{self.size} board"
            )
        return self


def load_game_config(
    path: Path | None = None,
    *,
    env: Mapping[str, str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> GameConfig:
    data: dict[str, Any] = {}
    if path is not None:
        data.update(_load_json(path))
    elif DEFAULT_CONFIG_PATH.exists():
        data.update(_load_json(DEFAULT_CONFIG_PATH))

    env = os.environ if env is None else env
    for env_key, field_name in ENV_KEYS.items():
        value = env.get(env_key)
        if value:
            data[field_name] = value

    for key, value in (overrides or {}).items():
        if value is not None:
            data[key] = value

    return GameConfig.model_validate(data)


def _load_json(path: Path) -> dict:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Missing config file: {path}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Malformed config file {path}: {exc.msg}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object.")
    return data
