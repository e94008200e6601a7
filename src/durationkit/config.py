"""YAML + Pydantic config loading."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from durationkit.errors import InvalidUnitSelection
from durationkit.units import SHORT_SUFFIXES, resolve_units

CONFIG_FILENAME = "duration_config.yaml"


class FormatConfig(BaseModel):
    short: bool = True
    units: list[str] = Field(default_factory=lambda: list(SHORT_SUFFIXES))

    @field_validator("units")
    @classmethod
    def _known_units(cls, value: list[str]) -> list[str]:
        try:
            resolve_units(value)
        except InvalidUnitSelection as e:
            raise ValueError(str(e)) from e
        return value


class ParseConfig(BaseModel):
    strict: bool = False


class DurationConfig(BaseModel):
    format: FormatConfig = Field(default_factory=FormatConfig)
    parse: ParseConfig = Field(default_factory=ParseConfig)


def find_config_file() -> Path | None:
    """Search for duration_config.yaml in cwd and parent dirs."""
    current = Path.cwd()
    for directory in [current, *current.parents]:
        candidate = directory / CONFIG_FILENAME
        if candidate.exists():
            return candidate
    return None


def load_config(config_path: str | Path | None = None) -> DurationConfig:
    """Load config from YAML file, falling back to defaults."""
    if config_path is None:
        found = find_config_file()
        if found is None:
            return DurationConfig()
        config_path = found

    config_path = Path(config_path)
    if not config_path.exists():
        return DurationConfig()

    with open(config_path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return DurationConfig(**raw)
