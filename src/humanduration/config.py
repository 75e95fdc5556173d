"""YAML + Pydantic config loading for the command line."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field

from humanduration.fields import HumanDuration
from humanduration.models import Duration
from humanduration.utils.logging import get_logger

log = get_logger(__name__)

CONFIG_FILENAME = "humanduration.yaml"

OutputFormat = Literal["human", "seconds", "nanos", "json"]


class OutputConfig(BaseModel):
    format: OutputFormat = "human"


class HumanDurationConfig(BaseModel):
    output: OutputConfig = Field(default_factory=OutputConfig)
    # Named durations, e.g. {"short": "5m"}; `parse short` resolves them.
    presets: dict[str, HumanDuration] = Field(default_factory=dict)

    def resolve_preset(self, name: str) -> Duration | None:
        return self.presets.get(name)


def find_config_file() -> Path | None:
    """Search for humanduration.yaml in cwd and parent dirs."""
    current = Path.cwd()
    for directory in [current, *current.parents]:
        candidate = directory / CONFIG_FILENAME
        if candidate.exists():
            return candidate
    return None


def load_config(config_path: str | Path | None = None) -> HumanDurationConfig:
    """Load config from YAML file, falling back to defaults."""
    if config_path is None:
        found = find_config_file()
        if found is None:
            return HumanDurationConfig()
        config_path = found

    config_path = Path(config_path)
    if not config_path.exists():
        log.debug("Config file %s not found, using defaults", config_path)
        return HumanDurationConfig()

    with open(config_path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    log.debug("Loaded config from %s", config_path)
    return HumanDurationConfig(**raw)
