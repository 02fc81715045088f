# config_manager.py - JSON config overlay for the counting backends

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from typing import Optional

from typing_extensions import TypedDict

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "wordcount.json"
CONFIG_ENV_VAR = "WORDCOUNT_CONFIG"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigData(TypedDict, total=False):
    """Shape of the JSON config file. Every key is optional."""
    initial_capacity: int
    load_factor: float
    growth_factor: int
    log_level: str


@dataclass(frozen=True)
class CounterConfig:
    """
    Knobs for the hash table backend plus the log level.
    Tree backends have nothing to tune.
    """
    initial_capacity: int = 16
    load_factor: float = 0.75
    growth_factor: int = 2
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.initial_capacity < 1:
            raise ValueError("initial_capacity must be >= 1")
        if not 0.0 < self.load_factor <= 1.0:
            raise ValueError("load_factor must be in (0, 1]")
        if self.growth_factor < 2:
            raise ValueError("growth_factor must be >= 2")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"unknown log_level {self.log_level!r}")


def _coerce(default, value):
    """
    Convert a JSON value to the type of the matching default.
    Booleans and fractional numbers are rejected for integer options
    instead of being truncated.
    """
    if isinstance(value, bool):
        raise ValueError("booleans are not accepted")
    if isinstance(default, int):
        if isinstance(value, float) and not value.is_integer():
            raise ValueError("expected a whole number")
        return int(value)
    if isinstance(default, float):
        return float(value)
    if not isinstance(value, str):
        raise TypeError("expected a string")
    return value


class Config:
    """
    Defaults overlaid with an optional JSON file.
    path: explicit file, else $WORDCOUNT_CONFIG, else ./wordcount.json.
    A missing file is fine and nothing is written back.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path or os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
        self.data: ConfigData = {
            f.name: f.default for f in fields(CounterConfig)  # type: ignore[misc]
        }
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ValueError(f"invalid config file {self.path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ValueError(f"invalid config file {self.path}: expected an object")

        for k, v in loaded.items():
            if k not in self.data:
                logger.warning("ignoring unknown config option %r in %s", k, self.path)
                continue
            try:
                self.data[k] = _coerce(self.data[k], v)
            except (TypeError, ValueError) as e:
                raise ValueError(f"bad value for {k!r} in {self.path}: {v!r}") from e

    def counter_config(self) -> CounterConfig:
        return CounterConfig(**self.data)
