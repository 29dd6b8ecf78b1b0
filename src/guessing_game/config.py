# Area: Shared
"""
guessing_game.config — Runtime configuration
============================================

Validated settings for diagnostics and debugging. None of them change
the rules of the game.

Sources, lowest to highest precedence:
    1. Defaults
    2. JSON config file (--config)
    3. Environment variables (a .env file is loaded first)
    4. CLI flags
"""

from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

logger = logging.getLogger("guessing_game.config")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Environment variable -> config key
ENV_MAPPINGS = {
    "GUESSING_GAME_LOG_LEVEL": "log_level",
    "GUESSING_GAME_LOG_FILE": "log_file",
    "GUESSING_GAME_SEED": "seed",
    "GUESSING_GAME_REVEAL_SECRET": "reveal_secret",
}


class GameConfig(BaseModel):
    """Settings for one run of the game."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    log_level: str = "WARNING"
    log_file: Optional[str] = None
    seed: Optional[int] = None
    reveal_secret: bool = False

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


def load_config_file(config_path: str) -> Dict[str, Any]:
    """
    Read a JSON config file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a JSON object
    """
    path = Path(config_path)
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    return data


def load_env() -> Dict[str, Any]:
    """Collect config values from the environment (and .env)."""
    load_dotenv(find_dotenv(usecwd=True))
    values: Dict[str, Any] = {}
    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            values[config_key] = os.environ[env_key]
    return values


def build_config(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> GameConfig:
    """
    Merge all config sources into a validated GameConfig.

    Args:
        config_path: Optional path to a JSON config file
        overrides: Values from CLI flags; None entries are ignored

    Raises:
        pydantic.ValidationError: If a value is invalid
    """
    values: Dict[str, Any] = {}
    if config_path:
        values.update(load_config_file(config_path))
    values.update(load_env())
    if overrides:
        values.update({k: v for k, v in overrides.items() if v is not None})
    return GameConfig(**values)
