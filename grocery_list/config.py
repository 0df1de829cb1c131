"""Configuration loading and validation for grocery-list.

Loads settings from .env via python-dotenv. Command-line flags override
anything set here.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dotenv import load_dotenv

if TYPE_CHECKING:
    from pathlib import Path

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Raised when configuration is missing or invalid."""


@dataclass(frozen=True)
class Config:
    """Typed, validated application configuration."""

    # Data files
    groceries_path: str = "groceries.json"
    shopping_list_path: str = "list.json"

    # Logging
    log_level: str = "WARNING"

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for ``log_level``."""
        return logging.getLevelName(self.log_level)


def load_config(env_path: str | Path | None = None) -> Config:
    """Load and validate configuration from environment / .env file.

    Args:
        env_path: Optional path to .env file. If None, searches from cwd upward.

    Returns:
        Validated Config instance.

    Raises:
        ConfigError: If a setting has an invalid value.
    """
    load_dotenv(dotenv_path=env_path)

    log_level = os.getenv("LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigError(
            f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got: {log_level!r}"
        )

    groceries_path = os.getenv("GROCERIES_PATH", "groceries.json")
    if not groceries_path.strip():
        raise ConfigError("GROCERIES_PATH must not be empty.")

    shopping_list_path = os.getenv("SHOPPING_LIST_PATH", "list.json")
    if not shopping_list_path.strip():
        raise ConfigError("SHOPPING_LIST_PATH must not be empty.")

    return Config(
        groceries_path=groceries_path,
        shopping_list_path=shopping_list_path,
        log_level=log_level,
    )
