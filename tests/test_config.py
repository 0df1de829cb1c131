"""Tests for grocery_list.config module."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest

if TYPE_CHECKING:
    from pathlib import Path

from grocery_list.config import Config, ConfigError, load_config


class TestConfig:
    """Tests for the Config dataclass."""

    def test_config_defaults(self) -> None:
        """Test Config uses correct default values."""
        cfg = Config()
        assert cfg.groceries_path == "groceries.json"
        assert cfg.shopping_list_path == "list.json"
        assert cfg.log_level == "WARNING"

    def test_config_is_frozen(self) -> None:
        """Test Config is immutable (frozen dataclass)."""
        cfg = Config()
        with pytest.raises(AttributeError):
            cfg.groceries_path = "other.json"  # type: ignore[misc]

    def test_log_level_value(self) -> None:
        """Test log_level maps to the numeric logging level."""
        assert Config(log_level="DEBUG").log_level_value == logging.DEBUG
        assert Config().log_level_value == logging.WARNING


class TestConfigError:
    """Tests for ConfigError exception."""

    def test_config_error_is_exception(self) -> None:
        """Test ConfigError is a proper exception."""
        err = ConfigError("bad value")
        assert str(err) == "bad value"
        assert isinstance(err, Exception)


class TestLoadConfig:
    """Tests for load_config function."""

    @patch("grocery_list.config.load_dotenv")
    @patch.dict(os.environ, {}, clear=True)
    def test_load_config_defaults(self, _mock_dotenv: object) -> None:
        """Test load_config with nothing set uses defaults."""
        cfg = load_config()
        assert cfg == Config()

    @patch("grocery_list.config.load_dotenv")
    @patch.dict(
        os.environ,
        {
            "GROCERIES_PATH": "/data/groceries.json",
            "SHOPPING_LIST_PATH": "/data/list.json",
            "LOG_LEVEL": "info",
        },
        clear=True,
    )
    def test_load_config_all_vars(self, _mock_dotenv: object) -> None:
        """Test load_config reads every variable."""
        cfg = load_config()
        assert cfg.groceries_path == "/data/groceries.json"
        assert cfg.shopping_list_path == "/data/list.json"
        assert cfg.log_level == "INFO"

    @patch("grocery_list.config.load_dotenv")
    @patch.dict(os.environ, {"LOG_LEVEL": "loud"}, clear=True)
    def test_load_config_invalid_log_level_raises(self, _mock_dotenv: object) -> None:
        """Test load_config raises ConfigError for an unknown LOG_LEVEL."""
        with pytest.raises(ConfigError, match="LOG_LEVEL must be one of"):
            load_config()

    @patch("grocery_list.config.load_dotenv")
    @patch.dict(os.environ, {"GROCERIES_PATH": "  "}, clear=True)
    def test_load_config_empty_groceries_path_raises(
        self, _mock_dotenv: object
    ) -> None:
        """Test load_config raises ConfigError for a blank GROCERIES_PATH."""
        with pytest.raises(ConfigError, match="GROCERIES_PATH"):
            load_config()

    @patch("grocery_list.config.load_dotenv")
    @patch.dict(os.environ, {"SHOPPING_LIST_PATH": ""}, clear=True)
    def test_load_config_empty_list_path_raises(self, _mock_dotenv: object) -> None:
        """Test load_config raises ConfigError for a blank SHOPPING_LIST_PATH."""
        with pytest.raises(ConfigError, match="SHOPPING_LIST_PATH"):
            load_config()

    @patch.dict(os.environ, {}, clear=True)
    def test_load_config_reads_env_file(self, tmp_path: Path) -> None:
        """Test load_config picks up values from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("GROCERIES_PATH=from_env_file.json\n")
        cfg = load_config(env_path=env_file)
        assert cfg.groceries_path == "from_env_file.json"
