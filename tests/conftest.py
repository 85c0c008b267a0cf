"""Shared test fixtures."""

from __future__ import annotations

import pytest

from matter_test_shell.config import AppConfig, LoggingConfig, OutputConfig, reset_config
from matter_test_shell.grammar.parser import CommandParser


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config layer at a temporary directory and drop cached config."""
    import matter_test_shell.cli as cli_module
    import matter_test_shell.config as cfg_module

    config_dir = tmp_path / "config"
    monkeypatch.setattr(cfg_module, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(cfg_module, "CONFIG_FILE", config_dir / "config.toml")
    monkeypatch.setattr(cli_module, "CONFIG_FILE", config_dir / "config.toml")
    for var in ("MATTER_SHELL_LOG_LEVEL", "MATTER_SHELL_LOG_FILE", "MATTER_SHELL_OUTPUT_JSON"):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    yield config_dir
    reset_config()


@pytest.fixture
def app_config(tmp_path):
    """Create a test configuration."""
    return AppConfig(
        logging=LoggingConfig(level="DEBUG", file=str(tmp_path / "test.log")),
        output=OutputConfig(json=True, show_usage_on_error=False),
    )


@pytest.fixture
def parser():
    return CommandParser()
