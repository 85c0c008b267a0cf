"""Tests for configuration module."""

from __future__ import annotations

from matter_test_shell.config import AppConfig, LoggingConfig, OutputConfig, get_config, load_config, reset_config, save_config


class TestAppConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.logging.level == "WARNING"
        assert config.logging.file == ""
        assert config.output.json is False
        assert config.output.show_usage_on_error is True

    def test_load_without_file(self, isolated_config):
        assert not (isolated_config / "config.toml").exists()
        assert load_config() == AppConfig()

    def test_save_and_load(self, isolated_config):
        config = AppConfig(
            logging=LoggingConfig(level="DEBUG", file="/tmp/shell.log"),
            output=OutputConfig(json=True, show_usage_on_error=False),
        )

        save_config(config)
        assert (isolated_config / "config.toml").exists()

        loaded = load_config()
        assert loaded.logging.level == "DEBUG"
        assert loaded.logging.file == "/tmp/shell.log"
        assert loaded.output.json is True
        assert loaded.output.show_usage_on_error is False

    def test_env_overrides(self, app_config, monkeypatch):
        save_config(app_config)
        monkeypatch.setenv("MATTER_SHELL_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("MATTER_SHELL_OUTPUT_JSON", "no")

        loaded = load_config()
        assert loaded.logging.level == "ERROR"
        assert loaded.output.json is False
        assert loaded.logging.file == app_config.logging.file

    def test_singleton(self):
        first = get_config()
        assert get_config() is first
        reset_config()
        assert get_config() is not first
