"""Configuration management using TOML + environment variables."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[no-redef]

import tomli_w

CONFIG_DIR = Path.home() / ".matter-test-shell"
CONFIG_FILE = CONFIG_DIR / "config.toml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    file: str = ""


@dataclass
class OutputConfig:
    json: bool = False
    show_usage_on_error: bool = True


@dataclass
class AppConfig:
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


def ensure_config_dir() -> None:
    """Create config directory with owner-only permissions."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    os.chmod(CONFIG_DIR, 0o700)


def load_config() -> AppConfig:
    """Load configuration from TOML file with env var overrides."""
    config = AppConfig()

    if CONFIG_FILE.exists():
        with open(CONFIG_FILE, "rb") as f:
            data = tomllib.load(f)

        logging_cfg = data.get("logging", {})
        config.logging.level = logging_cfg.get("level", config.logging.level)
        config.logging.file = logging_cfg.get("file", config.logging.file)

        output = data.get("output", {})
        config.output.json = output.get("json", config.output.json)
        config.output.show_usage_on_error = output.get("show_usage_on_error", config.output.show_usage_on_error)

    # Environment variable overrides
    if env_log_level := os.environ.get("MATTER_SHELL_LOG_LEVEL"):
        config.logging.level = env_log_level
    if env_log_file := os.environ.get("MATTER_SHELL_LOG_FILE"):
        config.logging.file = env_log_file
    if env_json := os.environ.get("MATTER_SHELL_OUTPUT_JSON"):
        config.output.json = _env_flag(env_json)

    return config


def save_config(config: AppConfig) -> None:
    """Save configuration to TOML file."""
    ensure_config_dir()

    data = {
        "logging": {
            "level": config.logging.level,
            "file": config.logging.file,
        },
        "output": {
            "json": config.output.json,
            "show_usage_on_error": config.output.show_usage_on_error,
        },
    }

    with open(CONFIG_FILE, "wb") as f:
        tomli_w.dump(data, f)


# Global singleton
_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get or load the global config singleton."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global config (for testing)."""
    global _config
    _config = None
