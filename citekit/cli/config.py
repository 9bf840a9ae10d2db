"""Configuration management for the CLI."""

import os
from pathlib import Path
from typing import Any

import yaml

DEFAULTS: dict[str, Any] = {
    "style": "apa",
    "form": "both",
    "output": "table",
}


class Config:
    """Configuration management for the CLI application."""

    @staticmethod
    def from_file(path: Path) -> dict[str, Any]:
        """Load configuration from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}") from e
        except OSError as e:
            raise ValueError(f"Error reading config file: {e}") from e

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping")
        return data

    @staticmethod
    def get_config_paths() -> list[Path]:
        """Get the default configuration file paths to check."""
        paths = []

        # User config
        xdg_config_home = Path(
            os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
        )
        paths.append(xdg_config_home / "citekit" / "config.yaml")

        # Project config
        paths.append(Path(".citekit.yaml"))
        paths.append(Path("citekit.yaml"))

        return paths

    @staticmethod
    def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
        """Merge multiple configuration dictionaries."""
        result: dict[str, Any] = {}
        for config in configs:
            result = _deep_merge(result, config)
        return result


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load configuration from defaults, files and environment variables.

    Args:
        path: Explicit config file, applied after the default locations.
    """
    config = dict(DEFAULTS)

    # Last file wins for conflicting keys
    for candidate in Config.get_config_paths():
        if candidate.exists():
            config = Config.merge_configs(config, Config.from_file(candidate))

    if path is not None:
        config = Config.merge_configs(config, Config.from_file(path))

    env_overrides = {}
    if style := os.environ.get("CITEKIT_STYLE"):
        env_overrides["style"] = style
    if output := os.environ.get("CITEKIT_OUTPUT"):
        env_overrides["output"] = output

    return Config.merge_configs(config, env_overrides)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
