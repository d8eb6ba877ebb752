"""Manages configuration for semver-isvalid.

This module is responsible for loading the application's configuration
settings. It aggregates settings from default values, TOML files, and
environment variables, providing a unified interface for accessing them.
"""

import logging
import os
from pathlib import Path
from typing import Dict, Any, Optional

try:
    import tomllib  # Available in Python 3.11+
except ImportError:
    import tomli as tomllib  # Fallback for Python versions < 3.11

logger = logging.getLogger(__name__)

# The name of the project-level configuration file.
PROJECT_CONFIG_NAME = "semver-isvalid.toml"

# The default path for the user-specific global configuration file.
USER_CONFIG_PATH = Path.home() / ".config" / "semver-isvalid" / "config.toml"

BOOLEAN_KEYS = ("with_v", "colors", "verbose")


class Config:
    """Handles the configuration for the semver-isvalid application.

    This class loads configuration from multiple sources with a defined
    precedence:
    1.  Default values (lowest precedence).
    2.  Project-specific `semver-isvalid.toml` file.
    3.  User-level `~/.config/semver-isvalid/config.toml` file.
    4.  A custom configuration file specified at runtime, which replaces
        the two files above.
    5.  Environment variables (highest precedence).

    Attributes:
        DEFAULT_CONFIG (Dict[str, Any]): A dictionary containing the default
            configuration values.
    """

    DEFAULT_CONFIG = {
        "with_v": False,  # Strip a single leading "v" before checking.
        "colors": True,
        "verbose": False,
        "spec_url": "https://semver.org",
    }

    ENV_MAPPING = {
        "SEMVER_ISVALID_WITH_V": "with_v",
        "SEMVER_ISVALID_COLORS": "colors",
        "SEMVER_ISVALID_VERBOSE": "verbose",
        "SEMVER_ISVALID_SPEC_URL": "spec_url",
    }

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initializes the configuration manager.

        Args:
            config_path (Optional[Path]): An optional path to a specific
                configuration file to load. If provided, it takes precedence
                over default file locations.
        """
        self.config = dict(self.DEFAULT_CONFIG)
        self._load_config(config_path)

    def _load_config(self, config_path: Optional[Path] = None) -> None:
        if config_path:
            self._load_file_config(Path(config_path))
        else:
            self._load_default_configs()

        self._load_env_config()

    def _load_default_configs(self) -> None:
        """Loads configs from standard locations if they exist."""
        project_config = Path.cwd() / PROJECT_CONFIG_NAME
        if project_config.exists():
            self._load_file_config(project_config)

        if USER_CONFIG_PATH.exists():
            self._load_file_config(USER_CONFIG_PATH)

    def _merge_configs(self, base: Dict[str, Any], new: Dict[str, Any]) -> None:
        """Recursively merges a new config dict into a base dict."""
        for key, value in new.items():
            if isinstance(value, dict) and key in base and isinstance(base[key], dict):
                self._merge_configs(base[key], value)
            else:
                base[key] = value

    def _load_file_config(self, config_path: Path) -> None:
        """Loads and merges configuration from a TOML file.

        A file that cannot be read or parsed is reported and skipped.

        Args:
            config_path (Path): The path to the TOML configuration file.
        """
        try:
            with open(config_path, "rb") as f:
                file_config = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Could not load config from {config_path}: {e}")
            return
        self._merge_configs(self.config, file_config)

    def _load_env_config(self) -> None:
        """Loads and merges configuration from environment variables."""
        for env_var, config_key in self.ENV_MAPPING.items():
            value = os.getenv(env_var)
            if value is None:
                continue
            if config_key in BOOLEAN_KEYS:
                self.set(config_key, value.lower() in ("true", "1", "yes", "on"))
            else:
                self.set(config_key, value)

    def get(self, key: str, default: Any = None) -> Any:
        """Retrieves a configuration value using a dot-separated key.

        Args:
            key (str): The dot-separated key (e.g., "spec_url").
            default (Any): The default value to return if the key is not found.

        Returns:
            Any: The configuration value or the default.
        """
        value: Any = self.config
        try:
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any) -> None:
        """Sets a configuration value in memory.

        Args:
            key (str): The dot-separated key.
            value (Any): The value to set.
        """
        keys = key.split('.')
        target_config = self.config
        for k in keys[:-1]:
            target_config = target_config.setdefault(k, {})
        target_config[keys[-1]] = value

    def __str__(self) -> str:
        return f"Config({self.config})"
