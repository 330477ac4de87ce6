"""
Main configuration manager for fmd2json.

This module provides the ConfigManager class that loads built-in defaults,
an optional JSON configuration file, a ``.env`` file and ``FMD2JSON_*``
environment overrides, then validates the result.
"""

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .environment import EnvironmentHandler
from .file_operations import FileOperations
from .paths import ConfigPaths
from .schema_validation import SchemaValidator


logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "content_suffixes": [".md"],
    "raw_output": False,
    "logging": {
        "level": "WARNING",
    },
}


def deep_merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into a copy of base."""
    result = deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge_dicts(result[key], value)
        else:
            result[key] = deepcopy(value)
    return result


class ConfigManager:
    """
    Configuration manager for fmd2json.

    Sources, lowest precedence first:
    - Built-in defaults
    - JSON configuration file (``fmd2json.config.json`` unless given)
    - Environment variables (after loading ``.env``)
    """

    def __init__(
        self,
        config_file: Optional[str] = None,
        project_root: Optional[Union[str, Path]] = None,
        load_env: bool = True,
    ) -> None:
        """
        Initialize the ConfigManager.

        Args:
            config_file: Path to configuration file; an explicit path must exist
            project_root: Directory for relative paths (default: current working directory)
            load_env: Whether to load environment variables from the .env file
        """
        self.project_root = Path(project_root or os.getcwd()).resolve()
        self.paths = ConfigPaths()
        self.explicit_config_file = config_file is not None
        self.config_file = config_file or self.paths.DEFAULT_CONFIG_FILE

        self._config: Dict[str, Any] = {}
        self._loaded = False

        self.logger = logger

        self.file_ops = FileOperations(self.project_root, self.paths.ENV_FILE)
        self.env_handler = EnvironmentHandler()
        self.schema_validator = SchemaValidator()

        if load_env:
            self.file_ops.load_environment_variables()

    @property
    def config(self) -> Dict[str, Any]:
        """Get the current configuration. Loads if not already loaded."""
        if not self._loaded:
            self.load_config()
        return deepcopy(self._config)

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def load_config(self, force_reload: bool = False) -> Dict[str, Any]:
        """
        Load configuration from all sources.

        Args:
            force_reload: Force reloading even if already loaded

        Returns:
            Loaded configuration dictionary

        Raises:
            ConfigurationFileNotFoundError: If an explicit config file is missing
            ConfigurationValidationError: If validation fails
            ConfigurationError: If any other loading step fails
        """
        if self._loaded and not force_reload:
            return deepcopy(self._config)

        config = deepcopy(DEFAULT_CONFIG)

        config_path = self.file_ops.resolve_path(self.config_file)
        if self.explicit_config_file or config_path.exists():
            self.logger.debug(f"Loading configuration from {config_path}")
            config = deep_merge_dicts(config, self.file_ops.load_json_file(config_path))
        else:
            self.logger.debug("No configuration file found, using defaults")

        config = self.env_handler.apply_environment_overrides(config)
        self._normalize(config)

        self.schema_validator.validate_config(config, str(config_path))

        self._config = config
        self._loaded = True
        return deepcopy(self._config)

    def _normalize(self, config: Dict[str, Any]) -> None:
        logging_config = config.get("logging")
        if isinstance(logging_config, dict) and isinstance(logging_config.get("level"), str):
            logging_config["level"] = logging_config["level"].upper()

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key using dot notation.

        Args:
            key: Configuration key (e.g. 'logging.level')
            default: Default value if key not found
        """
        config = self.config
        try:
            for k in key.split("."):
                config = config[k]
            return config
        except (KeyError, TypeError):
            return default

    @property
    def content_suffixes(self) -> List[str]:
        return list(self.get("content_suffixes", DEFAULT_CONFIG["content_suffixes"]))

    @property
    def raw_output(self) -> bool:
        return bool(self.get("raw_output", False))

    @property
    def log_level(self) -> str:
        return self.get("logging.level", "WARNING")

    def reset(self) -> None:
        """Reset configuration state, forcing reload on next access."""
        self._config = {}
        self._loaded = False
