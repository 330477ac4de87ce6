"""
Environment variable handling for configuration management.

Maps ``FMD2JSON_*`` variables onto configuration keys and converts their
string values to the types the configuration expects.
"""

import logging
import os
from copy import deepcopy
from typing import Any, Dict, Mapping, Optional, Tuple

from ...exceptions.config_exceptions import EnvironmentVariableError


logger = logging.getLogger(__name__)

TRUE_WORDS = ("true", "1", "yes", "on", "enabled")
FALSE_WORDS = ("false", "0", "no", "off", "disabled", "")


class EnvironmentHandler:
    """
    Environment variable handling for configuration management.

    Handles environment variable overrides and type conversion.
    """

    # env var -> (config key, target type)
    ENV_MAPPING: Dict[str, Tuple[str, str]] = {
        "FMD2JSON_CONTENT_SUFFIXES": ("content_suffixes", "list"),
        "FMD2JSON_RAW_OUTPUT": ("raw_output", "boolean"),
        "FMD2JSON_LOG_LEVEL": ("logging.level", "string"),
    }

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        """
        Initialize environment handler.

        Args:
            environ: Variables to read (defaults to os.environ at lookup time)
        """
        self._environ = environ
        self.logger = logger

    @property
    def environ(self) -> Mapping[str, str]:
        return self._environ if self._environ is not None else os.environ

    def convert_env_value(self, name: str, value: str, target_type: str) -> Any:
        """
        Convert an environment variable string to the configured type.

        Raises:
            EnvironmentVariableError: If conversion fails
        """
        if target_type == "boolean":
            word = value.strip().lower()
            if word in TRUE_WORDS:
                return True
            if word in FALSE_WORDS:
                return False
            raise EnvironmentVariableError(
                f"Cannot convert {name}={value!r} to a boolean",
                name,
            )
        if target_type == "list":
            return [item.strip() for item in value.split(",") if item.strip()]
        return value.strip()

    def apply_environment_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Args:
            config: Base configuration dictionary

        Returns:
            New configuration with overrides applied
        """
        result = deepcopy(config)

        for env_var, (config_key, target_type) in self.ENV_MAPPING.items():
            env_value = self.environ.get(env_var)
            if env_value is None:
                continue
            converted_value = self.convert_env_value(env_var, env_value, target_type)
            self._set_nested_value(result, config_key, converted_value)
            self.logger.debug(f"Applied environment override: {env_var} -> {config_key}")

        return result

    def _set_nested_value(self, config: Dict[str, Any], key_path: str, value: Any) -> None:
        keys = key_path.split(".")
        current = config

        for key in keys[:-1]:
            if not isinstance(current.get(key), dict):
                current[key] = {}
            current = current[key]

        current[keys[-1]] = value
