"""
Schema validation for configuration management.

Validates the merged configuration against a JSON schema and reports every
problem at once.
"""

import logging
from typing import Any, Dict, List, Optional

import jsonschema

from ...exceptions.config_exceptions import ConfigurationValidationError


logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

CONFIG_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "content_suffixes": {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
        },
        "raw_output": {"type": "boolean"},
        "logging": {
            "type": "object",
            "properties": {
                "level": {"enum": LOG_LEVELS},
            },
        },
    },
}


class SchemaValidator:
    """JSON schema validation for the fmd2json configuration."""

    def __init__(self, schema: Optional[Dict[str, Any]] = None) -> None:
        self.schema = schema or CONFIG_SCHEMA
        self._validator = jsonschema.Draft7Validator(self.schema)
        self.logger = logger

    def collect_errors(self, config: Dict[str, Any]) -> List[str]:
        """Return a readable message for every schema violation."""
        messages = []
        for error in sorted(self._validator.iter_errors(config), key=lambda e: [str(p) for p in e.path]):
            location = ".".join(str(part) for part in error.path) or "<root>"
            messages.append(f"{location}: {error.message}")
        return messages

    def validate_config(self, config: Dict[str, Any], config_file: Optional[str] = None) -> bool:
        """
        Validate configuration against the schema.

        Raises:
            ConfigurationValidationError: If any field is invalid
        """
        errors = self.collect_errors(config)
        if errors:
            raise ConfigurationValidationError(
                "Configuration validation failed",
                config_file=config_file,
                validation_errors=errors,
            )
        self.logger.debug("Configuration passed schema validation")
        return True
