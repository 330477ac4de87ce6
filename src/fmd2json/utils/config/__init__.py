"""Configuration management package.

Provides layered configuration (defaults, JSON file, .env, environment)
with JSON schema validation.

Usage:
    from fmd2json.utils.config import ConfigManager

    config = ConfigManager()
    suffixes = config.get("content_suffixes")
"""

from .manager import ConfigManager, DEFAULT_CONFIG
from .paths import ConfigPaths
from .file_operations import FileOperations
from .schema_validation import SchemaValidator
from .environment import EnvironmentHandler

__all__ = [
    'ConfigManager',
    'DEFAULT_CONFIG',
    'ConfigPaths',
    'FileOperations',
    'SchemaValidator',
    'EnvironmentHandler',
]
