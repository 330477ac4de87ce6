"""
Utilities package for fmd2json.
"""

from .config import ConfigManager, ConfigPaths

__all__ = [
    "ConfigManager",
    "ConfigPaths",
]
