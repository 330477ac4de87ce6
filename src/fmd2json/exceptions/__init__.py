"""
Exceptions package for fmd2json.

This package contains custom exception classes for conversion and
configuration error scenarios.
"""

from .config_exceptions import (
    ConfigurationError,
    ConfigurationFileNotFoundError,
    ConfigurationValidationError,
    EnvironmentVariableError,
)

from .conversion_exceptions import (
    Fmd2JsonError,
    SourceReadError,
    QueryError,
    QueryCompileError,
    QueryEvaluationError,
    OutputEncodingError,
)

__all__ = [
    # Configuration exceptions
    "ConfigurationError",
    "ConfigurationFileNotFoundError",
    "ConfigurationValidationError",
    "EnvironmentVariableError",
    # Conversion exceptions
    "Fmd2JsonError",
    "SourceReadError",
    "QueryError",
    "QueryCompileError",
    "QueryEvaluationError",
    "OutputEncodingError",
]
