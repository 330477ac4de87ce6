"""
Configuration-related exceptions for fmd2json.

Custom exception classes for handling configuration loading, validation,
and environment variable errors with user-friendly messages.
"""

from typing import List, Optional


class ConfigurationError(Exception):
    """Base exception for configuration-related errors."""

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error description
            config_file: Configuration file path that caused the error
            suggestions: List of suggested fixes
        """
        super().__init__(message)
        self.config_file = config_file
        self.suggestions = suggestions or []

    def __str__(self) -> str:
        """Return formatted error message with suggestions."""
        msg = super().__str__()

        if self.config_file:
            msg = f"{msg}\nConfig file: {self.config_file}"

        if self.suggestions:
            msg += "\n\nSuggestions:"
            for i, suggestion in enumerate(self.suggestions, 1):
                msg += f"\n  {i}. {suggestion}"

        return msg


class ConfigurationFileNotFoundError(ConfigurationError):
    """Exception raised when a configuration file is not found."""

    def __init__(self, message: str, config_file: Optional[str] = None) -> None:
        suggestions = [
            "Check if the configuration file exists at the specified path",
            "Verify file permissions allow reading",
            "Omit --config-path to run with the built-in defaults",
        ]
        super().__init__(message, config_file, suggestions)


class ConfigurationValidationError(ConfigurationError):
    """Exception raised when configuration validation fails."""

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        validation_errors: Optional[List[str]] = None
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error description
            config_file: Configuration file with validation errors
            validation_errors: List of specific validation error messages
        """
        super().__init__(message, config_file)
        self.validation_errors = validation_errors or []

    def __str__(self) -> str:
        """Return formatted validation error with details."""
        msg = super().__str__()

        if self.validation_errors:
            msg += "\n\nValidation errors:"
            for i, error in enumerate(self.validation_errors, 1):
                msg += f"\n  {i}. {error}"

        return msg


class EnvironmentVariableError(ConfigurationError):
    """Exception raised when an environment override cannot be converted."""

    def __init__(self, message: str, variable_name: Optional[str] = None) -> None:
        suggestions = []
        if variable_name:
            suggestions.append(f"Fix or unset {variable_name} in the environment or .env file")
        super().__init__(message, suggestions=suggestions)
        self.variable_name = variable_name
