"""
Conversion-related exceptions for fmd2json.

Errors raised while reading documents and projecting records through jq.
Metadata decode failures are not represented here: they are absorbed by the
decoder and the document is converted without metadata.
"""

from typing import List, Optional


class Fmd2JsonError(Exception):
    """Base exception for fatal conversion errors."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ) -> None:
        """
        Initialize conversion error.

        Args:
            message: Error description
            source: Document path (or "-" for stdin) being processed
            suggestions: List of suggested fixes
        """
        super().__init__(message)
        self.source = source
        self.suggestions = suggestions or []

    def __str__(self) -> str:
        msg = super().__str__()

        if self.suggestions:
            msg += "\n\nSuggestions:"
            for i, suggestion in enumerate(self.suggestions, 1):
                msg += f"\n  {i}. {suggestion}"

        return msg


class SourceReadError(Fmd2JsonError):
    """Raised when a document cannot be read or stat-ed."""


class QueryError(Fmd2JsonError):
    """Base exception for jq expression failures."""

    def __init__(
        self,
        message: str,
        expression: Optional[str] = None,
        source: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ) -> None:
        super().__init__(message, source, suggestions)
        self.expression = expression


class QueryCompileError(QueryError):
    """Raised when a jq expression cannot be parsed or compiled."""

    def __init__(self, message: str, expression: Optional[str] = None) -> None:
        suggestions = [
            "Check the expression syntax with `jq -n '<expression>'`",
            "Quote the expression so the shell does not expand it",
        ]
        super().__init__(message, expression=expression, suggestions=suggestions)


class QueryEvaluationError(QueryError):
    """Raised when evaluating a jq expression against a record fails."""


class OutputEncodingError(Fmd2JsonError):
    """Raised when a value has no JSON representation."""

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        suggestions = [
            "Quote non-finite numbers such as .inf and .nan in the frontmatter",
        ]
        super().__init__(message, source, suggestions)
