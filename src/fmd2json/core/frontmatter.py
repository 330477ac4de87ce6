"""
Frontmatter Splitting Module

Splits a document into its YAML frontmatter block and body. The header must
start at the very first byte with a ``---`` boundary line and is closed by
the first ``---`` boundary line that follows. LF and CRLF line endings are
accepted independently for the opening and closing boundaries, and a closing
boundary at the very end of the document needs no trailing newline.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

from .metadata_decoder import decode_metadata

logger = logging.getLogger(__name__)

OPENING_BOUNDARIES = ("---\n", "---\r\n")
CLOSING_LF = "\n---\n"
CLOSING_CRLF = "\r\n---\r\n"
TRAILING_LF = "\n---"
TRAILING_CRLF = "\r\n---"


@dataclass
class FrontmatterResult:
    """Result container for a frontmatter split.

    Attributes:
        has_frontmatter: True if a complete header block was found
        metadata_text: Raw header text between the boundaries, None without header
        body: Document content following the header (or the whole document)
    """
    has_frontmatter: bool
    metadata_text: Optional[str] = None
    body: str = ""

    def __post_init__(self):
        if self.has_frontmatter and self.metadata_text is None:
            raise ValueError("metadata_text is required when has_frontmatter is True")
        if not isinstance(self.body, str):
            raise ValueError(f"body must be a string, got {type(self.body)}")


def _to_text(content: Union[bytes, str]) -> str:
    if isinstance(content, bytes):
        return content.decode("utf-8", errors="replace")
    return content


class FrontmatterParser:
    """Splitter for ``---`` delimited YAML frontmatter."""

    def split(self, content: Union[bytes, str]) -> FrontmatterResult:
        """Split content into header text and body.

        Args:
            content: Raw document bytes (decoded as UTF-8) or text

        Returns:
            FrontmatterResult; without a complete header the body is the
            original content verbatim
        """
        text = _to_text(content)

        opening = next((b for b in OPENING_BOUNDARIES if text.startswith(b)), None)
        if opening is None:
            return FrontmatterResult(has_frontmatter=False, body=text)

        rest = text[len(opening):]
        lf_index = rest.find(CLOSING_LF)
        crlf_index = rest.find(CLOSING_CRLF)

        if lf_index >= 0 and (crlf_index < 0 or lf_index <= crlf_index):
            return FrontmatterResult(
                has_frontmatter=True,
                metadata_text=rest[:lf_index],
                body=rest[lf_index + len(CLOSING_LF):],
            )
        if crlf_index >= 0:
            return FrontmatterResult(
                has_frontmatter=True,
                metadata_text=rest[:crlf_index],
                body=rest[crlf_index + len(CLOSING_CRLF):],
            )

        # Header-only document whose closing boundary ends the file
        for trailing in (TRAILING_CRLF, TRAILING_LF):
            if rest.endswith(trailing):
                return FrontmatterResult(
                    has_frontmatter=True,
                    metadata_text=rest[:-len(trailing)],
                    body="",
                )

        logger.debug("Opening boundary without a closing boundary, treating document as body")
        return FrontmatterResult(has_frontmatter=False, body=text)

    def parse(self, content: Union[bytes, str]) -> Tuple[Optional[Dict[str, Any]], str]:
        """Split content and decode its header.

        Returns:
            (metadata, body) where metadata is None when there is no header
            or the header is not a YAML mapping
        """
        result = self.split(content)
        if not result.has_frontmatter:
            return None, result.body
        return decode_metadata(result.metadata_text), result.body


_parser = FrontmatterParser()


def split_frontmatter(content: Union[bytes, str]) -> Tuple[Optional[str], str]:
    """Return ``(metadata_text, body)`` for a document."""
    result = _parser.split(content)
    return result.metadata_text, result.body


def parse_frontmatter(content: Union[bytes, str]) -> Tuple[Optional[Dict[str, Any]], str]:
    """Return ``(metadata, body)`` for a document."""
    return _parser.parse(content)
