"""
Record assembly.

Merges decoded frontmatter with the computed fields of a document. The
computed fields always win: same-named metadata entries are dropped and a
warning is written for each of them before the record is built.
"""

import logging
from typing import Any, Dict, List, Optional, TextIO

logger = logging.getLogger(__name__)

DEFAULT_PROPERTY_NAMES = ("filename", "body", "mtime")

CONFLICT_WARNING = (
    'warning: frontmatter property "{name}" conflicts with default property, '
    "using default value\n"
)


def conflicting_properties(metadata: Optional[Dict[str, Any]]) -> List[str]:
    """Return reserved names present in metadata, in reserved-name order."""
    if metadata is None:
        return []
    return [name for name in DEFAULT_PROPERTY_NAMES if name in metadata]


def warn_conflicts(metadata: Optional[Dict[str, Any]], sink: TextIO) -> None:
    """Write one warning line to sink per reserved name found in metadata."""
    for name in conflicting_properties(metadata):
        logger.debug(f"Frontmatter property {name!r} overridden by default value")
        sink.write(CONFLICT_WARNING.format(name=name))


def assemble_record(
    metadata: Optional[Dict[str, Any]],
    filename: str,
    body: str,
    mtime: Optional[str] = None
) -> Dict[str, Any]:
    """
    Build the output record for one document.

    Args:
        metadata: Decoded frontmatter, or None when absent
        filename: Display name of the document ("" for stdin)
        body: Document content after the header
        mtime: RFC 3339 modification time, None for stdin documents

    Returns:
        Metadata entries in decoder order followed by the computed fields
    """
    record: Dict[str, Any] = {}
    if metadata:
        record.update(
            (key, value) for key, value in metadata.items()
            if key not in DEFAULT_PROPERTY_NAMES
        )

    record["filename"] = filename
    record["body"] = body
    if mtime is not None:
        record["mtime"] = mtime
    return record
