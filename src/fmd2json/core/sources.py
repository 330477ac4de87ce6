"""
Input sources for fmd2json.

Documents come from explicit file paths, from standard input (the ``-``
argument), or from a newline-separated list of paths read from standard
input when no path arguments are given.
"""

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Sequence, TextIO, Union

from ..exceptions.conversion_exceptions import SourceReadError

logger = logging.getLogger(__name__)

STDIN_SOURCE = "-"
DEFAULT_CONTENT_SUFFIXES = (".md",)


@dataclass(frozen=True)
class Document:
    """One input document, read fully into memory."""

    content: bytes
    filename: str = ""
    mtime: Optional[str] = None  # None for stdin documents
    source: str = STDIN_SOURCE


def format_rfc3339(timestamp: float) -> str:
    """Format a POSIX timestamp as RFC 3339 in local time, second precision."""
    text = datetime.fromtimestamp(timestamp).astimezone().isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[:-len("+00:00")] + "Z"
    return text


def display_name(path: Union[str, Path], content_suffixes: Sequence[str] = DEFAULT_CONTENT_SUFFIXES) -> str:
    """Base name of path with the first matching content suffix removed."""
    name = os.path.basename(os.fspath(path))
    for suffix in content_suffixes:
        if suffix and name.endswith(suffix):
            return name[:-len(suffix)]
    return name


def read_file_document(
    path: Union[str, Path],
    content_suffixes: Sequence[str] = DEFAULT_CONTENT_SUFFIXES
) -> Document:
    """
    Read a document from the filesystem.

    Raises:
        SourceReadError: If the file cannot be read or stat-ed
    """
    path_str = os.fspath(path)
    try:
        content = Path(path_str).read_bytes()
    except OSError as e:
        raise SourceReadError(f"reading file {path_str}: {e}", source=path_str) from e
    try:
        stat = os.stat(path_str)
    except OSError as e:
        raise SourceReadError(f"stat file {path_str}: {e}", source=path_str) from e

    logger.debug(f"Read {len(content)} bytes from {path_str}")
    return Document(
        content=content,
        filename=display_name(path_str, content_suffixes),
        mtime=format_rfc3339(stat.st_mtime),
        source=path_str,
    )


def read_stdin_document(stream: Union[BinaryIO, TextIO]) -> Document:
    """
    Read a single document from standard input.

    Text streams without an underlying buffer are encoded back to UTF-8.

    Raises:
        SourceReadError: If reading fails
    """
    try:
        content = stream.read()
    except OSError as e:
        raise SourceReadError(f"reading stdin: {e}", source=STDIN_SOURCE) from e
    if isinstance(content, str):
        content = content.encode("utf-8")
    return Document(content=content)


def iter_path_list(stream: TextIO) -> Iterator[str]:
    """Yield stripped, non-blank lines from a path list."""
    try:
        for line in stream:
            path = line.strip()
            if path:
                yield path
    except OSError as e:
        raise SourceReadError(f"reading stdin: {e}", source=STDIN_SOURCE) from e
