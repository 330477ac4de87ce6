"""
Document conversion pipeline.

The DocumentConverter drives one run: it enumerates input sources, converts
each document into a record, and writes that record (or its jq projection)
before moving on to the next document. The first fatal error ends the run.
"""

import logging
import sys
from typing import Any, Dict, Optional, Sequence, TextIO

from .frontmatter import FrontmatterParser
from .output import write_json
from .query import CompiledQuery
from .record import assemble_record, warn_conflicts
from .sources import (
    DEFAULT_CONTENT_SUFFIXES,
    STDIN_SOURCE,
    Document,
    iter_path_list,
    read_file_document,
    read_stdin_document,
)

logger = logging.getLogger(__name__)


class DocumentConverter:
    """
    Converts documents into NDJSON records.

    Args:
        out: Stream receiving records or query results
        err: Diagnostics stream receiving conflict warnings
        query: Compiled jq program; records are written unchanged when None
        raw_output: Print scalar query results as raw text
        content_suffixes: Suffixes stripped from file names for ``filename``
        stdin: Text stream used for ``-`` documents and path lists
            (defaults to sys.stdin at the time of use)
    """

    def __init__(
        self,
        out: TextIO,
        err: TextIO,
        query: Optional[CompiledQuery] = None,
        raw_output: bool = False,
        content_suffixes: Sequence[str] = DEFAULT_CONTENT_SUFFIXES,
        stdin: Optional[TextIO] = None,
    ) -> None:
        self.out = out
        self.err = err
        self.query = query
        self.raw_output = raw_output
        self.content_suffixes = tuple(content_suffixes)
        self._stdin = stdin
        self._parser = FrontmatterParser()

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    def convert(self, document: Document) -> Dict[str, Any]:
        """Split, decode and assemble one document into a record."""
        metadata, body = self._parser.parse(document.content)
        if metadata is None:
            logger.debug(f"{document.source}: no frontmatter")
        else:
            logger.debug(f"{document.source}: frontmatter with {len(metadata)} key(s)")
        warn_conflicts(metadata, self.err)
        return assemble_record(metadata, document.filename, body, document.mtime)

    def emit(self, record: Dict[str, Any]) -> None:
        """Write a record, or its query results, to the output stream."""
        if self.query is None:
            write_json(self.out, record)
        else:
            self.query.project(record, self.out, self.raw_output)

    def process_document(self, document: Document) -> None:
        self.emit(self.convert(document))

    def process_file(self, path: str) -> None:
        self.process_document(read_file_document(path, self.content_suffixes))

    def process_stdin(self) -> None:
        stream = getattr(self.stdin, "buffer", self.stdin)
        self.process_document(read_stdin_document(stream))

    def process_arg(self, arg: str) -> None:
        if arg == STDIN_SOURCE:
            self.process_stdin()
        else:
            self.process_file(arg)

    def process_path_list(self) -> int:
        """Process every path listed on stdin; returns the document count."""
        count = 0
        for path in iter_path_list(self.stdin):
            self.process_file(path)
            count += 1
        return count

    def run(self, args: Sequence[str]) -> int:
        """
        Process explicit arguments in order, or the stdin path list when
        there are none.

        Returns:
            Number of documents converted; a failing document raises before
            a count is returned
        """
        if not args:
            count = self.process_path_list()
        else:
            count = 0
            for arg in args:
                self.process_arg(arg)
                count += 1
        logger.debug(f"Converted {count} document(s)")
        return count
