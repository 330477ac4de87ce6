"""
Core conversion pipeline for fmd2json.

Components:
- frontmatter: split documents into header text and body
- metadata_decoder: YAML header decoding
- record: merge metadata with computed fields
- query: jq compilation and projection
- sources / converter: input enumeration and per-document processing
"""

from .frontmatter import (
    FrontmatterParser,
    FrontmatterResult,
    split_frontmatter,
    parse_frontmatter,
)
from .metadata_decoder import decode_metadata
from .record import (
    DEFAULT_PROPERTY_NAMES,
    assemble_record,
    conflicting_properties,
    warn_conflicts,
)
from .query import (
    CompiledQuery,
    compile_query,
    apply_query,
    scalar_to_text,
    is_scalar,
)
from .output import render_json, write_json, write_raw
from .sources import Document, read_file_document, read_stdin_document, iter_path_list
from .converter import DocumentConverter

__all__ = [
    # Frontmatter
    "FrontmatterParser",
    "FrontmatterResult",
    "split_frontmatter",
    "parse_frontmatter",
    "decode_metadata",

    # Records
    "DEFAULT_PROPERTY_NAMES",
    "assemble_record",
    "conflicting_properties",
    "warn_conflicts",

    # jq
    "CompiledQuery",
    "compile_query",
    "apply_query",
    "scalar_to_text",
    "is_scalar",

    # I/O
    "render_json",
    "write_json",
    "write_raw",
    "Document",
    "read_file_document",
    "read_stdin_document",
    "iter_path_list",
    "DocumentConverter",
]
