"""
fmd2json CLI Package.

Command-line interface converting frontmatter documents into NDJSON.
"""

from .cli import app, cli_main

__all__ = ["app", "cli_main"]
