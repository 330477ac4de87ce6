"""
fmd2json - convert Markdown frontmatter documents into NDJSON records.

Each input document is split into its YAML frontmatter and body, merged with
computed fields (filename, body, mtime) and written as one JSON line, or
projected through a jq expression.
"""

__version__ = "0.1.0"
__revision__ = "HEAD"

CMD_NAME = "fmd2json"


def format_version() -> str:
    """Return the identification line printed by ``--version``."""
    return f"{CMD_NAME} v{__version__} (rev:{__revision__})"


__all__ = ["__version__", "__revision__", "CMD_NAME", "format_version"]
