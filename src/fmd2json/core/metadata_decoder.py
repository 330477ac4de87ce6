"""
YAML metadata decoding.

Turns frontmatter text into an insertion-ordered ``dict`` of JSON-compatible
values. Anything that is not a YAML mapping is reported as absent metadata
rather than an error, so a broken header never stops a conversion.
"""

import logging
from typing import Any, Dict, Optional, Set

import yaml

logger = logging.getLogger(__name__)


class MetadataLoader(yaml.SafeLoader):
    """SafeLoader that leaves timestamps as plain strings and keys mappings by text."""

    def construct_mapping(self, node, deep=False):
        if not isinstance(node, yaml.MappingNode):
            raise yaml.constructor.ConstructorError(
                None, None, f"expected a mapping node, but found {node.id}", node.start_mark
            )
        self.flatten_mapping(node)
        mapping = {}
        for key_node, value_node in node.value:
            key = key_text(self.construct_object(key_node, deep=True))
            mapping[key] = self.construct_object(value_node, deep=deep)
        return mapping


# Drop the implicit timestamp resolver so dates decode as str, not datetime
MetadataLoader.yaml_implicit_resolvers = {
    first_char: [
        (tag, regexp) for tag, regexp in resolvers
        if tag != "tag:yaml.org,2002:timestamp"
    ]
    for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def key_text(key: Any) -> str:
    """Spell a decoded mapping key the way JSON spells the scalar."""
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


def normalize_value(value: Any, _parents: Optional[Set[int]] = None) -> Any:
    """
    Convert a decoded YAML value into JSON-compatible Python types.

    Raises:
        ValueError: If value contains itself through an alias
    """
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if not isinstance(value, (dict, list, tuple, set, frozenset)):
        return str(value)

    parents = _parents if _parents is not None else set()
    if id(value) in parents:
        raise ValueError("recursive alias in metadata")
    parents.add(id(value))
    try:
        if isinstance(value, dict):
            return {key_text(k): normalize_value(v, parents) for k, v in value.items()}
        return [normalize_value(v, parents) for v in value]
    finally:
        parents.discard(id(value))


def decode_metadata(text: Optional[str]) -> Optional[Dict[str, Any]]:
    """
    Decode frontmatter text into a metadata mapping.

    Args:
        text: Raw header text, or None when the document has no header

    Returns:
        Ordered mapping of the header's top-level keys, or None when the
        header is missing, empty, malformed, recursive, or not a mapping
    """
    if text is None:
        return None

    try:
        data = yaml.load(text, Loader=MetadataLoader)
    except yaml.YAMLError as e:
        logger.debug(f"Ignoring malformed frontmatter: {e}")
        return None

    if not isinstance(data, dict):
        if data is not None:
            logger.debug(f"Ignoring frontmatter of type {type(data).__name__}, expected a mapping")
        return None

    try:
        return normalize_value(data)
    except ValueError as e:
        logger.debug(f"Ignoring frontmatter: {e}")
        return None
