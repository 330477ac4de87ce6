"""NDJSON output helpers."""

import json
from typing import Any, TextIO

from ..exceptions.conversion_exceptions import OutputEncodingError


def render_json(value: Any) -> str:
    """
    Render value as compact single-line JSON without ASCII or HTML escaping.

    Raises:
        OutputEncodingError: If value holds NaN or an infinity
    """
    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
    except ValueError as e:
        raise OutputEncodingError(f"encoding JSON: {e}") from e


def write_json(stream: TextIO, value: Any) -> None:
    stream.write(render_json(value) + "\n")


def write_raw(stream: TextIO, text: str) -> None:
    stream.write(text + "\n")
