"""
jq Query Projection

Compiles a jq expression once per run and applies it to every assembled
record. A program may emit zero or more values per record; each is written
on its own line, either as compact JSON or, in raw-output mode, as plain
text when the value is a scalar (like ``jq --raw-output``).
"""

import logging
import math
from decimal import Decimal
from typing import Any, Dict, TextIO

import jq

from ..exceptions.conversion_exceptions import QueryCompileError, QueryEvaluationError
from .output import render_json, write_json, write_raw

logger = logging.getLogger(__name__)


def is_scalar(value: Any) -> bool:
    """True for values that raw output can print as plain text."""
    return value is None or isinstance(value, (str, bool, int, float))


def scalar_to_text(value: Any) -> str:
    """
    Render a scalar jq result as raw text.

    Strings are returned verbatim, booleans as ``true``/``false`` and null
    as an empty string. Integral floats drop the fractional part; other
    floats use the shortest round-trip decimal in positional notation.

    Raises:
        TypeError: If value is a mapping or sequence
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return f"{value:.0f}"
        return format(Decimal(repr(value)), "f")
    raise TypeError(f"not a scalar: {type(value).__name__}")


class CompiledQuery:
    """A compiled jq program, reusable across records."""

    def __init__(self, expression: str, program: Any) -> None:
        self.expression = expression
        self._program = program

    def project(self, record: Dict[str, Any], sink: TextIO, raw_output: bool = False) -> int:
        """
        Evaluate the program against record and write every result to sink.

        Args:
            record: Assembled record
            sink: Output stream
            raw_output: Print scalar results as raw text

        Returns:
            Number of results written

        Raises:
            QueryEvaluationError: If evaluation fails; results produced before
                the failure have already been written
            OutputEncodingError: If record has no JSON representation
        """
        program_input = self._program.input_text(render_json(record))
        count = 0
        try:
            for value in program_input:
                if raw_output and is_scalar(value):
                    write_raw(sink, scalar_to_text(value))
                else:
                    write_json(sink, value)
                count += 1
        except ValueError as e:
            raise QueryEvaluationError(
                f"failed to evaluate jq expression: {e}",
                expression=self.expression,
            ) from e
        logger.debug(f"jq expression {self.expression!r} produced {count} result(s)")
        return count


def compile_query(expression: str) -> CompiledQuery:
    """
    Compile a jq expression.

    Raises:
        QueryCompileError: If the expression cannot be parsed or compiled
    """
    try:
        program = jq.compile(expression)
    except ValueError as e:
        raise QueryCompileError(
            f"failed to compile jq expression {expression!r}: {e}",
            expression=expression,
        ) from e
    return CompiledQuery(expression, program)


def apply_query(
    record: Dict[str, Any],
    expression: str,
    sink: TextIO,
    raw_output: bool = False
) -> int:
    """Compile expression and project record through it."""
    return compile_query(expression).project(record, sink, raw_output)
