"""Tests for NDJSON rendering."""

import io

import pytest

from fmd2json.core.output import render_json, write_json, write_raw
from fmd2json.exceptions import Fmd2JsonError, OutputEncodingError


class TestRenderJson:
    """Tests for compact JSON rendering."""

    def test_compact(self):
        assert render_json({"a": [1, 2], "b": None}) == '{"a":[1,2],"b":null}'

    def test_no_html_escaping(self):
        assert render_json({"html": "<p>a & b</p>"}) == '{"html":"<p>a & b</p>"}'

    def test_unicode_is_not_escaped(self):
        assert render_json("日本語 é") == '"日本語 é"'

    def test_newlines_are_escaped(self):
        assert render_json("a\nb") == '"a\\nb"'

    def test_preserves_key_order(self):
        assert render_json({"z": 1, "a": 2}) == '{"z":1,"a":2}'

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_numbers_are_rejected(self, value):
        with pytest.raises(OutputEncodingError) as exc_info:
            render_json({"x": value})
        assert isinstance(exc_info.value, Fmd2JsonError)


class TestWriters:
    """Tests for line-terminated writers."""

    def test_write_json(self):
        stream = io.StringIO()
        write_json(stream, {"a": 1})
        write_json(stream, "x")
        assert stream.getvalue() == '{"a":1}\n"x"\n'

    def test_write_raw(self):
        stream = io.StringIO()
        write_raw(stream, "plain")
        assert stream.getvalue() == "plain\n"
