"""Tests for the document conversion pipeline."""

import io
import json

import pytest

from fmd2json.core.converter import DocumentConverter
from fmd2json.core.query import compile_query
from fmd2json.core.sources import Document
from fmd2json.exceptions import OutputEncodingError, QueryEvaluationError, SourceReadError


def make_converter(stdin_text="", **kwargs):
    out, err = io.StringIO(), io.StringIO()
    converter = DocumentConverter(out=out, err=err, stdin=io.StringIO(stdin_text), **kwargs)
    return converter, out, err


def records(out):
    return [json.loads(line) for line in out.getvalue().splitlines()]


class TestConvert:
    """Tests for converting single documents."""

    def test_convert_document(self):
        converter, _, _ = make_converter()
        record = converter.convert(Document(content=b"---\nprop1: aaa\n---\nbody body\n", filename="basic", mtime="t"))
        assert record == {"prop1": "aaa", "filename": "basic", "body": "body body\n", "mtime": "t"}

    def test_convert_warns_on_conflicts(self):
        converter, _, err = make_converter()
        converter.convert(Document(content=b"---\nbody: x\nfilename: y\n---\nz"))
        lines = err.getvalue().splitlines()
        assert len(lines) == 2
        assert '"filename"' in lines[0]
        assert '"body"' in lines[1]

    def test_header_types_survive(self):
        converter, _, _ = make_converter()
        record = converter.convert(Document(content=b"---\nn: 1\nf: 2.5\nm: {a: [1, x]}\n---\n"))
        assert record["n"] == 1
        assert record["f"] == 2.5
        assert record["m"] == {"a": [1, "x"]}

    def test_recursive_alias_converts_without_metadata(self):
        converter, _, _ = make_converter()
        record = converter.convert(Document(content=b"---\na: &x [*x]\n---\nbody\n"))
        assert record == {"filename": "", "body": "body\n"}

    def test_bool_and_int_keys_both_kept(self):
        converter, _, _ = make_converter()
        record = converter.convert(Document(content=b"---\n1: one\ntrue: yes-key\n---\n"))
        assert record == {"1": "one", "true": "yes-key", "filename": "", "body": ""}


class TestRun:
    """Tests for multi-document runs."""

    def test_returns_document_count(self, basic_doc, second_doc):
        converter, _, _ = make_converter("plain\n")
        assert converter.run([str(basic_doc), "-", str(second_doc)]) == 3

    def test_non_finite_metadata_stops_run(self, tmp_path, basic_doc):
        path = tmp_path / "inf.md"
        path.write_text("---\nx: .inf\ny: .nan\n---\nbody\n")
        converter, out, _ = make_converter()
        with pytest.raises(OutputEncodingError):
            converter.run([str(basic_doc), str(path), str(basic_doc)])
        assert [r["filename"] for r in records(out)] == ["basic"]

    def test_files_in_order(self, basic_doc, second_doc):
        converter, out, _ = make_converter()
        count = converter.run([str(basic_doc), str(second_doc)])
        assert count == 2
        first, second = records(out)
        assert first["filename"] == "basic"
        assert first["prop1"] == "aaa"
        assert "mtime" in first
        assert second["filename"] == "second"
        assert second["title"] == "second"
        assert second["tags"] == ["a", "b"]

    def test_no_frontmatter(self, no_frontmatter_doc):
        converter, out, _ = make_converter()
        converter.run([str(no_frontmatter_doc)])
        (record,) = records(out)
        assert record["filename"] == "no_frontmatter"
        assert record["body"] == "no frontmatter here\njust plain markdown\n"

    def test_conflicts(self, conflict_doc):
        converter, out, err = make_converter()
        converter.run([str(conflict_doc)])
        (record,) = records(out)
        assert record["filename"] == "conflict"
        assert record["body"] == "actual body\n"
        assert record["other"] == "value"
        assert record["mtime"] != "2020-01-01T00:00:00Z"
        warnings = err.getvalue()
        for name in ("filename", "body", "mtime"):
            assert f'"{name}"' in warnings

    def test_stdin_document(self):
        converter, out, _ = make_converter("---\na: 1\n---\nbody\n")
        converter.run(["-"])
        assert records(out) == [{"a": 1, "filename": "", "body": "body\n"}]

    def test_path_list_from_stdin(self, basic_doc, second_doc):
        converter, out, _ = make_converter(f"{basic_doc}\n\n  {second_doc}  \n")
        assert converter.run([]) == 2
        assert [r["filename"] for r in records(out)] == ["basic", "second"]

    def test_missing_file_stops_run(self, basic_doc, second_doc, tmp_path):
        converter, out, _ = make_converter()
        with pytest.raises(SourceReadError):
            converter.run([str(basic_doc), str(tmp_path / "missing.md"), str(second_doc)])
        assert [r["filename"] for r in records(out)] == ["basic"]

    def test_content_suffixes(self, tmp_path):
        path = tmp_path / "note.markdown"
        path.write_text("text")
        converter, out, _ = make_converter(content_suffixes=[".markdown"])
        converter.run([str(path)])
        assert records(out)[0]["filename"] == "note"


class TestRunWithQuery:
    """Tests for runs projected through jq."""

    def test_raw_output_multiple_files(self, basic_doc, second_doc):
        converter, out, _ = make_converter(query=compile_query(".filename"), raw_output=True)
        converter.run([str(basic_doc), str(second_doc)])
        assert out.getvalue() == "basic\nsecond\n"

    def test_json_output(self, basic_doc):
        converter, out, _ = make_converter(query=compile_query("{name: .filename, prop: .prop1}"))
        converter.run([str(basic_doc)])
        assert out.getvalue() == '{"name":"basic","prop":"aaa"}\n'

    def test_results_grouped_per_document(self, basic_doc, second_doc):
        converter, out, _ = make_converter(query=compile_query(".filename, .body"), raw_output=True)
        converter.run([str(basic_doc), str(second_doc)])
        assert out.getvalue() == "basic\nbody body\n\nsecond\nsecond body\n\n"

    def test_evaluation_error_propagates(self, basic_doc):
        converter, _, _ = make_converter(query=compile_query(".prop1 | error"))
        with pytest.raises(QueryEvaluationError):
            converter.run([str(basic_doc)])

    def test_non_finite_metadata_is_not_queried(self, tmp_path):
        path = tmp_path / "inf.md"
        path.write_text("---\nx: .inf\n---\n")
        converter, out, _ = make_converter(query=compile_query(".filename"))
        with pytest.raises(OutputEncodingError):
            converter.run([str(path)])
        assert out.getvalue() == ""
