"""Shared test fixtures for fmd2json tests."""

from pathlib import Path
from typing import Dict

import pytest


SAMPLE_DOCUMENTS: Dict[str, str] = {
    "basic.md": "---\nprop1: aaa\n---\nbody body\n",
    "second.md": "---\ntitle: second\ntags:\n  - a\n  - b\n---\nsecond body\n",
    "no_frontmatter.md": "no frontmatter here\njust plain markdown\n",
    "conflict.md": (
        "---\n"
        "filename: custom\n"
        "body: custom body\n"
        "mtime: 2020-01-01T00:00:00Z\n"
        "other: value\n"
        "---\n"
        "actual body\n"
    ),
}


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """
    Run every test from an empty working directory with no FMD2JSON_*
    overrides, so a stray config file or .env cannot leak into results.
    """
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    for name in ("FMD2JSON_CONTENT_SUFFIXES", "FMD2JSON_RAW_OUTPUT", "FMD2JSON_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield workdir


@pytest.fixture
def docs_dir(tmp_path) -> Path:
    """Directory holding the sample documents."""
    directory = tmp_path / "testdata"
    directory.mkdir()
    for name, content in SAMPLE_DOCUMENTS.items():
        (directory / name).write_bytes(content.encode("utf-8"))
    return directory


@pytest.fixture
def basic_doc(docs_dir) -> Path:
    return docs_dir / "basic.md"


@pytest.fixture
def second_doc(docs_dir) -> Path:
    return docs_dir / "second.md"


@pytest.fixture
def conflict_doc(docs_dir) -> Path:
    return docs_dir / "conflict.md"


@pytest.fixture
def no_frontmatter_doc(docs_dir) -> Path:
    return docs_dir / "no_frontmatter.md"
