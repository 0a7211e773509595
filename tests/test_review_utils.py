import argparse
import os
from pathlib import Path

import pytest

import review_utils
from review_utils import (
    DEFAULT_TARGET,
    ReadError,
    ReviewContext,
    WriteError,
    create_review_parser,
    find_js_files,
    get_repo_root,
    read_source,
    write_source_atomic,
)


def test_read_source(tmp_path):
    target = tmp_path / "a.js"
    target.write_text("logHeader({}, `x`);\n", encoding="utf-8")

    assert read_source(target) == "logHeader({}, `x`);\n"


def test_read_source_missing_or_directory(tmp_path):
    with pytest.raises(ReadError, match="File not found"):
        read_source(tmp_path / "missing.js")
    with pytest.raises(ReadError):
        read_source(tmp_path)


def test_write_source_atomic_replaces_content(tmp_path):
    target = tmp_path / "a.js"
    target.write_text("old\n", encoding="utf-8")

    write_source_atomic(target, "new\r\nlines\n")

    assert target.read_bytes() == b"new\r\nlines\n"
    assert os.listdir(tmp_path) == ["a.js"]


def test_failed_write_keeps_original(tmp_path, monkeypatch):
    target = tmp_path / "a.js"
    target.write_text("original\n", encoding="utf-8")

    def fail_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(review_utils.os, "replace", fail_replace)

    with pytest.raises(WriteError, match="disk full"):
        write_source_atomic(target, "rewritten\n")

    assert target.read_text(encoding="utf-8") == "original\n"
    assert os.listdir(tmp_path) == ["a.js"]


def test_write_into_missing_directory(tmp_path):
    with pytest.raises(WriteError):
        write_source_atomic(tmp_path / "nope" / "a.js", "x")


def test_get_repo_root(tmp_path):
    (tmp_path / "package.json").write_text("{}", encoding="utf-8")
    script = tmp_path / "scripts" / "js" / "tool.py"
    script.parent.mkdir(parents=True)
    script.write_text("", encoding="utf-8")

    assert get_repo_root(script) == tmp_path.resolve()


def test_find_js_files(tmp_path):
    for rel in ["src/b.js", "src/a/c.js", "src/a/readme.md", "src/z.jsx"]:
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("", encoding="utf-8")

    files = find_js_files(tmp_path / "src")

    assert files == [tmp_path / "src" / "a" / "c.js", tmp_path / "src" / "b.js"]


def test_parser_and_context_with_file(tmp_path):
    args = create_review_parser("test").parse_args(["--file", str(tmp_path / "x.js"), "--dry-run"])
    context = ReviewContext(args)

    assert context.dry_run is True
    assert context.target_file() == tmp_path / "x.js"


def test_context_default_target(tmp_path, monkeypatch):
    root = tmp_path.resolve()
    monkeypatch.setattr(review_utils, "get_repo_root", lambda: root)
    context = ReviewContext(argparse.Namespace(file=None, dry_run=False))

    assert context.target_file() == root / DEFAULT_TARGET
    assert context.relative_path(root / DEFAULT_TARGET) == Path("src/runner/clusterTask.js")


def test_read_source_keeps_line_endings(tmp_path):
    target = tmp_path / "a.js"
    target.write_bytes(b"logHeader({}, `x`);\r\n")

    assert read_source(target) == "logHeader({}, `x`);\r\n"
