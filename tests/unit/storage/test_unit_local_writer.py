# tests/unit/storage/test_unit_local_writer.py - v1
"""Tests for storage/local_writer.py."""

from __future__ import annotations

import json

from fraudshield.storage.local_writer import read_json, write_json_atomic


class TestWriteJsonAtomic:
    def test_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "a" / "b" / "out.json"
        write_json_atomic(path, {"k": "é"})
        assert json.loads(path.read_text(encoding="utf-8")) == {"k": "é"}
        assert "é" in path.read_text(encoding="utf-8")

    def test_replaces_existing(self, tmp_path):
        path = tmp_path / "out.json"
        write_json_atomic(path, [1])
        write_json_atomic(path, [2, 3])
        assert json.loads(path.read_text(encoding="utf-8")) == [2, 3]
        assert [p.name for p in tmp_path.iterdir()] == ["out.json"]


class TestReadJson:
    def test_missing(self, tmp_path):
        assert read_json(tmp_path / "none.json", default={}) == {}

    def test_blank(self, tmp_path):
        path = tmp_path / "blank.json"
        path.write_text("  \n", encoding="utf-8")
        assert read_json(path, default=[]) == []

    def test_reads(self, tmp_path):
        path = tmp_path / "x.json"
        path.write_text('{"a": 1}', encoding="utf-8")
        assert read_json(path, default=None) == {"a": 1}
