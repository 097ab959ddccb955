# tests/unit/bridge/test_unit_file_loader.py — v1
"""Tests for bridge/file_loader.py — file digest folded into the intention."""

from __future__ import annotations

from pathlib import Path

import pytest

from multihasher.bridge.file_loader import append_file_digest, digest_file
from multihasher.core.digests import digest512


class TestDigestFile:
    def test_text_file(self, tmp_path: Path):
        f = tmp_path / "intent.txt"
        f.write_text("test", encoding="utf-8")
        assert digest_file(f) == digest512("test")

    def test_accepts_str_path(self, tmp_path: Path):
        f = tmp_path / "intent.txt"
        f.write_bytes("ünï".encode("utf-8"))
        assert digest_file(str(f)) == digest512("ünï")

    def test_binary_file(self, tmp_path: Path):
        f = tmp_path / "blob.bin"
        f.write_bytes(b"\x00\xff\xfe")
        assert len(digest_file(f)) == 128

    def test_empty_file(self, tmp_path: Path):
        f = tmp_path / "empty"
        f.write_bytes(b"")
        assert digest_file(f) == digest512("")

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            digest_file(tmp_path / "missing.txt")


class TestAppendFileDigest:
    def test_appends_on_new_line(self, tmp_path: Path):
        f = tmp_path / "intent.txt"
        f.write_text("test", encoding="utf-8")
        assert append_file_digest("My intention", f) == f"My intention\n{digest512('test')}"

    def test_empty_intention(self, tmp_path: Path):
        f = tmp_path / "intent.txt"
        f.write_text("abc", encoding="utf-8")
        assert append_file_digest("", f) == f"\n{digest512('abc')}"
