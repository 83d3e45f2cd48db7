"""Tests for emlkit.loader."""

from __future__ import annotations

import pytest

from emlkit.loader import load_from_bytes, load_from_file, load_from_string


class TestLoadFromString:
    def test_returns_input_unchanged(self):
        text = "Subject: x\r\n\r\nbody\n"
        assert load_from_string(text) is text

    def test_rejects_bytes(self):
        with pytest.raises(TypeError):
            load_from_string(b"Subject: x")


class TestLoadFromBytes:
    def test_utf8(self):
        assert load_from_bytes("Subject: café".encode()) == "Subject: café"

    def test_other_encoding(self):
        assert load_from_bytes(b"caf\xe9", "latin-1") == "café"

    def test_invalid_bytes(self):
        with pytest.raises(UnicodeDecodeError):
            load_from_bytes(b"caf\xe9")


class TestLoadFromFile:
    def test_reads_whole_file(self, write_eml):
        text = "Subject: x\n\n" + "line\n" * 10_000
        assert load_from_file(write_eml(text)) == text

    def test_preserves_line_endings(self, write_eml):
        text = "A: 1\r\nB: 2\n\r\nbody\r"
        assert load_from_file(write_eml(text)) == text

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.eml"
        with pytest.raises(FileNotFoundError) as exc_info:
            load_from_file(path)
        assert str(exc_info.value.filename) == str(path)

    def test_decode_error_propagates(self, write_eml):
        path = write_eml("Subject: café", encoding="latin-1")
        with pytest.raises(UnicodeDecodeError):
            load_from_file(path)
        assert load_from_file(path, encoding="latin-1") == "Subject: café"
