"""Tests for the tolerant JSON document reader."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from spfx_upgrade.project.model import ABSENT, is_present
from spfx_upgrade.project.reader import read_document, strip_single_line_comments


class TestStripSingleLineComments:
    def test_removes_full_line_comment(self) -> None:
        text = '{\n  // comment\n  "a": 1\n}'
        assert json.loads(strip_single_line_comments(text)) == {"a": 1}

    def test_removes_trailing_comment(self) -> None:
        text = '{\n  "a": 1 // trailing\n}'
        assert json.loads(strip_single_line_comments(text)) == {"a": 1}

    def test_keeps_slashes_inside_strings(self) -> None:
        text = '{"url": "https://example.com//path", "b": "\\"//\\""}'
        assert strip_single_line_comments(text) == text

    def test_comment_on_last_line_without_newline(self) -> None:
        assert strip_single_line_comments('{"a": 1}\n// end') == '{"a": 1}\n'

    def test_preserves_line_count(self) -> None:
        text = '{\n// one\n// two\n"a": 1\n}'
        assert strip_single_line_comments(text).count("\n") == text.count("\n")


class TestReadDocument:
    def test_missing_file_is_absent(self, tmp_path: Path) -> None:
        assert read_document(tmp_path / "nope.json") is ABSENT

    def test_directory_is_absent(self, tmp_path: Path) -> None:
        assert read_document(tmp_path) is ABSENT

    def test_malformed_json_is_absent(self, tmp_path: Path) -> None:
        path = tmp_path / "tsconfig.json"
        path.write_text('{"compilerOptions": {', encoding="utf-8")
        assert read_document(path) is ABSENT

    def test_non_utf8_is_absent(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_bytes(b'{"a": "\xff\xfe"}')
        assert read_document(path) is ABSENT

    def test_parses_commented_document(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text('{\n  // comment\n  "version": "2.0"\n}', encoding="utf-8")
        assert read_document(path) == {"version": "2.0"}

    def test_tolerates_byte_order_mark(self, tmp_path: Path) -> None:
        path = tmp_path / "package.json"
        path.write_bytes(b'\xef\xbb\xbf{"name": "app"}')
        assert read_document(path) == {"name": "app"}

    @pytest.mark.parametrize("payload, expected", [("null", None), ("{}", {}), ("[]", [])])
    def test_empty_documents_are_present(self, tmp_path: Path, payload: str, expected: object) -> None:
        path = tmp_path / "doc.json"
        path.write_text(payload, encoding="utf-8")
        document = read_document(path)
        assert is_present(document)
        assert document == expected

    def test_nesting_beyond_parser_depth_is_absent(self, tmp_path: Path) -> None:
        path = tmp_path / "tsconfig.json"
        path.write_text("[" * 100_000, encoding="utf-8")
        assert read_document(path) is ABSENT

    def test_permission_denied_on_stat_is_absent(self, tmp_path: Path, monkeypatch) -> None:
        path = tmp_path / "config" / "config.json"

        def deny(self: Path) -> bool:
            raise PermissionError(13, "Permission denied", str(self))

        monkeypatch.setattr(Path, "is_file", deny)
        assert read_document(path) is ABSENT

    def test_permission_denied_on_read_is_absent(self, tmp_path: Path, monkeypatch) -> None:
        path = tmp_path / "package.json"
        path.write_text("{}", encoding="utf-8")

        def deny(self: Path, *args, **kwargs) -> str:
            raise PermissionError(13, "Permission denied", str(self))

        monkeypatch.setattr(Path, "read_text", deny)
        assert read_document(path) is ABSENT
