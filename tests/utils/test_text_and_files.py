# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : test_text_and_files.py
#   file_relpath : tests/utils/test_text_and_files.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Tests for line handling and atomic document writes."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st

from headersmith.utils import files
from headersmith.utils.files import read_document, write_document_atomic
from headersmith.utils.text import detect_newline, is_blank, split_lines, strip_eol
from tests.conftest import parametrize


@parametrize(
    "text, expected",
    [
        ("", []),
        ("a", ["a"]),
        ("a\nb", ["a\n", "b"]),
        ("a\r\nb\r\n", ["a\r\n", "b\r\n"]),
        ("a\rb\r", ["a\r", "b\r"]),
        ("\n\n", ["\n", "\n"]),
        ("a\x0cb c\n", ["a\x0cb c\n"]),
    ],
)
def test_split_lines(text: str, expected: list[str]) -> None:
    """Only CR, LF and CRLF end lines."""
    assert split_lines(text) == expected


@given(st.text(alphabet=st.sampled_from(["a", " ", "\n", "\r", "\x0c", " "])))
def test_split_lines_joins_back(text: str) -> None:
    """Joining the lines gives the original text."""
    assert "".join(split_lines(text)) == text


def test_line_helpers() -> None:
    """Terminator stripping, newline detection and blank checks."""
    assert strip_eol("x\r\n") == "x"
    assert strip_eol("x  ") == "x  "
    assert detect_newline(["a", "b\r\n", "c\n"]) == "\r\n"
    assert detect_newline(["a"]) == "\n"
    assert detect_newline(["a\r"]) == "\r"
    assert is_blank(" \t\r\n")
    assert not is_blank(" x\n")


def test_read_document_keeps_line_endings(tmp_path: Path) -> None:
    """No newline translation happens on read."""
    target = tmp_path / "a.cs"
    target.write_bytes(b"a\r\nb\rc\n")
    assert read_document(target) == "a\r\nb\rc\n"


def test_atomic_write_replaces_and_keeps_mode(tmp_path: Path) -> None:
    """The file is replaced in full and keeps its permission bits."""
    target = tmp_path / "a.sh"
    target.write_text("old\n", encoding="utf-8")
    os.chmod(target, 0o754)

    written = write_document_atomic(target, "new\r\nçontent\n")

    assert written == len("new\r\nçontent\n".encode())
    assert target.read_bytes() == "new\r\nçontent\n".encode()
    assert stat.S_IMODE(target.stat().st_mode) == 0o754
    assert list(tmp_path.iterdir()) == [target]


def test_atomic_write_failure_leaves_original(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """A failed move keeps the old content and removes the temporary file."""
    target = tmp_path / "a.cs"
    target.write_text("old\n", encoding="utf-8")

    def _fail(src: str, dst: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(files.os, "replace", _fail)
    with pytest.raises(OSError, match="disk full"):
        write_document_atomic(target, "new\n")

    assert target.read_text(encoding="utf-8") == "old\n"
    assert list(tmp_path.iterdir()) == [target]
