# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : test_definitions.py
#   file_relpath : tests/headers/test_definitions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Tests for header-definition (``*.licenseheader``) files."""

from __future__ import annotations

from pathlib import Path

import pytest

from headersmith.errors import InvalidInputError
from headersmith.headers.definitions import (
    find_definition_file,
    is_definition_file,
    parse_definition,
    read_definition,
    render_definition,
)

DEFINITION = """\
extensions: .cs .designer.cs
// Copyright (c) %CurrentYear% Example Corp.
// Licensed under the MIT license.

extensions: .xml .xaml
<!--
  Copyright (c) %CurrentYear% Example Corp.
-->

extensions: .txt
"""


def test_parse_definition_blocks() -> None:
    """Each extensions line opens a block; trailing blank lines are trimmed."""
    templates = parse_definition(DEFINITION)
    assert list(templates) == [".cs", ".designer.cs", ".xml", ".xaml", ".txt"]
    assert templates[".cs"] == [
        "// Copyright (c) %CurrentYear% Example Corp.",
        "// Licensed under the MIT license.",
    ]
    assert templates[".designer.cs"] == templates[".cs"]
    assert templates[".xml"] == ["<!--", "  Copyright (c) %CurrentYear% Example Corp.", "-->"]
    assert templates[".txt"] == []


def test_parse_definition_keeps_inner_blank_lines() -> None:
    """Blank lines inside a block are part of the template."""
    templates = parse_definition("extensions: .py\n# a\n\n# b\n\n\n")
    assert templates[".py"] == ["# a", "", "# b"]


def test_parse_definition_leading_blank_lines_are_ignored() -> None:
    """Blank lines before the first block are allowed."""
    assert parse_definition("\n\nextensions: .py\n# a\n") == {".py": ["# a"]}


def test_text_before_first_block_is_rejected() -> None:
    """Header text needs an extensions line above it."""
    with pytest.raises(InvalidInputError):
        parse_definition("// orphan\nextensions: .cs\n")


def test_empty_extensions_line_is_rejected() -> None:
    """An extensions line must list at least one extension."""
    with pytest.raises(InvalidInputError):
        parse_definition("extensions:\n// x\n")


def test_render_definition_groups_identical_templates() -> None:
    """Rendering groups extensions that share a template and parses back."""
    templates: dict[str, list[str] | None] = {
        ".cs": ["// A"],
        ".designer.cs": ["// A"],
        ".py": ["# B"],
        ".txt": None,
    }
    text = render_definition(templates)
    assert text.startswith("extensions: .cs .designer.cs\n// A\n\nextensions: .py\n# B\n")
    assert parse_definition(text) == {
        ".cs": ["// A"],
        ".designer.cs": ["// A"],
        ".py": ["# B"],
        ".txt": [],
    }
    assert render_definition({}) == ""


def test_is_definition_file() -> None:
    """The reserved extension is matched case-insensitively."""
    assert is_definition_file("Project.licenseheader")
    assert is_definition_file(Path("dir/X.LicenseHeader"))
    assert not is_definition_file("licenseheader.cs")


def test_find_definition_file_walks_up(tmp_path: Path) -> None:
    """The nearest definition file in the directory chain is used."""
    (tmp_path / "b.licenseheader").write_text("extensions: .cs\n// b\n", encoding="utf-8")
    (tmp_path / "a.licenseheader").write_text("extensions: .cs\n// a\n", encoding="utf-8")
    nested = tmp_path / "src" / "lib"
    nested.mkdir(parents=True)
    source = nested / "Program.cs"
    source.write_text("", encoding="utf-8")

    found = find_definition_file(source)
    assert found == (tmp_path / "a.licenseheader").resolve()
    assert read_definition(found) == {".cs": ["// a"]}

    closer = tmp_path / "src" / "local.licenseheader"
    closer.write_text("extensions: .cs\n// local\n", encoding="utf-8")
    assert find_definition_file(source) == closer.resolve()
    assert find_definition_file(nested) == closer.resolve()
