# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : test_config_io.py
#   file_relpath : tests/config/test_config_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Tests for loading and discovering TOML configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from headersmith.config.io import config_from_dict, discover_config_file, load_config
from headersmith.errors import ConfigError
from tests.conftest import parametrize

HEADERSMITH_TOML = """\
[headersmith]
keywords = ["copyright", "license"]
separator_lines = 1
max_workers = 4
definition_file = "Project.licenseheader"
exclude = ["build/", "*.generated.cs"]

[[headersmith.languages]]
name = "ini"
extensions = [".ini"]
line_comment = ";"
"""


def test_load_standalone_config(tmp_path: Path) -> None:
    """Every supported key is read from ``headersmith.toml``."""
    path = tmp_path / "headersmith.toml"
    path.write_text(HEADERSMITH_TOML, encoding="utf-8")

    cfg = load_config(path).freeze()

    assert cfg.keywords == ("copyright", "license")
    assert cfg.separator_lines == 1
    assert cfg.max_workers == 4
    assert cfg.definition_file == tmp_path / "Project.licenseheader"
    assert cfg.exclude == ("build/", "*.generated.cs")
    assert [lang.name for lang in cfg.languages] == ["ini"]
    assert cfg.languages[0].line_comment == ";"


def test_load_pyproject_section(tmp_path: Path) -> None:
    """The ``[tool.headersmith]`` table of ``pyproject.toml`` is used."""
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "x"\n\n[tool.headersmith]\nseparator_lines = 2\n', encoding="utf-8")
    assert load_config(path).separator_lines == 2


def test_pyproject_without_section_is_empty(tmp_path: Path) -> None:
    """A pyproject without the table contributes nothing."""
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "x"\n', encoding="utf-8")
    cfg = load_config(path)
    assert cfg.separator_lines is None
    assert cfg.languages == []


def test_invalid_toml_raises_config_error(tmp_path: Path) -> None:
    """Syntax errors are reported as ConfigError."""
    path = tmp_path / "headersmith.toml"
    path.write_text("[headersmith\nkeywords = \n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_missing_file_raises_config_error(tmp_path: Path) -> None:
    """Unreadable files are reported as ConfigError."""
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.toml")


@parametrize(
    "section",
    [
        {"keywords": "copyright"},
        {"exclude": [1, 2]},
        {"separator_lines": "1"},
        {"max_workers": True},
        {"definition_file": 3},
        {"languages": {"name": "x"}},
        {"languages": [{"extensions": [".x"]}]},
        {"languages": [{"name": "x", "extensions": [".x"]}]},
        {"languages": [{"name": "x", "extensions": [".x"], "line_comment": "#", "prologue": 1}]},
        {"languages": [{"name": "x", "extensions": [".x"], "line_comment": "#", "prologue": "["}]},
    ],
)
def test_invalid_values_raise_config_error(section: dict[str, object]) -> None:
    """Wrongly typed values and invalid languages are rejected."""
    with pytest.raises(ConfigError):
        config_from_dict(section)


def test_discover_prefers_nearest_file(tmp_path: Path) -> None:
    """Discovery walks upwards; ``headersmith.toml`` beats ``pyproject.toml``."""
    (tmp_path / "headersmith.toml").write_text("[headersmith]\n", encoding="utf-8")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert discover_config_file(nested) == (tmp_path / "headersmith.toml").resolve()

    (tmp_path / "a" / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert discover_config_file(nested) == (tmp_path / "headersmith.toml").resolve()

    (tmp_path / "a" / "pyproject.toml").write_text("[tool.headersmith]\n", encoding="utf-8")
    assert discover_config_file(nested) == (tmp_path / "a" / "pyproject.toml").resolve()

    (tmp_path / "a" / "headersmith.toml").write_text("[headersmith]\n", encoding="utf-8")
    assert discover_config_file(nested / "file.cs") == (tmp_path / "a" / "headersmith.toml").resolve()


def test_language_prologue_setting() -> None:
    """Configured languages default to the shebang prologue; an empty string disables it."""
    cfg = config_from_dict(
        {
            "languages": [
                {"name": "sh", "extensions": [".sh"], "line_comment": "#"},
                {"name": "ini", "extensions": [".ini"], "line_comment": ";", "prologue": ""},
                {"name": "svg", "extensions": [".svg"], "block_start": "<!--",
                 "block_end": "-->", "prologue": "<\\?xml\\s"},
            ]
        }
    )
    sh, ini, svg = cfg.languages
    assert sh.prologue == "#!"
    assert ini.prologue is None
    assert svg.is_prologue('<?xml version="1.0"?>\n')
