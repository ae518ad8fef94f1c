# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : io.py
#   file_relpath : src/headersmith/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Load HeaderSmith configuration from TOML.

Two sources are supported:

* a standalone ``headersmith.toml`` with a ``[headersmith]`` table, and
* a ``pyproject.toml`` with a ``[tool.headersmith]`` table.

Example:
    ```toml
    [headersmith]
    keywords = ["copyright", "license"]
    separator_lines = 1
    max_workers = 8
    definition_file = "Project.licenseheader"
    exclude = ["build/", "*.generated.cs"]

    [[headersmith.languages]]
    name = "ini"
    extensions = [".ini"]
    line_comment = ";"
    ```

Parsing is done with `tomlkit`; the parsed document is unwrapped to plain
Python values before validation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from headersmith.config.logging import HeaderSmithLogger, get_logger
from headersmith.config.model import MutableConfig
from headersmith.constants import CONFIG_FILE_NAME, CONFIG_SECTION, PYPROJECT_FILE_NAME
from headersmith.errors import ConfigError
from headersmith.languages.base import Language

logger: HeaderSmithLogger = get_logger(__name__)

TomlTable = dict[str, Any]

KEY_LANGUAGES = "languages"
KEY_KEYWORDS = "keywords"
KEY_SEPARATOR_LINES = "separator_lines"
KEY_MAX_WORKERS = "max_workers"
KEY_DEFINITION_FILE = "definition_file"
KEY_EXCLUDE = "exclude"


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path (Path): Path to the TOML document.

    Returns:
        TomlTable: The parsed content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_section(data: TomlTable, *, pyproject: bool) -> TomlTable | None:
    """Return the HeaderSmith table of a parsed document, or None if absent."""
    if pyproject:
        tool: Any = data.get("tool")
        section: Any = tool.get(CONFIG_SECTION) if isinstance(tool, dict) else None
    else:
        section = data.get(CONFIG_SECTION)
    return cast("TomlTable", section) if isinstance(section, dict) else None


def _str_list(value: Any, key: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in cast("list[Any]", value)):
        raise ConfigError(f"'{key}' must be a list of strings")
    return cast("list[str]", value)


def _optional_int(value: Any, key: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'{key}' must be an integer")
    return value


def language_from_dict(entry: TomlTable) -> Language:
    """Build a `Language` from a ``[[headersmith.languages]]`` entry.

    Raises:
        ConfigError: If required keys are missing or the definition is invalid.
    """
    name: Any = entry.get("name")
    if not isinstance(name, str) or not name:
        raise ConfigError("Language entries require a non-empty 'name'")
    extensions: list[str] = _str_list(entry.get("extensions", []), f"languages.{name}.extensions")
    prologue: Any = entry.get("prologue", "#!")
    if not isinstance(prologue, str):
        raise ConfigError(f"languages.{name}.prologue must be a string")
    try:
        return Language(
            name=name,
            extensions=tuple(extensions),
            line_comment=entry.get("line_comment") or None,
            block_start=entry.get("block_start") or None,
            block_end=entry.get("block_end") or None,
            prologue=prologue or None,
            description=str(entry.get("description", "")),
        )
    except ValueError as e:
        raise ConfigError(str(e)) from e


def config_from_dict(section: TomlTable, *, base_dir: Path | None = None) -> MutableConfig:
    """Translate a HeaderSmith TOML table into a `MutableConfig`.

    Args:
        section (TomlTable): The ``[headersmith]`` table.
        base_dir (Path | None): Directory relative paths are resolved against.

    Returns:
        MutableConfig: The configuration layer described by ``section``.

    Raises:
        ConfigError: On invalid values.
    """
    cfg = MutableConfig()

    languages: Any = section.get(KEY_LANGUAGES, [])
    if not isinstance(languages, list):
        raise ConfigError(f"'{KEY_LANGUAGES}' must be an array of tables")
    for entry in cast("list[Any]", languages):
        if not isinstance(entry, dict):
            raise ConfigError(f"'{KEY_LANGUAGES}' must be an array of tables")
        cfg.languages.append(language_from_dict(cast("TomlTable", entry)))

    if KEY_KEYWORDS in section:
        cfg.keywords = _str_list(section[KEY_KEYWORDS], KEY_KEYWORDS)

    if KEY_EXCLUDE in section:
        cfg.exclude = list(_str_list(section[KEY_EXCLUDE], KEY_EXCLUDE))

    cfg.separator_lines = _optional_int(section.get(KEY_SEPARATOR_LINES), KEY_SEPARATOR_LINES)
    cfg.max_workers = _optional_int(section.get(KEY_MAX_WORKERS), KEY_MAX_WORKERS)

    definition: Any = section.get(KEY_DEFINITION_FILE)
    if definition is not None:
        if not isinstance(definition, str):
            raise ConfigError(f"'{KEY_DEFINITION_FILE}' must be a string")
        def_path = Path(definition)
        if base_dir is not None and not def_path.is_absolute():
            def_path = base_dir / def_path
        cfg.definition_file = def_path

    return cfg


def load_config(path: Path) -> MutableConfig:
    """Load a configuration layer from ``headersmith.toml`` or ``pyproject.toml``.

    A ``pyproject.toml`` without a ``[tool.headersmith]`` table yields an
    empty layer.

    Raises:
        ConfigError: If the file is unreadable, not TOML, or holds invalid values.
    """
    data: TomlTable = load_toml_dict(path)
    section: TomlTable | None = extract_section(data, pyproject=path.name == PYPROJECT_FILE_NAME)
    if section is None:
        logger.debug("No HeaderSmith configuration in %s", path)
        return MutableConfig()
    logger.debug("Loaded HeaderSmith configuration from %s", path)
    return config_from_dict(section, base_dir=path.parent)


def discover_config_file(start: Path) -> Path | None:
    """Find the nearest configuration file at or above ``start``.

    ``headersmith.toml`` wins over ``pyproject.toml`` in the same directory;
    a ``pyproject.toml`` only counts if it has a ``[tool.headersmith]`` table.

    Args:
        start (Path): File or directory to start searching from.

    Returns:
        Path | None: The configuration file, or None.
    """
    current: Path = start.resolve()
    if current.is_file():
        current = current.parent
    for directory in (current, *current.parents):
        candidate: Path = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        pyproject: Path = directory / PYPROJECT_FILE_NAME
        if pyproject.is_file():
            try:
                if extract_section(load_toml_dict(pyproject), pyproject=True) is not None:
                    return pyproject
            except ConfigError:
                logger.warning("Ignoring unreadable %s during config discovery", pyproject)
    return None
