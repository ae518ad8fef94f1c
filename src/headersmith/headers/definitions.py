# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : definitions.py
#   file_relpath : src/headersmith/headers/definitions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Header-definition files (``*.licenseheader``).

A definition file maps extensions to header templates:

```text
extensions: .cs .designer.cs
// Copyright (c) %CurrentYear% Example Corp.
// Licensed under the MIT license.

extensions: .xml .xaml
<!--
  Copyright (c) %CurrentYear% Example Corp.
-->
```

Each ``extensions:`` line opens a block for the listed extensions; the
following lines are copied verbatim (before token expansion) until the next
``extensions:`` line. Blank lines separating blocks are trimmed from the end of
each block. A block with no lines maps its extensions to an empty template,
which requests header removal for them.

Definition files themselves are never rewritten (see `is_definition_file`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from headersmith.config.logging import HeaderSmithLogger, get_logger
from headersmith.constants import DEFINITION_EXTENSIONS_PREFIX, LICENSE_HEADER_EXTENSION
from headersmith.errors import InvalidInputError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

logger: HeaderSmithLogger = get_logger(__name__)


def is_definition_file(path: str | Path) -> bool:
    """Whether ``path`` names a header-definition file."""
    return str(path).lower().endswith(LICENSE_HEADER_EXTENSION)


def parse_definition(text: str) -> dict[str, list[str]]:
    """Parse the content of a header-definition file.

    Args:
        text (str): File content.

    Returns:
        dict[str, list[str]]: Template lines keyed by extension, in file order.
            An extension listed twice keeps its last definition.

    Raises:
        InvalidInputError: If template lines appear before the first
            ``extensions:`` line, or an ``extensions:`` line lists nothing.
    """
    templates: dict[str, list[str]] = {}
    current_exts: list[str] | None = None
    current_lines: list[str] = []

    def _flush() -> None:
        if current_exts is None:
            return
        while current_lines and not current_lines[-1].strip():
            current_lines.pop()
        for ext in current_exts:
            templates[ext] = list(current_lines)

    for lineno, line in enumerate(text.splitlines(), start=1):
        if line.lstrip().lower().startswith(DEFINITION_EXTENSIONS_PREFIX):
            _flush()
            exts: list[str] = line.lstrip()[len(DEFINITION_EXTENSIONS_PREFIX) :].split()
            if not exts:
                raise InvalidInputError(f"Line {lineno}: 'extensions:' lists no extension")
            current_exts = exts
            current_lines = []
            continue
        if current_exts is None:
            if line.strip():
                raise InvalidInputError(
                    f"Line {lineno}: header text before the first 'extensions:' line"
                )
            continue
        current_lines.append(line)

    _flush()
    logger.debug("Parsed header definition for extensions: %s", ", ".join(templates))
    return templates


def read_definition(path: Path) -> dict[str, list[str]]:
    """Read and parse a header-definition file.

    Raises:
        OSError: If the file cannot be read.
        InvalidInputError: If the content is malformed.
    """
    return parse_definition(path.read_text(encoding="utf-8"))


def render_definition(templates: Mapping[str, Sequence[str] | None]) -> str:
    """Render templates in the definition-file format.

    Extensions sharing an identical template are grouped on one
    ``extensions:`` line; blocks are separated by a blank line.
    """
    groups: dict[tuple[str, ...], list[str]] = {}
    for ext, lines in templates.items():
        key: tuple[str, ...] = tuple(lines or ())
        groups.setdefault(key, []).append(ext)

    blocks: list[str] = []
    for lines, exts in groups.items():
        block: list[str] = [f"{DEFINITION_EXTENSIONS_PREFIX} {' '.join(exts)}", *lines]
        blocks.append("\n".join(block))
    return "\n\n".join(blocks) + "\n" if blocks else ""


def find_definition_file(start: Path) -> Path | None:
    """Find the nearest header-definition file for ``start``.

    Looks in the directory of ``start`` (or ``start`` itself if it is a
    directory) and then in each parent directory. When a directory holds
    several definition files, the first in sorted order is used.

    Args:
        start (Path): A file or directory.

    Returns:
        Path | None: The nearest definition file, or None.
    """
    current: Path = start.resolve()
    if not current.is_dir():
        current = current.parent
    for directory in (current, *current.parents):
        try:
            candidates: list[Path] = sorted(
                p for p in directory.iterdir() if p.is_file() and is_definition_file(p.name)
            )
        except OSError as e:
            logger.debug("Cannot list %s: %s", directory, e)
            continue
        if candidates:
            logger.debug("Using header definition %s for %s", candidates[0], start)
            return candidates[0]
    return None
