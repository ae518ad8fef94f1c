# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : templates.py
#   file_relpath : src/headersmith/headers/templates.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Select the header template that applies to a path.

Templates are keyed by extension. The key that is the longest
case-insensitive suffix of the path wins, so a ``.designer.cs`` template takes
precedence over a ``.cs`` one. A matched template that is None or made of
blank lines only means "no header": the engine removes the existing header.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from headersmith.config.logging import HeaderSmithLogger, get_logger
from headersmith.errors import InvalidInputError
from headersmith.languages.registry import longest_suffix_match

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

logger: HeaderSmithLogger = get_logger(__name__)


class TemplateKind(Enum):
    """Discriminant of a `TemplateResolution`.

    Members:
        TEMPLATE: A non-empty template matched.
        EMPTY_HEADER: The matched template is blank; the header must be removed.
        NO_HEADER_FOUND: No template key matches the path.
        REMOVAL_ONLY: No template map was supplied; headers are only removed.
    """

    TEMPLATE = "template"
    EMPTY_HEADER = "empty_header"
    NO_HEADER_FOUND = "no_header_found"
    REMOVAL_ONLY = "removal_only"


@dataclass(frozen=True)
class TemplateResolution:
    """Result of `resolve_template`.

    Attributes:
        kind (TemplateKind): Discriminant.
        extension (str | None): The matched template key, if any.
        lines (tuple[str, ...]): Template lines (pre-expansion); empty unless
            ``kind`` is `TemplateKind.TEMPLATE`.
    """

    kind: TemplateKind
    extension: str | None = None
    lines: tuple[str, ...] = ()

    @property
    def removes_header(self) -> bool:
        """Whether applying this resolution removes the existing header."""
        return self.kind in (TemplateKind.EMPTY_HEADER, TemplateKind.REMOVAL_ONLY)


def is_blank_template(lines: Sequence[str] | None) -> bool:
    """Whether a template is None or consists only of blank lines."""
    return lines is None or all(not line.strip() for line in lines)


def _validated_lines(extension: str, value: object) -> tuple[str, ...] | None:
    if value is None:
        return None
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise InvalidInputError(
            f"Template for '{extension}' must be a sequence of lines, got {type(value).__name__}"
        )
    lines: tuple[object, ...] = tuple(value)
    for line in lines:
        if not isinstance(line, str):
            raise InvalidInputError(f"Template for '{extension}' contains a non-string line")
    return tuple(str(line) for line in lines)


def resolve_template(
    path: str | Path,
    templates: Mapping[str, Sequence[str] | None] | None,
) -> TemplateResolution:
    """Select the template for ``path``.

    Args:
        path (str | Path): The document path.
        templates (Mapping[str, Sequence[str] | None] | None): Templates keyed by
            extension, or None for removal-only mode.

    Returns:
        TemplateResolution: The selected template or the reason there is none.

    Raises:
        InvalidInputError: If the matched template is not a sequence of strings.
    """
    if templates is None:
        return TemplateResolution(TemplateKind.REMOVAL_ONLY)

    extension: str | None = longest_suffix_match(str(path), templates.keys())
    if extension is None:
        logger.debug("No header template matches %s", path)
        return TemplateResolution(TemplateKind.NO_HEADER_FOUND)

    lines: tuple[str, ...] | None = _validated_lines(extension, templates[extension])
    if lines is None or is_blank_template(lines):
        logger.debug("Template '%s' for %s is empty", extension, path)
        return TemplateResolution(TemplateKind.EMPTY_HEADER, extension=extension)

    return TemplateResolution(TemplateKind.TEMPLATE, extension=extension, lines=lines)
