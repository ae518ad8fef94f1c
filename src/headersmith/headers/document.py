# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : document.py
#   file_relpath : src/headersmith/headers/document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Single-document header engine.

A `HeaderDocument` holds the content of one file together with the resolved
language, the selected template and the token context. It answers two
questions:

* `validate_header`: is the header that would be written made only of
  comments? A template that is not would put code-like text at the top of
  the file.
* `replace_header_if_necessary`: compute the new content (insert, replace or
  remove the leading header) and report whether it differs.

All work happens on an in-memory line list; the caller decides whether and
where to write `HeaderDocument.content`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from headersmith.config.logging import HeaderSmithLogger, get_logger
from headersmith.headers.parser import CommentParser, HeaderRegion
from headersmith.headers.templates import TemplateKind, TemplateResolution
from headersmith.headers.tokens import expand_lines
from headersmith.utils.text import detect_newline, is_blank, split_lines, strip_eol

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from headersmith.headers.tokens import DocumentContext
    from headersmith.languages.base import Language

logger: HeaderSmithLogger = get_logger(__name__)


def wrap_in_comments(lines: Sequence[str], language: Language) -> list[str]:
    """Wrap plain text lines in the comment syntax of ``language``.

    Line-comment languages get the marker prepended to every non-blank line
    that does not already start with it. Block-only languages get a single
    block comment around all lines.

    Args:
        lines (Sequence[str]): Header lines without line terminators.
        language (Language): Target language.

    Returns:
        list[str]: The wrapped lines.
    """
    if language.line_comment:
        marker: str = language.line_comment
        wrapped: list[str] = []
        for line in lines:
            if is_blank(line) or line.lstrip().startswith(marker):
                wrapped.append(line)
            else:
                wrapped.append(f"{marker} {line}")
        return wrapped

    assert language.block_start is not None and language.block_end is not None
    return [language.block_start, *lines, language.block_end]


class HeaderDocument:
    """One document and the header it should carry.

    Args:
        path (Path): Path of the document (used in log messages).
        content (str): Current document content.
        language (Language): Comment syntax of the document.
        resolution (TemplateResolution): Template selected for the path.
        context (DocumentContext): Token context for expansion.
        keywords (Sequence[str] | None): When set, an existing comment region
            only counts as a license header if it contains one of these words.
        separator_lines (int | None): Blank lines written after a new header;
            None keeps those that followed the replaced region.
    """

    def __init__(
        self,
        *,
        path: Path,
        content: str,
        language: Language,
        resolution: TemplateResolution,
        context: DocumentContext,
        keywords: Sequence[str] | None = None,
        separator_lines: int | None = None,
    ) -> None:
        self.path: Path = path
        self.original: str = content
        self.content: str = content
        self.language: Language = language
        self.resolution: TemplateResolution = resolution
        self.keywords: tuple[str, ...] = tuple(k.lower() for k in keywords or ())
        self.separator_lines: int | None = separator_lines
        self.parser = CommentParser(language)
        self.foreign_comment: bool = False

        lines: list[str] = split_lines(content)
        self.newline: str = detect_newline(lines)
        # A prologue line (shebang, XML declaration) stays first, the header goes below it.
        self._prologue: list[str] = lines[:1] if lines and language.is_prologue(lines[0]) else []
        self._lines: list[str] = lines[len(self._prologue) :]

        self.header_lines: list[str] | None = None
        if resolution.kind is TemplateKind.TEMPLATE:
            self.header_lines = expand_lines(resolution.lines, context)
            logger.trace("Expanded header for %s: %s", path, self.header_lines)

    @property
    def removes_header(self) -> bool:
        """Whether this document's existing header is to be removed."""
        return self.header_lines is None

    @property
    def changed(self) -> bool:
        """Whether `content` differs from the original content."""
        return self.content != self.original

    def validate_header(self) -> bool:
        """Check that the header to be written holds only comments and whitespace.

        Removing a header never writes anything, so it is always valid.

        Returns:
            bool: True if the expanded header is comment-only.
        """
        if self.header_lines is None:
            return True
        valid: bool = self.parser.is_comment_only([line + "\n" for line in self.header_lines])
        if not valid:
            logger.debug("Header for %s contains non-comment text", self.path)
        return valid

    def rendered_header(self) -> list[str]:
        """Return the header lines as written, without line terminators.

        Comment-only headers are kept verbatim; others are wrapped in the
        language's comment syntax. Trailing blank lines are dropped.
        """
        if self.header_lines is None:
            return []
        lines: list[str] = list(self.header_lines)
        if not self.validate_header():
            lines = wrap_in_comments(lines, self.language)
        while lines and is_blank(lines[-1]):
            lines.pop()
        return lines

    def existing_header(self) -> HeaderRegion:
        """Parse the leading comment region that counts as the current header.

        With keywords configured, a region lacking all of them is not a license
        header: an empty region is returned (and `foreign_comment` set) so the
        new header goes above it. A region that already starts with the rendered
        header is ours whatever the keywords say.

        Raises:
            ParseError: If the leading comment region is malformed.
        """
        region: HeaderRegion = self.parser.parse_lines(self._lines)
        if self.keywords and not region.is_empty:
            text: str = region.text.lower()
            if not any(k in text for k in self.keywords):
                ours: bool = self.header_lines is not None and self._is_current(
                    region, self.rendered_header()
                )
                if ours:
                    return region
                logger.debug("Leading comment of %s has no license keyword", self.path)
                self.foreign_comment = True
                return HeaderRegion()
        return region

    def _is_current(self, region: HeaderRegion, rendered: list[str]) -> bool:
        existing: list[str] = [strip_eol(line) for line in region.comment_lines]
        if existing == rendered:
            return True
        if not self.keywords or not rendered or len(existing) <= len(rendered):
            return False
        # In keyword mode the license may be followed by other comment blocks.
        return existing[: len(rendered)] == rendered and is_blank(existing[len(rendered)])

    def replace_header_if_necessary(self) -> bool:
        """Insert, replace or remove the header and update `content`.

        Returns:
            bool: True if the content changed.

        Raises:
            ParseError: If the leading comment region is malformed.
        """
        region: HeaderRegion = self.existing_header()
        remainder: list[str] = self._lines[region.end :]

        if self.removes_header:
            if region.is_empty:
                logger.debug("No header to remove in %s", self.path)
                return False
            self.content = "".join([*self._prologue, *remainder])
            logger.info("Removed header from %s", self.path)
            return self.changed

        rendered: list[str] = self.rendered_header()
        if self._is_current(region, rendered):
            logger.debug("Header of %s is up to date", self.path)
            return False

        nl: str = self.newline
        separator: list[str]
        if self.separator_lines is None:
            separator = list(region.separator_lines)
        else:
            separator = [nl] * self.separator_lines
        if self.foreign_comment and not separator:
            # The new license must stay apart from the comment it is inserted above.
            separator = [nl]

        new_lines: list[str] = [line + nl for line in rendered]
        if self._prologue and not self._prologue[0].endswith(("\n", "\r")):
            self._prologue = [self._prologue[0] + nl]
        self.content = "".join([*self._prologue, *new_lines, *separator, *remainder])
        if self.changed:
            logger.info("Replaced header of %s", self.path)
        return self.changed
