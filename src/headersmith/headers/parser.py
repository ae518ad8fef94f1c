# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : parser.py
#   file_relpath : src/headersmith/headers/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Leading comment region parser.

The header region of a document is the longest prefix made of:

* blank lines,
* lines whose first non-blank text is the language's line-comment marker,
* block comments, from a start marker at the beginning of a line (after
  indentation) to the matching end marker, over one or more lines.

A block comment whose closing line continues with code (``/* x */ int a;``)
is not part of the region; the region ends before the line the block opened
on. Text after the end marker that is itself a comment (another block, or a
line comment) is accepted.

A block comment that is never closed raises `ParseError`: treating it as
"no header" or cutting it at an arbitrary point could destroy code.

The parser knows nothing about the language grammar beyond its comment
markers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from headersmith.config.logging import HeaderSmithLogger, get_logger
from headersmith.errors import ParseError
from headersmith.utils.text import is_blank, split_lines, strip_eol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from headersmith.languages.base import Language

logger: HeaderSmithLogger = get_logger(__name__)


@dataclass(frozen=True)
class HeaderRegion:
    """The leading comment region of a document.

    Attributes:
        lines (tuple[str, ...]): Raw lines of the region, terminators included.
        comment_end (int): Index (exclusive) of the last non-blank region line;
            lines from ``comment_end`` to the end of the region are the blank
            separator lines.
    """

    lines: tuple[str, ...] = ()
    comment_end: int = 0

    @property
    def end(self) -> int:
        """Number of document lines covered by the region."""
        return len(self.lines)

    @property
    def comment_lines(self) -> tuple[str, ...]:
        """Region lines up to the last non-blank one (leading blanks included)."""
        return self.lines[: self.comment_end]

    @property
    def separator_lines(self) -> tuple[str, ...]:
        """Blank lines between the last comment line and the rest of the document."""
        return self.lines[self.comment_end :]

    @property
    def is_empty(self) -> bool:
        """Whether the region holds no comment at all (blank lines only, or nothing)."""
        return self.comment_end == 0

    @property
    def text(self) -> str:
        """The comment part of the region as a single string."""
        return "".join(self.comment_lines)


class CommentParser:
    """Parse leading comment regions for one language.

    Args:
        language (Language): Supplies the comment markers.
    """

    def __init__(self, language: Language) -> None:
        self.language = language
        self.line_comment: str | None = language.line_comment or None
        self.block_start: str | None = language.block_start
        self.block_end: str | None = language.block_end

    def parse(self, text: str) -> HeaderRegion:
        """Parse the header region at the start of ``text``.

        Args:
            text (str): Document content.

        Returns:
            HeaderRegion: The region (possibly empty).

        Raises:
            ParseError: If a block comment in the region is not terminated.
        """
        return self.parse_lines(split_lines(text))

    def parse_lines(self, lines: Sequence[str]) -> HeaderRegion:
        """Parse the header region of a document given as raw lines.

        Raises:
            ParseError: If a block comment in the region is not terminated.
        """
        i: int = 0
        comment_end: int = 0
        n: int = len(lines)

        while i < n:
            body: str = strip_eol(lines[i])
            if is_blank(body):
                i += 1
                continue

            lead: str = body.lstrip()
            indent: int = len(body) - len(lead)

            # Block markers first: some block starts begin with the line marker (Lua "--[[").
            if self.block_start and lead.startswith(self.block_start):
                next_line: int | None = self._consume_block(lines, i, indent)
                if next_line is None:
                    logger.debug("Block comment at line %d is followed by code", i + 1)
                    break
                i = next_line
                comment_end = i
                continue

            if self.line_comment and lead.startswith(self.line_comment):
                i += 1
                comment_end = i
                continue

            break

        logger.trace("Header region: %d line(s), %d comment line(s)", i, comment_end)
        return HeaderRegion(lines=tuple(lines[:i]), comment_end=comment_end)

    def _consume_block(self, lines: Sequence[str], row: int, col: int) -> int | None:
        """Consume block comments starting at ``(row, col)``.

        Returns:
            int | None: Index of the first line after the comment(s), or None when
                code follows the closing marker on the same line.

        Raises:
            ParseError: If the block comment is not terminated.
        """
        assert self.block_start is not None and self.block_end is not None
        start_row: int = row
        while True:
            search_from: int = col + len(self.block_start)
            row, col = self._find_block_end(lines, row, search_from, start_row)
            rest: str = strip_eol(lines[row])[col + len(self.block_end) :]
            tail: str = rest.lstrip()
            if not tail:
                return row + 1
            if self.block_start and tail.startswith(self.block_start):
                col = col + len(self.block_end) + (len(rest) - len(tail))
                continue
            if self.line_comment and tail.startswith(self.line_comment):
                return row + 1
            return None

    def _find_block_end(
        self, lines: Sequence[str], row: int, col: int, start_row: int
    ) -> tuple[int, int]:
        assert self.block_end is not None
        while row < len(lines):
            idx: int = strip_eol(lines[row]).find(self.block_end, col)
            if idx >= 0:
                return row, idx
            row += 1
            col = 0
        offset: int = sum(len(line) for line in lines[:start_row])
        raise ParseError(
            f"Unterminated block comment '{self.block_start}' starting at line {start_row + 1}",
            offset=offset,
        )

    def is_comment_only(self, lines: Sequence[str]) -> bool:
        """Whether ``lines`` consist solely of comments and whitespace.

        Unterminated block comments count as non-comment text.
        """
        try:
            region: HeaderRegion = self.parse_lines(lines)
        except ParseError:
            return False
        return region.end == len(lines)
