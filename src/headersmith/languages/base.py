# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : base.py
#   file_relpath : src/headersmith/languages/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Language definitions: extensions and comment syntax.

A `Language` tells HeaderSmith which files it applies to (by extension) and
how comments are written in them. Languages may declare a line-comment marker
(``//``, ``#``, ``--``...), a block-comment pair (``/*`` ... ``*/``,
``<!--`` ... ``-->``), or both.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from headersmith.config.logging import HeaderSmithLogger, get_logger

logger: HeaderSmithLogger = get_logger(__name__)


def normalize_extension(ext: str) -> str:
    """Return ``ext`` lower-cased and stripped of surrounding whitespace.

    Extensions are stored as given (typically with the leading dot, e.g.
    ``.designer.cs``); matching is a plain case-insensitive suffix test, so a
    bare ``cs`` would also match ``foo.cs`` as well as ``foo.mcs``.
    """
    return ext.strip().lower()


@dataclass(frozen=True)
class Language:
    """A language's extensions and comment syntax.

    Attributes:
        name (str): Identifier of the language (e.g. ``"csharp"``).
        extensions (tuple[str, ...]): Recognized extensions in registration order.
        line_comment (str | None): Line-comment marker, if the language has one.
        block_start (str | None): Block-comment start marker.
        block_end (str | None): Block-comment end marker.
        prologue (str | None): Regular expression matched against the first line;
            a matching line (a shebang, an XML declaration) stays above the
            header. None disables the prologue.
        description (str): Human-readable description.
    """

    name: str
    extensions: tuple[str, ...]
    line_comment: str | None = None
    block_start: str | None = None
    block_end: str | None = None
    prologue: str | None = "#!"
    description: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Language name must not be empty")
        if (self.block_start is None) != (self.block_end is None):
            raise ValueError(
                f"Language '{self.name}': block_start and block_end must be set together"
            )
        if not self.line_comment and not self.block_start:
            raise ValueError(f"Language '{self.name}' declares no comment syntax")
        if self.prologue is not None:
            try:
                re.compile(self.prologue)
            except re.error as e:
                raise ValueError(f"Language '{self.name}': invalid prologue pattern: {e}") from e
        # Accept any iterable of extensions but store an immutable tuple.
        object.__setattr__(self, "extensions", tuple(self.extensions))

    @property
    def has_block_comments(self) -> bool:
        """Whether the language declares a block-comment pair."""
        return self.block_start is not None and self.block_end is not None

    @property
    def block_only(self) -> bool:
        """Whether block comments are the only comment syntax of the language."""
        return self.has_block_comments and not self.line_comment

    def is_prologue(self, line: str) -> bool:
        """Whether ``line`` is a first line that must stay above the header."""
        return self.prologue is not None and re.match(self.prologue, line) is not None

    def matching_extension(self, path: str) -> str | None:
        """Return the longest extension of this language that is a suffix of ``path``.

        Args:
            path (str): The path (or file name) to test.

        Returns:
            str | None: The matching extension, or None.
        """
        lowered: str = path.lower()
        best: str | None = None
        best_len: int = 0
        for ext in self.extensions:
            norm = normalize_extension(ext)
            if norm and lowered.endswith(norm) and len(norm) > best_len:
                best, best_len = ext, len(norm)
        return best
