# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : errors.py
#   file_relpath : src/headersmith/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Exceptions raised by the HeaderSmith engine.

The single-file and batch APIs translate these into `Outcome` and
`ReplacerError` values; they only escape to callers that use the lower-level
building blocks (parser, resolvers) directly.
"""

from __future__ import annotations


class HeaderSmithError(Exception):
    """Base class for all HeaderSmith errors."""


class LanguageNotFoundError(HeaderSmithError):
    """No registered comment syntax claims the file's extension."""

    def __init__(self, path: str) -> None:
        super().__init__(f"No language is registered for the extension of '{path}'")
        self.path = path


class ParseError(HeaderSmithError):
    """The leading comment region of a document is malformed.

    Attributes:
        offset (int): Character offset of the offending block-comment start marker.
    """

    def __init__(self, message: str, *, offset: int) -> None:
        super().__init__(message)
        self.offset = offset


class InvalidInputError(HeaderSmithError):
    """Malformed caller input (path, template data, token definitions)."""


class ConfigError(HeaderSmithError):
    """Configuration file is missing, unreadable or malformed."""


class NoHeaderFoundError(HeaderSmithError):
    """A template map was supplied but none of its extensions matches the path."""

    def __init__(self, path: str) -> None:
        super().__init__(f"No header template is defined for the extension of '{path}'")
        self.path = path
