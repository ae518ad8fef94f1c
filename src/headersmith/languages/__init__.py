# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : __init__.py
#   file_relpath : src/headersmith/languages/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Comment-syntax registry: languages, built-ins and extension resolution."""

from __future__ import annotations

from headersmith.languages.base import Language
from headersmith.languages.builtins import LANGUAGES
from headersmith.languages.registry import (
    LanguageRegistry,
    longest_suffix_match,
    resolve_language,
)

__all__ = [
    "LANGUAGES",
    "Language",
    "LanguageRegistry",
    "longest_suffix_match",
    "resolve_language",
]
