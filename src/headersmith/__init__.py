# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : __init__.py
#   file_relpath : src/headersmith/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""HeaderSmith package.

HeaderSmith inserts, updates and removes license headers in source files of
many languages. It recognizes each language's comment syntax, expands tokens
such as ``%CurrentYear%`` in header templates, and processes batches of files
concurrently. Both a CLI (``headersmith``) and the API below are provided.
"""

from __future__ import annotations

from headersmith.config.model import Config, MutableConfig
from headersmith.errors import (
    ConfigError,
    HeaderSmithError,
    InvalidInputError,
    LanguageNotFoundError,
    NoHeaderFoundError,
    ParseError,
)
from headersmith.languages import Language, LanguageRegistry, resolve_language
from headersmith.replacer import HeaderReplacer
from headersmith.types import (
    AdditionalToken,
    BatchResult,
    ErrorKind,
    HeaderJob,
    Outcome,
    OutcomeKind,
    ProgressReport,
    ReplacerError,
    make_job,
)

__all__ = [
    "AdditionalToken",
    "BatchResult",
    "Config",
    "ConfigError",
    "ErrorKind",
    "HeaderJob",
    "HeaderReplacer",
    "HeaderSmithError",
    "InvalidInputError",
    "Language",
    "LanguageNotFoundError",
    "LanguageRegistry",
    "MutableConfig",
    "NoHeaderFoundError",
    "Outcome",
    "OutcomeKind",
    "ParseError",
    "ProgressReport",
    "ReplacerError",
    "make_job",
    "resolve_language",
]
