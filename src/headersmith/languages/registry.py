# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : registry.py
#   file_relpath : src/headersmith/languages/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Language lookup by file extension.

`resolve_language` is the pure lookup used by the engine: among every
extension of every candidate language that is a (case-insensitive) suffix of
the path, the longest one wins, and equal-length ties go to the language
registered first. This lets ``.designer.cs`` beat ``.cs``.

`LanguageRegistry` composes the built-in languages with overlays (from
configuration or tests) and is safe to use from several threads.

Typical usage:
    ```python
    registry = LanguageRegistry.with_builtins()
    registry.register(Language(name="ini", extensions=(".ini",), line_comment=";"))
    lang = registry.resolve("settings.ini")
    ```
"""

from __future__ import annotations

from threading import RLock
from typing import TYPE_CHECKING

from headersmith.config.logging import HeaderSmithLogger, get_logger
from headersmith.errors import LanguageNotFoundError
from headersmith.languages.base import Language, normalize_extension
from headersmith.languages.builtins import LANGUAGES

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

logger: HeaderSmithLogger = get_logger(__name__)


def longest_suffix_match(path: str, candidates: Iterable[str]) -> str | None:
    """Return the longest candidate that is a case-insensitive suffix of ``path``.

    Ties are resolved in favor of the candidate seen first.

    Args:
        path (str): Path or file name to test.
        candidates (Iterable[str]): Candidate suffixes, in priority order.

    Returns:
        str | None: The winning candidate (as given), or None when nothing matches.
    """
    lowered: str = path.lower()
    best: str | None = None
    best_len: int = -1
    for cand in candidates:
        norm: str = normalize_extension(cand)
        if not norm or not lowered.endswith(norm):
            continue
        if len(norm) > best_len:
            best, best_len = cand, len(norm)
    return best


def resolve_language(path: str | Path, languages: Iterable[Language]) -> Language:
    """Return the language whose extension is the longest suffix of ``path``.

    Args:
        path (str | Path): The document path.
        languages (Iterable[Language]): Candidate languages in registration order.

    Returns:
        Language: The matching language.

    Raises:
        LanguageNotFoundError: When no extension of any language matches.
    """
    text: str = str(path)
    best: Language | None = None
    best_len: int = -1
    for lang in languages:
        ext: str | None = lang.matching_extension(text)
        if ext is None:
            continue
        length: int = len(normalize_extension(ext))
        if length > best_len:
            best, best_len = lang, length

    if best is None:
        logger.debug("No language found for %s", text)
        raise LanguageNotFoundError(text)

    logger.trace("Resolved %s to language '%s'", text, best.name)
    return best


class LanguageRegistry:
    """Ordered, thread-safe collection of languages keyed by name.

    Registering a language under an existing name replaces it in place (it
    keeps its position, hence its tie-breaking priority); new names are
    appended.
    """

    def __init__(self, languages: Iterable[Language] = ()) -> None:
        self._lock = RLock()
        self._languages: dict[str, Language] = {}
        for lang in languages:
            self._languages[lang.name] = lang

    @classmethod
    def with_builtins(cls, overlays: Iterable[Language] = ()) -> LanguageRegistry:
        """Return a registry with the built-in languages plus ``overlays``.

        Args:
            overlays (Iterable[Language]): Languages added after (or replacing)
                the built-ins.

        Returns:
            LanguageRegistry: The new registry.
        """
        registry = cls(LANGUAGES)
        for lang in overlays:
            registry.register(lang)
        return registry

    def register(self, language: Language) -> None:
        """Add or replace a language."""
        with self._lock:
            if language.name in self._languages:
                logger.debug("Replacing language '%s'", language.name)
            self._languages[language.name] = language

    def unregister(self, name: str) -> Language | None:
        """Remove a language by name and return it (None if unknown)."""
        with self._lock:
            return self._languages.pop(name, None)

    def get(self, name: str) -> Language | None:
        """Return a language by name."""
        with self._lock:
            return self._languages.get(name)

    def names(self) -> tuple[str, ...]:
        """Return the registered language names in registration order."""
        with self._lock:
            return tuple(self._languages)

    def as_tuple(self) -> tuple[Language, ...]:
        """Return a snapshot of the registered languages in registration order."""
        with self._lock:
            return tuple(self._languages.values())

    def resolve(self, path: str | Path) -> Language:
        """Resolve the language for ``path`` (see `resolve_language`)."""
        return resolve_language(path, self.as_tuple())

    def __iter__(self) -> Iterator[Language]:
        return iter(self.as_tuple())

    def __len__(self) -> int:
        with self._lock:
            return len(self._languages)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._languages
