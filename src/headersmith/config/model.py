# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : model.py
#   file_relpath : src/headersmith/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Configuration model for HeaderSmith.

`MutableConfig` is the builder used while merging defaults, configuration
files and CLI overrides. `Config` is the frozen snapshot handed to the
engine; call `Config.thaw()` to get a builder back.

Fields:
    languages: Extra languages; a language with a built-in name replaces the
        built-in definition.
    keywords: When set, an existing comment block only counts as a license
        header if it contains one of these words (case-insensitive).
    separator_lines: Number of blank lines written after a header. None keeps
        the blank lines that already followed the existing header (zero for
        files without one).
    max_workers: Upper bound of the batch thread pool (None: executor default).
    definition_file: Header-definition file used by the CLI when set.
    exclude: Gitignore-style patterns of files the CLI leaves out.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from headersmith.config.logging import HeaderSmithLogger, get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from headersmith.languages.base import Language

logger: HeaderSmithLogger = get_logger(__name__)


@dataclass(frozen=True)
class Config:
    """Immutable configuration snapshot."""

    languages: tuple[Language, ...] = ()
    keywords: tuple[str, ...] | None = None
    separator_lines: int | None = None
    max_workers: int | None = None
    definition_file: Path | None = None
    exclude: tuple[str, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            languages=list(self.languages),
            keywords=list(self.keywords) if self.keywords is not None else None,
            separator_lines=self.separator_lines,
            max_workers=self.max_workers,
            definition_file=self.definition_file,
            exclude=list(self.exclude),
        )

    def with_overrides(self, **overrides: Any) -> Config:
        """Return a copy with the given fields replaced."""
        return replace(self, **overrides)


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Use `merge_with()` to layer configuration sources (later layers win) and
    `freeze()` to obtain the `Config` consumed by the engine.
    """

    languages: list[Language] = field(default_factory=lambda: [])
    keywords: list[str] | None = None
    separator_lines: int | None = None
    max_workers: int | None = None
    definition_file: Path | None = None
    exclude: list[str] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the runtime defaults."""
        return cls()

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Merge ``other`` on top of this builder (in place) and return self.

        Scalar fields are taken from ``other`` when set there; languages are
        merged by name, with ``other`` winning; exclude patterns accumulate.

        Args:
            other (MutableConfig): The layer to apply on top.

        Returns:
            MutableConfig: This builder.
        """
        if other.languages:
            by_name: dict[str, Language] = {lang.name: lang for lang in self.languages}
            for lang in other.languages:
                by_name[lang.name] = lang
            self.languages = list(by_name.values())
        if other.keywords is not None:
            self.keywords = list(other.keywords)
        if other.separator_lines is not None:
            self.separator_lines = other.separator_lines
        if other.max_workers is not None:
            self.max_workers = other.max_workers
        if other.definition_file is not None:
            self.definition_file = other.definition_file
        if other.exclude:
            self.exclude.extend(p for p in other.exclude if p not in self.exclude)
        return self

    def freeze(self) -> Config:
        """Validate and return an immutable `Config`.

        Raises:
            ValueError: If ``separator_lines`` or ``max_workers`` are out of range.
        """
        if self.separator_lines is not None and self.separator_lines < 0:
            raise ValueError(f"separator_lines must be >= 0, got {self.separator_lines}")
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        keywords: tuple[str, ...] | None = None
        if self.keywords is not None:
            # An empty keyword list disables the keyword requirement.
            keywords = tuple(k.strip() for k in self.keywords if k.strip()) or None
        logger.trace("Freezing config: %s", self)
        return Config(
            languages=tuple(self.languages),
            keywords=keywords,
            separator_lines=self.separator_lines,
            max_workers=self.max_workers,
            definition_file=self.definition_file,
            exclude=tuple(self.exclude),
        )
