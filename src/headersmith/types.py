# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : types.py
#   file_relpath : src/headersmith/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Result, error and job types exchanged with HeaderSmith callers.

These are the values that cross the public API boundary:

* `HeaderJob`: one unit of work (a path, optionally its content, the
  extension-to-template mapping and extra tokens).
* `Outcome`: the terminal state of processing one job.
* `ReplacerError`: a per-job failure captured by the batch orchestrator.
* `ProgressReport`: emitted once per settled job during a batch.
* `BatchResult`: the aggregate returned once every job of a batch settled.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from yachalk import chalk

from headersmith.rendering.colored_enum import ColoredStrEnum

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


ConfirmCallback = Callable[[str], bool]
ProgressSink = Callable[["ProgressReport"], None]


class OutcomeKind(ColoredStrEnum):
    """Terminal state of processing a single document."""

    UNCHANGED = ("unchanged", chalk.green)
    REPLACED = ("replaced", chalk.blue)
    LANGUAGE_NOT_FOUND = ("language not found", chalk.yellow)
    NO_HEADER_FOUND = ("no header definition", chalk.yellow)
    EMPTY_HEADER = ("empty header", chalk.gray)
    PARSE_ERROR = ("parse error", chalk.red_bright)
    NON_COMMENT_TEXT = ("non-comment text", chalk.red)
    SKIPPED = ("skipped", chalk.gray)
    MISCELLANEOUS = ("invalid input", chalk.red_bright)


class ErrorKind(str, Enum):
    """Classification of a `ReplacerError`."""

    LANGUAGE_NOT_FOUND = "language_not_found"
    NO_HEADER_FOUND = "no_header_found"
    PARSING_ERROR = "parsing_error"
    NON_COMMENT_TEXT = "non_comment_text"
    MISCELLANEOUS = "miscellaneous"


@dataclass(frozen=True)
class AdditionalToken:
    """A caller-supplied token with a fixed replacement value.

    Attributes:
        token (str): Placeholder text to replace (e.g. ``"%Project%"``).
        value (str): Replacement text.
    """

    token: str
    value: str


@dataclass(frozen=True, kw_only=True)
class HeaderJob:
    """One unit of header work.

    Attributes:
        path (Path): Path of the document. Used for language and template
            resolution even when ``content`` is given.
        content (str | None): Document content. When None, the content is read
            from ``path`` and a changed result is written back to ``path``.
        templates (Mapping[str, Sequence[str] | None] | None): Header templates
            keyed by extension. None requests removal-only mode.
        additional_tokens (tuple[AdditionalToken, ...]): Extra tokens appended
            after the built-in tokens.
    """

    path: Path
    content: str | None = None
    templates: Mapping[str, Sequence[str] | None] | None = None
    additional_tokens: tuple[AdditionalToken, ...] = ()

    @property
    def in_memory(self) -> bool:
        """Whether the job works on supplied content instead of the file on disk."""
        return self.content is not None


def make_job(
    path: str | Path,
    content: str | None = None,
    templates: Mapping[str, Sequence[str] | None] | None = None,
    additional_tokens: Sequence[tuple[str, str] | AdditionalToken] = (),
) -> HeaderJob:
    """Build a `HeaderJob` from plain values.

    Args:
        path (str | Path): Path of the document.
        content (str | None): Optional document content.
        templates (Mapping[str, Sequence[str] | None] | None): Templates keyed by
            extension, or None for removal-only mode.
        additional_tokens (Sequence[tuple[str, str] | AdditionalToken]): Extra
            ``(token, value)`` pairs.

    Returns:
        HeaderJob: The job.
    """
    tokens: list[AdditionalToken] = []
    for item in additional_tokens:
        if isinstance(item, AdditionalToken):
            tokens.append(item)
        else:
            token, value = item
            tokens.append(AdditionalToken(token=token, value=value))
    return HeaderJob(
        path=Path(path),
        content=content,
        templates=templates,
        additional_tokens=tuple(tokens),
    )


@dataclass(frozen=True, kw_only=True)
class Outcome:
    """Result of processing one document.

    Attributes:
        kind (OutcomeKind): Terminal state.
        path (Path): Path of the processed document.
        content (str | None): The new content when ``kind`` is `OutcomeKind.REPLACED`.
        message (str | None): Human-readable explanation for non-success states.
    """

    kind: OutcomeKind
    path: Path
    content: str | None = None
    message: str | None = None

    @property
    def changed(self) -> bool:
        """Whether the document content was (or would be) rewritten."""
        return self.kind == OutcomeKind.REPLACED


@dataclass(frozen=True)
class ReplacerError:
    """A per-document failure.

    Attributes:
        path (Path): Path of the document.
        kind (ErrorKind): Error classification.
        message (str): Human-readable message.
    """

    path: Path
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class ProgressReport:
    """Batch progress snapshot.

    Attributes:
        total (int): Number of jobs in the batch.
        processed (int): Number of jobs settled so far.
    """

    total: int
    processed: int


@dataclass(frozen=True)
class BatchResult:
    """Aggregate result of a batch run.

    Attributes:
        errors (tuple[ReplacerError, ...]): Every captured per-job error. Empty
            means full success.
        outcomes (tuple[Outcome, ...]): Per-job outcomes in job order.
    """

    errors: tuple[ReplacerError, ...] = ()
    outcomes: tuple[Outcome, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        """Whether the batch finished without errors."""
        return not self.errors


OUTCOME_ERROR_KINDS: dict[OutcomeKind, ErrorKind] = {
    OutcomeKind.LANGUAGE_NOT_FOUND: ErrorKind.LANGUAGE_NOT_FOUND,
    OutcomeKind.NO_HEADER_FOUND: ErrorKind.NO_HEADER_FOUND,
    OutcomeKind.PARSE_ERROR: ErrorKind.PARSING_ERROR,
    OutcomeKind.NON_COMMENT_TEXT: ErrorKind.NON_COMMENT_TEXT,
    OutcomeKind.MISCELLANEOUS: ErrorKind.MISCELLANEOUS,
}
