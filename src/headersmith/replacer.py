# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : replacer.py
#   file_relpath : src/headersmith/replacer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Single-file and batch entry points of the header engine.

`HeaderReplacer.process_one` runs one `HeaderJob` through language
resolution, template selection, validation and replacement, and maps every
failure to an `Outcome`. `HeaderReplacer.process_many` runs a batch of jobs on
a thread pool:

* a failing job never stops the others; its error is collected in the
  `BatchResult`;
* every job reports progress exactly once, whatever its fate;
* when a header is not comment-only, the confirmation callback is asked once
  per extension. The answer is remembered for the rest of the batch and
  concurrent jobs with the same extension wait for it.

Typical usage:
    ```python
    replacer = HeaderReplacer()
    result = replacer.process_many(
        [make_job("src/a.cs", templates={".cs": ["// Copyright %CurrentYear%"]})],
        progress=lambda p: print(f"{p.processed}/{p.total}"),
    )
    for err in result.errors:
        print(err.path, err.kind, err.message)
    ```
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from threading import Lock
from typing import TYPE_CHECKING, Callable

from headersmith.config.logging import HeaderSmithLogger, get_logger
from headersmith.config.model import Config
from headersmith.errors import (
    InvalidInputError,
    LanguageNotFoundError,
    NoHeaderFoundError,
    ParseError,
)
from headersmith.headers.definitions import is_definition_file
from headersmith.headers.document import HeaderDocument
from headersmith.headers.templates import TemplateKind, TemplateResolution, resolve_template
from headersmith.headers.tokens import DocumentContext, UserInfo
from headersmith.languages.registry import LanguageRegistry
from headersmith.types import (
    OUTCOME_ERROR_KINDS,
    BatchResult,
    Outcome,
    OutcomeKind,
    ProgressReport,
    ReplacerError,
)
from headersmith.utils.files import read_document, write_document_atomic

if TYPE_CHECKING:
    from collections.abc import Iterable

    from headersmith.languages.base import Language
    from headersmith.types import ConfirmCallback, HeaderJob, ProgressSink

logger: HeaderSmithLogger = get_logger(__name__)


class HeaderReplacer:
    """Apply header templates to documents.

    Args:
        config (Config | None): Engine configuration (keywords, separator lines,
            worker count, extra languages).
        registry (LanguageRegistry | None): Languages to resolve against; by
            default the built-ins plus ``config.languages``.
        user (UserInfo | None): Identity for the user tokens; looked up once
            when None.
        clock (Callable[[], datetime] | None): Source of the current time.
        dry_run (bool): Compute new content without writing files.
    """

    def __init__(
        self,
        config: Config | None = None,
        registry: LanguageRegistry | None = None,
        *,
        user: UserInfo | None = None,
        clock: Callable[[], datetime] | None = None,
        dry_run: bool = False,
    ) -> None:
        self.config: Config = config or Config()
        self.registry: LanguageRegistry = (
            registry
            if registry is not None
            else LanguageRegistry.with_builtins(self.config.languages)
        )
        self.user: UserInfo = user if user is not None else UserInfo.current()
        self.clock: Callable[[], datetime] = clock or datetime.now
        self.dry_run: bool = dry_run

        self._decision_lock = Lock()
        self._decisions: dict[str, bool] = {}

    def reset_decisions(self) -> None:
        """Forget every remembered answer about invalid headers."""
        with self._decision_lock:
            self._decisions.clear()

    def _accept_invalid_header(
        self,
        extension: str,
        message: str,
        confirm: ConfirmCallback | None,
    ) -> bool:
        # The lock is held while asking so concurrent jobs never ask twice.
        with self._decision_lock:
            if extension in self._decisions:
                return self._decisions[extension]
            answer: bool = True if confirm is None else bool(confirm(message))
            self._decisions[extension] = answer
            logger.debug("Invalid header for '%s' files accepted: %s", extension, answer)
            return answer

    def create_document(self, job: HeaderJob) -> HeaderDocument:
        """Build the `HeaderDocument` for a job.

        Args:
            job (HeaderJob): The job.

        Returns:
            HeaderDocument: The document, ready for validation and replacement.

        Raises:
            InvalidInputError: If the path is empty or the template is malformed.
            LanguageNotFoundError: If no language claims the path.
            NoHeaderFoundError: If templates were given but none matches the path.
            OSError: If the content has to be read and cannot be.
            UnicodeDecodeError: If the file is not valid UTF-8.
        """
        if not job.path.name:
            raise InvalidInputError(f"Invalid document path: '{job.path}'")

        language: Language = self.registry.resolve(job.path)
        resolution: TemplateResolution = resolve_template(job.path, job.templates)
        if resolution.kind is TemplateKind.NO_HEADER_FOUND:
            raise NoHeaderFoundError(str(job.path))

        content: str = job.content if job.content is not None else read_document(job.path)
        context = DocumentContext.for_path(
            job.path,
            additional_tokens=job.additional_tokens,
            user=self.user,
            now=self.clock(),
        )
        return HeaderDocument(
            path=job.path,
            content=content,
            language=language,
            resolution=resolution,
            context=context,
            keywords=self.config.keywords,
            separator_lines=self.config.separator_lines,
        )

    def process_one(
        self,
        job: HeaderJob,
        *,
        confirm: ConfirmCallback | None = None,
        called_by_user: bool = True,
        language_not_found: Callable[[str], None] | None = None,
    ) -> Outcome:
        """Process a single job.

        File jobs (no ``content``) are read from and written back to
        ``job.path``; content jobs only return the new content.

        Args:
            job (HeaderJob): The job.
            confirm (ConfirmCallback | None): Asked whether to proceed when the
                header is not comment-only (once per extension until
                `reset_decisions`). None means proceed.
            called_by_user (bool): When False, a missing language or template is
                reported as `OutcomeKind.SKIPPED` instead of an error outcome.
            language_not_found (Callable[[str], None] | None): Receives the
                message when no language matches and ``called_by_user`` is True.

        Returns:
            Outcome: The terminal state of the job.
        """
        path = job.path
        if is_definition_file(path):
            logger.debug("Skipping header definition file %s", path)
            return Outcome(kind=OutcomeKind.SKIPPED, path=path, message="Header definition file")

        try:
            doc: HeaderDocument = self.create_document(job)
        except LanguageNotFoundError as e:
            message = str(e)
            if not called_by_user:
                logger.debug("%s (skipped)", message)
                return Outcome(kind=OutcomeKind.SKIPPED, path=path, message=message)
            logger.warning(message)
            if language_not_found is not None:
                language_not_found(message)
            return Outcome(kind=OutcomeKind.LANGUAGE_NOT_FOUND, path=path, message=message)
        except NoHeaderFoundError as e:
            message = str(e)
            if not called_by_user:
                logger.debug("%s (skipped)", message)
                return Outcome(kind=OutcomeKind.SKIPPED, path=path, message=message)
            logger.warning(message)
            return Outcome(kind=OutcomeKind.NO_HEADER_FOUND, path=path, message=message)
        except (InvalidInputError, OSError, UnicodeDecodeError) as e:
            logger.error("Cannot process %s: %s", path, e)
            return Outcome(kind=OutcomeKind.MISCELLANEOUS, path=path, message=str(e))

        if not doc.validate_header():
            extension: str = (doc.resolution.extension or path.suffix).lower()
            message = (
                f"The header for '{extension}' files contains text outside of comments. "
                "Apply it anyway?"
            )
            if not self._accept_invalid_header(extension, message, confirm):
                logger.warning("Not applying non-comment header to %s", path)
                return Outcome(kind=OutcomeKind.NON_COMMENT_TEXT, path=path, message=message)

        try:
            changed: bool = doc.replace_header_if_necessary()
        except ParseError as e:
            message = f"Cannot parse the header of '{path}': {e}"
            logger.error(message)
            return Outcome(kind=OutcomeKind.PARSE_ERROR, path=path, message=message)

        if not changed:
            if doc.resolution.kind is TemplateKind.EMPTY_HEADER:
                return Outcome(
                    kind=OutcomeKind.EMPTY_HEADER, path=path, message="Header template is empty"
                )
            return Outcome(kind=OutcomeKind.UNCHANGED, path=path)

        if not job.in_memory and not self.dry_run:
            try:
                write_document_atomic(path, doc.content)
            except OSError as e:
                logger.error("Cannot write %s: %s", path, e)
                return Outcome(kind=OutcomeKind.MISCELLANEOUS, path=path, message=str(e))
        return Outcome(kind=OutcomeKind.REPLACED, path=path, content=doc.content)

    def process_many(
        self,
        jobs: Iterable[HeaderJob],
        progress: ProgressSink | None = None,
        confirm: ConfirmCallback | None = None,
        *,
        called_by_user: bool = False,
    ) -> BatchResult:
        """Process jobs concurrently and wait for all of them.

        Starts with a fresh invalid-header decision cache.

        Args:
            jobs (Iterable[HeaderJob]): The jobs.
            progress (ProgressSink | None): Receives one `ProgressReport` per job.
            confirm (ConfirmCallback | None): See `process_one`.
            called_by_user (bool): See `process_one`.

        Returns:
            BatchResult: Collected errors and the per-job outcomes in job order.
        """
        job_list: list[HeaderJob] = list(jobs)
        total: int = len(job_list)
        self.reset_decisions()

        counter_lock = Lock()
        processed: int = 0

        def _run(job: HeaderJob) -> Outcome:
            nonlocal processed
            try:
                outcome: Outcome = self.process_one(
                    job, confirm=confirm, called_by_user=called_by_user
                )
            except Exception as e:  # noqa: BLE001
                logger.exception("Unexpected error while processing %s", job.path)
                outcome = Outcome(kind=OutcomeKind.MISCELLANEOUS, path=job.path, message=str(e))
            with counter_lock:
                processed += 1
                report = ProgressReport(total=total, processed=processed)
                if progress is not None:
                    progress(report)
            return outcome

        logger.info("Processing %d document(s)", total)
        with ThreadPoolExecutor(
            max_workers=self.config.max_workers, thread_name_prefix="headersmith"
        ) as pool:
            outcomes: list[Outcome] = list(pool.map(_run, job_list))

        errors: list[ReplacerError] = [
            ReplacerError(path=o.path, kind=OUTCOME_ERROR_KINDS[o.kind], message=o.message or "")
            for o in outcomes
            if o.kind in OUTCOME_ERROR_KINDS
        ]
        logger.info("Processed %d document(s), %d error(s)", total, len(errors))
        return BatchResult(errors=tuple(errors), outcomes=tuple(outcomes))
