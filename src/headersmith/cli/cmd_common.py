# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : cmd_common.py
#   file_relpath : src/headersmith/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Plumbing shared by the ``apply`` and ``remove`` commands.

Configuration loading, file discovery, running the batch and turning the
`BatchResult` into console output and an `ExitCode`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern
from yachalk import chalk

from headersmith.cli.errors import (
    HeaderSmithConfigError,
    HeaderSmithFileNotFoundError,
    HeaderSmithPipelineError,
)
from headersmith.cli.exit_codes import ExitCode
from headersmith.config.io import discover_config_file, load_config
from headersmith.config.logging import HeaderSmithLogger, get_logger
from headersmith.config.model import Config, MutableConfig
from headersmith.errors import ConfigError
from headersmith.headers.definitions import is_definition_file
from headersmith.replacer import HeaderReplacer
from headersmith.types import BatchResult, OutcomeKind, ProgressReport

if TYPE_CHECKING:
    from collections.abc import Iterable

    from headersmith.types import ConfirmCallback, HeaderJob, ProgressSink

logger: HeaderSmithLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the output level stored on the Click context (WARNING if unset)."""
    obj = ctx.find_root().obj or {}
    return int(obj.get("verbosity_level", logging.WARNING))


def resolve_config(config_path: str | None) -> Config:
    """Build the effective configuration.

    Args:
        config_path (str | None): Explicit configuration file; discovered from
            the working directory when None.

    Returns:
        Config: Defaults merged with the configuration file, if any.

    Raises:
        HeaderSmithConfigError: If the configuration cannot be loaded.
    """
    builder: MutableConfig = MutableConfig.from_defaults()
    path: Path | None = Path(config_path) if config_path else discover_config_file(Path.cwd())
    try:
        if path is not None:
            builder.merge_with(load_config(path))
        return builder.freeze()
    except (ConfigError, ValueError) as e:
        raise HeaderSmithConfigError(str(e)) from e


def collect_files(paths: Iterable[str], *, exclude: Iterable[str] = ()) -> list[Path]:
    """Expand the command arguments into a sorted, de-duplicated file list.

    Directories are walked recursively; hidden directories (``.git`` and the
    like) and header-definition files are left out. ``exclude`` holds
    gitignore-style patterns, matched against paths relative to the argument
    they were found under (or the path itself for file arguments).

    Raises:
        HeaderSmithFileNotFoundError: If an argument does not exist.
    """
    spec: PathSpec = PathSpec.from_lines(GitWildMatchPattern, list(exclude))
    files: dict[Path, None] = {}
    for raw in paths:
        path = Path(raw)
        if not path.exists():
            raise HeaderSmithFileNotFoundError(f"No such file or directory: '{raw}'")
        if path.is_file():
            if not spec.match_file(path.as_posix()):
                files[path] = None
            continue
        for candidate in sorted(path.rglob("*")):
            rel: Path = candidate.relative_to(path)
            if any(part.startswith(".") for part in rel.parts[:-1]):
                continue
            if not candidate.is_file() or is_definition_file(candidate):
                continue
            if spec.match_file(rel.as_posix()):
                logger.debug("Excluded %s", candidate)
                continue
            files[candidate] = None
    logger.debug("Collected %d file(s)", len(files))
    return list(files)


def _progress_printer(verbosity: int) -> ProgressSink | None:
    if verbosity > logging.INFO:
        return None

    def _print(report: ProgressReport) -> None:
        click.echo(chalk.gray(f"[{report.processed}/{report.total}]"), err=True)

    return _print


def run_batch(
    jobs: list[HeaderJob],
    *,
    config: Config,
    confirm: ConfirmCallback | None,
    dry_run: bool,
    verbosity: int,
) -> BatchResult:
    """Run ``jobs`` through a `HeaderReplacer`.

    Raises:
        HeaderSmithPipelineError: If the batch itself fails unexpectedly.
    """
    replacer = HeaderReplacer(config, dry_run=dry_run)
    try:
        return replacer.process_many(jobs, progress=_progress_printer(verbosity), confirm=confirm)
    except Exception as e:
        logger.exception("Batch failed")
        raise HeaderSmithPipelineError(f"Unexpected error: {e}") from e


def report_result(result: BatchResult, *, dry_run: bool, verbosity: int) -> ExitCode:
    """Print the batch outcome and return the exit code.

    Changed documents are always listed (unless ``-q``); unchanged and skipped
    ones only with ``-v``. Errors go to stderr.

    Returns:
        ExitCode: `ExitCode.FAILURE` if any job failed, `ExitCode.WOULD_CHANGE`
            for a dry run with changes, `ExitCode.SUCCESS` otherwise.
    """
    changed: int = 0
    for outcome in result.outcomes:
        if outcome.changed:
            changed += 1
            if verbosity <= logging.WARNING:
                label: str = "would change" if dry_run else outcome.kind.value
                click.echo(f"{outcome.kind.render(label)}: {outcome.path}")
        elif outcome.kind in (OutcomeKind.UNCHANGED, OutcomeKind.SKIPPED, OutcomeKind.EMPTY_HEADER):
            if verbosity <= logging.INFO:
                click.echo(f"{outcome.kind.render()}: {outcome.path}")

    for err in result.errors:
        click.echo(chalk.red(f"{err.kind.value}: {err.path}: {err.message}"), err=True)

    if verbosity <= logging.WARNING:
        summary = f"{len(result.outcomes)} file(s), {changed} changed, {len(result.errors)} error(s)"
        click.echo(chalk.bold(summary))

    if result.errors:
        return ExitCode.FAILURE
    if dry_run and changed:
        return ExitCode.WOULD_CHANGE
    return ExitCode.SUCCESS
