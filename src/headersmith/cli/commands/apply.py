# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : apply.py
#   file_relpath : src/headersmith/cli/commands/apply.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""HeaderSmith ``apply`` command.

Inserts or replaces license headers. Templates come from a header-definition
file: the one given with ``--definition``, else ``definition_file`` from the
configuration, else the ``*.licenseheader`` file nearest to each document.
Documents without a definition are skipped.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from headersmith.cli.cmd_common import (
    collect_files,
    get_effective_verbosity,
    report_result,
    resolve_config,
    run_batch,
)
from headersmith.cli.errors import HeaderSmithConfigError
from headersmith.cli.options import config_option, dry_run_option, exclude_option
from headersmith.config.logging import HeaderSmithLogger, get_logger
from headersmith.errors import InvalidInputError
from headersmith.headers.definitions import find_definition_file, read_definition
from headersmith.types import make_job

if TYPE_CHECKING:
    from headersmith.config.model import Config
    from headersmith.types import ConfirmCallback, HeaderJob

logger: HeaderSmithLogger = get_logger(__name__)

Templates = dict[str, list[str]]


def _load_definition(path: Path, cache: dict[Path, Templates]) -> Templates:
    if path not in cache:
        try:
            cache[path] = read_definition(path)
        except (OSError, InvalidInputError) as e:
            raise HeaderSmithConfigError(f"Invalid header definition {path}: {e}") from e
    return cache[path]


def build_jobs(files: list[Path], *, definition: Path | None) -> list[HeaderJob]:
    """Pair each file with the templates of its header definition.

    Raises:
        HeaderSmithConfigError: If a definition file cannot be read or parsed.
    """
    cache: dict[Path, Templates] = {}
    jobs: list[HeaderJob] = []
    for file in files:
        source: Path | None = definition or find_definition_file(file)
        if source is None:
            logger.info("No header definition found for %s", file)
            continue
        jobs.append(make_job(file, templates=_load_definition(source, cache)))
    return jobs


def _confirm(message: str) -> bool:
    return click.confirm(message, default=False, err=True)


@click.command(
    name="apply",
    help="Insert or replace license headers.",
)
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=str))
@click.option(
    "--definition",
    "definition_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Header definition (*.licenseheader) to use for every file.",
)
@config_option
@exclude_option
@click.option(
    "-y",
    "--yes",
    is_flag=True,
    default=False,
    help="Apply headers that contain non-comment text without asking.",
)
@dry_run_option
def apply_command(
    *,
    paths: tuple[str, ...],
    definition_path: Path | None,
    config_path: str | None,
    exclude_patterns: tuple[str, ...],
    yes: bool,
    dry_run: bool,
) -> None:
    """Insert or replace license headers in PATHS."""
    ctx = click.get_current_context()
    verbosity: int = get_effective_verbosity(ctx)
    config: Config = resolve_config(config_path)

    files: list[Path] = collect_files(paths, exclude=(*config.exclude, *exclude_patterns))
    jobs: list[HeaderJob] = build_jobs(files, definition=definition_path or config.definition_file)
    confirm: ConfirmCallback | None = None if yes else _confirm

    result = run_batch(jobs, config=config, confirm=confirm, dry_run=dry_run, verbosity=verbosity)
    ctx.exit(report_result(result, dry_run=dry_run, verbosity=verbosity))
