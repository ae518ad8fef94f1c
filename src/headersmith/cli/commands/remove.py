# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : remove.py
#   file_relpath : src/headersmith/cli/commands/remove.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""HeaderSmith ``remove`` command: strip the leading license header of files."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from headersmith.cli.cmd_common import (
    collect_files,
    get_effective_verbosity,
    report_result,
    resolve_config,
    run_batch,
)
from headersmith.cli.options import config_option, dry_run_option, exclude_option
from headersmith.types import make_job

if TYPE_CHECKING:
    from pathlib import Path

    from headersmith.config.model import Config


@click.command(
    name="remove",
    help="Remove license headers.",
    epilog="""
Removes the leading comment region of each file. Configure 'keywords' to only
remove comment regions that mention them (e.g. "copyright").
""",
)
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=str))
@config_option
@exclude_option
@dry_run_option
def remove_command(
    *,
    paths: tuple[str, ...],
    config_path: str | None,
    exclude_patterns: tuple[str, ...],
    dry_run: bool,
) -> None:
    """Remove license headers from PATHS."""
    ctx = click.get_current_context()
    verbosity: int = get_effective_verbosity(ctx)
    config: Config = resolve_config(config_path)

    files: list[Path] = collect_files(paths, exclude=(*config.exclude, *exclude_patterns))
    jobs = [make_job(file) for file in files]

    result = run_batch(jobs, config=config, confirm=None, dry_run=dry_run, verbosity=verbosity)
    ctx.exit(report_result(result, dry_run=dry_run, verbosity=verbosity))
