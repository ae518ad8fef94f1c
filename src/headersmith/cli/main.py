# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : main.py
#   file_relpath : src/headersmith/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""``headersmith`` command group.

Group-level options are resolved once and stored in ``ctx.obj``:

* ``verbosity_level``: program output level from ``-v`` / ``-q``;
* ``log_level``: internal logging level from ``HEADERSMITH_LOG_LEVEL``.
"""

from __future__ import annotations

import click

from headersmith.cli.commands.apply import apply_command
from headersmith.cli.commands.languages import languages_command
from headersmith.cli.commands.remove import remove_command
from headersmith.cli.commands.version import version_command
from headersmith.cli.options import common_verbose_options, resolve_verbosity
from headersmith.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int) -> None:
    """Store verbosity on the Click context and configure logging.

    Args:
        ctx (click.Context): Current Click context; ``obj`` is initialized.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
    """
    ctx.obj = ctx.obj or {}
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="HeaderSmith: insert, update and remove license headers.",
)
@common_verbose_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int) -> None:
    """Entry point for the HeaderSmith CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet)

    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'headersmith apply [PATHS...]' to add license headers.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(apply_command)

cli.add_command(remove_command)

cli.add_command(languages_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
