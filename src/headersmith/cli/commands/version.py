# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : version.py
#   file_relpath : src/headersmith/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""HeaderSmith ``version`` command."""

from __future__ import annotations

import click
from yachalk import chalk

from headersmith.constants import HEADERSMITH_VERSION


@click.command(
    name="version",
    help="Show the installed HeaderSmith version.",
)
def version_command() -> None:
    """Print the version of HeaderSmith installed in this environment."""
    click.echo(chalk.bold(HEADERSMITH_VERSION))
