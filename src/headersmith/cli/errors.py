# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : errors.py
#   file_relpath : src/headersmith/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Click exceptions raised by HeaderSmith commands.

Each class carries the `ExitCode` Click exits with when it propagates out of
a command.
"""

from __future__ import annotations

from typing import IO, Any

import click
from yachalk import chalk

from headersmith.cli.exit_codes import ExitCode


class HeaderSmithCliError(click.ClickException):
    """Base class for all HeaderSmith CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message (colors are added by `show`)."""
        return str(self.message)

    def show(self, file: IO[Any] | None = None) -> None:
        """Print the error to stderr in bright red."""
        click.echo(chalk.red_bright(f"Error: {self.format_message()}"), file=file, err=True)


class HeaderSmithUsageError(HeaderSmithCliError):
    """Invalid flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class HeaderSmithConfigError(HeaderSmithCliError):
    """Invalid configuration file or header definition file."""

    exit_code = ExitCode.CONFIG_ERROR


class HeaderSmithFileNotFoundError(HeaderSmithCliError):
    """An input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class HeaderSmithPipelineError(HeaderSmithCliError):
    """Unexpected failure inside the engine."""

    exit_code = ExitCode.PIPELINE_ERROR
