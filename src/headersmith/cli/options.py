# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : options.py
#   file_relpath : src/headersmith/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Reusable Click options and their resolution."""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from headersmith.cli.errors import HeaderSmithUsageError
from headersmith.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Map ``-v`` / ``-q`` counts to a logging-style output level.

    One ``-v`` gives INFO, two give DEBUG, three or more give TRACE; any ``-q``
    gives ERROR. The default is WARNING.

    Raises:
        HeaderSmithUsageError: If both ``-v`` and ``-q`` are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise HeaderSmithUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``--verbose`` and ``--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Show more output (repeat for more detail).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only show errors.",
    )(f)
    return f


def config_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--config`` option."""
    return click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False, path_type=str),
        default=None,
        help="Configuration file (headersmith.toml or pyproject.toml). "
        "Discovered from the working directory when omitted.",
    )(f)


def dry_run_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--dry-run`` flag."""
    return click.option(
        "--dry-run",
        is_flag=True,
        default=False,
        help="Report what would change without writing files.",
    )(f)


def exclude_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the repeatable ``--exclude`` option."""
    return click.option(
        "--exclude",
        "exclude_patterns",
        multiple=True,
        metavar="PATTERN",
        help="Gitignore-style pattern of files to leave alone (repeatable). "
        "Added to the configured 'exclude' patterns.",
    )(f)
