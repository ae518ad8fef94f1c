# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : languages.py
#   file_relpath : src/headersmith/cli/commands/languages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""HeaderSmith ``languages`` command.

Lists the registered languages (built-ins plus configured ones) with their
extensions and comment markers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click
from yachalk import chalk

from headersmith.cli.cmd_common import get_effective_verbosity, resolve_config
from headersmith.cli.options import config_option
from headersmith.languages.registry import LanguageRegistry

if TYPE_CHECKING:
    from headersmith.languages.base import Language


def _comment_syntax(lang: Language) -> str:
    parts: list[str] = []
    if lang.line_comment:
        parts.append(lang.line_comment)
    if lang.block_start and lang.block_end:
        parts.append(f"{lang.block_start} ... {lang.block_end}")
    return ", ".join(parts)


@click.command(
    name="languages",
    help="List the languages HeaderSmith can process.",
)
@config_option
def languages_command(*, config_path: str | None) -> None:
    """List registered languages."""
    ctx = click.get_current_context()
    verbosity: int = get_effective_verbosity(ctx)
    registry = LanguageRegistry.with_builtins(resolve_config(config_path).languages)

    for lang in registry:
        line = f"{chalk.bold(lang.name):<24} {' '.join(lang.extensions)}"
        if verbosity <= logging.INFO:
            line += f"  {chalk.gray(_comment_syntax(lang))}"
        click.echo(line)
