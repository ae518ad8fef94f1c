# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : logging.py
#   file_relpath : src/headersmith/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""HeaderSmith logging with a TRACE level and colored console output.

The module registers a TRACE level below DEBUG and installs
`HeaderSmithLogger` as the logger class. Library modules only call
`get_logger(__name__)`; applications (the CLI, the test suite) call
`setup_logging()` once to get colored records on the console.

The level comes from the caller or from ``HEADERSMITH_LOG_LEVEL``; without
either, only CRITICAL records are shown so batch output stays clean.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, TYPE_CHECKING, Any, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Mapping

    from headersmith.rendering.colored_enum import Colorizer

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "HEADERSMITH_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
# Batches run on worker threads; below INFO the thread name tells jobs apart.
DEBUG_LOG_FORMAT: Final[str] = (
    "[%(levelname)s] [%(threadName)s] [%(name)s:%(lineno)d] %(message)s"
)

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class HeaderSmithLogger(logging.Logger):
    """Logger class with an extra `trace()` method below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` with severity TRACE.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Optional extra information for the record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(HeaderSmithLogger)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record by severity.

    Thresholds are checked from the most severe down; records below TRACE
    get the last style.
    """

    styles: tuple[tuple[int, Colorizer], ...] = (
        (logging.CRITICAL, chalk.red_bright),
        (logging.ERROR, chalk.red),
        (logging.WARNING, chalk.yellow),
        (logging.INFO, chalk.green),
        (logging.DEBUG, chalk.gray),
        (TRACE_LEVEL, chalk.blue),
    )

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it according to its level."""
        message: str = super().format(record)
        for threshold, style in self.styles:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``HEADERSMITH_LOG_LEVEL``, or None.

    Accepts level names (``"trace"``, ``"DEBUG"``, ``"warn"``) and numbers
    (``"10"``). Unset, empty and unknown values give None.
    """
    raw: str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return _LEVEL_NAMES.get(raw)


def setup_logging(level: int | None = None, *, stream: IO[Any] | None = None) -> None:
    """Configure the root logger with one colored console handler.

    Calling it again replaces the previous handler.

    Args:
        level (int | None): Log level; `resolve_env_log_level()` is consulted
            when None, then CRITICAL.
        stream (IO[Any] | None): Destination; stdout when None.
    """
    if level is None:
        env_level: int | None = resolve_env_log_level()
        level = logging.CRITICAL if env_level is None else env_level

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for old in list(root.handlers):
        root.removeHandler(old)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> HeaderSmithLogger:
    """Return the `HeaderSmithLogger` called ``name``."""
    return cast("HeaderSmithLogger", logging.getLogger(name))
