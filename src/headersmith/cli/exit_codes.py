# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : exit_codes.py
#   file_relpath : src/headersmith/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Exit codes of the ``headersmith`` command.

Values follow the BSD ``sysexits`` convention where one exists.
``WOULD_CHANGE = 2`` is the exception: it reports a dry run that found work to
do. Click also exits with 2 on usage errors, so tests check
``result.exception is None`` to tell the two apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes of the ``headersmith`` command.

    Attributes:
        SUCCESS: Every document processed without error.
        FAILURE: At least one document failed.
        WOULD_CHANGE: Dry run: some documents would be rewritten.
        USAGE_ERROR: Invalid flags or arguments (``EX_USAGE``).
        FILE_NOT_FOUND: An input path does not exist (``EX_NOINPUT``).
        PIPELINE_ERROR: Internal engine failure (``EX_SOFTWARE``).
        CONFIG_ERROR: Invalid configuration or header definition (``EX_CONFIG``).
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2

    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    PIPELINE_ERROR = 70  # EX_SOFTWARE
    CONFIG_ERROR = 78  # EX_CONFIG
