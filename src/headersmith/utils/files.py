# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : files.py
#   file_relpath : src/headersmith/utils/files.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Reading and atomically writing documents.

Both functions open files with ``newline=""`` so line terminators pass
through untouched in either direction.
"""

from __future__ import annotations

import os
import tempfile
from typing import TYPE_CHECKING

from headersmith.config.logging import HeaderSmithLogger, get_logger

if TYPE_CHECKING:
    from pathlib import Path

logger: HeaderSmithLogger = get_logger(__name__)


def read_document(path: Path) -> str:
    """Read a UTF-8 document without newline translation.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def write_document_atomic(path: Path, text: str) -> int:
    """Replace the content of ``path`` with ``text`` in one step.

    The text goes to a temporary file in the same directory, which then
    replaces ``path`` with `os.replace`. Readers see either the old or the new
    content, never a mix. The original permission bits are kept.

    Args:
        path (Path): Target file.
        text (str): New content.

    Returns:
        int: Number of UTF-8 bytes written.

    Raises:
        OSError: If the temporary file cannot be written or moved into place.
    """
    directory: Path = path.parent
    mode: int | None
    try:
        mode = path.stat().st_mode & 0o7777
    except OSError:
        mode = None

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        if mode is not None:
            os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except OSError:
            logger.warning("Could not remove temporary file %s", tmp_name)
        raise

    bytes_written: int = len(text.encode("utf-8"))
    logger.debug("Wrote %d bytes to %s", bytes_written, path)
    return bytes_written
