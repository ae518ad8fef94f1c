# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : text.py
#   file_relpath : src/headersmith/utils/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

r"""Line splitting and newline detection.

Only ``\r\n``, ``\n`` and ``\r`` count as line terminators. `str.splitlines`
also splits on form feeds and Unicode separators, which would let a header
rewrite alter bytes outside the header region.
"""

from __future__ import annotations

import re
from typing import Final

_RE_LINE: Final[re.Pattern[str]] = re.compile(r"[^\r\n]*(?:\r\n|\n|\r)|[^\r\n]+\Z")


def split_lines(text: str) -> list[str]:
    """Split ``text`` into lines, keeping each line's terminator.

    ``"".join(split_lines(text)) == text`` always holds.
    """
    return _RE_LINE.findall(text)


def strip_eol(line: str) -> str:
    """Return ``line`` without its trailing line terminator."""
    return line.rstrip("\r\n")


def detect_newline(lines: list[str]) -> str:
    r"""Return the first newline sequence used by ``lines`` (``"\n"`` if none)."""
    for ln in lines:
        if ln.endswith("\r\n"):
            return "\r\n"
        if ln.endswith("\n"):
            return "\n"
        if ln.endswith("\r"):
            return "\r"
    return "\n"


def is_blank(line: str) -> bool:
    """Whether ``line`` holds only whitespace (terminator included)."""
    return not line.strip()
