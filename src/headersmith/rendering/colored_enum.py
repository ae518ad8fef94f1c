# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : colored_enum.py
#   file_relpath : src/headersmith/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""String enum carrying a colorizer for human-facing output.

`ColoredStrEnum` members are plain strings (their `.value` is the label) and
carry a yachalk style used by `render()`, so result kinds can be printed with a
consistent color without the engine depending on the CLI.

Example:
    ```python
    from yachalk import chalk

    class Verdict(ColoredStrEnum):
        OK = ("ok", chalk.green)
        BAD = ("bad", chalk.red)

    print(Verdict.OK.render())            # green "ok"
    print(Verdict.BAD.render("failed"))  # red "failed"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable compatible with `yachalk.ChalkBuilder.__call__`."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Return the decorated concatenation of ``args``."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose value is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The textual value stored in `_value_`.
            color (Colorizer): The colorizer used for display.

        Returns:
            ColoredStrEnum: The new member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    def render(self, text: str | None = None) -> str:
        """Color ``text`` (the member's own label when None) with the member's style."""
        return self._color(self._value_ if text is None else text)

    def __str__(self) -> str:
        return self._value_
