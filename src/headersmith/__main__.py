# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : __main__.py
#   file_relpath : src/headersmith/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Run the HeaderSmith CLI with ``python -m headersmith``.

Equivalent to the ``headersmith`` console script.

Examples:
    Insert headers under ``src``::

        python -m headersmith apply src
"""

from __future__ import annotations

from headersmith.cli.main import cli

if __name__ == "__main__":
    cli()
