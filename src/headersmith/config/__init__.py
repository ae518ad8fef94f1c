# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : __init__.py
#   file_relpath : src/headersmith/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Configuration and logging for HeaderSmith.

Configuration follows a mutable/immutable split: build a `MutableConfig`
(from defaults, TOML files or code), then `freeze()` it into a `Config`
consumed by the engine.
"""

from __future__ import annotations

from headersmith.config.model import Config, MutableConfig

__all__ = ["Config", "MutableConfig"]
