# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : constants.py
#   file_relpath : src/headersmith/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""HeaderSmith constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    HEADERSMITH_VERSION: str = get_version("headersmith")
except PackageNotFoundError:  # running from a source checkout
    HEADERSMITH_VERSION = "0.0.0+unknown"

# Files with this extension hold header definitions and are never rewritten.
LICENSE_HEADER_EXTENSION: str = ".licenseheader"

# Prefix of the line that opens a block in a header-definition file.
DEFINITION_EXTENSIONS_PREFIX: str = "extensions:"

CONFIG_FILE_NAME: str = "headersmith.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
CONFIG_SECTION: str = "headersmith"
