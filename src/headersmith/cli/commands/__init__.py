# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : __init__.py
#   file_relpath : src/headersmith/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""HeaderSmith CLI subcommands."""
