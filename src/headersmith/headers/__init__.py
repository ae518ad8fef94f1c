# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : __init__.py
#   file_relpath : src/headersmith/headers/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Header templates, token expansion, comment parsing and the document engine."""
