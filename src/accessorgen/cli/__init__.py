# topmark:header:start
#
#   project      : AccessorGen
#   file         : __init__.py
#   file_relpath : src/accessorgen/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for AccessorGen."""
