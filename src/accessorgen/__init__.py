# topmark:header:start
#
#   project      : AccessorGen
#   file         : __init__.py
#   file_relpath : src/accessorgen/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AccessorGen package.

AccessorGen scans C-family source text for field declarations and generates
getter/setter methods, inserting them after the last existing accessor, after the
constructor, or after the last field. It exposes both a CLI and a small typed API
(`accessorgen.api`) for automation.
"""

from __future__ import annotations
