# topmark:header:start
#
#   project      : AccessorGen
#   file         : __init__.py
#   file_relpath : src/accessorgen/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural scanning core: declaration scanner, block locator and accessor planner."""

from __future__ import annotations
