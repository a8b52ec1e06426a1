# topmark:header:start
#
#   project      : AccessorGen
#   file         : __init__.py
#   file_relpath : src/accessorgen/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer for AccessorGen.

Build settings with `MutableConfig` (mutable), then `freeze()` into a `Config`
before handing them to the generator. Do not mutate a frozen `Config`; call
`Config.thaw()` instead.
"""

from __future__ import annotations

from accessorgen.config.model import Config, MutableConfig

__all__ = [
    "Config",
    "MutableConfig",
]
