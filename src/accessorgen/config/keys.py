# topmark:header:start
#
#   project      : AccessorGen
#   file         : keys.py
#   file_relpath : src/accessorgen/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML section and key names used by AccessorGen configuration files."""

from __future__ import annotations

from typing import Final


class Toml:
    """Section and key names of the AccessorGen TOML schema.

    A configuration document has a single ``[generator]`` table (nested under
    ``[tool.accessorgen]`` when it lives in ``pyproject.toml``).
    """

    SECTION_GENERATOR: Final[str] = "generator"

    KEY_INDENT: Final[str] = "indent"
    KEY_GETTER_PREFIX: Final[str] = "getter_prefix"
    KEY_SETTER_PREFIX: Final[str] = "setter_prefix"
    KEY_ACCESSOR_ACCESSIBILITY: Final[str] = "accessor_accessibility"
    KEY_CONSTRUCTOR_ACCESSIBILITY: Final[str] = "constructor_accessibility"
    KEY_INSTANCE_QUALIFIER: Final[str] = "instance_qualifier"

    GENERATOR_KEYS: Final[tuple[str, ...]] = (
        KEY_INDENT,
        KEY_GETTER_PREFIX,
        KEY_SETTER_PREFIX,
        KEY_ACCESSOR_ACCESSIBILITY,
        KEY_CONSTRUCTOR_ACCESSIBILITY,
        KEY_INSTANCE_QUALIFIER,
    )
