# topmark:header:start
#
#   project      : AccessorGen
#   file         : io.py
#   file_relpath : src/accessorgen/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for AccessorGen configuration.

Parsing and rendering use `tomlkit`. Loaders return plain ``dict`` structures and
log (rather than raise) on unreadable or malformed documents, so a broken config
file degrades to "no settings" instead of aborting a run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeAlias, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from accessorgen.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from accessorgen.config.logging import AccessorgenLogger

logger: AccessorgenLogger = get_logger(__name__)

TomlTable: TypeAlias = dict[str, Any]


def is_toml_table(value: Any) -> bool:
    """Return True if ``value`` is a TOML table (a ``dict`` with string keys)."""
    return isinstance(value, dict) and all(isinstance(k, str) for k in cast("dict[Any, Any]", value))


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``accessorgen.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content; empty on failure.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table at ``key``, or an empty dict if absent or not a table."""
    value: Any = table.get(key)
    if is_toml_table(value):
        return cast("TomlTable", value)
    if value is not None:
        logger.warning("Expected a table for [%s], got %s; ignoring", key, type(value).__name__)
    return {}


def get_string_value_or_none_checked(table: TomlTable, key: str, *, where: str) -> str | None:
    """Extract an optional string value, warning when it has the wrong type.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        where (str): Location used in the warning message (e.g. ``"[generator]"``).

    Returns:
        str | None: The string value, or None when absent or not a string.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.warning(
        "%s.%s: expected a string, got %s (%r); ignoring",
        where,
        key,
        type(value).__name__,
        value,
    )
    return None


def to_toml(data: Mapping[str, Any]) -> str:
    """Render a mapping as TOML text using tomlkit.

    ``None`` values are dropped since TOML has no null.
    """
    cleaned: dict[str, Any] = {}
    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, dict):
            cleaned[key] = {k: v for k, v in cast("dict[str, Any]", value).items() if v is not None}
        else:
            cleaned[key] = value
    return tomlkit.dumps(cleaned)
