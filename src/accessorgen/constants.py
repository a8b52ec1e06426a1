# topmark:header:start
#
#   project      : AccessorGen
#   file         : constants.py
#   file_relpath : src/accessorgen/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AccessorGen Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

ACCESSORGEN_VERSION: str = get_version("accessorgen")

# Config file names, in discovery order within a directory:
LOCAL_TOML_CONFIG_NAME: str = "accessorgen.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "accessorgen"

#: Accessibility keywords a field declaration must start with to be recognized.
ACCESSIBILITY_LEVELS: tuple[str, ...] = (
    "public",
    "protected",
    "internal",
    "private",
    "protected internal",
    "private protected",
)

DEFAULT_INDENT: str = " " * 8
DEFAULT_GETTER_PREFIX: str = "Get"
DEFAULT_SETTER_PREFIX: str = "Set"
DEFAULT_ACCESSOR_ACCESSIBILITY: str = "public"
DEFAULT_CONSTRUCTOR_ACCESSIBILITY: str = "public"
DEFAULT_INSTANCE_QUALIFIER: str = "this."
