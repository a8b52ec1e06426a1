# topmark:header:start
#
#   project      : AccessorGen
#   file         : model.py
#   file_relpath : src/accessorgen/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AccessorGen configuration model.

Configuration is built in layers with the mutable `MutableConfig` builder and then
frozen into an immutable `Config` snapshot that the generator consumes:

1. runtime defaults (`MutableConfig.from_defaults`);
2. discovered project files, from the filesystem root down to the working
   directory, so the nearest file wins (`MutableConfig.discover_local_config_files`);
3. explicit ``--config`` files, in the order given;
4. CLI overrides (`MutableConfig.apply_overrides`).

In each directory ``accessorgen.toml`` takes precedence over the
``[tool.accessorgen]`` table of ``pyproject.toml``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

from accessorgen.config.io import (
    get_string_value_or_none_checked,
    get_table_value,
    load_toml_dict,
    to_toml,
)
from accessorgen.config.keys import Toml
from accessorgen.config.logging import get_logger
from accessorgen.constants import (
    DEFAULT_ACCESSOR_ACCESSIBILITY,
    DEFAULT_CONSTRUCTOR_ACCESSIBILITY,
    DEFAULT_GETTER_PREFIX,
    DEFAULT_INDENT,
    DEFAULT_INSTANCE_QUALIFIER,
    DEFAULT_SETTER_PREFIX,
    LOCAL_TOML_CONFIG_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from accessorgen.config.io import TomlTable
    from accessorgen.config.logging import AccessorgenLogger

logger: AccessorgenLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable generator settings.

    Attributes:
        indent (str): Indentation written before each generated line.
        getter_prefix (str): Getter name prefix; also the title used to find existing getters.
        setter_prefix (str): Setter name prefix; also the title used to find existing setters.
        accessor_accessibility (str): Accessibility keyword of generated methods.
        constructor_accessibility (str): Accessibility keyword used to build the
            constructor lookup title.
        instance_qualifier (str): Qualifier prepended to instance field references.
        config_files (tuple[Path, ...]): Files the settings were loaded from, in merge order.
    """

    indent: str = DEFAULT_INDENT
    getter_prefix: str = DEFAULT_GETTER_PREFIX
    setter_prefix: str = DEFAULT_SETTER_PREFIX
    accessor_accessibility: str = DEFAULT_ACCESSOR_ACCESSIBILITY
    constructor_accessibility: str = DEFAULT_CONSTRUCTOR_ACCESSIBILITY
    instance_qualifier: str = DEFAULT_INSTANCE_QUALIFIER
    config_files: tuple[Path, ...] = ()

    def to_toml_dict(self) -> TomlTable:
        """Return the settings as a TOML-shaped dict (``[generator]`` table)."""
        return {
            Toml.SECTION_GENERATOR: {
                Toml.KEY_INDENT: self.indent,
                Toml.KEY_GETTER_PREFIX: self.getter_prefix,
                Toml.KEY_SETTER_PREFIX: self.setter_prefix,
                Toml.KEY_ACCESSOR_ACCESSIBILITY: self.accessor_accessibility,
                Toml.KEY_CONSTRUCTOR_ACCESSIBILITY: self.constructor_accessibility,
                Toml.KEY_INSTANCE_QUALIFIER: self.instance_qualifier,
            }
        }

    def to_toml(self) -> str:
        """Render the settings as a TOML document."""
        return to_toml(self.to_toml_dict())

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this snapshot."""
        return MutableConfig(
            indent=self.indent,
            getter_prefix=self.getter_prefix,
            setter_prefix=self.setter_prefix,
            accessor_accessibility=self.accessor_accessibility,
            constructor_accessibility=self.constructor_accessibility,
            instance_qualifier=self.instance_qualifier,
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Fields left as ``None`` are unset and do not override lower layers when merging.
    `freeze` fills unset fields with the runtime defaults.
    """

    indent: str | None = None
    getter_prefix: str | None = None
    setter_prefix: str | None = None
    accessor_accessibility: str | None = None
    constructor_accessibility: str | None = None
    instance_qualifier: str | None = None
    config_files: list[Path] = field(default_factory=list[Path])

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the runtime defaults."""
        return Config().thaw()

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a layer from a parsed AccessorGen TOML table.

        Unknown keys and values of the wrong type are logged and ignored.

        Args:
            data (TomlTable): The parsed document (already unwrapped from
                ``[tool.accessorgen]`` for pyproject files).
            config_file (Path | None): Source file, recorded for diagnostics.

        Returns:
            MutableConfig: The layer; only keys present in ``data`` are set.
        """
        generator: TomlTable = get_table_value(data, Toml.SECTION_GENERATOR)
        where: str = f"[{Toml.SECTION_GENERATOR}]"

        for key in data:
            if key != Toml.SECTION_GENERATOR:
                logger.warning("Unknown config section %r in %s; ignoring", key, config_file)
        for key in generator:
            if key not in Toml.GENERATOR_KEYS:
                logger.warning("Unknown config key %s.%s in %s; ignoring", where, key, config_file)

        return cls(
            indent=get_string_value_or_none_checked(generator, Toml.KEY_INDENT, where=where),
            getter_prefix=get_string_value_or_none_checked(
                generator, Toml.KEY_GETTER_PREFIX, where=where
            ),
            setter_prefix=get_string_value_or_none_checked(
                generator, Toml.KEY_SETTER_PREFIX, where=where
            ),
            accessor_accessibility=get_string_value_or_none_checked(
                generator, Toml.KEY_ACCESSOR_ACCESSIBILITY, where=where
            ),
            constructor_accessibility=get_string_value_or_none_checked(
                generator, Toml.KEY_CONSTRUCTOR_ACCESSIBILITY, where=where
            ),
            instance_qualifier=get_string_value_or_none_checked(
                generator, Toml.KEY_INSTANCE_QUALIFIER, where=where
            ),
            config_files=[config_file] if config_file else [],
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a layer from ``accessorgen.toml`` or ``pyproject.toml``.

        For ``pyproject.toml`` the ``[tool.accessorgen]`` table is used.

        Args:
            path (Path): The file to load.

        Returns:
            MutableConfig | None: The layer, or None when a pyproject file has no
                ``[tool.accessorgen]`` table.
        """
        data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_TOML_NAME:
            tool: TomlTable = get_table_value(data, "tool")
            if PYPROJECT_TOOL_SECTION not in tool:
                logger.debug("No [tool.%s] table in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            data = get_table_value(tool, PYPROJECT_TOOL_SECTION)
        logger.info("Loaded config from %s", path)
        return cls.from_toml_dict(data, config_file=path)

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return project config files from the filesystem root down to ``start``.

        Per directory, ``accessorgen.toml`` is preferred over ``pyproject.toml``; a
        pyproject file is only returned when it holds a ``[tool.accessorgen]`` table.

        Args:
            start (Path): Directory to start from (usually the working directory).

        Returns:
            list[Path]: Files ordered from lowest to highest precedence.
        """
        found: list[Path] = []
        current: Path = start.resolve()
        for directory in (current, *current.parents):
            local: Path = directory / LOCAL_TOML_CONFIG_NAME
            if local.is_file():
                found.append(local)
                continue
            pyproject: Path = directory / PYPROJECT_TOML_NAME
            if pyproject.is_file():
                tool: TomlTable = get_table_value(load_toml_dict(pyproject), "tool")
                if PYPROJECT_TOOL_SECTION in tool:
                    found.append(pyproject)
        found.reverse()
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        config_paths: Iterable[Path] = (),
        use_local_config: bool = True,
    ) -> MutableConfig:
        """Merge defaults, discovered files and explicit files into one builder.

        Args:
            start (Path | None): Directory to discover project config from; defaults
                to the current working directory.
            config_paths (Iterable[Path]): Explicit config files, applied last.
            use_local_config (bool): If False, skip discovery.

        Returns:
            MutableConfig: The merged builder.
        """
        merged: MutableConfig = cls.from_defaults()
        paths: list[Path] = []
        if use_local_config:
            paths.extend(cls.discover_local_config_files(start or Path.cwd()))
        paths.extend(config_paths)

        for path in paths:
            layer: MutableConfig | None = cls.from_toml_file(path)
            if layer is not None:
                merged = merged.merge_with(layer)
        return merged

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where the fields set on ``other`` override this one."""
        overrides: dict[str, Any] = {
            f.name: getattr(other, f.name)
            for f in fields(other)
            if f.name != "config_files" and getattr(other, f.name) is not None
        }
        return replace(
            self,
            **overrides,
            config_files=[*self.config_files, *other.config_files],
        )

    def apply_overrides(self, overrides: Mapping[str, Any]) -> MutableConfig:
        """Apply a flat mapping of setting overrides (e.g. from CLI options).

        Keys with ``None`` values are skipped; unknown keys are logged and ignored.
        """
        known: set[str] = {f.name for f in fields(self)} - {"config_files"}
        for key, value in overrides.items():
            if value is None:
                continue
            if key not in known:
                logger.warning("Unknown setting override %r; ignoring", key)
                continue
            setattr(self, key, value)
        return self

    def freeze(self) -> Config:
        """Return an immutable `Config`, filling unset fields with defaults."""
        defaults: Config = Config()
        return Config(
            indent=self.indent if self.indent is not None else defaults.indent,
            getter_prefix=self.getter_prefix or defaults.getter_prefix,
            setter_prefix=self.setter_prefix or defaults.setter_prefix,
            accessor_accessibility=self.accessor_accessibility or defaults.accessor_accessibility,
            constructor_accessibility=(
                self.constructor_accessibility
                if self.constructor_accessibility is not None
                else defaults.constructor_accessibility
            ),
            instance_qualifier=(
                self.instance_qualifier
                if self.instance_qualifier is not None
                else defaults.instance_qualifier
            ),
            config_files=tuple(self.config_files),
        )
