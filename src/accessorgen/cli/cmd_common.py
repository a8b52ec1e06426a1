# topmark:header:start
#
#   project      : AccessorGen
#   file         : cmd_common.py
#   file_relpath : src/accessorgen/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from accessorgen.cli.errors import AccessorgenConfigError
from accessorgen.config import Config, MutableConfig
from accessorgen.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from accessorgen.cli.console import ClickConsole

logger = get_logger(__name__)


def get_console() -> ClickConsole:
    """Return the console stored on the current Click context by the group."""
    ctx: click.Context = click.get_current_context()
    return ctx.obj["console"]


def get_verbosity() -> int:
    """Return the program-output verbosity resolved by the group."""
    ctx: click.Context = click.get_current_context()
    return int(ctx.obj.get("verbosity_level", 0))


def build_config(
    *,
    no_config: bool,
    config_paths: Sequence[str],
    overrides: Mapping[str, Any] | None = None,
) -> Config:
    """Resolve the effective configuration for a command.

    Args:
        no_config (bool): Skip discovery of project config files.
        config_paths (Sequence[str]): Explicit config files (applied after discovered ones).
        overrides (Mapping[str, Any] | None): Setting overrides from CLI options.

    Returns:
        Config: The frozen configuration.

    Raises:
        AccessorgenConfigError: If an explicit config file does not exist.
    """
    paths: list[Path] = [Path(p) for p in config_paths]
    for path in paths:
        if not path.is_file():
            raise AccessorgenConfigError(f"Config file not found: {path}")

    draft: MutableConfig = MutableConfig.load_merged(
        config_paths=paths,
        use_local_config=not no_config,
    )
    if overrides:
        draft.apply_overrides(overrides)
    config: Config = draft.freeze()
    logger.debug("Effective config: %s", config)
    return config


def format_position(line: int, character: int) -> str:
    """Format a 0-based position as the 1-based ``line:column`` shown to users."""
    return f"{line + 1}:{character + 1}"
