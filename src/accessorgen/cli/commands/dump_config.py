# topmark:header:start
#
#   project      : AccessorGen
#   file         : dump_config.py
#   file_relpath : src/accessorgen/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AccessorGen ``dump-config`` command.

Prints the effective configuration (defaults merged with discovered and explicit
config files) as TOML.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from accessorgen.cli.cmd_common import build_config, get_console, get_verbosity
from accessorgen.cli.options import CONTEXT_SETTINGS, common_config_options

if TYPE_CHECKING:
    from accessorgen.cli.console import ClickConsole
    from accessorgen.config import Config


@click.command(
    name="dump-config",
    help="Print the effective configuration as TOML.",
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
def dump_config_command(*, no_config: bool, config_paths: tuple[str, ...]) -> None:
    """Print the merged configuration.

    With ``-v`` the files the settings were loaded from are listed as TOML comments.
    """
    console: ClickConsole = get_console()
    config: Config = build_config(no_config=no_config, config_paths=config_paths)

    if get_verbosity() <= logging.INFO:
        for path in config.config_files:
            console.print(f"# loaded from: {path}")
    console.print(config.to_toml(), nl=False)
