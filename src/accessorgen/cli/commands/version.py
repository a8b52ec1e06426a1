# topmark:header:start
#
#   project      : AccessorGen
#   file         : version.py
#   file_relpath : src/accessorgen/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AccessorGen ``version`` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from accessorgen.cli.cmd_common import get_console
from accessorgen.cli.options import OutputFormat, output_format_option
from accessorgen.constants import ACCESSORGEN_VERSION

if TYPE_CHECKING:
    from accessorgen.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of AccessorGen.",
)
@output_format_option
def version_command(*, output_format: str) -> None:
    """Print the AccessorGen version as installed in the active environment."""
    console: ClickConsole = get_console()
    if output_format == OutputFormat.JSON.value:
        console.print(json.dumps({"version": ACCESSORGEN_VERSION}))
        return
    console.print(ACCESSORGEN_VERSION)
