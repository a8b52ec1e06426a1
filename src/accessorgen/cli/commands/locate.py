# topmark:header:start
#
#   project      : AccessorGen
#   file         : locate.py
#   file_relpath : src/accessorgen/cli/commands/locate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AccessorGen ``locate`` command.

Prints the end position of the last block whose header contains ``--title``,
or ``none``.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from accessorgen.cli.cmd_common import format_position, get_console
from accessorgen.cli.io import read_source
from accessorgen.cli.options import CONTEXT_SETTINGS, OutputFormat, output_format_option
from accessorgen.core.document import SourceDocument
from accessorgen.core.locator import locate_last_block

if TYPE_CHECKING:
    from accessorgen.cli.console import ClickConsole
    from accessorgen.core.types import Position


@click.command(
    name="locate",
    help="Find where the last block with a given title ends.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("path", type=str)
@click.option("--title", "-t", required=True, help="Substring looked up in block headers.")
@output_format_option
def locate_command(*, path: str, title: str, output_format: str) -> None:
    """Print the end of the last block in PATH whose header contains TITLE."""
    console: ClickConsole = get_console()
    document: SourceDocument = SourceDocument.from_text(read_source(path))
    position: Position | None = locate_last_block(document, title)

    if output_format == OutputFormat.JSON.value:
        payload = (
            None
            if position is None
            else {"line": position.line, "character": position.character}
        )
        console.print(json.dumps({"path": path, "title": title, "position": payload}))
        return

    if position is None:
        console.print("none")
        return
    console.print(format_position(position.line, position.character))
