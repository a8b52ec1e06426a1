# topmark:header:start
#
#   project      : AccessorGen
#   file         : scan.py
#   file_relpath : src/accessorgen/cli/commands/scan.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AccessorGen ``scan`` command.

Lists the field declarations found in each file, the class name and the position
where ``generate`` would insert accessors. Never modifies files.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from accessorgen.cli.cmd_common import build_config, format_position, get_console
from accessorgen.cli.io import read_source
from accessorgen.cli.options import (
    CONTEXT_SETTINGS,
    OutputFormat,
    common_config_options,
    output_format_option,
)
from accessorgen.core.document import SourceDocument
from accessorgen.core.planner import compute_insertion_point
from accessorgen.core.resolver import resolve_class_name
from accessorgen.core.scanner import scan_declarations

if TYPE_CHECKING:
    from accessorgen.cli.console import ClickConsole
    from accessorgen.config import Config
    from accessorgen.core.types import Declaration, Position


def _declaration_payload(declaration: Declaration) -> dict[str, Any]:
    return {
        "line": declaration.line,
        "accessibility": declaration.accessibility,
        "static": declaration.is_static,
        "type": declaration.type,
        "name": declaration.name,
    }


@click.command(
    name="scan",
    help="List field declarations and the accessor insertion point.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("paths", nargs=-1, required=True, type=str)
@common_config_options
@output_format_option
def scan_command(
    *,
    paths: tuple[str, ...],
    no_config: bool,
    config_paths: tuple[str, ...],
    output_format: str,
) -> None:
    """Report the declarations of each file in PATHS.

    Args:
        paths (tuple[str, ...]): Files to scan, or ``-`` for STDIN.
        no_config (bool): If True, skip loading project configuration files.
        config_paths (tuple[str, ...]): Additional configuration files to load and merge.
        output_format (str): ``text`` or ``json`` (positions are 0-based in JSON).
    """
    console: ClickConsole = get_console()
    config: Config = build_config(no_config=no_config, config_paths=config_paths)

    reports: list[dict[str, Any]] = []
    for path in paths:
        document: SourceDocument = SourceDocument.from_text(read_source(path))
        declarations: list[Declaration] = scan_declarations(document)
        position: Position | None = compute_insertion_point(document, declarations, config)
        class_name: str | None = resolve_class_name(document)

        if output_format == OutputFormat.JSON.value:
            reports.append(
                {
                    "path": path,
                    "class": class_name,
                    "declarations": [_declaration_payload(d) for d in declarations],
                    "insertion_point": (
                        None
                        if position is None
                        else {"line": position.line, "character": position.character}
                    ),
                }
            )
            continue

        console.print(console.styled(f"{path} (class {class_name or '-'})", bold=True))
        for declaration in declarations:
            modifiers: str = declaration.accessibility + (" static" if declaration.is_static else "")
            console.print(
                f"  {declaration.line + 1:>4}: {modifiers} {declaration.type} {declaration.name}"
            )
        if not declarations:
            console.print("  no declarations")
        where: str = (
            "none" if position is None else format_position(position.line, position.character)
        )
        console.print(f"  insertion point: {where}")

    if output_format == OutputFormat.JSON.value:
        console.print(json.dumps(reports, indent=2))
