# topmark:header:start
#
#   project      : AccessorGen
#   file         : generate.py
#   file_relpath : src/accessorgen/cli/commands/generate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AccessorGen ``generate`` command.

Generates getter/setter pairs for the field declarations of each file and inserts
them after the last existing accessor, else after the constructor, else after the
last field. Performs a dry run by default and writes files when ``--apply`` is
given.

Input modes supported:
  • **Paths mode (default)**: one or more PATHS.
  • **Content on STDIN**: a single ``-`` as the sole PATH; with ``--apply`` the
    updated content is written to STDOUT.

Examples:
  Preview changes (dry run):

    $ accessorgen generate Person.cs

  Apply changes (write in place):

    $ accessorgen generate --apply src/Person.cs src/Order.cs

  Quick fix for the field on line 7 only:

    $ accessorgen generate --apply --line 7 Person.cs
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from accessorgen.cli.cmd_common import build_config, format_position, get_console
from accessorgen.cli.errors import AccessorgenUsageError
from accessorgen.cli.exit_codes import ExitCode
from accessorgen.cli.io import STDIN_MARKER, read_source, write_source
from accessorgen.cli.options import CONTEXT_SETTINGS, common_config_options
from accessorgen.config.logging import get_logger
from accessorgen.core.document import SourceDocument
from accessorgen.core.planner import apply_plan, plan_generation
from accessorgen.utils.diff import make_unified_diff, render_patch

if TYPE_CHECKING:
    from accessorgen.cli.console import ClickConsole
    from accessorgen.config import Config
    from accessorgen.core.types import GenerationPlan, GenerationResult

logger = get_logger(__name__)


def _describe(path: str, result: GenerationResult, *, applied: bool) -> str:
    plan: GenerationPlan = result.plan
    if not result.changed or plan.insertion_point is None:
        return f"{path}: no declarations; nothing to insert"
    verb: str = "inserted" if applied else "would insert"
    where: str = format_position(plan.insertion_point.line, plan.insertion_point.character)
    return (
        f"{path}: {verb} {len(plan.declarations)} accessor pair(s) at {where} "
        f"(after last {plan.anchor})"
    )


@click.command(
    name="generate",
    help="Generate getters and setters for field declarations.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Examples:

  # Preview which files would change (dry-run)
  accessorgen generate Person.cs

  # Apply: insert accessors in-place
  accessorgen generate --apply Person.cs
""",
)
@click.argument("paths", nargs=-1, required=True, type=str)
@common_config_options
@click.option(
    "--apply", "apply_changes", is_flag=True, help="Write changes to files (off by default)."
)
@click.option("--diff", is_flag=True, help="Show unified diffs.")
@click.option(
    "--line",
    "line",
    type=click.IntRange(min=1),
    default=None,
    help="Only generate accessors for the declaration on this 1-based line.",
)
@click.option("--indent", default=None, help="Indentation of generated lines.")
@click.option("--getter-prefix", default=None, help="Getter name prefix (default: Get).")
@click.option("--setter-prefix", default=None, help="Setter name prefix (default: Set).")
def generate_command(
    *,
    paths: tuple[str, ...],
    no_config: bool,
    config_paths: tuple[str, ...],
    apply_changes: bool,
    diff: bool,
    line: int | None,
    indent: str | None,
    getter_prefix: str | None,
    setter_prefix: str | None,
) -> None:
    """Generate accessors for each file in PATHS.

    Args:
        paths (tuple[str, ...]): Files to process, or a single ``-`` for STDIN.
        no_config (bool): If True, skip loading project configuration files.
        config_paths (tuple[str, ...]): Additional configuration files to load and merge.
        apply_changes (bool): Write changes to files; otherwise perform a dry run.
        diff (bool): Show unified diffs of the insertions.
        line (int | None): 1-based line of the single declaration to generate for.
        indent (str | None): Indentation override.
        getter_prefix (str | None): Getter prefix override.
        setter_prefix (str | None): Setter prefix override.

    Raises:
        AccessorgenUsageError: If ``-`` is combined with other paths.
    """
    ctx: click.Context = click.get_current_context()
    console: ClickConsole = get_console()

    if STDIN_MARKER in paths and len(paths) > 1:
        raise AccessorgenUsageError("'-' (content on STDIN) must be the only PATH.")

    config: Config = build_config(
        no_config=no_config,
        config_paths=config_paths,
        overrides={
            "indent": indent,
            "getter_prefix": getter_prefix,
            "setter_prefix": setter_prefix,
        },
    )

    would_change: bool = False
    for path in paths:
        document: SourceDocument = SourceDocument.from_text(read_source(path))
        plan: GenerationPlan = plan_generation(
            document, config, line=None if line is None else line - 1
        )
        result: GenerationResult = apply_plan(document, plan)

        to_stdout: bool = path == STDIN_MARKER and apply_changes
        if not to_stdout:
            console.print(_describe(path, result, applied=apply_changes))

        if diff and result.changed and not to_stdout:
            patch: str = make_unified_diff(
                result.original_text,
                result.updated_text,
                path=path,
                newline_style=document.newline_style,
            )
            console.print(render_patch(patch) if console.enable_color else patch, nl=False)

        if apply_changes:
            if result.changed or to_stdout:
                write_source(path, result.updated_text)
        elif result.changed:
            would_change = True

    if would_change:
        ctx.exit(ExitCode.WOULD_CHANGE)
