# topmark:header:start
#
#   project      : AccessorGen
#   file         : diff.py
#   file_relpath : src/accessorgen/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff generation and colorized preview.

Used by the CLI to show what ``generate`` would insert before ``--apply`` writes it.
"""

from __future__ import annotations

import difflib
import re
from typing import Sequence

from yachalk import chalk

from accessorgen.config.logging import get_logger

logger = get_logger(__name__)

# Split after CRLF, LF or a lone CR; other Unicode line separators stay in the line.
_KEEPENDS_RE: re.Pattern[str] = re.compile(r"(?<=\n)|(?<=\r)(?!\n)")


def _split_keepends(text: str) -> list[str]:
    return [line for line in _KEEPENDS_RE.split(text) if line]


def make_unified_diff(original: str, updated: str, *, path: str, newline_style: str = "\n") -> str:
    """Return a unified diff between two versions of a document.

    Args:
        original: The text before generation.
        updated: The text after generation.
        path: Display name used in the ``---``/``+++`` lines.
        newline_style: Line terminator for the diff control lines.

    Returns:
        The diff text; empty when both versions are equal.
    """
    patch_lines: list[str] = list(
        difflib.unified_diff(
            _split_keepends(original),
            _split_keepends(updated),
            fromfile=f"{path} (current)",
            tofile=f"{path} (updated)",
            n=3,
            lineterm=newline_style,
        )
    )
    logger.trace("Diff for %s has %d line(s)", path, len(patch_lines))
    # Join exactly as produced by difflib. Do not introduce CRLF conversions.
    return "".join(patch_lines)


def render_patch(patch: Sequence[str] | str) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as **either** a sequence of lines **or** a single
            multiline string.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = [line.rstrip("\r\n") for line in _split_keepends(patch)]
    else:
        lines = list(patch)

    def process_line(line: str) -> str:
        # Show control characters explicitly
        content = line.replace("\r", "\\r").replace("\n", "\\n")

        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    return chalk.gray("".join(f"{process_line(line)}\n" for line in lines))
