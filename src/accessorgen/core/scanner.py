# topmark:header:start
#
#   project      : AccessorGen
#   file         : scanner.py
#   file_relpath : src/accessorgen/core/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Declaration scanner.

Walks a document line by line and recognizes single-line field declarations of
the shape::

    [accessibility ][static ]type name <anything>;

The accessibility word is optional in the pattern but mandatory for
recognition: a line is only reported when its leading word is one of
`accessorgen.constants.ACCESSIBILITY_LEVELS`. The scanner has no lexical
awareness, so a commented-out or quoted line that has the right shape is
reported like code.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from accessorgen.config.logging import get_logger
from accessorgen.constants import ACCESSIBILITY_LEVELS
from accessorgen.core.types import Declaration, Range

if TYPE_CHECKING:
    from accessorgen.config.logging import AccessorgenLogger
    from accessorgen.core.document import SourceDocument

logger: AccessorgenLogger = get_logger(__name__)

# '([accessibility] )?(static )?([type]) ([name]) [anything];'
DECLARATION_RE: Final[re.Pattern[str]] = re.compile(
    r"(?:([a-zA-Z]+) )?(static )?([a-zA-Z\[\]<>]+) ([a-zA-Z0-9]+).*;"
)


def declaration_from_line(text: str, line: int) -> Declaration | None:
    """Parse one line and return its declaration, if any.

    Args:
        text (str): The line text (without end-of-line characters).
        line (int): 0-based index of the line, used for the source range.

    Returns:
        Declaration | None: The declaration, or None if the line does not match the
            declaration pattern or lacks a recognized accessibility keyword.
    """
    match: re.Match[str] | None = DECLARATION_RE.search(text)
    if match is None:
        return None

    accessibility: str | None = match.group(1)
    if not accessibility or accessibility not in ACCESSIBILITY_LEVELS:
        logger.trace("Line %d: rejected (accessibility %r): %s", line, accessibility, text)
        return None

    return Declaration(
        original_text=text,
        accessibility=accessibility,
        is_static=match.group(2) is not None,
        type=match.group(3),
        name=match.group(4),
        source_range=Range.of_line(line, text),
    )


def scan_declarations(document: SourceDocument) -> list[Declaration]:
    """Return every field declaration in ``document``, in document order.

    Args:
        document (SourceDocument): The snapshot to scan.

    Returns:
        list[Declaration]: One entry per matching line; empty when none match.
    """
    declarations: list[Declaration] = []
    for index, text in document.iter_lines():
        declaration: Declaration | None = declaration_from_line(text, index)
        if declaration is not None:
            logger.trace(
                "Line %d: %s %s%s %s",
                index,
                declaration.accessibility,
                "static " if declaration.is_static else "",
                declaration.type,
                declaration.name,
            )
            declarations.append(declaration)

    logger.debug("Found %d declaration(s) in %d line(s)", len(declarations), document.line_count)
    return declarations
