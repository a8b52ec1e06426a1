# topmark:header:start
#
#   project      : AccessorGen
#   file         : locator.py
#   file_relpath : src/accessorgen/core/locator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Block locator: find where a titled ``{ ... }`` block ends.

The locator makes a single forward pass over the document and keeps a stack of
*block headers*, the text that introduced each currently open block:

- if the line holding ``{`` also carries the header (``public Foo() {``), the line
  itself is the header;
- otherwise (brace on its own line, or a line of another shape) the header is the
  nearest non-blank line above it.

Whenever a line contains ``}``, the top header is popped. If it contains the
requested title, the end of that line becomes the candidate position; later
matches overwrite earlier ones. A single line may both open and close a block.

There is no tokenizer: braces inside comments or string literals are counted like
any other brace, and a ``}`` with no open block is ignored.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from accessorgen.config.logging import get_logger
from accessorgen.constants import (
    DEFAULT_CONSTRUCTOR_ACCESSIBILITY,
    DEFAULT_GETTER_PREFIX,
    DEFAULT_SETTER_PREFIX,
)
from accessorgen.core.resolver import constructor_title
from accessorgen.core.types import Position

if TYPE_CHECKING:
    from accessorgen.config.logging import AccessorgenLogger
    from accessorgen.core.document import SourceDocument

logger: AccessorgenLogger = get_logger(__name__)

# '[whitespace]{' and nothing else
BRACE_ONLY_RE: Final[re.Pattern[str]] = re.compile(r"\s*\{")
# '[whitespace][letters, whitespace, parentheses] {[anything]'
HEADER_WITH_BRACE_RE: Final[re.Pattern[str]] = re.compile(r"\s*[A-Za-z\s()]+ \{.*")

OPEN_BRACE: Final[str] = "{"
CLOSE_BRACE: Final[str] = "}"


def _is_header_line(text: str) -> bool:
    """Return True if the line holding ``{`` carries its own block header."""
    brace_only: bool = BRACE_ONLY_RE.fullmatch(text) is not None
    return not brace_only and HEADER_WITH_BRACE_RE.fullmatch(text) is not None


def _header_above(document: SourceDocument, index: int) -> str:
    """Return the nearest non-blank line above ``index``.

    When every line above is blank (or ``index`` is the first line), the line at
    ``index`` is its own header.
    """
    for above in range(index - 1, -1, -1):
        text: str = document.line_at(above)
        if text.strip():
            return text
    return document.line_at(index)


def locate_last_block(document: SourceDocument, title: str) -> Position | None:
    """Return the end of the last closing line of a block whose header contains ``title``.

    Args:
        document (SourceDocument): The snapshot to search.
        title (str): Substring looked up in each block header.

    Returns:
        Position | None: End-of-line position of the closing brace line of the last
            matching block, or None if no matching block closes.
    """
    open_headers: list[str] = []
    last_match: Position | None = None

    for index, text in document.iter_lines():
        if OPEN_BRACE in text:
            header: str = text if _is_header_line(text) else _header_above(document, index)
            logger.trace("Line %d: open block (depth %d): %r", index, len(open_headers) + 1, header)
            open_headers.append(header)

        if CLOSE_BRACE in text and open_headers:
            closed: str = open_headers.pop()
            if title in closed:
                last_match = Position(index, len(text))
                logger.trace("Line %d: closed block matching %r: %r", index, title, closed)

    logger.debug("Last block titled %r ends at %s", title, last_match)
    return last_match


def locate_last_accessor(
    document: SourceDocument,
    *,
    getter_title: str = DEFAULT_GETTER_PREFIX,
    setter_title: str = DEFAULT_SETTER_PREFIX,
) -> Position | None:
    """Return the end of the last getter or setter block, whichever closes later.

    Args:
        document (SourceDocument): The snapshot to search.
        getter_title (str): Title identifying getter blocks.
        setter_title (str): Title identifying setter blocks.

    Returns:
        Position | None: The later of the two positions, or None if neither exists.
    """
    last_getter: Position | None = locate_last_block(document, getter_title)
    last_setter: Position | None = locate_last_block(document, setter_title)

    if last_getter and last_setter:
        return last_setter if last_setter.is_after(last_getter) else last_getter
    return last_setter or last_getter


def locate_last_constructor(
    document: SourceDocument,
    *,
    accessibility: str = DEFAULT_CONSTRUCTOR_ACCESSIBILITY,
) -> Position | None:
    """Return the end of the last constructor block of the document's class.

    Args:
        document (SourceDocument): The snapshot to search.
        accessibility (str): Accessibility keyword the constructor is declared with.

    Returns:
        Position | None: The position, or None when there is no class or no constructor.
    """
    title: str | None = constructor_title(document, accessibility=accessibility)
    if title is None:
        return None
    return locate_last_block(document, title)
