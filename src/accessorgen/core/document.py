# topmark:header:start
#
#   project      : AccessorGen
#   file         : document.py
#   file_relpath : src/accessorgen/core/document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable snapshot of a text buffer.

`SourceDocument` is the only view of the source text the core works with. It
offers ordered access to each line (without end-of-line characters) and a single
mutation primitive, `SourceDocument.insert`, that returns the new full text
rather than changing the snapshot in place. Positions computed from one snapshot
are only valid for that snapshot; re-scan after every mutation.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from accessorgen.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from accessorgen.config.logging import AccessorgenLogger
    from accessorgen.core.types import Position

logger: AccessorgenLogger = get_logger(__name__)

LF: str = "\n"
CRLF: str = "\r\n"
CR: str = "\r"

# Line breaks are CR, LF and CRLF only; form feeds and U+2028 stay inside a line.
_EOL_RE: re.Pattern[str] = re.compile(r"(\r\n|\r|\n)")


def detect_newline_style(text: str) -> str:
    """Return the newline sequence used by the first line break of ``text``.

    Defaults to ``LF`` for single-line or empty text.
    """
    idx: int = text.find(LF)
    if idx > 0 and text[idx - 1] == CR:
        return CRLF
    if idx < 0 and CR in text:
        return CR
    return LF


@dataclass(frozen=True)
class SourceDocument:
    """Read-only line view over a text snapshot.

    Attributes:
        text (str): The full document text.
        lines (tuple[str, ...]): Line texts without end-of-line characters.
        offsets (tuple[int, ...]): Character offset of the start of each line in ``text``.
        newline_style (str): The newline sequence used by the document.
    """

    text: str
    lines: tuple[str, ...]
    offsets: tuple[int, ...]
    newline_style: str

    @classmethod
    def from_text(cls, text: str) -> SourceDocument:
        """Build a snapshot from raw text, keeping track of line offsets.

        Args:
            text (str): The document content.

        Returns:
            SourceDocument: The snapshot.
        """
        lines: list[str] = []
        offsets: list[int] = []
        offset: int = 0
        parts: list[str] = _EOL_RE.split(text)
        # parts alternates line text and its end-of-line sequence
        for idx in range(0, len(parts), 2):
            line_text: str = parts[idx]
            eol: str = parts[idx + 1] if idx + 1 < len(parts) else ""
            if not line_text and not eol:
                break
            offsets.append(offset)
            lines.append(line_text)
            offset += len(line_text) + len(eol)
        return cls(
            text=text,
            lines=tuple(lines),
            offsets=tuple(offsets),
            newline_style=detect_newline_style(text),
        )

    @property
    def line_count(self) -> int:
        """Number of lines in the snapshot."""
        return len(self.lines)

    def line_at(self, index: int) -> str:
        """Return the text of line ``index`` (0-based)."""
        return self.lines[index]

    def iter_lines(self) -> Iterator[tuple[int, str]]:
        """Yield ``(index, text)`` pairs in document order."""
        yield from enumerate(self.lines)

    def offset_at(self, position: Position) -> int:
        """Translate a position into a character offset into ``text``.

        Positions beyond the last line map to the end of the text; characters
        beyond the end of a line are clamped to the end of that line.
        """
        if position.line >= len(self.lines):
            return len(self.text)
        line_text: str = self.lines[position.line]
        return self.offsets[position.line] + min(position.character, len(line_text))

    def insert(self, position: Position, snippet: str) -> str:
        """Return the document text with ``snippet`` inserted at ``position``.

        Args:
            position (Position): Where to insert.
            snippet (str): Text to insert.

        Returns:
            str: The updated document text. The snapshot itself is unchanged.
        """
        offset: int = self.offset_at(position)
        logger.trace("Inserting %d chars at %s (offset %d)", len(snippet), position, offset)
        return self.text[:offset] + snippet + self.text[offset:]
