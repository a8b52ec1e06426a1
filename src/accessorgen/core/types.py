# topmark:header:start
#
#   project      : AccessorGen
#   file         : types.py
#   file_relpath : src/accessorgen/core/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value types shared by the scanner, the block locator and the planner.

Positions follow editor conventions: both ``line`` and ``character`` are
0-based, and a position may point one past the last character of a line (the
*end* of that line).
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, order=True)
class Position:
    """A location in a document (0-based line and character).

    Positions compare by ``(line, character)``, so the later of two positions is
    simply ``max(a, b)``.

    Attributes:
        line (int): 0-based line index.
        character (int): 0-based column within the line.
    """

    line: int
    character: int

    def is_after(self, other: Position) -> bool:
        """Return True if this position lies strictly after ``other``."""
        return self > other

    def __str__(self) -> str:
        return f"{self.line}:{self.character}"


@dataclass(frozen=True)
class Range:
    """A span between two positions (``start`` inclusive, ``end`` exclusive).

    Attributes:
        start (Position): First position of the span.
        end (Position): Position just after the span.
    """

    start: Position
    end: Position

    @classmethod
    def of_line(cls, line: int, text: str) -> Range:
        """Return the range covering the full text of one line (end-of-line excluded)."""
        return cls(Position(line, 0), Position(line, len(text)))


@dataclass(frozen=True, kw_only=True)
class Declaration:
    """A field declaration recognized on a single source line.

    Attributes:
        original_text (str): The source line, unmodified.
        accessibility (str): The accessibility keyword that introduced the line.
        is_static (bool): True if a ``static`` modifier follows the accessibility word.
        type (str): The declared type token (may contain ``[]`` and ``<>``).
        name (str): The field identifier.
        source_range (Range): Span of the whole source line; its end is the fallback
            insertion anchor.
    """

    original_text: str
    accessibility: str
    is_static: bool
    type: str
    name: str
    source_range: Range

    @property
    def line(self) -> int:
        """0-based line index of the declaration."""
        return self.source_range.start.line


@dataclass(frozen=True, kw_only=True)
class GenerationPlan:
    """What to insert, and where.

    A plan is the explicit hand-off between the analysis phase (scan + locate) and
    the mutation phase (`accessorgen.core.planner.apply_plan`).

    Attributes:
        declarations (tuple[Declaration, ...]): Declarations accessors are generated for.
        insertion_point (Position | None): Where the snippet goes; None when nothing
            can be inserted.
        snippet (str): The concatenated accessor text (empty when there is nothing to do).
        anchor (str): How the insertion point was chosen: ``"accessor"``,
            ``"constructor"``, ``"declaration"`` or ``"none"``.
    """

    declarations: tuple[Declaration, ...] = ()
    insertion_point: Position | None = None
    snippet: str = ""
    anchor: str = "none"

    @property
    def is_noop(self) -> bool:
        """True if applying the plan would not change the document."""
        return self.insertion_point is None or not self.snippet


@dataclass(frozen=True, kw_only=True)
class GenerationResult:
    """Outcome of generating accessors for one document.

    Attributes:
        plan (GenerationPlan): The plan that was applied.
        original_text (str): The document text before insertion.
        updated_text (str): The document text after insertion (equal to
            ``original_text`` when nothing was inserted).
        notes (list[str]): Human-readable notes for logging or CLI display.
    """

    plan: GenerationPlan
    original_text: str
    updated_text: str
    notes: list[str] = field(default_factory=list[str])

    @property
    def changed(self) -> bool:
        """True if the updated text differs from the original."""
        return self.updated_text != self.original_text
