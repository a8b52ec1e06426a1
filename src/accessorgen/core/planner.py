# topmark:header:start
#
#   project      : AccessorGen
#   file         : planner.py
#   file_relpath : src/accessorgen/core/planner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Insertion planning and application.

The planner ties the scanner, the block locator and the renderer together. The
insertion point is, in order of preference:

1. the end of the last getter or setter block;
2. the end of the last constructor block;
3. the end of the last declaration's line;
4. nothing, whenever the document has no declarations at all.

Planning and applying are separate steps that communicate through an explicit
`GenerationPlan` value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from accessorgen.config import Config
from accessorgen.config.logging import get_logger
from accessorgen.core.locator import locate_last_accessor, locate_last_constructor
from accessorgen.core.renderer import render_accessors
from accessorgen.core.scanner import declaration_from_line, scan_declarations
from accessorgen.core.types import GenerationPlan, GenerationResult

if TYPE_CHECKING:
    from collections.abc import Sequence

    from accessorgen.config.logging import AccessorgenLogger
    from accessorgen.core.document import SourceDocument
    from accessorgen.core.types import Declaration, Position

logger: AccessorgenLogger = get_logger(__name__)

ANCHOR_ACCESSOR: str = "accessor"
ANCHOR_CONSTRUCTOR: str = "constructor"
ANCHOR_DECLARATION: str = "declaration"
ANCHOR_NONE: str = "none"


def _find_anchor(
    document: SourceDocument,
    declarations: Sequence[Declaration],
    config: Config,
) -> tuple[Position | None, str]:
    position: Position | None = locate_last_accessor(
        document,
        getter_title=config.getter_prefix,
        setter_title=config.setter_prefix,
    )
    if position is not None:
        return position, ANCHOR_ACCESSOR

    position = locate_last_constructor(document, accessibility=config.constructor_accessibility)
    if position is not None:
        return position, ANCHOR_CONSTRUCTOR

    if declarations:
        return declarations[-1].source_range.end, ANCHOR_DECLARATION

    return None, ANCHOR_NONE


def compute_insertion_point(
    document: SourceDocument,
    declarations: Sequence[Declaration] | None = None,
    config: Config | None = None,
) -> Position | None:
    """Return where generated accessors should be inserted.

    Args:
        document (SourceDocument): The snapshot to analyze.
        declarations (Sequence[Declaration] | None): Declarations of ``document``; scanned
            when None.
        config (Config | None): Generator settings (accessor titles and constructor
            accessibility); defaults when None.

    Returns:
        Position | None: The insertion point, or None when the document has no
            declarations (there is nothing to insert, whatever blocks it holds).
    """
    if declarations is None:
        declarations = scan_declarations(document)
    if not declarations:
        return None
    position, _anchor = _find_anchor(document, declarations, config or Config())
    return position


def plan_generation(
    document: SourceDocument,
    config: Config | None = None,
    *,
    line: int | None = None,
) -> GenerationPlan:
    """Plan accessor generation for a document.

    Args:
        document (SourceDocument): The snapshot to analyze.
        config (Config | None): Generator settings; defaults when None.
        line (int | None): When set, only the declaration on this 0-based line gets
            accessors (quick-fix mode). The insertion point is still computed from
            the whole document.

    Returns:
        GenerationPlan: The plan; a no-op plan when there is nothing to generate.
    """
    cfg: Config = config or Config()
    declarations: list[Declaration] = scan_declarations(document)

    targets: list[Declaration]
    if line is None:
        targets = declarations
    elif 0 <= line < document.line_count:
        single: Declaration | None = declaration_from_line(document.line_at(line), line)
        targets = [single] if single is not None else []
    else:
        logger.warning("Line %d is outside the document (%d lines)", line, document.line_count)
        targets = []

    if not targets:
        logger.info("No declarations to generate accessors for")
        return GenerationPlan()

    position, anchor = _find_anchor(document, declarations, cfg)
    assert position is not None  # targets are a subset of the scanned declarations

    logger.info(
        "Inserting accessors for %d declaration(s) at %s (after last %s)",
        len(targets),
        position,
        anchor,
    )
    return GenerationPlan(
        declarations=tuple(targets),
        insertion_point=position,
        snippet=render_accessors(targets, cfg, newline_style=document.newline_style),
        anchor=anchor,
    )


def apply_plan(document: SourceDocument, plan: GenerationPlan) -> GenerationResult:
    """Apply a plan to the document it was computed from.

    Args:
        document (SourceDocument): The snapshot ``plan`` was computed from.
        plan (GenerationPlan): The plan to apply.

    Returns:
        GenerationResult: The original and updated text.
    """
    if plan.is_noop or plan.insertion_point is None:
        return GenerationResult(
            plan=plan,
            original_text=document.text,
            updated_text=document.text,
            notes=["no declarations found; nothing to insert"],
        )

    updated: str = document.insert(plan.insertion_point, plan.snippet)
    return GenerationResult(
        plan=plan,
        original_text=document.text,
        updated_text=updated,
        notes=[
            f"{len(plan.declarations)} accessor pair(s) inserted at "
            f"{plan.insertion_point} (after last {plan.anchor})"
        ],
    )
