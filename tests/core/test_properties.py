# topmark:header:start
#
#   project      : AccessorGen
#   file         : test_properties.py
#   file_relpath : tests/core/test_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the scanner, the block locator and the planner.

This suite asserts:
1) well-formed declaration lines are recognized field by field;
2) lines without an accessibility keyword are never recognized;
3) the locator agrees with a simple model of sibling blocks;
4) no input text makes the core raise, and generation only ever inserts.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from accessorgen.core.document import SourceDocument
from accessorgen.core.locator import locate_last_block
from accessorgen.core.planner import apply_plan, compute_insertion_point, plan_generation
from accessorgen.core.scanner import declaration_from_line, scan_declarations
from tests.strategies_accessorgen import (
    BLOCK_TITLES,
    LINE_ENDINGS,
    DeclarationSample,
    s_class_with_blocks,
    s_declaration,
    s_unqualified_declaration,
)

if TYPE_CHECKING:
    from accessorgen.core.types import Declaration, GenerationPlan, GenerationResult, Position

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

PROPERTY_SETTINGS = settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=75,
)


@PROPERTY_SETTINGS
@given(sample=s_declaration())
def test_declaration_parts_are_recovered(sample: DeclarationSample) -> None:
    """Each generated declaration parses back into the parts it was built from."""
    decl: Declaration | None = declaration_from_line(sample.text, 5)

    assert decl is not None
    assert decl.accessibility == sample.accessibility
    assert decl.is_static == sample.is_static
    assert decl.type == sample.type
    assert decl.name == sample.name
    assert decl.source_range.end.character == len(sample.text)


@PROPERTY_SETTINGS
@given(line=s_unqualified_declaration())
def test_missing_accessibility_is_never_recognized(line: str) -> None:
    """A declaration-shaped line with another leading word is rejected."""
    assert declaration_from_line(line, 0) is None


@PROPERTY_SETTINGS
@given(
    samples=st.lists(s_declaration(), max_size=6),
    newline=st.sampled_from(LINE_ENDINGS),
)
def test_scan_is_idempotent_and_ordered(samples: list[DeclarationSample], newline: str) -> None:
    """Scanning twice is stable and every declaration points at its own line."""
    text: str = "".join(f"{s.text}{newline}" for s in samples)
    document: SourceDocument = SourceDocument.from_text(text)

    first: list[Declaration] = scan_declarations(document)
    assert first == scan_declarations(document)
    assert [d.name for d in first] == [s.name for s in samples]
    for decl in first:
        assert decl.original_text == document.line_at(decl.line)


@PROPERTY_SETTINGS
@given(case=s_class_with_blocks())
def test_locator_matches_sibling_block_model(case: tuple[list[str], dict[str, Position]]) -> None:
    """The last block carrying a title ends where the model says it does."""
    lines, expected = case
    document: SourceDocument = SourceDocument.from_text("\n".join(lines) + "\n")

    for title in BLOCK_TITLES:
        assert locate_last_block(document, f"public {title}") == expected.get(title)


@PROPERTY_SETTINGS
@given(text=st.text(max_size=400), title=st.text(min_size=1, max_size=5))
def test_core_never_raises_on_arbitrary_text(text: str, title: str) -> None:
    """Unbalanced braces and random noise degrade to None / no-op, never to errors."""
    document: SourceDocument = SourceDocument.from_text(text)

    locate_last_block(document, title)
    compute_insertion_point(document)
    result: GenerationResult = apply_plan(document, plan_generation(document))

    if not result.changed:
        assert result.updated_text == text


@PROPERTY_SETTINGS
@given(
    samples=st.lists(s_declaration(), min_size=1, max_size=4),
    newline=st.sampled_from(LINE_ENDINGS),
)
def test_generation_only_inserts(samples: list[DeclarationSample], newline: str) -> None:
    """Removing the snippet from the updated text gives back the original."""
    lines: list[str] = ["class Model", "{", *(s.text for s in samples), "}"]
    text: str = newline.join(lines) + newline
    document: SourceDocument = SourceDocument.from_text(text)

    plan: GenerationPlan = plan_generation(document)
    result: GenerationResult = apply_plan(document, plan)

    assert plan.insertion_point is not None
    assert result.changed
    offset: int = document.offset_at(plan.insertion_point)
    updated: str = result.updated_text
    assert updated[offset : offset + len(plan.snippet)] == plan.snippet
    assert updated[:offset] + updated[offset + len(plan.snippet) :] == text
    # Generation happens at the end of a line
    assert plan.insertion_point.character == len(document.line_at(plan.insertion_point.line))
