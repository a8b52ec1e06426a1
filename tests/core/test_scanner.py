# topmark:header:start
#
#   project      : AccessorGen
#   file         : test_scanner.py
#   file_relpath : tests/core/test_scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the declaration scanner."""

from __future__ import annotations

from typing import TYPE_CHECKING

from accessorgen.core.scanner import declaration_from_line, scan_declarations
from accessorgen.core.types import Position, Range
from tests.conftest import (
    CONSTRUCTOR_AND_PROPERTY,
    EMPTY_CLASS,
    MULTI_PROPERTIES_AND_CONSTRUCTOR,
    NO_CONSTRUCTOR,
    doc,
    mark_pipeline,
    parametrize,
)

if TYPE_CHECKING:
    from accessorgen.core.types import Declaration


@mark_pipeline
def test_empty_class_has_no_declarations() -> None:
    """`class Empty { }` yields no declarations."""
    assert scan_declarations(doc(*EMPTY_CLASS)) == []


@mark_pipeline
def test_single_field_is_recognized_with_its_line_range() -> None:
    """A private int field is reported with the full-line source range."""
    declarations: list[Declaration] = scan_declarations(doc(*NO_CONSTRUCTOR))

    assert len(declarations) == 1
    decl: Declaration = declarations[0]
    assert decl.original_text == "        private int name;"
    assert decl.accessibility == "private"
    assert decl.is_static is False
    assert decl.type == "int"
    assert decl.name == "name"
    assert decl.source_range == Range(Position(6, 0), Position(6, 25))
    assert decl.line == 6


@mark_pipeline
def test_constructor_line_is_not_a_declaration() -> None:
    """`public ConstructorAndProperty() { }` has no `;` and is skipped."""
    declarations: list[Declaration] = scan_declarations(doc(*CONSTRUCTOR_AND_PROPERTY))
    assert [d.name for d in declarations] == ["name"]


@mark_pipeline
def test_declarations_are_returned_in_document_order() -> None:
    """Multiple fields come back in the order they appear."""
    declarations: list[Declaration] = scan_declarations(doc(*MULTI_PROPERTIES_AND_CONSTRUCTOR))

    assert [d.name for d in declarations] == ["first", "second"]
    assert declarations[1].source_range == Range(Position(7, 0), Position(7, 27))


@mark_pipeline
def test_static_field() -> None:
    """A `static` modifier after the accessibility word sets `is_static`."""
    decl = declaration_from_line("    private static int count;", 3)

    assert decl is not None
    assert decl.is_static is True
    assert decl.type == "int"
    assert decl.name == "count"
    assert decl.line == 3


@mark_pipeline
@parametrize(
    "line, expected_type, expected_name",
    [
        ("        private List<int> list;", "List<int>", "list"),
        ("    public int[] values;", "int[]", "values"),
        ('    protected string label = "x";', "string", "label"),
        ("    internal Dictionary<string> map;", "Dictionary<string>", "map"),
        ("\tprivate double ratio2;", "double", "ratio2"),
    ],
)
def test_type_and_name_tokens(line: str, expected_type: str, expected_name: str) -> None:
    """Generic and array types are kept verbatim; initializers are ignored."""
    decl = declaration_from_line(line, 0)

    assert decl is not None
    assert decl.type == expected_type
    assert decl.name == expected_name


@mark_pipeline
@parametrize(
    "line",
    [
        "        int count;",
        "using System;",
        "        return this.name;",
        "        static int counter;",
        "        readonly int counter;",
        "        public Person() { }",
        "",
        "}",
    ],
)
def test_lines_without_recognized_accessibility_are_rejected(line: str) -> None:
    """Accessibility is mandatory for recognition."""
    assert declaration_from_line(line, 0) is None


@mark_pipeline
def test_only_first_declaration_on_a_line_is_reported() -> None:
    """At most one declaration is produced per line."""
    decls = scan_declarations(doc("    private int a; private int b;"))
    assert [d.name for d in decls] == ["a"]


@mark_pipeline
def test_commented_out_declaration_is_still_reported() -> None:
    """The scanner has no lexical awareness of comments."""
    decls = scan_declarations(doc("    // private int legacy;"))
    assert [d.name for d in decls] == ["legacy"]


@mark_pipeline
def test_duplicates_are_kept() -> None:
    """Identical lines are reported once each."""
    decls = scan_declarations(doc("private int x;", "private int x;"))
    assert [d.line for d in decls] == [0, 1]


@mark_pipeline
def test_scanning_is_idempotent() -> None:
    """Scanning the same snapshot twice yields equal results."""
    document = doc(*MULTI_PROPERTIES_AND_CONSTRUCTOR)
    assert scan_declarations(document) == scan_declarations(document)


@mark_pipeline
def test_unicode_line_separator_does_not_shift_lines() -> None:
    """A U+2028 inside a string literal keeps the declaration and later line numbers."""
    document = doc(
        "class Separators",
        "{",
        '    private string sep = "\u2028";',
        "    private int x;",
        "}",
    )
    declarations: list[Declaration] = scan_declarations(document)

    assert document.line_count == 5
    assert [(d.name, d.line) for d in declarations] == [("sep", 2), ("x", 3)]
