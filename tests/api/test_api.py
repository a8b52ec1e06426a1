# topmark:header:start
#
#   project      : AccessorGen
#   file         : test_api.py
#   file_relpath : tests/api/test_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the public `accessorgen.api` facade."""

from __future__ import annotations

from accessorgen import api
from accessorgen.config import Config
from accessorgen.constants import ACCESSORGEN_VERSION
from tests.conftest import (
    CONSTRUCTOR_AND_PROPERTY,
    EMPTY_CLASS,
    NO_CONSTRUCTOR,
    doc,
    make_config,
    mark_integration,
)

NO_CONSTRUCTOR_TEXT: str = "\n".join(NO_CONSTRUCTOR) + "\n"


@mark_integration
def test_public_names_are_exported() -> None:
    """Everything listed in `__all__` exists on the module."""
    for name in api.__all__:
        assert hasattr(api, name), name


@mark_integration
def test_functions_accept_text_and_documents() -> None:
    """Raw text and `SourceDocument` give the same answers."""
    document = doc(*CONSTRUCTOR_AND_PROPERTY)
    text: str = document.text

    assert api.scan_declarations(text) == api.scan_declarations(document)
    assert api.resolve_class_name(text) == "ConstructorAndProperty"
    assert api.locate_last_block(document, "public ConstructorAndProperty") == api.Position(8, 43)
    assert api.compute_insertion_point(text) == api.Position(8, 43)


@mark_integration
def test_generate_whole_document() -> None:
    """`generate` inserts accessors for every declaration."""
    result: api.GenerationResult = api.generate(NO_CONSTRUCTOR_TEXT)

    assert result.changed
    assert result.original_text == NO_CONSTRUCTOR_TEXT
    assert "public int GetName() { return this.name; }" in result.updated_text
    assert result.plan.insertion_point == api.Position(6, 25)


@mark_integration
def test_generate_nothing_for_empty_class() -> None:
    """No declarations leaves the text unchanged."""
    text: str = "\n".join(EMPTY_CLASS) + "\n"
    result: api.GenerationResult = api.generate(text)

    assert not result.changed
    assert result.updated_text == text
    assert api.compute_insertion_point(text) is None


@mark_integration
def test_generate_single_line() -> None:
    """`line=` restricts generation to one 0-based line."""
    assert api.generate(NO_CONSTRUCTOR_TEXT, line=6).changed
    assert not api.generate(NO_CONSTRUCTOR_TEXT, line=5).changed


@mark_integration
def test_config_as_mapping_or_frozen_config() -> None:
    """Settings may be a TOML-shaped mapping or a `Config`."""
    from_mapping = api.generate(NO_CONSTRUCTOR_TEXT, config={"generator": {"indent": "  "}})
    from_config = api.generate(NO_CONSTRUCTOR_TEXT, config=make_config(indent="  "))

    assert from_mapping.updated_text == from_config.updated_text
    assert "\n  public int GetName()" in from_mapping.updated_text


@mark_integration
def test_render_accessors() -> None:
    """Rendering through the facade honors settings and newline style."""
    decls: list[api.Declaration] = api.scan_declarations(NO_CONSTRUCTOR_TEXT)

    default: str = api.render_accessors(decls)
    assert default.startswith("\n\n        public int GetName()")

    crlf: str = api.render_accessors(decls, config=Config(indent=""), newline_style="\r\n")
    assert crlf.startswith("\r\n\r\npublic int GetName()")


@mark_integration
def test_version() -> None:
    """`version()` reports the installed distribution version."""
    assert api.version() == ACCESSORGEN_VERSION
