# topmark:header:start
#
#   project      : AccessorGen
#   file         : renderer.py
#   file_relpath : src/accessorgen/core/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Accessor rendering.

Each declaration renders to a blank line followed by a one-line getter and a
one-line setter::

    public int GetName() { return this.name; }
    public void SetName(int name) { this.name = name; }

Static fields are referenced without the instance qualifier. The text starts with
a newline so it can be spliced in at the end of an existing line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from accessorgen.config import Config
from accessorgen.config.logging import get_logger
from accessorgen.core.document import LF

if TYPE_CHECKING:
    from collections.abc import Iterable

    from accessorgen.config.logging import AccessorgenLogger
    from accessorgen.core.types import Declaration

logger: AccessorgenLogger = get_logger(__name__)


def capitalize_first_letter(text: str) -> str:
    """Upper-case the first character of ``text`` and leave the rest untouched."""
    return text[:1].upper() + text[1:]


def render_getter(declaration: Declaration, config: Config) -> str:
    """Render the getter method for ``declaration`` (single line, no indent)."""
    qualifier: str = "" if declaration.is_static else config.instance_qualifier
    method: str = f"{config.getter_prefix}{capitalize_first_letter(declaration.name)}"
    return (
        f"{config.accessor_accessibility} {declaration.type} {method}() "
        f"{{ return {qualifier}{declaration.name}; }}"
    )


def render_setter(declaration: Declaration, config: Config) -> str:
    """Render the setter method for ``declaration`` (single line, no indent)."""
    qualifier: str = "" if declaration.is_static else config.instance_qualifier
    method: str = f"{config.setter_prefix}{capitalize_first_letter(declaration.name)}"
    return (
        f"{config.accessor_accessibility} void {method}({declaration.type} {declaration.name}) "
        f"{{ {qualifier}{declaration.name} = {declaration.name}; }}"
    )


def render_accessor(
    declaration: Declaration,
    config: Config | None = None,
    *,
    newline_style: str = LF,
) -> str:
    """Render the getter/setter pair for one declaration.

    Args:
        declaration (Declaration): The field to render accessors for.
        config (Config | None): Generator settings; defaults when None.
        newline_style (str): Newline sequence to write.

    Returns:
        str: Two newlines, the indented getter, a newline and the indented setter.
    """
    cfg: Config = config or Config()
    return (
        newline_style
        + newline_style
        + cfg.indent
        + render_getter(declaration, cfg)
        + newline_style
        + cfg.indent
        + render_setter(declaration, cfg)
    )


def render_accessors(
    declarations: Iterable[Declaration],
    config: Config | None = None,
    *,
    newline_style: str = LF,
) -> str:
    """Render and concatenate the accessors of ``declarations``, in order.

    Returns:
        str: The concatenated text; empty when there are no declarations.
    """
    rendered: list[str] = [
        render_accessor(declaration, config, newline_style=newline_style)
        for declaration in declarations
    ]
    logger.debug("Rendered accessors for %d declaration(s)", len(rendered))
    return "".join(rendered)
