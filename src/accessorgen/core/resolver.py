# topmark:header:start
#
#   project      : AccessorGen
#   file         : resolver.py
#   file_relpath : src/accessorgen/core/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Title resolution helpers for the block locator."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from accessorgen.config.logging import get_logger
from accessorgen.constants import DEFAULT_CONSTRUCTOR_ACCESSIBILITY

if TYPE_CHECKING:
    from accessorgen.config.logging import AccessorgenLogger
    from accessorgen.core.document import SourceDocument

logger: AccessorgenLogger = get_logger(__name__)

# '[whitespace][modifiers]class ([name])[anything]'
CLASS_DECLARATION_RE: Final[re.Pattern[str]] = re.compile(r"\s*[A-Za-z\t]*class ([A-Za-z0-9_]+).*")


def resolve_class_name(document: SourceDocument) -> str | None:
    """Return the name of the first class declared in ``document``.

    Only the first ``class X`` occurrence counts; later (or nested) classes are
    ignored.

    Args:
        document (SourceDocument): The snapshot to search.

    Returns:
        str | None: The class name, or None if the document declares no class.
    """
    for index, text in document.iter_lines():
        match: re.Match[str] | None = CLASS_DECLARATION_RE.search(text)
        if match:
            logger.debug("Class %r declared on line %d", match.group(1), index)
            return match.group(1)
    return None


def constructor_title(
    document: SourceDocument,
    *,
    accessibility: str = DEFAULT_CONSTRUCTOR_ACCESSIBILITY,
) -> str | None:
    """Return the title identifying the constructor blocks of the document's class.

    Args:
        document (SourceDocument): The snapshot to search.
        accessibility (str): Accessibility keyword prefixed to the class name; may be
            empty to match constructors of any accessibility.

    Returns:
        str | None: ``"<accessibility> <ClassName>"`` (or ``" <ClassName>"``), or None
            when the document declares no class.
    """
    class_name: str | None = resolve_class_name(document)
    if class_name is None:
        return None
    return f"{accessibility} {class_name}"
