# topmark:header:start
#
#   project      : AccessorGen
#   file         : api.py
#   file_relpath : src/accessorgen/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public AccessorGen API (stable surface).

This module exposes a **small, typed API** for integrations (editor plugins,
scripts) that want to generate accessors without going through the CLI. All
functions are pure: they take the current text snapshot and return values; none
of them touches the filesystem.

Every function accepts either raw text or a `SourceDocument`, and the settings
either as a frozen `accessorgen.config.Config` or as a plain mapping mirroring
the TOML shape:

```python
from accessorgen import api

result = api.generate(
    source_text,
    config={"generator": {"indent": "    ", "getter_prefix": "Get"}},
)
if result.changed:
    print(result.updated_text)
```

Results are recomputed from scratch on every call. Positions are only valid for
the text they were computed from: re-scan after every edit.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Union

from accessorgen.config import Config, MutableConfig
from accessorgen.config.logging import get_logger
from accessorgen.constants import ACCESSORGEN_VERSION
from accessorgen.core import locator, planner, renderer, resolver, scanner
from accessorgen.core.document import SourceDocument
from accessorgen.core.types import Declaration, GenerationPlan, GenerationResult, Position, Range

if TYPE_CHECKING:
    from collections.abc import Iterable

    from accessorgen.config.logging import AccessorgenLogger

logger: AccessorgenLogger = get_logger(__name__)

__all__: list[str] = [
    "Declaration",
    "GenerationPlan",
    "GenerationResult",
    "Position",
    "Range",
    "SourceDocument",
    "compute_insertion_point",
    "generate",
    "locate_last_block",
    "render_accessors",
    "resolve_class_name",
    "scan_declarations",
    "version",
]

DocumentLike = Union[str, SourceDocument]
ConfigLike = Union[Config, Mapping[str, Any], None]


def _as_document(source: DocumentLike) -> SourceDocument:
    if isinstance(source, SourceDocument):
        return source
    return SourceDocument.from_text(source)


def _as_config(config: ConfigLike) -> Config:
    if config is None:
        return Config()
    if isinstance(config, Config):
        return config
    layer: MutableConfig = MutableConfig.from_toml_dict(dict(config))
    return MutableConfig.from_defaults().merge_with(layer).freeze()


def scan_declarations(source: DocumentLike) -> list[Declaration]:
    """Return the field declarations of ``source`` in document order."""
    return scanner.scan_declarations(_as_document(source))


def resolve_class_name(source: DocumentLike) -> str | None:
    """Return the name of the first class declared in ``source``, or None."""
    return resolver.resolve_class_name(_as_document(source))


def locate_last_block(source: DocumentLike, title: str) -> Position | None:
    """Return the end of the last block whose header contains ``title``, or None."""
    return locator.locate_last_block(_as_document(source), title)


def compute_insertion_point(source: DocumentLike, *, config: ConfigLike = None) -> Position | None:
    """Return where accessors would be inserted in ``source``, or None.

    The point is the end of the last getter/setter block, else of the last
    constructor block, else of the last declaration's line.
    """
    return planner.compute_insertion_point(_as_document(source), config=_as_config(config))


def render_accessors(
    declarations: Iterable[Declaration],
    *,
    config: ConfigLike = None,
    newline_style: str = "\n",
) -> str:
    """Render the concatenated getter/setter text for ``declarations``."""
    return renderer.render_accessors(
        declarations, _as_config(config), newline_style=newline_style
    )


def generate(
    source: DocumentLike,
    *,
    line: int | None = None,
    config: ConfigLike = None,
) -> GenerationResult:
    """Generate accessors for ``source`` and return the updated text.

    Args:
        source (DocumentLike): The text (or snapshot) to process.
        line (int | None): When set, only generate for the declaration on this
            0-based line.
        config (ConfigLike): Generator settings.

    Returns:
        GenerationResult: Plan, original and updated text. ``changed`` is False when
            there were no declarations to generate accessors for.
    """
    document: SourceDocument = _as_document(source)
    plan: GenerationPlan = planner.plan_generation(document, _as_config(config), line=line)
    return planner.apply_plan(document, plan)


def version() -> str:
    """Return the installed AccessorGen version (PEP 440)."""
    return ACCESSORGEN_VERSION
