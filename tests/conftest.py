# topmark:header:start
#
#   project      : AccessorGen
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the AccessorGen test suite.

This file sets up global fixtures, typed mark helpers and the logging
configuration used during test runs.

Notes:
    Tests should respect the immutable/mutable configuration split: build a
    `accessorgen.config.MutableConfig`, then `freeze()` it into a
    `accessorgen.config.Config` before handing it to the core.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from accessorgen.config import Config, MutableConfig
from accessorgen.config import logging as ag_logging
from accessorgen.core.document import SourceDocument

F = TypeVar("F", bound=Callable[..., object])

# Type of the decorator itself: takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_accessorgen_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure AccessorGen's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(ag_logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure logging at TRACE level for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    ag_logging.setup_logging(level=ag_logging.TRACE_LEVEL)


def doc(*lines: str, newline: str = "\n") -> SourceDocument:
    """Build a `SourceDocument` from lines, terminating each with ``newline``.

    Args:
        *lines (str): Line texts without end-of-line characters.
        newline (str): Newline sequence to join with.

    Returns:
        SourceDocument: The snapshot.
    """
    return SourceDocument.from_text("".join(f"{line}{newline}" for line in lines))


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): Generator keys (``indent``, ``getter_prefix``, ...).

    Returns:
        Config: The frozen configuration.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    draft.apply_overrides(overrides)
    return draft.freeze()


# C# fixtures. Line numbers in the tests below are 0-based.

EMPTY_CLASS: tuple[str, ...] = (
    "using System;",
    "",
    "namespace TestingBefore",
    "{",
    "    class Empty { }",
    "}",
)

NO_CONSTRUCTOR: tuple[str, ...] = (
    "using System;",
    "",
    "namespace TestingBefore",
    "{",
    "    class NoConstructor",
    "    {",
    "        private int name;",
    "    }",
    "}",
)

CONSTRUCTOR_AND_PROPERTY: tuple[str, ...] = (
    "using System;",
    "",
    "namespace TestingBefore",
    "{",
    "    class ConstructorAndProperty",
    "    {",
    "        private int name;",
    "",
    "        public ConstructorAndProperty() { }",
    "    }",
    "}",
)

MULTI_PROPERTIES_AND_CONSTRUCTOR: tuple[str, ...] = (
    "using System;",
    "",
    "namespace TestingBefore",
    "{",
    "    class MultiPropertiesAndConstructor",
    "    {",
    "        private int first;",
    "        private int second;",
    "",
    "        public MultiPropertiesAndConstructor() { }",
    "    }",
    "}",
)

WITH_ACCESSORS: tuple[str, ...] = (
    "class Person",
    "{",
    "    private int age;",
    "",
    "    public int GetAge() { return this.age; }",
    "    public void SetAge(int age) { this.age = age; }",
    "",
    "    public Person() { }",
    "}",
)
