# topmark:header:start
#
#   project      : AccessorGen
#   file         : options.py
#   file_relpath : src/accessorgen/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, config, output
format) and their resolution logic, so commands and the group can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from accessorgen.cli.errors import AccessorgenUsageError
from accessorgen.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")

#: Program-output verbosity per number of ``-v`` flags (index capped at 3).
VERBOSE_LEVELS: tuple[int, ...] = (logging.WARNING, logging.INFO, logging.DEBUG, TRACE_LEVEL)
QUIET_LEVEL: int = logging.ERROR

#: Click context settings shared by the group and its commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Map ``-v``/``-q`` counts onto a logging level for program output.

    No flag gives WARNING; ``-v`` INFO, ``-vv`` DEBUG, ``-vvv`` (or more) TRACE;
    any number of ``-q`` gives ERROR.

    Raises:
        AccessorgenUsageError: If ``-v`` and ``-q`` are combined.
    """
    if verbose_count and quiet_count:
        raise AccessorgenUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count:
        return QUIET_LEVEL
    return VERBOSE_LEVELS[min(verbose_count, len(VERBOSE_LEVELS) - 1)]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--verbose`` and ``--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Report more about each file (repeat up to three times).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


class ColorMode(str, Enum):
    """Value of the ``--color`` option."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def _env_color_preference() -> bool | None:
    """Return the colour preference expressed by FORCE_COLOR / NO_COLOR, if any."""
    force: str = os.environ.get("FORCE_COLOR", "")
    if force not in ("", "0"):
        return True
    if "NO_COLOR" in os.environ:
        return False
    return None


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Decide whether program output is colourized.

    Machine-readable output is never coloured. Otherwise an explicit ``--color``
    choice wins, then the FORCE_COLOR and NO_COLOR environment variables, and
    finally whether stdout is a terminal.

    Args:
        cli_mode (ColorMode | None): Mode chosen on the command line.
        output_format (str | None): Output format of the command, if it has one.
        stdout_isatty (bool | None): Terminal check override; probed when None.

    Returns:
        bool: True to emit ANSI colours.
    """
    if output_format == OutputFormat.JSON.value:
        return False
    if cli_mode in (ColorMode.ALWAYS, ColorMode.NEVER):
        return cli_mode == ColorMode.ALWAYS

    from_env: bool | None = _env_color_preference()
    if from_env is not None:
        return from_env

    if stdout_isatty is None:
        isatty = getattr(sys.stdout, "isatty", None)
        try:
            stdout_isatty = bool(isatty()) if isatty else False
        except ValueError:
            # closed stream
            stdout_isatty = False
    return stdout_isatty


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="When to colourize output (default: auto).",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Same as --color=never.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--no-config`` and ``--config`` options to a command."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Skip accessorgen.toml / pyproject.toml discovery.",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(file_okay=True, dir_okay=False),
        help="Extra TOML file merged after discovered ones (repeatable).",
    )(f)
    return f


class OutputFormat(str, Enum):
    """Output format for commands that report results."""

    TEXT = "text"
    JSON = "json"


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add a ``--format`` option selecting an `OutputFormat`."""
    return click.option(
        "--format",
        "output_format",
        type=click.Choice([m.value for m in OutputFormat]),
        default=OutputFormat.TEXT.value,
        show_default=True,
        help="Output format.",
    )(f)
