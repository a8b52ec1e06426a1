# topmark:header:start
#
#   project      : AccessorGen
#   file         : logging.py
#   file_relpath : src/accessorgen/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AccessorGen logging: a TRACE level, a trace-capable logger and coloured records.

Diagnostics (this module) are separate from program output
(`accessorgen.cli.console.ClickConsole`). The log level comes from
``ACCESSORGEN_LOG_LEVEL``, not from ``-v``/``-q``; by default only CRITICAL
records are shown.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Callable, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Mapping

#: Below DEBUG; used for per-line scanner and locator chatter.
TRACE_LEVEL: Final[int] = logging.DEBUG - 5

#: Environment variable consulted by `resolve_env_log_level`.
LOG_LEVEL_ENV_VAR: Final[str] = "ACCESSORGEN_LOG_LEVEL"


class AccessorgenLogger(logging.Logger):
    """Logger class adding `trace()` for records at `TRACE_LEVEL`."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level.

        Args:
            msg (object): The message format string.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            # stacklevel=2 attributes the record to the caller of trace()
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(AccessorgenLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

# Checked top-down; the first threshold not above the record level picks the style.
_LEVEL_STYLES: tuple[tuple[int, Callable[[str], str]], ...] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "FATAL": logging.CRITICAL,
    "CRITICAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class ChalkFormatter(logging.Formatter):
    """Formatter colouring each record by severity with yachalk."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and colour the result according to its level."""
        message: str = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim.red(message)


def resolve_env_log_level() -> int | None:
    """Return the level requested through ``ACCESSORGEN_LOG_LEVEL``.

    Accepts level names in any case (``trace``, ``DEBUG``, ``warn``...) or a
    number. Returns None when the variable is unset, empty or unrecognized.
    """
    raw: str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return _LEVEL_NAMES.get(raw)


def setup_logging(level: int | None = None) -> None:
    """Install a single coloured stdout handler on the root logger.

    Args:
        level (int | None): Level to log at. When None, ``ACCESSORGEN_LOG_LEVEL`` is
            consulted, falling back to CRITICAL.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root = logging.getLogger()
    root.setLevel(level)
    for existing in list(root.handlers):
        root.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    )
    root.addHandler(handler)
    root.propagate = False


def get_logger(name: str) -> AccessorgenLogger:
    """Return the `AccessorgenLogger` called ``name``."""
    return cast("AccessorgenLogger", logging.getLogger(name))
