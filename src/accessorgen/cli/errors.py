# topmark:header:start
#
#   project      : AccessorGen
#   file         : errors.py
#   file_relpath : src/accessorgen/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the AccessorGen CLI.

Raise these in CLI commands to signal errors with standardized messages and exit
codes. The core never raises them: absence of a declaration or of a matching
block is a normal outcome, not an error.

Exceptions prefer the project console if available (see `show()`); if no console
is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from accessorgen.cli.exit_codes import ExitCode


class AccessorgenError(click.ClickException):
    """Base class for all AccessorGen CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class AccessorgenUsageError(AccessorgenError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class AccessorgenConfigError(AccessorgenError):
    """Error for configuration errors (missing/invalid config file)."""

    exit_code = ExitCode.CONFIG_ERROR


class AccessorgenFileNotFoundError(AccessorgenError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class AccessorgenPermissionDeniedError(AccessorgenError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class AccessorgenIOError(AccessorgenError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class AccessorgenEncodingError(AccessorgenError):
    """Error for text decoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR
