# topmark:header:start
#
#   project      : AccessorGen
#   file         : io.py
#   file_relpath : src/accessorgen/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File and STDIN I/O for CLI commands.

Sources are read and written as UTF-8 bytes, so the document's own end-of-line
sequences survive the round trip for files and for STDIN alike. OS-level and
decoding failures are mapped to the matching `AccessorgenError` subclass.
"""

from __future__ import annotations

from pathlib import Path

import click

from accessorgen.cli.errors import (
    AccessorgenEncodingError,
    AccessorgenFileNotFoundError,
    AccessorgenIOError,
    AccessorgenPermissionDeniedError,
)
from accessorgen.config.logging import get_logger

logger = get_logger(__name__)

#: Path placeholder meaning "read the content from STDIN".
STDIN_MARKER: str = "-"


def read_source(path: str) -> str:
    """Read a source document from ``path`` (or STDIN when ``path`` is ``-``).

    Both sources are read as bytes and decoded here, so no newline translation
    takes place on either path.

    Args:
        path (str): File path, or ``-`` for STDIN.

    Returns:
        str: The document text with its original newlines.

    Raises:
        AccessorgenFileNotFoundError: If the file does not exist.
        AccessorgenPermissionDeniedError: If the file cannot be read.
        AccessorgenEncodingError: If the content is not valid UTF-8.
        AccessorgenIOError: For other I/O failures.
    """
    source_name: str = "STDIN" if path == STDIN_MARKER else path
    try:
        if path == STDIN_MARKER:
            data: bytes = click.get_binary_stream("stdin").read()
        else:
            data = Path(path).read_bytes()
        text: str = data.decode("utf-8")
    except FileNotFoundError as e:
        raise AccessorgenFileNotFoundError(f"File not found: {path}") from e
    except IsADirectoryError as e:
        raise AccessorgenIOError(f"Not a file: {path}") from e
    except PermissionError as e:
        raise AccessorgenPermissionDeniedError(f"Permission denied: {path}") from e
    except UnicodeDecodeError as e:
        raise AccessorgenEncodingError(f"Cannot decode {source_name} as UTF-8: {e}") from e
    except OSError as e:
        raise AccessorgenIOError(f"Cannot read {source_name}: {e}") from e

    logger.debug("Read %d chars from %s", len(text), source_name)
    return text


def write_source(path: str, text: str) -> None:
    """Write ``text`` back to ``path`` (or STDOUT when ``path`` is ``-``).

    Raises:
        AccessorgenPermissionDeniedError: If the file cannot be written.
        AccessorgenIOError: For other I/O failures.
    """
    if path == STDIN_MARKER:
        stdout = click.get_binary_stream("stdout")
        stdout.write(text.encode("utf-8"))
        stdout.flush()
        return

    try:
        Path(path).write_bytes(text.encode("utf-8"))
    except PermissionError as e:
        raise AccessorgenPermissionDeniedError(f"Permission denied: {path}") from e
    except OSError as e:
        raise AccessorgenIOError(f"Cannot write {path}: {e}") from e

    logger.info("Wrote %d chars to %s", len(text), path)
