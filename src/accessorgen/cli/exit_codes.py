# topmark:header:start
#
#   project      : AccessorGen
#   file         : exit_codes.py
#   file_relpath : src/accessorgen/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the AccessorGen CLI.

AccessorGen aligns with the BSD `sysexits` convention where practical. The one
deliberate divergence is `WOULD_CHANGE=2`, used by dry runs that would insert
accessors. Click's own usage errors also exit with 2; AccessorGen reports its own
usage errors with `USAGE_ERROR` (64).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the AccessorGen CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        WOULD_CHANGE: Dry-run: accessors would be inserted if ``--apply`` were set.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Text decoding error. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Missing/invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see class docstring
    USAGE_ERROR = 64
    ENCODING_ERROR = 65
    FILE_NOT_FOUND = 66
    IO_ERROR = 74
    PERMISSION_DENIED = 77
    CONFIG_ERROR = 78
