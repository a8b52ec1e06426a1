# topmark:header:start
#
#   project      : AccessorGen
#   file         : __main__.py
#   file_relpath : src/accessorgen/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running AccessorGen via ``python -m accessorgen``.

It delegates directly to :func:`accessorgen.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how AccessorGen is launched.

Examples:
    Preview the accessors that would be generated::

        python -m accessorgen generate Person.cs
"""

from __future__ import annotations

from accessorgen.cli.main import cli

if __name__ == "__main__":
    cli()
