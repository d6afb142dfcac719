"""Allow ``python -m gdfmt`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m gdfmt`` behaves identically to the ``gdfmt`` console
script.
"""

from __future__ import annotations

from gdfmt.cli.app import cli

if __name__ == "__main__":
    cli()
