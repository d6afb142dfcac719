"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit: formatted, written, or check passed."""

GENERAL_ERROR: int = 1
"""A known GdfmtError was caught. User-facing message was displayed."""

CHECK_FAILED: int = 1
"""``--check`` found that the input is not formatted."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
