"""Domain models for gdfmt.

All models are **frozen** dataclasses: immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and must remain pure across the entire lifecycle.
"""

from __future__ import annotations

import argparse
import enum
from dataclasses import dataclass
from pathlib import Path


# ---------------------------------------------------------------------------
# Parsed command line
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Invocation:
    """The parsed command-line arguments of a single run."""

    input_path: Path | None
    """Source file to format, or ``None`` to read standard input."""

    stdout: bool = False
    """Print the result instead of overwriting *input_path*."""

    check: bool = False
    """Only report whether the source is already formatted."""

    use_spaces: bool = False
    """Indent with spaces instead of tabs."""

    indent_size: int = 4
    """Spaces per indentation level; only meaningful with *use_spaces*."""

    reorder_code: bool = False
    """Request the declaration-reordering pass."""

    debug: bool = False
    """Emit DEBUG-level diagnostics on stderr."""

    @classmethod
    def from_namespace(cls, namespace: argparse.Namespace) -> Invocation:
        """Build an :class:`Invocation` from an ``argparse`` namespace."""
        return cls(
            input_path=namespace.input,
            stdout=namespace.stdout,
            check=namespace.check,
            use_spaces=namespace.use_spaces,
            indent_size=namespace.indent_size,
            reorder_code=namespace.reorder_code,
            debug=namespace.debug,
        )

    @property
    def has_file(self) -> bool:
        return self.input_path is not None


# ---------------------------------------------------------------------------
# Engine configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FormatterConfig:
    """Options handed to the formatting engine, passed by value."""

    indent_size: int = 4
    use_spaces: bool = False
    reorder_code: bool = False


# ---------------------------------------------------------------------------
# Output policy
# ---------------------------------------------------------------------------

class OutputMode(enum.Enum):
    """Where the formatted text goes.  Exactly one applies per run."""

    CHECK = "check"
    """Compare against the source and report; never write."""

    OVERWRITE = "overwrite"
    """Replace the input file's content."""

    STDOUT = "stdout"
    """Print the formatted text to standard output."""
