"""Custom exception hierarchy for gdfmt.

All exceptions that cross layer boundaries must inherit from
:class:`GdfmtError`.  Raw third-party exceptions (e.g. from gdtoolkit or
lark) and raw ``OSError`` instances must NEVER propagate beyond the
infrastructure layer: they must be caught and re-raised as a typed
subclass defined here.

Hierarchy
---------
GdfmtError
├── SourceReadError
├── FormatError
│   └── UnsupportedOptionError
├── OutputWriteError
└── EnvironmentError
"""

from __future__ import annotations


class GdfmtError(Exception):
    """Base exception for all gdfmt errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input -----------------------------------------------------------------

class SourceReadError(GdfmtError):
    """Raised when the source file or standard input cannot be read."""


# --- Formatting ------------------------------------------------------------

class FormatError(GdfmtError):
    """Raised when the formatting engine rejects or fails on the input."""


class UnsupportedOptionError(FormatError):
    """Raised when the engine cannot honour a formatter configuration."""


# --- Output ----------------------------------------------------------------

class OutputWriteError(GdfmtError):
    """Raised when the formatted result cannot be written back."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(GdfmtError):
    """Raised when a required runtime dependency is not available."""


def append_gdtoolkit_upgrade_suggestion(hint: str) -> str:
    """Append gdtoolkit upgrade guidance to an existing hint text.

    The suggestion is appended only once and preserves the original
    hint content verbatim.
    """
    marker = "Also try updating gdtoolkit:"
    if marker in hint:
        return hint
    return "\n".join(
        (
            hint,
            marker,
            "    pip install --upgrade gdtoolkit",
        )
    )
