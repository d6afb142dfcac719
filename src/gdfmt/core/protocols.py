"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations, preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol

from gdfmt.core.models import FormatterConfig


class FormattingEngine(Protocol):
    """Contract for formatting backends.

    Any object that implements :meth:`format` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).  A plain identity stub is a valid engine, which keeps the
    CLI testable without the real formatter.
    """

    def format(self, source: str, config: FormatterConfig) -> str:
        """Return *source* formatted according to *config*.

        Implementations must be pure with respect to their inputs and
        must map all backend-specific exceptions to
        :class:`~gdfmt.exceptions.GdfmtError` subclasses.

        Raises
        ------
        FormatError
            When the source cannot be parsed or formatted.
        UnsupportedOptionError
            When *config* requests something the backend cannot do.
        """
        ...  # pragma: no cover
