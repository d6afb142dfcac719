"""gdtoolkit backed implementation of :class:`~gdfmt.core.protocols.FormattingEngine`.

This module is the **only** place in the codebase that imports
``gdtoolkit`` or ``lark``.  All parser exceptions are caught here and
re-raised as typed :class:`~gdfmt.exceptions.GdfmtError` subclasses, and
nothing raw escapes the infrastructure boundary.
"""

from __future__ import annotations

import logging

from gdfmt.core.models import FormatterConfig
from gdfmt.exceptions import (
    EnvironmentError,
    FormatError,
    UnsupportedOptionError,
    append_gdtoolkit_upgrade_suggestion,
)

logger = logging.getLogger(__name__)


class GdtoolkitEngine:
    """Concrete :class:`FormattingEngine` backed by ``gdtoolkit.formatter``.

    Usage::

        engine = GdtoolkitEngine()
        text = engine.format("func f():\\n  pass\\n", FormatterConfig())

    This class satisfies the :class:`~gdfmt.core.protocols.FormattingEngine`
    protocol structurally: no explicit inheritance required.
    """

    MAX_LINE_LENGTH: int = 100
    """Line length budget handed to gdtoolkit (its own ``gdformat`` default)."""

    @staticmethod
    def _spaces_for_indent(config: FormatterConfig) -> int | None:
        """Map the config onto gdtoolkit's ``spaces_for_indent`` argument.

        ``None`` tells gdtoolkit to indent with tabs.
        """
        return config.indent_size if config.use_spaces else None

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def format(self, source: str, config: FormatterConfig) -> str:
        """Format GDScript *source* according to *config*.

        Raises
        ------
        EnvironmentError
            When gdtoolkit is not installed.
        UnsupportedOptionError
            When *config* requests declaration reordering.
        FormatError
            When the source does not parse, or gdtoolkit fails otherwise.
        """
        try:
            from gdtoolkit.formatter import format_code
            from lark.exceptions import LarkError
        except ModuleNotFoundError as exc:
            raise EnvironmentError(
                "gdtoolkit is not installed. Install with: pip install gdtoolkit",
            ) from exc

        if config.reorder_code:
            raise UnsupportedOptionError(
                "gdtoolkit does not support declaration reordering.",
                hint="Run again without --reorder-code.",
            )

        spaces = self._spaces_for_indent(config)
        logger.debug(
            "gdtoolkit format_code(max_line_length=%d, spaces_for_indent=%s)",
            self.MAX_LINE_LENGTH,
            spaces,
        )

        try:
            formatted = format_code(
                source,
                max_line_length=self.MAX_LINE_LENGTH,
                spaces_for_indent=spaces,
            )
        except LarkError as exc:
            raise FormatError(str(exc).strip()) from exc
        except Exception as exc:
            raise FormatError(
                f"Unexpected gdtoolkit error: {exc}",
                hint=append_gdtoolkit_upgrade_suggestion(
                    "The input may have triggered a formatter bug.",
                ),
            ) from exc

        return formatted
