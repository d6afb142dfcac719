"""Core format service: drives a single call into the formatting engine.

This service delegates the actual formatting to a
:class:`~gdfmt.core.protocols.FormattingEngine` injected at construction
time.  It is responsible for:

* Delegating to the engine.
* Ensuring only :class:`~gdfmt.exceptions.GdfmtError` subclasses escape.
* Rejecting engine results that are not text.

Guarantees
----------
* Pure orchestration: no I/O, no ``print()``, no filesystem access.
* No gdtoolkit import.
"""

from __future__ import annotations

import logging

from gdfmt.core.models import FormatterConfig
from gdfmt.core.protocols import FormattingEngine
from gdfmt.exceptions import FormatError, GdfmtError

logger = logging.getLogger(__name__)


class FormatService:
    """Stateless service wrapping one formatting engine.

    Parameters
    ----------
    engine:
        Any object satisfying the :class:`FormattingEngine` protocol.
    """

    def __init__(self, engine: FormattingEngine) -> None:
        self._engine: FormattingEngine = engine

    def format(self, source: str, config: FormatterConfig) -> str:
        """Format *source* with *config*.

        Raises
        ------
        FormatError
            If the engine fails, or returns something other than ``str``.
        """
        logger.debug(
            "Formatting %d characters with %s via %s",
            len(source),
            config,
            type(self._engine).__name__,
        )
        try:
            formatted = self._engine.format(source, config)
        except GdfmtError:
            # Already one of ours: let it propagate unchanged.
            raise
        except Exception as exc:
            raise FormatError(
                f"Unexpected formatting engine error: {exc}",
            ) from exc

        if not isinstance(formatted, str):
            raise FormatError(
                "Formatting engine returned "
                f"{type(formatted).__name__} instead of text.",
            )

        logger.debug(
            "Engine returned %d characters (%s)",
            len(formatted),
            "unchanged" if formatted == source else "changed",
        )
        return formatted
