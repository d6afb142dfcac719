"""Logging configuration for gdfmt.

- Default: WARNING level (quiet operation)
- ``--debug`` flag: DEBUG level with timestamps and module names

Only the ``gdfmt`` logger hierarchy is touched; the root logger is left
alone so embedding applications and test harnesses keep their handlers.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_DEBUG_FORMAT = "%(asctime)s %(name)s [%(levelname)s] %(message)s"
_DEFAULT_FORMAT = "%(name)s: %(message)s"

# Parser internals are chatty at DEBUG
_NOISY_LOGGERS = ("lark",)

PACKAGE_LOGGER = "gdfmt"


def configure_logging(*, debug: bool = False, stream: TextIO | None = None) -> None:
    """Install a single stderr handler on the ``gdfmt`` logger.

    Safe to call more than once: previous handlers are replaced.

    Args:
        debug: Enable DEBUG level with the detailed format
        stream: Output stream (default: the current ``sys.stderr``)
    """
    level = logging.DEBUG if debug else logging.WARNING
    log_format = _DEBUG_FORMAT if debug else _DEFAULT_FORMAT

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(log_format))
    package_logger.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    package_logger.debug("Logging configured: level=%s", logging.getLevelName(level))
