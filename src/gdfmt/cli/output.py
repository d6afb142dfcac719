"""Output dispatch: one handler per :class:`~gdfmt.core.models.OutputMode`.

The mode is chosen once by :func:`~gdfmt.core.policy.select_output_mode`;
this module only carries it out.  Each handler returns the process exit
code for its outcome.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from gdfmt.cli import exit_codes
from gdfmt.cli.console import console
from gdfmt.core.models import OutputMode
from gdfmt.core.policy import is_formatted
from gdfmt.infra.source_io import write_source_file, write_stream

logger = logging.getLogger(__name__)

FORMATTED_MESSAGE = "File is formatted"
NOT_FORMATTED_MESSAGE = "The file is not formatted"


def report_check(source: str, formatted: str, stdout: TextIO) -> int:
    """Report whether *source* was already formatted.  Never writes files."""
    if is_formatted(source, formatted):
        write_stream(stdout, f"{FORMATTED_MESSAGE}\n")
        return exit_codes.SUCCESS
    console.print(
        f"[bold yellow]{NOT_FORMATTED_MESSAGE}[/bold yellow]",
        plain=NOT_FORMATTED_MESSAGE,
    )
    return exit_codes.CHECK_FAILED


def write_back(path: Path, formatted: str) -> int:
    """Replace *path*'s content with *formatted*."""
    write_source_file(path, formatted)
    logger.info("Formatted %s", path)
    return exit_codes.SUCCESS


def emit(formatted: str, stdout: TextIO) -> int:
    """Print *formatted* exactly as the engine produced it."""
    write_stream(stdout, formatted)
    return exit_codes.SUCCESS


def dispatch(
    mode: OutputMode,
    *,
    source: str,
    formatted: str,
    path: Path | None,
    stdout: TextIO,
) -> int:
    """Carry out *mode* and return the exit code."""
    logger.debug("Output mode: %s", mode.value)
    if mode is OutputMode.CHECK:
        return report_check(source, formatted, stdout)
    if mode is OutputMode.OVERWRITE:
        # select_output_mode only picks OVERWRITE when a file was given.
        assert path is not None
        return write_back(path, formatted)
    return emit(formatted, stdout)
