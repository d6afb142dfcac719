"""CLI application entry point for gdfmt.

This module is the **sole error boundary** for the entire application.
It catches :class:`~gdfmt.exceptions.GdfmtError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No formatting logic lives here: the engine is an injected collaborator.
* Flow: parse arguments → acquire source → build config → format →
  dispatch to exactly one output mode.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from gdfmt.cli import exit_codes
from gdfmt.cli.console import console, escape_markup
from gdfmt.core.models import Invocation
from gdfmt.core.protocols import FormattingEngine
from gdfmt.exceptions import GdfmtError
from gdfmt.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _indent_size(value: str) -> int:
    """``argparse`` type for ``--indent-size``: a non-negative integer."""
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if size < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {size}")
    return size


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="gdfmt",
        description=(
            "Format GDScript files with consistent style and indentation. "
            "By default, the formatter overwrites input files with the "
            "formatted code. Use --stdout to output to standard output instead."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        default=None,
        metavar="FILE",
        help=(
            "Input GDScript file to format. If no file path is provided, "
            "the program reads from standard input and outputs to "
            "standard output."
        ),
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help=(
            "Output formatted code to stdout instead of overwriting the "
            "input file. This flag is ignored when reading from stdin "
            "(stdout is always used)."
        ),
    )
    parser.add_argument(
        "-c",
        "--check",
        action="store_true",
        help=(
            "Check if the file is already formatted without making changes. "
            "Exits with code 0 if the file is already formatted and 1 if "
            "it's not formatted."
        ),
    )
    parser.add_argument(
        "--use-spaces",
        action="store_true",
        help=(
            "Use spaces for indentation instead of tabs. The number of "
            "spaces is controlled by --indent-size."
        ),
    )
    parser.add_argument(
        "--indent-size",
        type=_indent_size,
        default=4,
        metavar="NUM",
        help=(
            "Number of spaces to use for each indentation level when "
            "--use-spaces is enabled. Has no effect without the "
            "--use-spaces flag. (default: %(default)s)"
        ),
    )
    parser.add_argument(
        "--reorder-code",
        action="store_true",
        help=(
            "Reorder source-level declarations (signals, properties, "
            "methods, etc.) according to the official GDScript style "
            "guide. Applied after the main formatting pass."
        ),
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print diagnostic logging to stderr.",
    )
    return parser


# ---------------------------------------------------------------------------
# Pipeline steps
# ---------------------------------------------------------------------------

def _is_interactive(stream: TextIO | None) -> bool:
    """Return ``True`` when *stream* is attached to a terminal."""
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # Closed stream.
        return False


def _acquire_source(invocation: Invocation, stdin: TextIO) -> str:
    """Read the source from the named file, else drain *stdin*."""
    from gdfmt.infra.source_io import read_source_file, read_stream

    if invocation.input_path is not None:
        return read_source_file(invocation.input_path)
    return read_stream(stdin)


def _default_engine() -> FormattingEngine:
    """Instantiate the gdtoolkit-backed engine."""
    from gdfmt.infra.gdtoolkit_engine import GdtoolkitEngine

    return GdtoolkitEngine()


def _run(
    invocation: Invocation,
    *,
    stdin: TextIO,
    stdout: TextIO,
    engine: FormattingEngine,
) -> int:
    """Execute one formatting run for an already-parsed *invocation*."""
    from gdfmt.cli.output import dispatch
    from gdfmt.core.format_service import FormatService
    from gdfmt.core.policy import build_formatter_config, select_output_mode

    source = _acquire_source(invocation, stdin)
    config = build_formatter_config(invocation)
    formatted = FormatService(engine).format(source, config)

    mode = select_output_mode(
        has_file=invocation.has_file,
        stdout=invocation.stdout,
        check=invocation.check,
    )
    return dispatch(
        mode,
        source=source,
        formatted=formatted,
        path=invocation.input_path,
        stdout=stdout,
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    engine: FormattingEngine | None = None,
) -> int:
    """Run the gdfmt CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    stdin, stdout:
        Streams to read source from and write results to.  Default to the
        process streams at call time.
    engine:
        Formatting engine to use.  Defaults to the gdtoolkit adapter.

    Returns
    -------
    int
        OS process exit code.
    """
    from gdfmt.utils.logging_setup import configure_logging

    args_list = sys.argv[1:] if argv is None else list(argv)
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    parser = _build_parser()

    # Nothing given and nothing piped: show help instead of waiting on a tty.
    if not args_list and _is_interactive(stdin):
        from gdfmt.infra.source_io import write_stream

        write_stream(stdout, parser.format_help())
        return exit_codes.SUCCESS

    args = parser.parse_args(args_list)
    invocation = Invocation.from_namespace(args)
    configure_logging(debug=invocation.debug)
    logger.debug("Parsed %s", invocation)

    return _run(
        invocation,
        stdin=stdin,
        stdout=stdout,
        engine=engine if engine is not None else _default_engine(),
    )


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli(argv: list[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except GdfmtError as exc:
        console.error(str(exc), exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]", plain="\nAborted by user.")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}",
            plain=(
                "Unexpected error. Please report this issue.\n"
                f"  {type(exc).__name__}: {exc}"
            ),
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
