"""Pure decision functions derived from the parsed invocation.

Nothing here touches the filesystem or the engine; every function is a
deterministic mapping from values to values.
"""

from __future__ import annotations

from gdfmt.core.models import FormatterConfig, Invocation, OutputMode


def build_formatter_config(invocation: Invocation) -> FormatterConfig:
    """Derive the engine configuration from the command line.

    ``indent_size`` is forwarded verbatim even when spaces are not in use;
    the engine decides what it means.
    """
    return FormatterConfig(
        indent_size=invocation.indent_size,
        use_spaces=invocation.use_spaces,
        reorder_code=invocation.reorder_code,
    )


def select_output_mode(*, has_file: bool, stdout: bool, check: bool) -> OutputMode:
    """Pick the single output destination for this run.

    Priority
    --------
    1. ``check`` wins over everything, including ``stdout``.
    2. A named file without ``stdout`` is overwritten.
    3. Everything else prints to standard output.
    """
    if check:
        return OutputMode.CHECK
    if has_file and not stdout:
        return OutputMode.OVERWRITE
    return OutputMode.STDOUT


def is_formatted(source: str, formatted: str) -> bool:
    """Return ``True`` when the engine left *source* unchanged."""
    return source == formatted
