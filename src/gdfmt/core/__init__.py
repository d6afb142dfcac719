"""Core / service layer: pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from gdfmt.core.format_service import FormatService
from gdfmt.core.models import FormatterConfig, Invocation, OutputMode
from gdfmt.core.policy import build_formatter_config, is_formatted, select_output_mode
from gdfmt.core.protocols import FormattingEngine

__all__: list[str] = [
    "FormatService",
    "FormatterConfig",
    "FormattingEngine",
    "Invocation",
    "OutputMode",
    "build_formatter_config",
    "is_formatted",
    "select_output_mode",
]
