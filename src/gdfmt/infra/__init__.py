"""Infrastructure layer: external system integration.

This layer wraps all interaction with gdtoolkit and the filesystem.
Every raw third-party or OS exception must be caught here and re-raised
as a :class:`~gdfmt.exceptions.GdfmtError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from gdfmt.infra.gdtoolkit_engine import GdtoolkitEngine
from gdfmt.infra.source_io import (
    read_source_file,
    read_stream,
    write_source_file,
    write_stream,
)

__all__: list[str] = [
    "GdtoolkitEngine",
    "read_source_file",
    "read_stream",
    "write_source_file",
    "write_stream",
]
