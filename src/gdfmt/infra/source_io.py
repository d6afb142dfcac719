"""Source acquisition and write-back.

Files, stdin and stdout are all handled as UTF-8 with newline
translation disabled, so the text compared in check mode, written back
on overwrite, or passed through to stdout is exactly what arrived
(CRLF input stays CRLF).

Every ``OSError`` / ``UnicodeError`` is re-raised as a typed
:class:`~gdfmt.exceptions.GdfmtError` subclass; nothing raw escapes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from gdfmt.exceptions import OutputWriteError, SourceReadError

logger = logging.getLogger(__name__)

_ENCODING = "utf-8"


def _describe(exc: BaseException) -> str:
    """Short human-readable cause, without the errno/filename noise."""
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)


def read_source_file(path: Path) -> str:
    """Read the whole of *path* as text.

    Raises
    ------
    SourceReadError
        If the file is missing, unreadable, or not valid UTF-8.
    """
    try:
        with open(path, encoding=_ENCODING, newline="") as handle:
            text = handle.read()
    except (OSError, UnicodeError) as exc:
        raise SourceReadError(
            f"Failed to read file {path}: {_describe(exc)}",
        ) from exc
    logger.debug("Read %d characters from %s", len(text), path)
    return text


def read_stream(stream: TextIO) -> str:
    """Drain *stream* until end-of-stream.

    When *stream* exposes a binary ``buffer`` (as ``sys.stdin`` does) the
    raw bytes are decoded as strict UTF-8, bypassing the text layer's
    newline translation and locale encoding, so CRLF input stays CRLF.

    Raises
    ------
    SourceReadError
        If the stream cannot be read or decoded.
    """
    buffer = getattr(stream, "buffer", None)
    try:
        if buffer is not None:
            text = buffer.read().decode(_ENCODING)
        else:
            text = stream.read()
    except (OSError, UnicodeError, ValueError) as exc:
        # ValueError: read on a closed stream.
        raise SourceReadError(
            f"Failed to read from stdin: {_describe(exc)}",
        ) from exc
    logger.debug("Read %d characters from stdin", len(text))
    return text


def write_stream(stream: TextIO, text: str) -> None:
    """Write *text* to *stream* without newline translation, then flush.

    Streams with a binary ``buffer`` receive UTF-8 bytes directly.

    Raises
    ------
    OutputWriteError
        If the stream is closed or the write fails (e.g. a broken pipe).
    """
    buffer = getattr(stream, "buffer", None)
    try:
        if buffer is not None:
            stream.flush()
            buffer.write(text.encode(_ENCODING))
            buffer.flush()
        else:
            stream.write(text)
            stream.flush()
    except (OSError, ValueError) as exc:
        raise OutputWriteError(
            f"Failed to write to stdout: {_describe(exc)}",
        ) from exc


def write_source_file(path: Path, text: str) -> None:
    """Replace the content of *path* with *text*.

    No atomic rename is attempted; a failure part-way through may leave
    the file truncated.

    Raises
    ------
    OutputWriteError
        If the file cannot be opened or written.
    """
    try:
        with open(path, "w", encoding=_ENCODING, newline="") as handle:
            handle.write(text)
    except (OSError, UnicodeError) as exc:
        raise OutputWriteError(
            f"Failed to write to file {path}: {_describe(exc)}",
        ) from exc
    logger.debug("Wrote %d characters to %s", len(text), path)
