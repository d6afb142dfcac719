"""Shared pytest fixtures and configuration for the gdfmt test suite.

Guidelines
----------
* gdtoolkit is never required: the engine is stubbed at the protocol
  boundary, and the gdtoolkit adapter is tested against fake modules.
* Streams are injected into :func:`gdfmt.cli.app.main`; tests never read
  the real process stdin.
* Files live under ``tmp_path`` only.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from pathlib import Path

import pytest

from gdfmt.core.models import FormatterConfig


class StubEngine:
    """Protocol-compatible engine that records every call.

    *transform* maps source to output; *error*, when set, is raised
    instead of returning.
    """

    def __init__(
        self,
        transform: Callable[[str], str] = lambda source: source,
        *,
        error: Exception | None = None,
    ) -> None:
        self._transform = transform
        self._error = error
        self.calls: list[tuple[str, FormatterConfig]] = []

    def format(self, source: str, config: FormatterConfig) -> str:
        self.calls.append((source, config))
        if self._error is not None:
            raise self._error
        return self._transform(source)


class TtyStream(io.StringIO):
    """A text stream that claims to be an interactive terminal."""

    def isatty(self) -> bool:
        return True


UNFORMATTED = "func _ready():\n  print('hi')\n"
FORMATTED = "func _ready():\n\tprint('hi')\n"


def fake_format(source: str) -> str:
    """Deterministic stand-in for a formatter: two spaces become a tab."""
    return source.replace("  ", "\t")


@pytest.fixture()
def identity_engine() -> StubEngine:
    return StubEngine()


@pytest.fixture()
def fake_engine() -> StubEngine:
    return StubEngine(fake_format)


@pytest.fixture()
def unformatted_file(tmp_path: Path) -> Path:
    path = tmp_path / "player.gd"
    path.write_text(UNFORMATTED, encoding="utf-8")
    return path


@pytest.fixture()
def formatted_file(tmp_path: Path) -> Path:
    path = tmp_path / "enemy.gd"
    path.write_text(FORMATTED, encoding="utf-8")
    return path


@pytest.fixture()
def stdout() -> io.StringIO:
    return io.StringIO()
