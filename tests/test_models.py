"""Tests for domain models (core/models.py).

All models are frozen dataclasses: these tests verify immutability,
defaults, and construction from ``argparse`` output.
"""

from __future__ import annotations

import argparse
import dataclasses
from pathlib import Path

import pytest

from gdfmt.core.models import FormatterConfig, Invocation, OutputMode


def _namespace(**overrides: object) -> argparse.Namespace:
    """Factory mirroring the CLI parser's defaults."""
    defaults: dict[str, object] = {
        "input": None,
        "stdout": False,
        "check": False,
        "use_spaces": False,
        "indent_size": 4,
        "reorder_code": False,
        "debug": False,
    }
    defaults.update(overrides)
    return argparse.Namespace(**defaults)


# ---------------------------------------------------------------------------
# Invocation
# ---------------------------------------------------------------------------

class TestInvocation:
    def test_from_namespace_defaults(self) -> None:
        inv = Invocation.from_namespace(_namespace())
        assert inv == Invocation(input_path=None)
        assert inv.has_file is False

    def test_from_namespace_with_file(self) -> None:
        inv = Invocation.from_namespace(
            _namespace(input=Path("player.gd"), stdout=True, indent_size=2),
        )
        assert inv.input_path == Path("player.gd")
        assert inv.has_file is True
        assert inv.stdout is True
        assert inv.indent_size == 2

    def test_frozen(self) -> None:
        inv = Invocation(input_path=None)
        with pytest.raises(dataclasses.FrozenInstanceError):
            inv.check = True  # type: ignore[misc]


# ---------------------------------------------------------------------------
# FormatterConfig
# ---------------------------------------------------------------------------

class TestFormatterConfig:
    def test_defaults(self) -> None:
        config = FormatterConfig()
        assert config.indent_size == 4
        assert config.use_spaces is False
        assert config.reorder_code is False

    def test_equality_is_by_value(self) -> None:
        assert FormatterConfig(2, True, False) == FormatterConfig(
            indent_size=2, use_spaces=True,
        )

    def test_frozen(self) -> None:
        config = FormatterConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.indent_size = 8  # type: ignore[misc]


class TestOutputMode:
    def test_three_modes(self) -> None:
        assert {mode.value for mode in OutputMode} == {"check", "overwrite", "stdout"}
