"""Smoke tests: verify scaffold wiring.

These tests prove that:
* The CLI entry points are importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import importlib

import pytest

from gdfmt import __version__
from gdfmt.cli import exit_codes
from gdfmt.exceptions import (
    EnvironmentError,
    FormatError,
    GdfmtError,
    OutputWriteError,
    SourceReadError,
    UnsupportedOptionError,
    append_gdtoolkit_upgrade_suggestion,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            SourceReadError,
            FormatError,
            UnsupportedOptionError,
            OutputWriteError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[GdfmtError]
    ) -> None:
        assert issubclass(exc_class, GdfmtError)

    def test_unsupported_option_is_a_format_error(self) -> None:
        assert issubclass(UnsupportedOptionError, FormatError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(GdfmtError, Exception)

    def test_hint_is_stored(self) -> None:
        err = GdfmtError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = GdfmtError("boom")
        assert err.hint is None


class TestUpgradeSuggestion:
    def test_appends_once(self) -> None:
        hint = append_gdtoolkit_upgrade_suggestion("Check your input.")
        assert hint.startswith("Check your input.\n")
        assert "pip install --upgrade gdtoolkit" in hint
        assert append_gdtoolkit_upgrade_suggestion(hint) == hint


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_check_failed_is_one(self) -> None:
        assert exit_codes.CHECK_FAILED == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

class TestEntryPoints:
    def test_dunder_main_importable(self) -> None:
        module = importlib.import_module("gdfmt.__main__")
        assert callable(module.cli)

    def test_layers_export_public_api(self) -> None:
        import gdfmt.core
        import gdfmt.infra

        assert "FormatService" in gdfmt.core.__all__
        assert "GdtoolkitEngine" in gdfmt.infra.__all__
