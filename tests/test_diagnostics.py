"""Tests for diagnostics: codes, templates and the exception hierarchy.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from multicultural import (
    FallbackConfigurationError,
    InvalidLocaleError,
    InvariantViolationError,
    MultiCulturalError,
)
from multicultural.diagnostics import Diagnostic, DiagnosticCode, ErrorTemplate


class TestDiagnosticCode:
    """Test code uniqueness and ranges."""

    def test_codes_unique(self) -> None:
        """Every code has a distinct value."""
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    def test_categories(self) -> None:
        """Codes fall into their documented ranges."""
        assert 1000 <= DiagnosticCode.LOCALE_INVALID.value < 2000
        assert 2000 <= DiagnosticCode.CHAIN_WILDCARD_MISSING.value < 3000
        assert 3000 <= DiagnosticCode.VALUE_NULL_STORED.value < 4000


class TestDiagnosticFormatting:
    """Test Diagnostic rendering."""

    def test_message_only(self) -> None:
        """Minimal diagnostics render a single line."""
        diagnostic = Diagnostic(code=DiagnosticCode.LOCALE_INVALID, message="bad")
        assert diagnostic.format_error() == "error[LOCALE_INVALID]: bad"
        assert str(diagnostic) == "bad"

    def test_full(self) -> None:
        """Locale and hint are rendered on their own lines."""
        diagnostic = ErrorTemplate.duplicate_anchor("fr")
        rendered = diagnostic.format_error()
        assert rendered.splitlines() == [
            "error[CHAIN_ANCHOR_DUPLICATE]: "
            "Fallback chains must start with unique locales; 'fr' is repeated",
            "  = locale: fr",
            "  = help: Merge the chains that share a starting locale",
        ]

    def test_frozen(self) -> None:
        """Diagnostics are immutable."""
        diagnostic = ErrorTemplate.wildcard_missing()
        with pytest.raises(AttributeError):
            diagnostic.message = "changed"  # type: ignore[misc]


class TestErrorTemplate:
    """Test that every template yields its code."""

    @pytest.mark.parametrize(
        ("diagnostic", "code"),
        [
            (ErrorTemplate.invalid_locale("x y", "bad"), DiagnosticCode.LOCALE_INVALID),
            (ErrorTemplate.duplicate_anchor("fr"), DiagnosticCode.CHAIN_ANCHOR_DUPLICATE),
            (ErrorTemplate.wildcard_missing(), DiagnosticCode.CHAIN_WILDCARD_MISSING),
            (ErrorTemplate.wildcard_duplicate(3), DiagnosticCode.CHAIN_WILDCARD_DUPLICATE),
            (ErrorTemplate.null_value_stored("en"), DiagnosticCode.VALUE_NULL_STORED),
        ],
    )
    def test_codes(self, diagnostic: Diagnostic, code: DiagnosticCode) -> None:
        """Templates produce diagnostics with the matching code and a hint."""
        assert diagnostic.code == code
        assert diagnostic.hint


class TestExceptionHierarchy:
    """Test exception classes."""

    @pytest.mark.parametrize(
        "exc_type", [FallbackConfigurationError, InvalidLocaleError, InvariantViolationError]
    )
    def test_common_base(self, exc_type: type[MultiCulturalError]) -> None:
        """All library errors derive from MultiCulturalError."""
        assert issubclass(exc_type, MultiCulturalError)

    def test_invalid_locale_is_value_error(self) -> None:
        """InvalidLocaleError is also a ValueError."""
        assert issubclass(InvalidLocaleError, ValueError)

    def test_plain_message(self) -> None:
        """A string message leaves diagnostic unset."""
        error = MultiCulturalError("boom")
        assert error.diagnostic is None
        assert str(error) == "boom"

    def test_diagnostic_message(self) -> None:
        """A diagnostic message is rendered and kept."""
        diagnostic = ErrorTemplate.wildcard_duplicate(2)
        error = FallbackConfigurationError(diagnostic)
        assert error.diagnostic is diagnostic
        assert str(error) == diagnostic.format_error()
