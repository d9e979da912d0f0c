"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from multicultural.constants import ANY_LOCALE

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics raised by the library are built here, so tests can
    compare codes instead of matching message text.
    """

    @staticmethod
    def invalid_locale(locale_code: str, reason: str) -> Diagnostic:
        """Locale identifier could not be parsed.

        Args:
            locale_code: The identifier as supplied by the caller
            reason: Parser error text

        Returns:
            Diagnostic for LOCALE_INVALID
        """
        msg = f"Invalid locale identifier '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_INVALID,
            message=msg,
            hint="Use a BCP-47 identifier such as 'en-US' or 'zh-Hant-TW'",
            locale_code=locale_code,
        )

    @staticmethod
    def duplicate_anchor(anchor: str) -> Diagnostic:
        """Two chains start with the same locale.

        Args:
            anchor: The repeated starting locale

        Returns:
            Diagnostic for CHAIN_ANCHOR_DUPLICATE
        """
        msg = f"Fallback chains must start with unique locales; '{anchor}' is repeated"
        return Diagnostic(
            code=DiagnosticCode.CHAIN_ANCHOR_DUPLICATE,
            message=msg,
            hint="Merge the chains that share a starting locale",
            locale_code=anchor,
        )

    @staticmethod
    def wildcard_missing() -> Diagnostic:
        """No chain uses the wildcard anchor.

        Returns:
            Diagnostic for CHAIN_WILDCARD_MISSING
        """
        msg = f"Exactly one fallback chain must start with '{ANY_LOCALE}'; none found"
        return Diagnostic(
            code=DiagnosticCode.CHAIN_WILDCARD_MISSING,
            message=msg,
            hint=f"Add a chain such as '{ANY_LOCALE},' or '{ANY_LOCALE},en'",
        )

    @staticmethod
    def wildcard_duplicate(count: int) -> Diagnostic:
        """More than one chain uses the wildcard anchor.

        Args:
            count: Number of wildcard chains supplied

        Returns:
            Diagnostic for CHAIN_WILDCARD_DUPLICATE
        """
        msg = f"Exactly one fallback chain must start with '{ANY_LOCALE}'; found {count}"
        return Diagnostic(
            code=DiagnosticCode.CHAIN_WILDCARD_DUPLICATE,
            message=msg,
            hint="Keep a single default chain",
        )

    @staticmethod
    def null_value_stored(locale_code: str) -> Diagnostic:
        """A None value reached the internal mapping.

        Args:
            locale_code: Locale whose entry is None

        Returns:
            Diagnostic for VALUE_NULL_STORED
        """
        msg = f"Multi-locale value stores None for locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.VALUE_NULL_STORED,
            message=msg,
            hint="Pass None to set_localized_string() to remove an entry",
            locale_code=locale_code,
        )
