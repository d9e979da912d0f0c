"""Exception hierarchy with structured diagnostics.

All exceptions may carry a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "FallbackConfigurationError",
    "InvalidLocaleError",
    "InvariantViolationError",
    "MultiCulturalError",
]


class MultiCulturalError(Exception):
    """Base exception for all multicultural errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MultiCulturalError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class FallbackConfigurationError(MultiCulturalError):
    """Fallback chains violate the construction rules.

    Raised when two chains share a starting locale, or when the number of
    wildcard chains is not exactly one. Fatal: the resolver is not created.
    """


class InvalidLocaleError(MultiCulturalError, ValueError):
    """Locale identifier cannot be parsed."""


class InvariantViolationError(MultiCulturalError):
    """Internal consistency fault in a multi-locale value.

    Never raised by correct use of the public API; indicates a bug in the
    value implementation itself.
    """
