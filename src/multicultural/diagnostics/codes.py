"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by exceptions.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale identifier errors
        2000-2999: Fallback chain configuration errors
        3000-3999: Multi-locale value consistency errors
    """

    # Locale identifier errors (1000-1999)
    LOCALE_INVALID = 1001

    # Fallback chain configuration errors (2000-2999)
    CHAIN_ANCHOR_DUPLICATE = 2001
    CHAIN_WILDCARD_MISSING = 2002
    CHAIN_WILDCARD_DUPLICATE = 2003

    # Value consistency errors (3000-3999)
    VALUE_NULL_STORED = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale_code: Locale involved in the error (empty if not applicable)
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale_code: str = ""

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[CHAIN_WILDCARD_MISSING]: No chain starts with '*'
              = locale: fr
              = help: Add a chain such as '*,en'

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.locale_code:
            lines.append(f"  = locale: {self.locale_code}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
