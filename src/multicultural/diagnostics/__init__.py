"""Diagnostic system for multicultural errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    FallbackConfigurationError,
    InvalidLocaleError,
    InvariantViolationError,
    MultiCulturalError,
)
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "FallbackConfigurationError",
    "InvalidLocaleError",
    "InvariantViolationError",
    "MultiCulturalError",
]
