"""Shared constants for multicultural.

This module provides centralized configuration constants used across the
locale, fallback and runtime packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Locale identifiers: Invariant root and wildcard anchor
- Defaults: Locale used when the system locale cannot be detected
- Cache limits: Memory bounds for Babel locale lookups
- Debug display: Bounds for repr() of multi-locale values

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale identifiers
    "INVARIANT_LOCALE",
    "ANY_LOCALE",
    "CHAIN_SEPARATOR",
    # Defaults
    "DEFAULT_LOCALE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Debug display
    "DEBUG_DISPLAY_THRESHOLD",
    "DEBUG_DISPLAY_MAX_LENGTH",
]

# ============================================================================
# LOCALE IDENTIFIERS
# ============================================================================

# Canonical name of the invariant (root) locale. It is its own parent.
INVARIANT_LOCALE: str = ""

# Chain anchor matching any locale not listed by another chain.
ANY_LOCALE: str = "*"

# Separator used by string-form chain definitions ("fr,fr-CA").
CHAIN_SEPARATOR: str = ","

# ============================================================================
# DEFAULTS
# ============================================================================

# Returned by get_system_locale() when neither the OS nor the environment
# provides a usable locale.
DEFAULT_LOCALE: str = "en-US"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of Babel Locale objects and parent lookups kept by the
# lru_cache wrappers in locale_utils.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# DEBUG DISPLAY
# ============================================================================

# repr() of MultiCulturalString shows at most this many entries...
DEBUG_DISPLAY_THRESHOLD: int = 3

# ...each truncated to this many characters.
DEBUG_DISPLAY_MAX_LENGTH: int = 10
