"""multicultural - strings with per-locale variants and fallback resolution.

Attach several locale-specific variants to one logical string and resolve
the best variant for a requested locale with a configurable fallback
policy, without duplicating business objects per locale.

Public API:
    MultiCulturalString - Immutable locale -> text value
    ChainsFallbackResolver - Fallback policy from anchored locale chains
    FallbackResolver - Protocol for custom fallback policies
    GlobalizationSettings - Process-wide default resolver
    as_multicultural_string / as_string / set_localized_value - View plain
        strings as multi-locale values
    UILocaleScope / get_ui_locale / set_ui_locale - Current UI locale

Exceptions:
    MultiCulturalError - Base exception class
    FallbackConfigurationError - Invalid chain configuration
    InvalidLocaleError - Malformed locale identifier
    InvariantViolationError - Internal value consistency fault

Submodules:
    multicultural.locale_utils - Canonical names, parents, casing
    multicultural.fallback - Resolvers and global settings
    multicultural.runtime - Values, formatting, UI locale, string bridge
    multicultural.diagnostics - Error types and diagnostic codes
"""

from .constants import ANY_LOCALE, INVARIANT_LOCALE
from .diagnostics import (
    FallbackConfigurationError,
    InvalidLocaleError,
    InvariantViolationError,
    MultiCulturalError,
)
from .fallback import ChainsFallbackResolver, FallbackResolver, GlobalizationSettings
from .runtime import (
    LocalizedStr,
    MultiCulturalString,
    UILocaleScope,
    as_multicultural_string,
    as_string,
    get_localized_string,
    get_ui_locale,
    set_localized_value,
    set_ui_locale,
    to_localized_string,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("multicultural")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ANY_LOCALE",
    "INVARIANT_LOCALE",
    "ChainsFallbackResolver",
    "FallbackConfigurationError",
    "FallbackResolver",
    "GlobalizationSettings",
    "InvalidLocaleError",
    "InvariantViolationError",
    "LocalizedStr",
    "MultiCulturalError",
    "MultiCulturalString",
    "UILocaleScope",
    "__version__",
    "as_multicultural_string",
    "as_string",
    "get_localized_string",
    "get_ui_locale",
    "set_localized_value",
    "set_ui_locale",
    "to_localized_string",
]
