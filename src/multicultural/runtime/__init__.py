"""Runtime: multi-locale values, per-locale formatting and the string bridge.

Submodules:
    value      - MultiCulturalString (immutable locale -> text mapping)
    formatting - FormatContext, LocalizedFormatter, SupportsLocalizedFormat
    ui_locale  - Current UI locale (ContextVar-backed)
    bridge     - Identity-keyed weak cache linking str objects to values

Python 3.13+.
"""

from .bridge import (
    LocalizedStr,
    as_multicultural_string,
    as_string,
    get_localized_string,
    set_localized_value,
    to_localized_string,
)
from .formatting import FormatContext, LocalizedFormatter, SupportsLocalizedFormat
from .ui_locale import UILocaleScope, get_ui_locale, reset_ui_locale, set_ui_locale
from .value import MultiCulturalString

__all__ = [
    "FormatContext",
    "LocalizedFormatter",
    "LocalizedStr",
    "MultiCulturalString",
    "SupportsLocalizedFormat",
    "UILocaleScope",
    "as_multicultural_string",
    "as_string",
    "get_localized_string",
    "get_ui_locale",
    "reset_ui_locale",
    "set_localized_value",
    "set_ui_locale",
    "to_localized_string",
]
