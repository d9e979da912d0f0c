"""Locale utilities: canonical names, the parent hierarchy and casing.

Centralizes locale handling used throughout the codebase. Every public
entry point normalizes locale identifiers with normalize_locale() so that
"en_us", "EN-US" and "en-US" all compare equal and hit the same cache
entries.

Hierarchy:
    Each locale has exactly one parent, progressively more general, ending
    at the invariant root ("") which is its own parent. Parents come from
    CLDR parent exceptions shipped with Babel (e.g. en-AU -> en-001) and
    otherwise from dropping the last subtag (fr-CA -> fr, fr -> "").

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

from multicultural.constants import DEFAULT_LOCALE, INVARIANT_LOCALE, MAX_LOCALE_CACHE_SIZE
from multicultural.diagnostics import ErrorTemplate, InvalidLocaleError

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_parent_locale",
    "get_system_locale",
    "is_invariant_locale",
    "locale_hierarchy",
    "lower_for_locale",
    "normalize_locale",
    "to_posix_locale",
    "upper_for_locale",
]

logger = logging.getLogger(__name__)

# Identifiers that name the root locale rather than a language.
_ROOT_ALIASES = frozenset({"", "root", "und", "invariant"})

# Languages whose casing of the letter i differs from the Unicode default.
_TURKIC_LANGUAGES = frozenset({"tr", "az"})
_TURKIC_LOWER = str.maketrans({"I": "ı", "İ": "i"})
_TURKIC_UPPER = str.maketrans({"i": "İ"})


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def normalize_locale(locale_code: str) -> str:
    """Convert a locale identifier to its canonical BCP-47 name.

    Accepts both BCP-47 (hyphen) and POSIX (underscore) separators and
    fixes the case of every subtag. Encoding suffixes (".UTF-8") are
    dropped. Root aliases ("", "root", "und") map to the invariant locale.

    Args:
        locale_code: Locale identifier (e.g., "en_us", "zh-hant-tw")

    Returns:
        Canonical name (e.g., "en-US", "zh-Hant-TW", "")

    Raises:
        TypeError: If locale_code is not a string
        InvalidLocaleError: If the identifier is malformed

    Example:
        >>> normalize_locale("en_us")
        'en-US'
        >>> normalize_locale("root")
        ''
    """
    if not isinstance(locale_code, str):
        msg = f"Locale identifier must be a string, got {type(locale_code).__name__}"
        raise TypeError(msg)

    stripped = locale_code.strip()
    if stripped.lower() in _ROOT_ALIASES:
        return INVARIANT_LOCALE

    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel.core import get_locale_identifier, parse_locale  # noqa: PLC0415

    try:
        parts = parse_locale(stripped.replace("-", "_"))
    except ValueError as e:
        raise InvalidLocaleError(ErrorTemplate.invalid_locale(locale_code, str(e))) from None
    return get_locale_identifier(parts[:4], sep="-")


def to_posix_locale(locale_code: str) -> str:
    """Convert a locale identifier to the POSIX form used by Babel.

    Example:
        >>> to_posix_locale("en-US")
        'en_US'
        >>> to_posix_locale("")
        'root'
    """
    canonical = normalize_locale(locale_code)
    if canonical == INVARIANT_LOCALE:
        return "root"
    return canonical.replace("-", "_")


def is_invariant_locale(locale_code: str) -> bool:
    """Return True iff locale_code names the invariant root locale."""
    return normalize_locale(locale_code) == INVARIANT_LOCALE


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_parent_locale(locale_code: str) -> str:
    """Get the next more general locale.

    Consults CLDR parent exceptions first (so en-AU falls back through
    en-001 and es-MX through es-419), then drops the last subtag.

    Args:
        locale_code: Locale identifier in any accepted form

    Returns:
        Canonical parent name; the invariant root is its own parent

    Example:
        >>> get_parent_locale("fr-CA")
        'fr'
        >>> get_parent_locale("fr")
        ''
        >>> get_parent_locale("")
        ''
    """
    canonical = normalize_locale(locale_code)
    if canonical == INVARIANT_LOCALE:
        return INVARIANT_LOCALE

    from babel.core import get_global  # noqa: PLC0415

    posix = canonical.replace("-", "_")
    exception = get_global("parent_exceptions").get(posix)
    if exception:
        return normalize_locale(exception)

    parts = canonical.split("-")
    if len(parts) == 1:
        return INVARIANT_LOCALE
    return "-".join(parts[:-1])


def locale_hierarchy(locale_code: str) -> tuple[str, ...]:
    """List a locale and all of its ancestors, ending with the invariant root.

    Example:
        >>> locale_hierarchy("de-DE")
        ('de-DE', 'de', '')
    """
    current = normalize_locale(locale_code)
    chain = [current]
    while current != INVARIANT_LOCALE:
        current = get_parent_locale(current)
        chain.append(current)
    return tuple(chain)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. Thread-safe via
    lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        InvalidLocaleError: If locale format is invalid
    """
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(to_posix_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the normalization, parent and Babel locale caches."""
    normalize_locale.cache_clear()
    get_parent_locale.cache_clear()
    get_babel_locale.cache_clear()


def lower_for_locale(text: str, locale_code: str) -> str:
    """Lowercase text using the casing rules of the given locale.

    Example:
        >>> lower_for_locale("ISTANBUL", "tr-TR")
        'ıstanbul'
        >>> lower_for_locale("ISTANBUL", "en-US")
        'istanbul'
    """
    if _language_of(locale_code) in _TURKIC_LANGUAGES:
        text = text.translate(_TURKIC_LOWER)
    return text.lower()


def upper_for_locale(text: str, locale_code: str) -> str:
    """Uppercase text using the casing rules of the given locale.

    Example:
        >>> upper_for_locale("istanbul", "tr")
        'İSTANBUL'
    """
    if _language_of(locale_code) in _TURKIC_LANGUAGES:
        text = text.translate(_TURKIC_UPPER)
    return text.upper()


def _language_of(locale_code: str) -> str:
    return normalize_locale(locale_code).split("-", 1)[0]


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales and values that cannot be
    parsed as locale identifiers.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return DEFAULT_LOCALE.

    Returns:
        Detected locale in canonical BCP-47 form.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    candidates: list[str] = []
    try:
        system_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        system_locale = None
    if system_locale:
        candidates.append(system_locale)
    candidates.extend(
        value for var in ("LC_ALL", "LC_MESSAGES", "LANG") if (value := os.environ.get(var))
    )

    for candidate in candidates:
        code = candidate.split(".")[0]
        if code in ("C", "POSIX", ""):
            continue
        try:
            return normalize_locale(code)
        except InvalidLocaleError:
            logger.warning("Ignoring unparseable system locale '%s'", candidate)

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return DEFAULT_LOCALE
