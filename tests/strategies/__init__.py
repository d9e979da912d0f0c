"""Hypothesis strategies for multicultural property-based testing.

Python 3.13+.
"""

from .locales import (
    LOCALE_POOL,
    chain_configurations,
    locale_codes,
    localized_texts,
    multicultural_strings,
)

__all__ = [
    "LOCALE_POOL",
    "chain_configurations",
    "locale_codes",
    "localized_texts",
    "multicultural_strings",
]
