"""Locale fallback resolution.

Submodules:
    process  - FallbackResolver protocol
    chains   - ChainsFallbackResolver (anchored chains plus wildcard chain)
    settings - GlobalizationSettings (process-wide default resolver)

Python 3.13+.
"""

from multicultural.fallback.chains import ChainsFallbackResolver
from multicultural.fallback.process import FallbackResolver
from multicultural.fallback.settings import GlobalizationSettings

__all__ = [
    "ChainsFallbackResolver",
    "FallbackResolver",
    "GlobalizationSettings",
]
