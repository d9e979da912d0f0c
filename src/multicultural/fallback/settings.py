"""Process-wide globalization settings.

Holds the fallback resolver used by MultiCulturalString lookups when the
caller does not pass one explicitly. Host applications may install a
custom resolver at start-up:

    GlobalizationSettings.current().fallback_resolver = (
        ChainsFallbackResolver.from_strings(["*,en"])
    )

Passing a resolver to each lookup remains the preferred style; the
singleton is a convenience for simple callers.

Thread Safety:
    The singleton is created once under a class-level RLock (double-checked),
    so racing first callers observe the same instance. Resolver replacement
    is a single attribute store.

Python 3.13+.
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import ClassVar

from multicultural.constants import ANY_LOCALE, INVARIANT_LOCALE
from multicultural.fallback.chains import ChainsFallbackResolver
from multicultural.fallback.process import FallbackResolver

__all__ = ["GlobalizationSettings"]

logger = logging.getLogger(__name__)

# Standard hierarchy walk with no chain overrides.
_DEFAULT_FALLBACK: FallbackResolver = ChainsFallbackResolver([[ANY_LOCALE, INVARIANT_LOCALE]])


class GlobalizationSettings:
    """Globalization settings for multi-locale values.

    Use GlobalizationSettings.current() to obtain the process-wide instance.
    """

    _instance: ClassVar[GlobalizationSettings | None] = None
    _instance_lock: ClassVar[RLock] = RLock()

    __slots__ = ("_fallback_resolver",)

    def __init__(self) -> None:
        self._fallback_resolver: FallbackResolver | None = None

    @classmethod
    def current(cls) -> GlobalizationSettings:
        """Get the process-wide settings instance, creating it on first use."""
        instance = cls._instance
        if instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
                    logger.debug("Globalization settings initialized")
                instance = cls._instance
        return instance

    @staticmethod
    def get_default_fallback() -> FallbackResolver:
        """Return the built-in resolver (plain hierarchy walk)."""
        return _DEFAULT_FALLBACK

    @property
    def fallback_resolver(self) -> FallbackResolver:
        """Resolver used when a lookup does not supply one. Never None."""
        if self._fallback_resolver is None:
            return _DEFAULT_FALLBACK
        return self._fallback_resolver

    @fallback_resolver.setter
    def fallback_resolver(self, resolver: FallbackResolver) -> None:
        if resolver is None:
            msg = "fallback_resolver cannot be None; use reset_fallback_resolver()"
            raise TypeError(msg)
        self._fallback_resolver = resolver
        logger.debug("Default fallback resolver replaced: %r", resolver)

    @property
    def has_custom_resolver(self) -> bool:
        """True if the host application installed its own resolver."""
        return self._fallback_resolver is not None

    def reset_fallback_resolver(self) -> None:
        """Restore the built-in resolver."""
        self._fallback_resolver = None
