"""Fallback resolver protocol.

A fallback resolver turns a requested locale into the ordered sequence of
locales to probe when looking up a localized value.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ["FallbackResolver"]


@runtime_checkable
class FallbackResolver(Protocol):
    """Protocol for locale fallback policies.

    This is a Protocol (structural typing) rather than ABC so applications
    can plug in any object with a matching get_fallback_chain() method.

    Example:
        >>> class EnglishLast:
        ...     def get_fallback_chain(self, locale: str) -> tuple[str, ...]:
        ...         return (locale, "en")
        ...
        >>> value.get_string("de-DE", resolver=EnglishLast())
    """

    def get_fallback_chain(self, locale: str) -> Sequence[str]:
        """Return the locales to probe for the requested locale, in order.

        Args:
            locale: Requested locale (any accepted identifier form)

        Returns:
            Finite sequence of canonical locale names; recomputed per call
        """
        ...  # pylint: disable=unnecessary-ellipsis
