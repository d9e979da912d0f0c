"""Current display (UI) locale.

Lookups that do not name a locale use the current UI locale. It is held in
a ContextVar, so each thread and each asyncio task sees its own value and
no global state is mutated. When nothing has been set, the system locale
(detected once) applies.

Usage:
    with UILocaleScope("de-DE"):
        title.to_string()  # German, with fallback

Python 3.13+.
"""

from __future__ import annotations

import functools
from contextvars import ContextVar, Token

from multicultural.locale_utils import get_system_locale, normalize_locale

__all__ = [
    "UILocaleScope",
    "get_ui_locale",
    "reset_ui_locale",
    "set_ui_locale",
]

_ui_locale: ContextVar[str | None] = ContextVar("multicultural_ui_locale", default=None)


@functools.lru_cache(maxsize=1)
def _system_ui_locale() -> str:
    return get_system_locale()


def get_ui_locale() -> str:
    """Return the canonical name of the current UI locale."""
    current = _ui_locale.get()
    if current is None:
        return _system_ui_locale()
    return current


def set_ui_locale(locale: str) -> Token[str | None]:
    """Set the UI locale for the current context.

    Returns:
        Token for reset_ui_locale()
    """
    return _ui_locale.set(normalize_locale(locale))


def reset_ui_locale(token: Token[str | None]) -> None:
    """Restore the UI locale in effect before the matching set_ui_locale()."""
    _ui_locale.reset(token)


class UILocaleScope:
    """Context manager that switches the UI locale for a block."""

    __slots__ = ("_locale", "_token")

    def __init__(self, locale: str) -> None:
        self._locale = normalize_locale(locale)
        self._token: Token[str | None] | None = None

    def __enter__(self) -> str:
        self._token = _ui_locale.set(self._locale)
        return self._locale

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        if self._token is not None:
            _ui_locale.reset(self._token)
            self._token = None
