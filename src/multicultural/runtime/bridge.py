"""Treat plain strings as multi-locale values.

Strings have no slot for extra data, so locale variants are attached to a
string object through a side table keyed by the object's identity (not its
content). An entry lives only as long as its key string is reachable; it
is evicted by a weakref callback afterwards.

    >>> label = set_localized_value("Save", "Speichern", "de")
    >>> to_localized_string(label, "de")
    'Speichern'
    >>> to_localized_string(label, "en")  # original text, if UI locale is en
    'Save'

as_string() returns a LocalizedStr: a fresh str subclass instance that can
be weakly referenced and therefore serves as its own cache key. Plain
built-in str instances cannot be weakly referenced; for them the cache is
never populated and every lookup builds a fresh single-locale value.

The table is an opportunistic cache, never a source of truth: a miss
always means "create fresh".

Thread Safety:
    All table operations run under an RLock. Insert-if-absent is a single
    locked step, so racing callers share one holder per key identity.
    Eviction callbacks may run on any thread during garbage collection.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import weakref
from threading import RLock
from typing import TYPE_CHECKING

from multicultural.runtime.ui_locale import get_ui_locale
from multicultural.runtime.value import MultiCulturalString

if TYPE_CHECKING:
    from multicultural.fallback import FallbackResolver

__all__ = [
    "LocalizedStr",
    "as_multicultural_string",
    "as_string",
    "bridge_cache_size",
    "clear_bridge_cache",
    "get_localized_string",
    "set_localized_value",
    "to_localized_string",
]

logger = logging.getLogger(__name__)


class LocalizedStr(str):
    """A str that can carry locale variants through the bridge.

    Behaves exactly like str; string operations return plain str.
    """


class _ValueHolder:
    """Mutable cell holding the current value for one key string."""

    __slots__ = ("value",)

    def __init__(self, value: MultiCulturalString) -> None:
        self.value = value


class _IdentityWeakTable:
    """Maps live objects to holders by identity.

    Entries are (weak reference, holder) pairs keyed by id(). The weak
    reference is checked on every read so a recycled id never matches a
    dead key.
    """

    __slots__ = ("__weakref__", "_entries", "_lock")

    def __init__(self) -> None:
        self._entries: dict[int, tuple[weakref.ref[str], _ValueHolder]] = {}
        self._lock = RLock()

    def get(self, key: str) -> _ValueHolder | None:
        with self._lock:
            entry = self._entries.get(id(key))
            if entry is not None and entry[0]() is key:
                return entry[1]
            return None

    def setdefault(self, key: str, value: MultiCulturalString) -> _ValueHolder:
        """Return the holder for key, inserting one holding value if absent.

        Raises:
            TypeError: If key does not support weak references
        """
        with self._lock:
            holder = self.get(key)
            if holder is None:
                holder = _ValueHolder(value)
                self._insert(key, holder)
            return holder

    def assign(self, key: str, value: MultiCulturalString) -> None:
        """Make key's holder hold value, creating the holder if needed."""
        with self._lock:
            holder = self.get(key)
            if holder is None:
                self._insert(key, _ValueHolder(value))
            else:
                holder.value = value

    def _insert(self, key: str, holder: _ValueHolder) -> None:
        key_id = id(key)
        ref = weakref.ref(key, functools.partial(_evict, weakref.ref(self), key_id))
        self._entries[key_id] = (ref, holder)
        logger.debug("Bridge entry created for string id %#x", key_id)

    def discard(self, key_id: int, ref: weakref.ref[str]) -> None:
        with self._lock:
            entry = self._entries.get(key_id)
            if entry is not None and entry[0] is ref:
                del self._entries[key_id]
                logger.debug("Bridge entry evicted for string id %#x", key_id)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


def _evict(
    table_ref: weakref.ref[_IdentityWeakTable], key_id: int, ref: weakref.ref[str]
) -> None:
    table = table_ref()
    if table is not None:
        table.discard(key_id, ref)


_holders = _IdentityWeakTable()


def as_multicultural_string(source: str | None) -> MultiCulturalString:
    """View a string as a multi-locale value.

    Returns the value attached to this exact string object if there is one;
    otherwise a value mapping the current UI locale to the string, which is
    attached to the object when it supports weak references.

    Args:
        source: String to view; None gives MultiCulturalString.EMPTY
    """
    if source is None:
        return MultiCulturalString.EMPTY

    holder = _holders.get(source)
    if holder is not None:
        return holder.value

    value = MultiCulturalString.EMPTY.set_localized_string(get_ui_locale(), source)
    try:
        return _holders.setdefault(source, value).value
    except TypeError:
        # Built-in str cannot be weakly referenced; nothing to attach to.
        return value


def as_string(value: MultiCulturalString) -> LocalizedStr:
    """Convert a multi-locale value to a string that remembers it.

    The result is the value's text for the current UI locale (with
    fallback, "" if none) as a fresh LocalizedStr object, so that
    as_multicultural_string() on that exact object returns value.

    Raises:
        TypeError: If value is not a MultiCulturalString
    """
    if not isinstance(value, MultiCulturalString):
        msg = f"as_string() requires a MultiCulturalString, got {type(value).__name__}"
        raise TypeError(msg)

    key = LocalizedStr(value.to_string())
    _holders.assign(key, value)
    return key


def set_localized_value(
    source: str | None, text: str | None, locale: str | None = None
) -> LocalizedStr:
    """Return a string carrying source's variants with locale set to text.

    Args:
        source: String whose variants are extended (None = no variants)
        text: Text for locale; None removes the locale
        locale: Target locale; None means the current UI locale
    """
    target = get_ui_locale() if locale is None else locale
    return as_string(as_multicultural_string(source).set_localized_string(target, text))


def to_localized_string(
    source: str | None,
    locale: str | None = None,
    *,
    use_fallback: bool = True,
    resolver: FallbackResolver | None = None,
) -> str:
    """Resolve a string's variant for locale; "" if none resolves."""
    return as_multicultural_string(source).to_string(
        locale, use_fallback=use_fallback, resolver=resolver
    )


def get_localized_string(
    source: str | None,
    locale: str | None = None,
    *,
    use_fallback: bool = True,
    resolver: FallbackResolver | None = None,
) -> str | None:
    """Resolve a string's variant for locale; None if none resolves."""
    return as_multicultural_string(source).get_string(
        locale, use_fallback=use_fallback, resolver=resolver
    )


def bridge_cache_size() -> int:
    """Number of live bridge entries (for diagnostics and tests)."""
    return len(_holders)


def clear_bridge_cache() -> None:
    """Drop all bridge entries."""
    _holders.clear()
