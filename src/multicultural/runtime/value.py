"""Immutable multi-locale string value.

A MultiCulturalString holds one text per locale and resolves "the" text for
a requested locale through a fallback resolver:

    >>> title = MultiCulturalString({"en": "Settings", "de": "Einstellungen"})
    >>> title.get_string("de-AT")
    'Einstellungen'
    >>> title.get_string("fr-FR") is None
    True

Every mutator returns a new instance. None is never stored: passing None as
the text for a locale removes that locale instead.

Lookup:
    get_string() returns None when no locale in the fallback chain has a
    value; to_string() returns "" in that case. Callers that must tell
    "explicitly empty" from "missing" use get_string().

Thread Safety:
    Instances are immutable and safe for unsynchronized concurrent reads.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, ClassVar, TypeAlias

from multicultural.constants import DEBUG_DISPLAY_MAX_LENGTH, DEBUG_DISPLAY_THRESHOLD
from multicultural.diagnostics import ErrorTemplate, InvariantViolationError
from multicultural.fallback.settings import GlobalizationSettings
from multicultural.locale_utils import lower_for_locale, normalize_locale, upper_for_locale
from multicultural.runtime.formatting import FormatContext, get_format_context, render_for_locale
from multicultural.runtime.ui_locale import get_ui_locale

if TYPE_CHECKING:
    from collections.abc import Callable

    from multicultural.fallback import FallbackResolver

__all__ = ["MultiCulturalString"]

LocalizedPairs: TypeAlias = Iterable[tuple[str, str | None]] | Mapping[str, str | None]


class MultiCulturalString:
    """Immutable mapping from locale to text.

    Construct from a mapping or from (locale, text) pairs. Locale names are
    normalized ("en_us" and "en-US" are the same key); pairs with a None
    text are skipped; for repeated locales the last pair wins.

    Two values are equal iff their stored mappings are equal. Fallback is
    never taken into account for equality.

    Attributes:
        EMPTY: Shared value in which no locale has a text
    """

    EMPTY: ClassVar[MultiCulturalString]

    __slots__ = ("_localized",)

    def __init__(self, localized_strings: LocalizedPairs | None = None) -> None:
        """Create a value from locale/text pairs.

        Args:
            localized_strings: Mapping or iterable of (locale, text) pairs

        Raises:
            TypeError: If a locale is not a string or a text is neither a
                string nor None
            InvalidLocaleError: If a locale identifier is malformed
        """
        if localized_strings is None:
            items: Iterable[tuple[str, str | None]] = ()
        elif isinstance(localized_strings, Mapping):
            items = localized_strings.items()
        else:
            items = localized_strings

        data: dict[str, str] = {}
        for locale, text in items:
            if text is None:
                continue
            data[normalize_locale(locale)] = _coerce_text(text)
        self._localized: dict[str, str] = data

    @classmethod
    def _from_trusted(cls, data: dict[str, str]) -> MultiCulturalString:
        """Wrap an already normalized dict without copying it."""
        instance = cls.__new__(cls)
        instance._localized = data
        instance._check_invariants()
        return instance

    def _check_invariants(self) -> None:
        for locale, text in self._localized.items():
            if text is None:
                raise InvariantViolationError(ErrorTemplate.null_value_stored(locale))

    @classmethod
    def of(cls, locale: str, text: str | None) -> MultiCulturalString:
        """Create a value with a single locale (EMPTY if text is None)."""
        return cls(((locale, text),))

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str | None]]) -> MultiCulturalString:
        """Rebuild a value from a flat sequence of (locale, text) pairs.

        The last pair for a repeated locale wins.
        """
        return cls(pairs)

    def to_pairs(self) -> tuple[tuple[str, str], ...]:
        """Serialize as a flat tuple of (locale, text) pairs."""
        return tuple(self._localized.items())

    @classmethod
    def from_dict(cls, data: Mapping[str, str | None]) -> MultiCulturalString:
        """Rebuild a value from a locale -> text mapping (e.g. decoded JSON)."""
        return cls(data)

    def to_dict(self) -> dict[str, str]:
        """Return a fresh locale -> text dict, suitable for JSON encoding."""
        return dict(self._localized)

    def __reduce__(self) -> tuple[Any, ...]:
        return (MultiCulturalString.from_pairs, (self.to_pairs(),))

    # ------------------------------------------------------------------
    # Static helpers
    # ------------------------------------------------------------------

    @staticmethod
    def is_null_or_empty(value: MultiCulturalString | None) -> bool:
        """True if value is None or every stored text is empty."""
        return value is None or value.is_empty

    @staticmethod
    def is_null_or_whitespace(value: MultiCulturalString | None) -> bool:
        """True if value is None or every stored text is blank."""
        return value is None or value.is_whitespace

    @classmethod
    def format(
        cls,
        template: MultiCulturalString,
        *args: object,
        resolver: FallbackResolver | None = None,
        number_locale: str | None = None,
        **kwargs: object,
    ) -> MultiCulturalString:
        """Format a multi-locale template once per locale.

        Each locale's template text is rendered with str.format() syntax.
        Arguments that render themselves per locale (other multi-locale
        values) produce their variant for that locale; numbers and dates
        use the locale's CLDR formats.

        Args:
            template: Template with one format string per locale
            *args: Positional format arguments
            resolver: Fallback resolver for nested multi-locale arguments
            number_locale: Locale for numbers and dates in every output
                (None = each template locale; "" = plain Python formatting)
            **kwargs: Keyword format arguments

        Returns:
            Value with the same locale set as template

        Example:
            >>> greeting = MultiCulturalString({"en": "Hello, {0}!", "de": "Hallo, {0}!"})
            >>> MultiCulturalString.format(greeting, "Anna").to_dict()
            {'en': 'Hello, Anna!', 'de': 'Hallo, Anna!'}
        """
        if not isinstance(template, MultiCulturalString):
            msg = f"template must be a MultiCulturalString, got {type(template).__name__}"
            raise TypeError(msg)

        result: dict[str, str] = {}
        for locale, text in template._localized.items():
            context = FormatContext(locale, resolver=resolver, number_locale=number_locale)
            result[locale] = render_for_locale(text, args, kwargs, context)
        return cls._from_trusted(result)

    @classmethod
    def join(
        cls,
        separator: MultiCulturalString,
        args: Iterable[object],
        *,
        resolver: FallbackResolver | None = None,
        number_locale: str | None = None,
    ) -> MultiCulturalString:
        """Join arguments with each locale's variant of separator.

        Arguments are rendered per locale as by format() with "{0}".

        Example:
            >>> comma = MultiCulturalString({"en": ", ", "ja": "、"})
            >>> MultiCulturalString.join(comma, ["a", "b"]).get_string("ja")
            'a、b'
        """
        if not isinstance(separator, MultiCulturalString):
            msg = f"separator must be a MultiCulturalString, got {type(separator).__name__}"
            raise TypeError(msg)

        items = list(args)
        result: dict[str, str] = {}
        for locale, text in separator._localized.items():
            context = FormatContext(locale, resolver=resolver, number_locale=number_locale)
            parts = [render_for_locale("{0}", (item,), {}, context) for item in items]
            result[locale] = text.join(parts)
        return cls._from_trusted(result)

    # ------------------------------------------------------------------
    # Transformations (all return new instances)
    # ------------------------------------------------------------------

    def set_localized_string(self, locale: str, text: str | None) -> MultiCulturalString:
        """Return a copy with locale set to text, or removed if text is None.

        Raises:
            TypeError: If locale is None or text is not a string
        """
        canonical = normalize_locale(locale)
        data = dict(self._localized)
        if text is None:
            data.pop(canonical, None)
        else:
            data[canonical] = _coerce_text(text)
        return MultiCulturalString._from_trusted(data)

    def merge_with(self, other: MultiCulturalString) -> MultiCulturalString:
        """Return the union of both values; this value wins on collisions.

        Raises:
            TypeError: If other is not a MultiCulturalString
        """
        if not isinstance(other, MultiCulturalString):
            msg = f"Cannot merge with {type(other).__name__}; expected MultiCulturalString"
            raise TypeError(msg)
        return MultiCulturalString._from_trusted({**other._localized, **self._localized})

    def lower(self) -> MultiCulturalString:
        """Lowercase every text with the casing rules of its own locale."""
        return MultiCulturalString._from_trusted(
            {locale: lower_for_locale(text, locale) for locale, text in self._localized.items()}
        )

    def upper(self) -> MultiCulturalString:
        """Uppercase every text with the casing rules of its own locale."""
        return MultiCulturalString._from_trusted(
            {locale: upper_for_locale(text, locale) for locale, text in self._localized.items()}
        )

    def pad_left(self, width: int, fill: str = " ") -> MultiCulturalString:
        """Right-align each locale's resolved text in a field of width."""
        _check_padding(width, fill)
        return self._map_resolved(lambda text: text.rjust(width, fill))

    def pad_right(self, width: int, fill: str = " ") -> MultiCulturalString:
        """Left-align each locale's resolved text in a field of width."""
        _check_padding(width, fill)
        return self._map_resolved(lambda text: text.ljust(width, fill))

    def _map_resolved(self, transform: Callable[[str], str]) -> MultiCulturalString:
        # Operates on the text each stored locale resolves to with fallback,
        # which a custom resolver may draw from a different locale.
        data: dict[str, str] = {}
        for locale in self._localized:
            resolved = self.get_string(locale)
            if resolved is not None:
                data[locale] = transform(resolved)
        return MultiCulturalString._from_trusted(data)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @property
    def locales(self) -> tuple[str, ...]:
        """Canonical names of the stored locales, in insertion order."""
        return tuple(self._localized)

    @property
    def is_empty(self) -> bool:
        """True if every stored text is empty (vacuously true for EMPTY)."""
        return all(not text for text in self._localized.values())

    @property
    def is_whitespace(self) -> bool:
        """True if every stored text is empty or whitespace only."""
        return all(not text.strip() for text in self._localized.values())

    def contains_locale(self, locale: str) -> bool:
        """Exact membership test; no fallback."""
        return normalize_locale(locale) in self._localized

    def __contains__(self, locale: object) -> bool:
        return isinstance(locale, str) and self.contains_locale(locale)

    def get_string(
        self,
        locale: str | None = None,
        *,
        use_fallback: bool = True,
        resolver: FallbackResolver | None = None,
    ) -> str | None:
        """Resolve the best text for a locale.

        Args:
            locale: Requested locale; None means the current UI locale
            use_fallback: If False, only the exact locale is consulted
            resolver: Fallback resolver; None means the global default

        Returns:
            Text of the first locale in the fallback chain present in this
            value, or None if there is none
        """
        requested = get_ui_locale() if locale is None else normalize_locale(locale)
        if not use_fallback:
            return self._localized.get(requested)

        if resolver is None:
            resolver = GlobalizationSettings.current().fallback_resolver
        for candidate in resolver.get_fallback_chain(requested):
            text = self._localized.get(normalize_locale(candidate))
            if text is not None:
                return text
        return None

    def to_string(
        self,
        locale: str | None = None,
        *,
        use_fallback: bool = True,
        resolver: FallbackResolver | None = None,
    ) -> str:
        """Like get_string(), but returns "" instead of None."""
        text = self.get_string(locale, use_fallback=use_fallback, resolver=resolver)
        return "" if text is None else text

    def format_for_locale(
        self,
        locale: str,
        format_spec: str = "",
        *,
        use_fallback: bool = True,
        resolver: FallbackResolver | None = None,
    ) -> str:
        """Render the variant for locale, applying a str.format() spec."""
        text = self.to_string(locale, use_fallback=use_fallback, resolver=resolver)
        return format(text, format_spec)

    def __format__(self, format_spec: str) -> str:
        context = get_format_context()
        if context is None:
            return self.format_for_locale(get_ui_locale(), format_spec)
        return self.format_for_locale(
            context.locale,
            format_spec,
            use_fallback=context.use_fallback,
            resolver=context.resolver,
        )

    def __str__(self) -> str:
        context = get_format_context()
        if context is None:
            return self.to_string()
        return self.to_string(
            context.locale, use_fallback=context.use_fallback, resolver=context.resolver
        )

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, MultiCulturalString):
            return NotImplemented
        return self._localized == other._localized

    def __hash__(self) -> int:
        return hash(frozenset(self._localized.items()))

    def __repr__(self) -> str:
        if not self._localized:
            return "MultiCulturalString(Empty)"

        shown = [
            f"{locale or 'invariant'}: {text[:DEBUG_DISPLAY_MAX_LENGTH]!r}"
            for locale, text in list(self._localized.items())[:DEBUG_DISPLAY_THRESHOLD]
        ]
        if len(self._localized) > DEBUG_DISPLAY_THRESHOLD:
            shown.append(f"... (Count = {len(self._localized)})")
        return f"MultiCulturalString({', '.join(shown)})"


MultiCulturalString.EMPTY = MultiCulturalString()


def _coerce_text(text: object) -> str:
    """Return text as an exact str; str subclasses are copied."""
    if type(text) is str:
        return text
    if isinstance(text, str):
        return str.__str__(text)
    msg = f"Localized text must be a string or None, got {type(text).__name__}"
    raise TypeError(msg)


def _check_padding(width: int, fill: str) -> None:
    if width < 0:
        msg = f"Padding width must be >= 0, got {width}"
        raise ValueError(msg)
    if len(fill) != 1:
        msg = f"Padding fill must be exactly one character, got {fill!r}"
        raise ValueError(msg)
