"""Per-locale string formatting.

MultiCulturalString.format() and join() render one output string per
locale. While a locale is being rendered, a FormatContext is active so
that arguments able to render themselves per locale (anything satisfying
SupportsLocalizedFormat, including MultiCulturalString) produce the
matching variant.

Argument handling in LocalizedFormatter.format_field():
    - SupportsLocalizedFormat: value.format_for_locale(locale, spec, ...)
    - int/float/Decimal, date/datetime with an empty spec: Babel CLDR
      formatting for the locale (bool excluded), keeping every fraction digit
    - anything else, any non-empty spec, the invariant locale: format()

FormatContext.number_locale renders numbers and dates for a locale other
than the one whose template is being rendered.

Thread Safety:
    The active context lives in a ContextVar; formatters are created per
    render call.

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

import logging
import string
from contextvars import ContextVar, Token
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from babel import UnknownLocaleError
from babel import dates as babel_dates
from babel import numbers as babel_numbers

from multicultural.constants import INVARIANT_LOCALE
from multicultural.locale_utils import get_babel_locale, normalize_locale

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from multicultural.fallback import FallbackResolver

__all__ = [
    "FormatContext",
    "FormatContextScope",
    "LocalizedFormatter",
    "SupportsLocalizedFormat",
    "get_format_context",
    "render_for_locale",
]

logger = logging.getLogger(__name__)

_active_context: ContextVar[FormatContext | None] = ContextVar(
    "multicultural_format_context", default=None
)


@dataclass(frozen=True, slots=True)
class FormatContext:
    """Immutable per-locale formatting settings.

    Attributes:
        locale: Canonical locale being rendered
        use_fallback: Whether nested multi-locale values may fall back
        resolver: Fallback resolver for nested values (None = global default)
        number_locale: Locale for numbers and dates (None = locale)
    """

    locale: str
    use_fallback: bool = True
    resolver: FallbackResolver | None = None
    number_locale: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "locale", normalize_locale(self.locale))
        if self.number_locale is not None:
            object.__setattr__(self, "number_locale", normalize_locale(self.number_locale))

    @property
    def value_locale(self) -> str:
        """Locale that numbers and dates are rendered for."""
        return self.locale if self.number_locale is None else self.number_locale


@runtime_checkable
class SupportsLocalizedFormat(Protocol):
    """Capability of rendering oneself for a given locale."""

    def format_for_locale(
        self,
        locale: str,
        format_spec: str = "",
        *,
        use_fallback: bool = True,
        resolver: FallbackResolver | None = None,
    ) -> str:
        """Render the value for locale, applying format_spec."""
        ...  # pylint: disable=unnecessary-ellipsis


def get_format_context() -> FormatContext | None:
    """Return the FormatContext being rendered, if any."""
    return _active_context.get()


class FormatContextScope:
    """Context manager that activates a FormatContext for a block."""

    __slots__ = ("_context", "_token")

    def __init__(self, context: FormatContext) -> None:
        self._context = context
        self._token: Token[FormatContext | None] | None = None

    def __enter__(self) -> FormatContext:
        self._token = _active_context.set(self._context)
        return self._context

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        if self._token is not None:
            _active_context.reset(self._token)
            self._token = None


class LocalizedFormatter(string.Formatter):
    """str.format()-compatible formatter bound to one locale."""

    def __init__(self, context: FormatContext) -> None:
        super().__init__()
        self._context = context

    @property
    def context(self) -> FormatContext:
        """Formatting settings this formatter renders with."""
        return self._context

    def format_field(self, value: Any, format_spec: str) -> str:
        ctx = self._context
        if isinstance(value, SupportsLocalizedFormat):
            return value.format_for_locale(
                ctx.locale,
                format_spec,
                use_fallback=ctx.use_fallback,
                resolver=ctx.resolver,
            )
        if not format_spec and ctx.value_locale != INVARIANT_LOCALE:
            rendered = _format_with_babel(value, ctx.value_locale)
            if rendered is not None:
                return rendered
        return str(super().format_field(value, format_spec))


def _format_with_babel(value: object, locale: str) -> str | None:
    """Format numbers and dates with CLDR rules; None for other types."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal, date)):
        return None
    try:
        babel_locale = get_babel_locale(locale)
        match value:
            case datetime():
                return str(babel_dates.format_datetime(value, locale=babel_locale))
            case date():
                return str(babel_dates.format_date(value, locale=babel_locale))
            case _:
                return str(
                    babel_numbers.format_decimal(
                        value, locale=babel_locale, decimal_quantization=False
                    )
                )
    except (UnknownLocaleError, ValueError) as e:
        logger.warning(
            "Locale formatting of %s for '%s' failed: %s. Using default formatting",
            type(value).__name__,
            locale,
            e,
        )
        return None


def render_for_locale(
    template: str,
    args: Sequence[object],
    kwargs: Mapping[str, object],
    context: FormatContext,
) -> str:
    """Render a str.format() template for one locale.

    The context stays active during rendering, so values formatted through
    their own __format__ also see it.
    """
    with FormatContextScope(context):
        return LocalizedFormatter(context).vformat(template, args, kwargs)
