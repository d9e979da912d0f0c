"""Fallback Chains Example - Configuring Locale Fallback.

Demonstrates how lookups walk the locale hierarchy and how chains override
where the walk continues.

Scenarios covered:
1. Default behavior: plain hierarchy walk (de-AT -> de -> invariant)
2. Anchored chains: French regions fall back to Canadian French
3. Wildcard chain: everything else falls back to English
4. Installing a process-wide resolver
5. Custom resolver objects

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Sequence

from multicultural import (
    ChainsFallbackResolver,
    FallbackConfigurationError,
    GlobalizationSettings,
    MultiCulturalString,
)
from multicultural.locale_utils import locale_hierarchy

CATALOG = MultiCulturalString(
    {
        "": "Checkout",
        "en": "Checkout",
        "fr-CA": "Caisse",
        "es-419": "Pagar",
        "lv": "Kase",
    }
)


def example_1_hierarchy() -> None:
    """Example 1: Hierarchy walk with the built-in resolver."""
    print("=" * 60)
    print("Example 1: Locale hierarchy")
    print("=" * 60)

    for code in ("de-AT", "es-MX", "en-AU", "lv-LV"):
        print(f"  {code:6} hierarchy: {locale_hierarchy(code)}")
        print(f"  {code:6} resolves:  {CATALOG.get_string(code)}")


def example_2_chains() -> None:
    """Example 2: Anchored and wildcard chains."""
    print("\n" + "=" * 60)
    print("Example 2: Chains {fr: [fr-CA], *: [en]}")
    print("=" * 60)

    resolver = ChainsFallbackResolver([["fr", "fr-CA"], ["*", "en"]])
    print(f"  {resolver!r}")
    for code in ("fr-FR", "fr-BE", "de-DE", "ja"):
        chain = resolver.get_fallback_chain(code)
        text = CATALOG.get_string(code, resolver=resolver)
        print(f"  {code:6} chain: {chain} -> {text}")


def example_3_string_configuration() -> None:
    """Example 3: Chains from configuration strings, and validation."""
    print("\n" + "=" * 60)
    print("Example 3: String configuration")
    print("=" * 60)

    resolver = ChainsFallbackResolver.from_strings(["lt,lv", "et,lv", "*,en"])
    print(f"  lt-LT resolves: {CATALOG.get_string('lt-LT', resolver=resolver)}")

    try:
        ChainsFallbackResolver.from_strings(["lt,lv", "lt,en"])
    except FallbackConfigurationError as e:
        print("  Rejected configuration:")
        for line in str(e).splitlines():
            print(f"    {line}")


def example_4_global_resolver() -> None:
    """Example 4: Installing a process-wide resolver."""
    print("\n" + "=" * 60)
    print("Example 4: GlobalizationSettings")
    print("=" * 60)

    settings = GlobalizationSettings.current()
    print(f"  ja (default resolver):  {CATALOG.get_string('ja-JP')}")
    settings.fallback_resolver = ChainsFallbackResolver.from_strings(["*,lv"])
    try:
        print(f"  ja (custom '*,lv'):      {CATALOG.get_string('ja-JP')}")
    finally:
        settings.reset_fallback_resolver()


class PreferredLanguagesResolver:
    """Resolver that tries a user's preferred languages after the request."""

    def __init__(self, preferred: Sequence[str]) -> None:
        self._preferred = tuple(preferred)

    def get_fallback_chain(self, locale: str) -> Sequence[str]:
        return (*locale_hierarchy(locale)[:-1], *self._preferred)


def example_5_custom_resolver() -> None:
    """Example 5: Any object with get_fallback_chain() is a resolver."""
    print("\n" + "=" * 60)
    print("Example 5: Custom resolver")
    print("=" * 60)

    resolver = PreferredLanguagesResolver(["lv", "en"])
    print(f"  de-CH chain: {resolver.get_fallback_chain('de-CH')}")
    print(f"  de-CH resolves: {CATALOG.get_string('de-CH', resolver=resolver)}")


if __name__ == "__main__":
    example_1_hierarchy()
    example_2_chains()
    example_3_string_configuration()
    example_4_global_resolver()
    example_5_custom_resolver()

    print("\n" + "=" * 60)
    print("[SUCCESS] All fallback examples completed!")
    print("=" * 60)
