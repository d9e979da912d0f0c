"""multicultural Quick Start Examples.

Demonstrates the core operations on multi-locale strings:
1. Creating values and resolving a variant for a locale
2. Adding, replacing and removing locales
3. Merging, casing and padding
4. Per-locale formatting with nested values and CLDR numbers
5. Viewing plain strings as multi-locale values

Python 3.13+.
"""

from __future__ import annotations

import json
from decimal import Decimal

from multicultural import (
    MultiCulturalString,
    UILocaleScope,
    as_multicultural_string,
    set_localized_value,
    to_localized_string,
)

# Example 1: Creating a value and resolving variants
print("Example 1: Resolving variants")
title = MultiCulturalString({"en": "Settings", "de": "Einstellungen", "lv": "Iestatījumi"})
print(f"  de-AT -> {title.get_string('de-AT')}")  # falls back to de
print(f"  lv    -> {title.get_string('lv')}")
print(f"  ja    -> {title.get_string('ja')!r}")  # None: no variant in the hierarchy
print(f"  ja    -> {title.to_string('ja')!r} (to_string)")
print(f"  de-AT (exact only) -> {title.get_string('de-AT', use_fallback=False)!r}")
print(f"  {title!r}")

# Example 2: Values are immutable; mutators return new instances
print("\nExample 2: Adding and removing locales")
with_french = title.set_localized_string("fr", "Paramètres")
without_german = with_french.set_localized_string("de", None)
print(f"  original locales: {title.locales}")
print(f"  after set fr:     {with_french.locales}")
print(f"  after remove de:  {without_german.locales}")

# Example 3: Merge, casing and padding
print("\nExample 3: Merge, casing and padding")
defaults = MultiCulturalString({"en": "City", "tr": "şehir"})
overrides = MultiCulturalString({"tr": "istanbul"})
merged = overrides.merge_with(defaults)
print(f"  merged:  {merged.to_dict()}")
print(f"  upper:   {merged.upper().to_dict()}")  # Turkish dotted İ
print(f"  padded:  {merged.pad_left(10, '.').to_dict()}")

# Example 4: Formatting once per locale
print("\nExample 4: Per-locale formatting")
template = MultiCulturalString({"en": "{0} costs {1}", "de": "{0} kostet {1}"})
product = MultiCulturalString({"en": "The book", "de": "Das Buch"})
price = MultiCulturalString.format(template, product, Decimal("1234.5"))
print(f"  en: {price.get_string('en')}")
print(f"  de: {price.get_string('de')}")

separator = MultiCulturalString({"en": ", ", "ja": "、"})
print(f"  joined (ja): {MultiCulturalString.join(separator, ['a', 'b', 'c']).get_string('ja')}")

with UILocaleScope("de-DE"):
    print(f"  f-string under de-DE: {title}")

# Example 5: Plain strings that carry variants
print("\nExample 5: Strings with attached variants")
with UILocaleScope("en"):
    label = set_localized_value("Save", "Speichern", "de")
    label = set_localized_value(label, "Saglabāt", "lv")
    print(f"  label as str: {label}")
    print(f"  label in lv:  {to_localized_string(label, 'lv')}")
    print(f"  all variants: {as_multicultural_string(label).to_dict()}")

# Values serialize as plain locale -> text mappings
encoded = json.dumps(title.to_dict(), ensure_ascii=False)
print(f"\nJSON: {encoded}")
assert MultiCulturalString.from_dict(json.loads(encoded)) == title

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
