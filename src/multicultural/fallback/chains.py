"""Fallback resolver driven by a list of locale chains.

Each chain starts with an anchor locale followed by the locales to try
after it. Exactly one chain must start with "*", which applies to any
locale not anchored by another chain:

    ChainsFallbackResolver([["fr", "fr-CA"], ["*", "en"]])

Resolution walks the standard locale hierarchy from the requested locale
until it reaches an anchor or the invariant root, then appends the
matching chain (or the wildcard chain). Duplicates are removed keeping the
first occurrence, so hierarchy locales always precede chain locales.

The string form "*," (wildcard followed by the invariant root) reproduces
the plain hierarchy walk with no overrides.

Thread Safety:
    Immutable after construction. Safe for unsynchronized concurrent reads.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType

from multicultural.constants import ANY_LOCALE, CHAIN_SEPARATOR, INVARIANT_LOCALE
from multicultural.diagnostics import ErrorTemplate, FallbackConfigurationError
from multicultural.locale_utils import get_parent_locale, normalize_locale

__all__ = ["ChainsFallbackResolver"]

logger = logging.getLogger(__name__)


class ChainsFallbackResolver:
    """Fallback resolver for a set of anchored locale chains.

    Chain order in the configuration is irrelevant; order within a chain is
    authoritative. Chains with an empty first element are ignored.

    Example:
        >>> resolver = ChainsFallbackResolver([["fr", "fr-CA"], ["*", "en"]])
        >>> resolver.get_fallback_chain("fr-FR")
        ('fr-FR', 'fr', 'fr-CA')
        >>> resolver.get_fallback_chain("de-DE")
        ('de-DE', 'de', '', 'en')

    Attributes:
        chains: Read-only mapping of anchor locale to its continuation
        default_chain: Continuation of the wildcard chain
    """

    __slots__ = ("_chains", "_default_chain")

    def __init__(self, chains: Iterable[Sequence[str]]) -> None:
        """Build the resolver and validate the chain set.

        Args:
            chains: Locale lists; the first element of each is its anchor

        Raises:
            FallbackConfigurationError: If anchors repeat, or the number of
                wildcard chains is not exactly one
            InvalidLocaleError: If a chain names a malformed locale
        """
        entries = [list(chain) for chain in chains]
        entries = [chain for chain in entries if chain and chain[0]]

        wildcard_chains = [chain for chain in entries if chain[0] == ANY_LOCALE]
        if len(wildcard_chains) > 1:
            raise FallbackConfigurationError(ErrorTemplate.wildcard_duplicate(len(wildcard_chains)))
        if not wildcard_chains:
            raise FallbackConfigurationError(ErrorTemplate.wildcard_missing())

        anchored: dict[str, tuple[str, ...]] = {}
        for chain in entries:
            if chain[0] == ANY_LOCALE:
                continue
            anchor = normalize_locale(chain[0])
            if anchor in anchored:
                raise FallbackConfigurationError(ErrorTemplate.duplicate_anchor(anchor))
            anchored[anchor] = tuple(normalize_locale(code) for code in chain[1:])

        self._chains: Mapping[str, tuple[str, ...]] = MappingProxyType(anchored)
        self._default_chain: tuple[str, ...] = tuple(
            normalize_locale(code) for code in wildcard_chains[0][1:]
        )
        logger.debug(
            "Fallback resolver created: %d anchored chain(s), wildcard chain %r",
            len(self._chains),
            self._default_chain,
        )

    @classmethod
    def from_strings(cls, definitions: Iterable[str]) -> ChainsFallbackResolver:
        """Build a resolver from comma-separated chain definitions.

        An empty item denotes the invariant root, so "*," is the wildcard
        chain continuing with the invariant locale.

        Example:
            >>> ChainsFallbackResolver.from_strings(["fr,fr-CA", "*,en"])
        """
        return cls(
            [item.strip() for item in definition.split(CHAIN_SEPARATOR)]
            for definition in definitions
        )

    @property
    def chains(self) -> Mapping[str, tuple[str, ...]]:
        """Read-only mapping of anchor locale to its continuation."""
        return self._chains

    @property
    def default_chain(self) -> tuple[str, ...]:
        """Continuation of the wildcard chain."""
        return self._default_chain

    def get_fallback_chain(self, locale: str) -> tuple[str, ...]:
        """Return the locales to probe for the requested locale, in order.

        Args:
            locale: Requested locale (any accepted identifier form)

        Returns:
            Deduplicated tuple of canonical locale names. When no anchor is
            met and the wildcard chain is empty, only the requested locale.
        """
        requested = normalize_locale(locale)

        visited = [requested]
        current = requested
        while current not in self._chains and current != INVARIANT_LOCALE:
            current = get_parent_locale(current)
            visited.append(current)

        if current in self._chains:
            return tuple(dict.fromkeys([*visited, *self._chains[current]]))
        if self._default_chain:
            return tuple(dict.fromkeys([*visited, *self._default_chain]))
        return (requested,)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ChainsFallbackResolver):
            return NotImplemented
        return (
            self._default_chain == other._default_chain
            and dict(self._chains) == dict(other._chains)
        )

    def __hash__(self) -> int:
        return hash((self._default_chain, frozenset(self._chains.items())))

    def __repr__(self) -> str:
        parts = [f"{anchor!r}: {list(chain)!r}" for anchor, chain in self._chains.items()]
        parts.append(f"{ANY_LOCALE!r}: {list(self._default_chain)!r}")
        return f"ChainsFallbackResolver({{{', '.join(parts)}}})"
