"""Tests for the GlobalizationSettings singleton.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence

import pytest

from multicultural import (
    ChainsFallbackResolver,
    GlobalizationSettings,
    MultiCulturalString,
)


class _FixedResolver:
    """Resolver that always tries the request, then the configured locales."""

    def __init__(self, *tail: str) -> None:
        self.tail = tail
        self.calls: list[str] = []

    def get_fallback_chain(self, locale: str) -> Sequence[str]:
        self.calls.append(locale)
        return [locale, *self.tail]


class TestSingleton:
    """Test process-wide instance creation."""

    def test_current_returns_same_instance(self) -> None:
        """Repeated calls return the identical object."""
        assert GlobalizationSettings.current() is GlobalizationSettings.current()

    def test_concurrent_first_access(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Racing first callers all observe one instance."""
        monkeypatch.setattr(GlobalizationSettings, "_instance", None)
        barrier = threading.Barrier(8)
        seen: list[GlobalizationSettings] = []
        seen_lock = threading.Lock()

        def worker() -> None:
            barrier.wait()
            instance = GlobalizationSettings.current()
            with seen_lock:
                seen.append(instance)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(seen) == 8
        assert all(instance is seen[0] for instance in seen)

    def test_creation_logged(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """First creation is logged at DEBUG level."""
        monkeypatch.setattr(GlobalizationSettings, "_instance", None)
        with caplog.at_level(logging.DEBUG, logger="multicultural.fallback.settings"):
            GlobalizationSettings.current()
        assert "Globalization settings initialized" in caplog.text


class TestFallbackResolverProperty:
    """Test getting and replacing the default resolver."""

    def test_default_resolver(self) -> None:
        """Without configuration the built-in resolver applies."""
        settings = GlobalizationSettings.current()
        assert not settings.has_custom_resolver
        assert settings.fallback_resolver is GlobalizationSettings.get_default_fallback()

    def test_default_is_hierarchy_walk(self) -> None:
        """The built-in resolver walks the hierarchy to the root."""
        resolver = GlobalizationSettings.get_default_fallback()
        assert list(resolver.get_fallback_chain("de-AT")) == ["de-AT", "de", ""]

    def test_default_equals_string_form(self) -> None:
        """The built-in resolver is the "*," configuration."""
        assert GlobalizationSettings.get_default_fallback() == (
            ChainsFallbackResolver.from_strings(["*,"])
        )

    def test_set_custom_resolver(self) -> None:
        """An installed resolver is returned by the property."""
        settings = GlobalizationSettings.current()
        custom = ChainsFallbackResolver([["*", "en"]])
        settings.fallback_resolver = custom
        assert settings.fallback_resolver is custom
        assert settings.has_custom_resolver

    def test_replace_twice(self) -> None:
        """The resolver may be replaced more than once."""
        settings = GlobalizationSettings.current()
        settings.fallback_resolver = ChainsFallbackResolver([["*", "en"]])
        second = ChainsFallbackResolver([["*", "de"]])
        settings.fallback_resolver = second
        assert settings.fallback_resolver is second

    def test_none_rejected(self) -> None:
        """Assigning None is a precondition violation."""
        settings = GlobalizationSettings.current()
        with pytest.raises(TypeError, match="cannot be None"):
            settings.fallback_resolver = None  # type: ignore[assignment]
        assert not settings.has_custom_resolver

    def test_reset(self) -> None:
        """reset_fallback_resolver() restores the built-in resolver."""
        settings = GlobalizationSettings.current()
        settings.fallback_resolver = ChainsFallbackResolver([["*", "en"]])
        settings.reset_fallback_resolver()
        assert settings.fallback_resolver is GlobalizationSettings.get_default_fallback()

    def test_replacement_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Replacing the resolver is logged at DEBUG level."""
        with caplog.at_level(logging.DEBUG, logger="multicultural.fallback.settings"):
            GlobalizationSettings.current().fallback_resolver = _FixedResolver("en")
        assert "Default fallback resolver replaced" in caplog.text


class TestLookupIntegration:
    """Test that values consult the global resolver."""

    def test_lookup_uses_global_resolver(self) -> None:
        """get_string() without a resolver uses the installed one."""
        value = MultiCulturalString({"en": "Hello"})
        assert value.get_string("de-DE") is None

        GlobalizationSettings.current().fallback_resolver = ChainsFallbackResolver(
            [["*", "en"]]
        )
        assert value.get_string("de-DE") == "Hello"

    def test_explicit_resolver_wins(self) -> None:
        """A resolver passed to the lookup overrides the global one."""
        GlobalizationSettings.current().fallback_resolver = ChainsFallbackResolver(
            [["*", "en"]]
        )
        value = MultiCulturalString({"en": "Hello", "lv": "Sveiki"})
        local = _FixedResolver("lv")
        assert value.get_string("de-DE", resolver=local) == "Sveiki"
        assert local.calls == ["de-DE"]

    def test_custom_protocol_resolver(self) -> None:
        """Any FallbackResolver may be installed globally."""
        custom = _FixedResolver("ja")
        GlobalizationSettings.current().fallback_resolver = custom
        value = MultiCulturalString({"ja": "こんにちは"})
        assert value.get_string("ko") == "こんにちは"
        assert custom.calls == ["ko"]
