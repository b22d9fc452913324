"""FormatterCache tests.

Validates get-or-create semantics, single construction per key, sealing of
stored formatters, statistics, and the process-wide default cache.
"""

import logging
from unittest.mock import patch

import pytest
from babel import Locale
from hypothesis import event, given, settings
from hypothesis import strategies as st

from cldrdates.enums import FormatStyle
from cldrdates.runtime import cache as cache_module
from cldrdates.runtime.cache import FormatterCache, get_default_cache, reset_default_cache
from cldrdates.runtime.configuration import (
    LocalizedPattern,
    LocalizedStyle,
    LocalizedTemplate,
    Pattern,
    Style,
    Template,
)
from cldrdates.runtime.formatter import DateFormatter
from tests.strategies import configurations


class _CountingFormatter(DateFormatter):
    """DateFormatter that counts how many instances were built."""

    __slots__ = ()
    created = 0

    def __init__(self, locale: object = None) -> None:
        type(self).created += 1
        super().__init__(locale)  # type: ignore[arg-type]


@pytest.fixture
def counting_formatter(monkeypatch: pytest.MonkeyPatch) -> type[_CountingFormatter]:
    """Route cache construction through _CountingFormatter."""
    _CountingFormatter.created = 0
    monkeypatch.setattr(cache_module, "DateFormatter", _CountingFormatter)
    return _CountingFormatter


class TestGetOrCreate:
    """Lookup, construct on miss, insert."""

    def test_same_configuration_same_instance(self, cache: FormatterCache) -> None:
        """Repeated requests return the identical formatter."""
        first = cache.get(Pattern("yyyy-MM-dd"))
        assert cache.get(Pattern("yyyy-MM-dd")) is first

    def test_equal_configurations_share_entry(self, cache: FormatterCache) -> None:
        """Distinct but equal configuration objects hit the same entry."""
        a = LocalizedPattern("yyyy-MM-dd", "de-DE")  # type: ignore[arg-type]
        b = LocalizedPattern("yyyy-MM-dd", Locale.parse("de_DE"))
        assert cache.get(a) is cache.get(b)
        assert len(cache) == 1

    def test_different_configurations_different_instances(
        self, cache: FormatterCache
    ) -> None:
        """Different keys build different formatters."""
        assert cache.get(Pattern("yyyy")) is not cache.get(Pattern("MM"))
        assert len(cache) == 2

    def test_constructed_once(
        self, cache: FormatterCache, counting_formatter: type[_CountingFormatter]
    ) -> None:
        """Construction happens only on the first request."""
        config = Style(FormatStyle.SHORT, FormatStyle.NONE)
        for _ in range(5):
            cache.get(config)
        assert counting_formatter.created == 1

    def test_constructed_once_per_key(
        self, cache: FormatterCache, counting_formatter: type[_CountingFormatter]
    ) -> None:
        """Each distinct key constructs exactly one formatter."""
        configs = [Template("yMd"), Pattern("yMd"), Template("yMd"), Pattern("yMd")]
        for config in configs:
            cache.get(config)
        assert counting_formatter.created == 2

    def test_formatter_is_sealed(self, cache: FormatterCache) -> None:
        """Stored formatters reject reconfiguration."""
        formatter = cache.get(Pattern("yyyy-MM-dd"))
        assert formatter.sealed
        with pytest.raises(RuntimeError):
            formatter.date_format = "MM"
        assert cache.get(Pattern("yyyy-MM-dd")).pattern == "yyyy-MM-dd"

    def test_non_localized_uses_default_locale(self) -> None:
        """Non-localized variants use the cache's default locale."""
        cache = FormatterCache(default_locale="de_DE")
        formatter = cache.get(Style(FormatStyle.LONG, FormatStyle.NONE))
        assert str(formatter.locale) == "de_DE"

    def test_localized_overrides_default_locale(self, cache: FormatterCache) -> None:
        """Localized variants carry their own locale."""
        formatter = cache.get(LocalizedTemplate("yMMMd", Locale.parse("fr_FR")))
        assert str(formatter.locale) == "fr_FR"

    def test_miss_logged_at_debug(
        self, cache: FormatterCache, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Construction logs the key; hits do not log."""
        with caplog.at_level(logging.DEBUG, logger="cldrdates.runtime.cache"):
            cache.get(Template("yMd"))
            cache.get(Template("yMd"))
        messages = [r.getMessage() for r in caplog.records if r.name == "cldrdates.runtime.cache"]
        assert messages == ["Building formatter for template(yMd)"]

    @settings(max_examples=50)
    @given(configs=st.lists(configurations(free_text=False), min_size=1, max_size=10))
    def test_one_entry_per_distinct_key(self, configs: list[object]) -> None:
        """Cache size equals the number of distinct keys requested."""
        cache = FormatterCache(default_locale="en_US")
        for config in configs:
            cache.get(config)  # type: ignore[arg-type]
        keys = {c.cache_key() for c in configs}  # type: ignore[attr-defined]
        event(f"distinct={len(keys)}")
        assert len(cache) == len(keys)
        assert set(cache.keys()) == keys


class TestCacheIntrospection:
    """clear, contains, keys, statistics."""

    def test_contains(self, cache: FormatterCache) -> None:
        """Membership by configuration."""
        config = LocalizedStyle(FormatStyle.SHORT, FormatStyle.SHORT, Locale("en"))
        assert config not in cache
        cache.get(config)
        assert config in cache
        assert "not a configuration" not in cache

    def test_keys_in_insertion_order(self, cache: FormatterCache) -> None:
        """keys() snapshots keys in insertion order."""
        cache.get(Pattern("b"))
        cache.get(Pattern("a"))
        assert cache.keys() == ("pattern(b)", "pattern(a)")

    def test_hits_and_misses(self, cache: FormatterCache) -> None:
        """Statistics count hits and misses."""
        cache.get(Pattern("yyyy"))
        cache.get(Pattern("yyyy"))
        cache.get(Pattern("yyyy"))
        assert cache.misses == 1
        assert cache.hits == 2

    def test_cache_info(self, cache: FormatterCache) -> None:
        """cache_info reports size, statistics and default locale."""
        cache.get(Template("yMd"))
        assert cache.cache_info() == {
            "size": 1,
            "hits": 0,
            "misses": 1,
            "default_locale": "en_US",
        }

    def test_clear(self, cache: FormatterCache) -> None:
        """clear() drops entries and statistics."""
        first = cache.get(Pattern("yyyy"))
        cache.clear()
        assert len(cache) == 0
        assert cache.hits == cache.misses == 0
        assert cache.get(Pattern("yyyy")) is not first

    def test_empty_cache_is_usable(self) -> None:
        """An empty cache is a valid (if falsy) cache."""
        cache = FormatterCache(default_locale="en_US")
        assert len(cache) == 0
        assert cache.keys() == ()


class TestDefaultLocale:
    """Default locale resolution for the cache."""

    def test_explicit_default(self) -> None:
        """Constructor argument wins."""
        assert str(FormatterCache(default_locale="lv_LV").default_locale) == "lv_LV"

    def test_system_default(self) -> None:
        """None detects the system locale."""
        with patch("cldrdates.locale_utils.get_system_locale", return_value="pl"):
            cache = FormatterCache()
        assert str(cache.default_locale) == "pl"

    def test_unknown_default_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unknown default locale warns and uses en_US."""
        with caplog.at_level(logging.WARNING, logger="cldrdates.locale_utils"):
            cache = FormatterCache(default_locale="xx_YY")
        assert str(cache.default_locale) == "en_US"
        assert any(r.levelno == logging.WARNING for r in caplog.records)


class TestDefaultCache:
    """Process-wide default cache lifecycle."""

    def test_lazy_singleton(self) -> None:
        """Every call returns the same instance."""
        assert get_default_cache() is get_default_cache()

    def test_reset_creates_new_instance(self) -> None:
        """Reset drops the instance; the next call builds a fresh one."""
        first = get_default_cache()
        first.get(Pattern("yyyy"))
        reset_default_cache()
        second = get_default_cache()
        assert second is not first
        assert len(second) == 0

    def test_reset_without_cache(self) -> None:
        """Reset before first use is harmless."""
        reset_default_cache()
        reset_default_cache()
        assert isinstance(get_default_cache(), FormatterCache)

    def test_default_cache_uses_system_locale(self) -> None:
        """The default cache resolves its locale on creation."""
        with patch("cldrdates.locale_utils.get_system_locale", return_value="sv"):
            cache = get_default_cache()
        assert str(cache.default_locale) == "sv"
