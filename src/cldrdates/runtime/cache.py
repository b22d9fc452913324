"""Thread-safe build-once cache of configured date formatters.

Configuring a formatter means resolving locale data and patterns, which is
expensive next to a dict lookup, while a configured formatter can be reused
indefinitely. FormatterCache therefore builds each formatter on first request
and hands out the same instance forever after.

Architecture:
    - dict keyed by Configuration.cache_key()
    - get-or-create (lookup, construct on miss, insert) under one RLock, so
      at most one formatter is ever built and stored per key
    - unbounded, never evicted; clear() is the only removal
    - stored formatters are sealed (configuration can no longer change)

Process-wide default:
    get_default_cache() creates a shared cache on first use and returns it on
    every later call; reset_default_cache() drops it. Anything that accepts a
    ``cache`` argument can be given an isolated instance instead, which is
    what tests do.

Python 3.13+.
"""

from __future__ import annotations

import logging
from threading import Lock, RLock
from typing import TYPE_CHECKING

from cldrdates.locale_utils import canonical_locale_id, resolve_default_locale
from cldrdates.runtime.formatter import DateFormatter

if TYPE_CHECKING:
    from babel import Locale

    from cldrdates.runtime.configuration import Configuration

__all__ = ["FormatterCache", "get_default_cache", "reset_default_cache"]

logger = logging.getLogger(__name__)


class FormatterCache:
    """Thread-safe get-or-create cache of sealed DateFormatter instances.

    Attributes:
        hits: Number of lookups answered from the cache
        misses: Number of lookups that built a new formatter

    Example:
        >>> cache = FormatterCache(default_locale="en_US")
        >>> formatter = cache.get(Pattern("yyyy-MM-dd"))
        >>> formatter is cache.get(Pattern("yyyy-MM-dd"))
        True
        >>> len(cache)
        1
    """

    __slots__ = ("_default_locale", "_entries", "_hits", "_lock", "_misses")

    def __init__(self, default_locale: Locale | str | None = None) -> None:
        """Initialize an empty cache.

        Args:
            default_locale: Locale given to formatters built for the
                non-localized variants. None detects the system locale;
                unknown codes fall back to en_US with a warning.
        """
        self._default_locale: Locale = resolve_default_locale(default_locale)
        self._entries: dict[str, DateFormatter] = {}
        self._lock = RLock()
        self._hits = 0
        self._misses = 0

    def get(self, configuration: Configuration) -> DateFormatter:
        """Return the formatter for a configuration, building it on first use.

        Thread-safe. Concurrent first requests for the same configuration
        build exactly one formatter and all callers receive it.

        Args:
            configuration: Any Configuration variant

        Returns:
            Sealed DateFormatter configured for this configuration
        """
        key = configuration.cache_key()

        with self._lock:
            formatter = self._entries.get(key)
            if formatter is not None:
                self._hits += 1
                return formatter

            self._misses += 1
            logger.debug("Building formatter for %s", key)
            formatter = DateFormatter(self._default_locale)
            configuration.apply(formatter)
            formatter.seal()
            self._entries[key] = formatter
            return formatter

    def clear(self) -> None:
        """Drop every cached formatter and reset statistics."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def keys(self) -> tuple[str, ...]:
        """Snapshot of cached keys in insertion order."""
        with self._lock:
            return tuple(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, configuration: object) -> bool:
        cache_key = getattr(configuration, "cache_key", None)
        if cache_key is None:
            return False
        with self._lock:
            return cache_key() in self._entries

    @property
    def default_locale(self) -> Locale:
        """Locale used by formatters for non-localized configurations."""
        return self._default_locale

    @property
    def hits(self) -> int:
        """Number of cache hits."""
        with self._lock:
            return self._hits

    @property
    def misses(self) -> int:
        """Number of cache misses (formatters built)."""
        with self._lock:
            return self._misses

    def cache_info(self) -> dict[str, int | str]:
        """Get cache statistics.

        Returns:
            Dictionary with size, hits, misses and default_locale

        Example:
            >>> cache = FormatterCache(default_locale="en_US")
            >>> cache.cache_info()
            {'size': 0, 'hits': 0, 'misses': 0, 'default_locale': 'en_US'}
        """
        with self._lock:
            return {
                "size": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
                "default_locale": canonical_locale_id(self._default_locale),
            }


_default_cache: FormatterCache | None = None
_default_cache_lock = Lock()


def get_default_cache() -> FormatterCache:
    """Return the process-wide cache, creating it on first use."""
    # pylint: disable=global-statement
    global _default_cache  # noqa: PLW0603
    with _default_cache_lock:
        if _default_cache is None:
            _default_cache = FormatterCache()
        return _default_cache


def reset_default_cache() -> None:
    """Tear down the process-wide cache; the next get_default_cache() rebuilds it."""
    # pylint: disable=global-statement
    global _default_cache  # noqa: PLW0603
    with _default_cache_lock:
        _default_cache = None
