"""Locale utilities for BCP-47 to POSIX conversion and default locale lookup.

Centralizes locale normalization used throughout the codebase so that cache
keys always carry the same canonical identifier for the same locale.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os

from babel import Locale, UnknownLocaleError

from cldrdates.constants import FALLBACK_LOCALE, MAX_LOCALE_CACHE_SIZE

__all__ = [
    "canonical_locale_id",
    "clear_locale_cache",
    "coerce_locale",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
    "resolve_default_locale",
]

logger = logging.getLogger(__name__)

# "C.UTF-8" normalizes to "C"; none of these name a CLDR locale
_PSEUDO_LOCALES = frozenset({"", "C", "POSIX"})


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Encoding suffixes from environment values (de_DE.UTF-8) are dropped.

    Args:
        locale_code: BCP-47 or POSIX locale code (e.g., "en-US", "pt_BR.UTF-8")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("de_DE.UTF-8")
        'de_DE'
    """
    return locale_code.split(".", 1)[0].replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. Thread-safe via
    lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.territory
        'US'
    """
    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the get_babel_locale cache (useful in tests)."""
    get_babel_locale.cache_clear()


def coerce_locale(locale: Locale | str) -> Locale:
    """Return a Babel Locale for either a Locale or a locale code.

    Raises:
        babel.core.UnknownLocaleError: If a string code is not recognized
        ValueError: If a string code is malformed
    """
    if isinstance(locale, Locale):
        return locale
    return get_babel_locale(locale)


def canonical_locale_id(locale: Locale) -> str:
    """Canonical identifier of a Babel locale, e.g. 'en_US' or 'zh_Hans_CN'."""
    return str(locale)


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Normalizes the result to POSIX format for Babel compatibility.
    Filters out "C" and "POSIX" pseudo-locales.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return FALLBACK_LOCALE.

    Returns:
        Detected locale code in POSIX format.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale:
            normalized = normalize_locale(system_locale)
            if normalized not in _PSEUDO_LOCALES:
                return normalized
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value:
            normalized = normalize_locale(value)
            if normalized not in _PSEUDO_LOCALES:
                return normalized

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return FALLBACK_LOCALE


def resolve_default_locale(locale: Locale | str | None = None) -> Locale:
    """Resolve the locale used by formatters that carry no locale override.

    An explicit argument wins over the system locale. Unknown or malformed
    codes fall back to FALLBACK_LOCALE with a warning instead of raising, so
    a misconfigured environment never breaks formatting.

    Args:
        locale: Explicit default locale, or None to detect the system locale

    Returns:
        Babel Locale to use as default
    """
    if isinstance(locale, Locale):
        return locale

    locale_code = locale if locale is not None else get_system_locale()
    try:
        return get_babel_locale(locale_code)
    except UnknownLocaleError as e:
        logger.warning(
            "Unknown locale '%s': %s. Falling back to %s", locale_code, e, FALLBACK_LOCALE
        )
    except ValueError as e:
        logger.warning(
            "Invalid locale format '%s': %s. Falling back to %s",
            locale_code,
            e,
            FALLBACK_LOCALE,
        )
    return get_babel_locale(FALLBACK_LOCALE)
