"""Shared constants for cldrdates.

Centralizes the tunables used by the locale, parsing and cache layers so that
every module reads them from one place.

Constants are grouped by domain:
- Locale defaults: fallback when no usable default locale is configured
- Cache limits: memory bounds for the bounded helper caches
- Parse defaults: values filled in for fields a pattern does not carry

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "FALLBACK_LOCALE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    "MAX_PATTERN_CACHE_SIZE",
    # Parse defaults
    "DEFAULT_PARSE_YEAR",
    "TWO_DIGIT_YEAR_PIVOT",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale used when neither the caller nor the environment supplies one, and
# when a configured default locale is unknown to CLDR.
FALLBACK_LOCALE: str = "en_US"

# ============================================================================
# CACHE LIMITS
# ============================================================================
#
# The formatter cache itself is unbounded: one entry per distinct
# configuration, never evicted. The limits below only bound the helper caches
# keyed by caller-controlled strings (locale codes, raw patterns), which could
# otherwise grow without limit when fed arbitrary input.
#
# ============================================================================

# Maximum cached Babel Locale objects (get_babel_locale).
MAX_LOCALE_CACHE_SIZE: int = 128

# Maximum compiled (pattern, locale) parsers.
MAX_PATTERN_CACHE_SIZE: int = 256

# ============================================================================
# PARSE DEFAULTS
# ============================================================================

# Year used when a pattern has no year field (matches time.strptime).
DEFAULT_PARSE_YEAR: int = 1900

# Two-digit years below the pivot map to 20xx, the rest to 19xx
# (same split as time.strptime's %y).
TWO_DIGIT_YEAR_PIVOT: int = 69
