"""Hypothesis strategies for cldrdates property-based testing.

Usage:
    from tests.strategies import configurations, locale_codes
    from tests.strategies.dates import ROUND_TRIP_PATTERNS
"""

from .dates import (
    LOCALE_POOL,
    ROUND_TRIP_PATTERNS,
    TEMPLATE_POOL,
    configurations,
    format_styles,
    locale_codes,
    patterns,
    reasonable_dates,
    reasonable_datetimes,
    templates,
)

__all__ = [
    "LOCALE_POOL",
    "ROUND_TRIP_PATTERNS",
    "TEMPLATE_POOL",
    "configurations",
    "format_styles",
    "locale_codes",
    "patterns",
    "reasonable_dates",
    "reasonable_datetimes",
    "templates",
]
