"""Date to string and string to date conversion through the formatter cache.

Each call picks exactly one Configuration variant (no locale means the
non-localized variant, a locale means its localized counterpart), fetches the
matching formatter from the cache and runs it.

Examples:
    >>> from datetime import date
    >>> format_with_pattern(date(2024, 3, 7), "yyyy-MM-dd")
    '2024-03-07'
    >>> format_with_style(date(2024, 3, 7), "long", "none", locale="fr_FR")
    '7 mars 2024'
    >>> parse_with_pattern("2024-03-07", "yyyy-MM-dd")
    datetime.datetime(2024, 3, 7, 0, 0)
    >>> parse_with_pattern("not-a-date", "yyyy-MM-dd") is None
    True

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cldrdates.runtime.cache import get_default_cache
from cldrdates.runtime.configuration import (
    LocalizedPattern,
    LocalizedStyle,
    LocalizedTemplate,
    Pattern,
    Style,
    Template,
)

if TYPE_CHECKING:
    from datetime import date, datetime

    from babel import Locale

    from cldrdates.enums import FormatStyle
    from cldrdates.runtime.cache import FormatterCache
    from cldrdates.runtime.configuration import Configuration

__all__ = [
    "format_with_pattern",
    "format_with_style",
    "format_with_template",
    "parse_with_pattern",
    "parse_with_style",
    "parse_with_template",
    "pattern_configuration",
    "style_configuration",
    "template_configuration",
]


# ============================================================================
# CONFIGURATION SELECTION
# ============================================================================


def style_configuration(
    date_style: FormatStyle | str,
    time_style: FormatStyle | str,
    locale: Locale | str | None = None,
) -> Style | LocalizedStyle:
    """Style, or LocalizedStyle when a locale is given."""
    if locale is not None:
        return LocalizedStyle(date_style, time_style, locale)  # type: ignore[arg-type]
    return Style(date_style, time_style)  # type: ignore[arg-type]


def template_configuration(
    template: str, locale: Locale | str | None = None
) -> Template | LocalizedTemplate:
    """Template, or LocalizedTemplate when a locale is given."""
    if locale is not None:
        return LocalizedTemplate(template, locale)  # type: ignore[arg-type]
    return Template(template)


def pattern_configuration(
    pattern: str, locale: Locale | str | None = None
) -> Pattern | LocalizedPattern:
    """Pattern, or LocalizedPattern when a locale is given."""
    if locale is not None:
        return LocalizedPattern(pattern, locale)  # type: ignore[arg-type]
    return Pattern(pattern)


def _format(
    value: date | datetime, configuration: Configuration, cache: FormatterCache | None
) -> str:
    formatter = (cache if cache is not None else get_default_cache()).get(configuration)
    return formatter.string_from_date(value)


def _parse(
    text: str, configuration: Configuration, cache: FormatterCache | None
) -> datetime | None:
    formatter = (cache if cache is not None else get_default_cache()).get(configuration)
    return formatter.date_from_string(text)


# ============================================================================
# DATE -> STRING
# ============================================================================


def format_with_style(
    value: date | datetime,
    date_style: FormatStyle | str,
    time_style: FormatStyle | str,
    *,
    locale: Locale | str | None = None,
    cache: FormatterCache | None = None,
) -> str:
    """Format a date with predefined date and time styles.

    Args:
        value: date or datetime to format
        date_style: Style for the date half ("none" omits it)
        time_style: Style for the time half ("none" omits it)
        locale: Locale override; None uses the cache's default locale
        cache: Formatter cache; None uses the process-wide cache

    Returns:
        Formatted string

    Raises:
        DateFormattingError: If Babel cannot render the value
    """
    return _format(value, style_configuration(date_style, time_style, locale), cache)


def format_with_template(
    value: date | datetime,
    template: str,
    *,
    locale: Locale | str | None = None,
    cache: FormatterCache | None = None,
) -> str:
    """Format a date with a skeleton such as "yMMMd", expanded for the locale."""
    return _format(value, template_configuration(template, locale), cache)


def format_with_pattern(
    value: date | datetime,
    pattern: str,
    *,
    locale: Locale | str | None = None,
    cache: FormatterCache | None = None,
) -> str:
    """Format a date with a literal CLDR pattern such as "yyyy-MM-dd"."""
    return _format(value, pattern_configuration(pattern, locale), cache)


# ============================================================================
# STRING -> DATE
# ============================================================================


def parse_with_style(
    text: str,
    date_style: FormatStyle | str,
    time_style: FormatStyle | str,
    *,
    locale: Locale | str | None = None,
    cache: FormatterCache | None = None,
) -> datetime | None:
    """Parse text written in predefined date and time styles.

    Returns:
        Parsed datetime, or None if the text does not match
    """
    return _parse(text, style_configuration(date_style, time_style, locale), cache)


def parse_with_template(
    text: str,
    template: str,
    *,
    locale: Locale | str | None = None,
    cache: FormatterCache | None = None,
) -> datetime | None:
    """Parse text written in the pattern a skeleton expands to; None on mismatch."""
    return _parse(text, template_configuration(template, locale), cache)


def parse_with_pattern(
    text: str,
    pattern: str,
    *,
    locale: Locale | str | None = None,
    cache: FormatterCache | None = None,
) -> datetime | None:
    """Parse text written in a literal CLDR pattern; None on mismatch."""
    return _parse(text, pattern_configuration(pattern, locale), cache)
