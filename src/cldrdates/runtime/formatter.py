"""Configurable date formatter backed by Babel.

DateFormatter is the reusable "formatting engine" handed out by the formatter
cache. It starts blank, is configured by plain attribute assignment (styles,
explicit pattern, template expansion, locale) and then renders dates to
strings and parses strings back to datetimes any number of times.

Architecture:
    - Configuration resolves to one CLDR pattern (explicit pattern, or the
      locale's style patterns combined through its dateTimeFormat)
    - Formatting goes through babel.dates.format_datetime
    - Parsing goes through cldrdates.parsing (compiled per pattern+locale)
    - seal() freezes configuration; the cache seals every entry it stores

Thread Safety:
    Format and parse calls on one instance are serialized by a per-instance
    RLock. Sealed formatters never change configuration, so a sealed
    instance can be shared freely between threads.

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from threading import RLock
from typing import TYPE_CHECKING

from babel import dates as babel_dates

from cldrdates.core.errors import DateFormattingError, DateParseError
from cldrdates.enums import FormatStyle
from cldrdates.locale_utils import canonical_locale_id, coerce_locale, resolve_default_locale
from cldrdates.parsing.dates import parse_date_string
from cldrdates.runtime.skeletons import expand_skeleton

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["DateFormatter"]

logger = logging.getLogger(__name__)

# Used when a locale has no dateTimeFormat for the requested length
_DATETIME_COMBINE_FALLBACK = "{1} {0}"


class DateFormatter:
    """Babel-backed formatter configured by attribute assignment.

    A fresh instance uses the default locale and has no styles and no pattern,
    so it formats every date as the empty string until configured.

    Examples:
        >>> formatter = DateFormatter("en_US")
        >>> formatter.date_format = "yyyy-MM-dd"
        >>> formatter.string_from_date(date(2024, 3, 7))
        '2024-03-07'
        >>> formatter.date_from_string("2024-03-07")
        datetime.datetime(2024, 3, 7, 0, 0)

        >>> formatter = DateFormatter("de_DE")
        >>> formatter.date_style = FormatStyle.LONG
        >>> formatter.string_from_date(date(2024, 3, 7))
        '7. März 2024'

    Configuration precedence follows the usual formatter convention: an
    explicit pattern wins over styles, and assigning a style clears any
    explicit pattern.
    """

    __slots__ = (
        "_date_format",
        "_date_style",
        "_lock",
        "_locale",
        "_pattern",
        "_sealed",
        "_time_style",
    )

    def __init__(self, locale: Locale | str | None = None) -> None:
        """Create a blank formatter.

        Args:
            locale: Locale or locale code; None selects the system default
                (unknown codes fall back to en_US with a warning)
        """
        self._locale: Locale = resolve_default_locale(locale)
        self._date_style = FormatStyle.NONE
        self._time_style = FormatStyle.NONE
        self._date_format: str | None = None
        self._pattern: str | None = None
        self._sealed = False
        self._lock = RLock()

    def __repr__(self) -> str:
        return (
            f"DateFormatter(locale={canonical_locale_id(self._locale)!r}, "
            f"pattern={self.pattern!r}, sealed={self._sealed})"
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def locale(self) -> Locale:
        """Locale used for names, style patterns and template expansion."""
        return self._locale

    @locale.setter
    def locale(self, value: Locale | str) -> None:
        self._check_mutable()
        self._locale = coerce_locale(value)

    @property
    def date_style(self) -> FormatStyle:
        """Date half style; NONE leaves the date out."""
        return self._date_style

    @date_style.setter
    def date_style(self, value: FormatStyle | str) -> None:
        self._check_mutable()
        self._date_style = FormatStyle(value)
        self._date_format = None

    @property
    def time_style(self) -> FormatStyle:
        """Time half style; NONE leaves the time out."""
        return self._time_style

    @time_style.setter
    def time_style(self, value: FormatStyle | str) -> None:
        self._check_mutable()
        self._time_style = FormatStyle(value)
        self._date_format = None

    @property
    def date_format(self) -> str | None:
        """Explicit CLDR pattern, or None when styles drive formatting."""
        return self._date_format

    @date_format.setter
    def date_format(self, value: str) -> None:
        self._check_mutable()
        self._date_format = value

    def set_localized_date_format_from_template(self, template: str) -> None:
        """Expand a skeleton (e.g. "yMMMd") into the locale's preferred pattern.

        Uses the current locale, so assign the locale first when overriding it.
        j/J/C stand for the locale's preferred hour, date and time halves
        without a joint skeleton are combined through the locale's
        dateTimeFormat, and field widths follow the request. A template with
        no field letters at all is used verbatim as the pattern.

        Args:
            template: CLDR skeleton listing the wanted fields, in any order

        Example:
            >>> formatter = DateFormatter("en_US")
            >>> formatter.set_localized_date_format_from_template("yMMMMd")
            >>> formatter.date_format
            'MMMM d, y'
        """
        self._check_mutable()
        pattern = expand_skeleton(template, self._locale)
        if pattern is None:
            logger.debug(
                "No skeleton matches template %r for locale %s; using it as pattern",
                template,
                canonical_locale_id(self._locale),
            )
            pattern = template
        self._date_format = pattern

    @property
    def sealed(self) -> bool:
        """True once seal() has frozen the configuration."""
        return self._sealed

    def seal(self) -> None:
        """Resolve the effective pattern and reject further configuration.

        Idempotent. Any later assignment raises RuntimeError.
        """
        with self._lock:
            if self._sealed:
                return
            self._pattern = self._resolve_pattern()
            self._sealed = True

    def _check_mutable(self) -> None:
        if self._sealed:
            msg = (
                "Cannot reconfigure a sealed DateFormatter. "
                "Request a formatter for the new configuration instead."
            )
            raise RuntimeError(msg)

    @property
    def pattern(self) -> str:
        """Effective CLDR pattern used for both formatting and parsing.

        Empty when neither a pattern nor any style is configured.
        """
        if self._pattern is not None:
            return self._pattern
        return self._resolve_pattern()

    def _resolve_pattern(self) -> str:
        if self._date_format is not None:
            return self._date_format

        date_style = self._date_style
        time_style = self._time_style
        if date_style.is_none and time_style.is_none:
            return ""
        if time_style.is_none:
            return str(self._locale.date_formats[date_style].pattern)
        if date_style.is_none:
            return str(self._locale.time_formats[time_style].pattern)

        date_pattern = str(self._locale.date_formats[date_style].pattern)
        time_pattern = str(self._locale.time_formats[time_style].pattern)
        # CLDR dateTimeFormat: {1} is the date, {0} the time. Quoted literals
        # stay quoted since the result is itself a CLDR pattern.
        datetime_formats = self._locale.datetime_formats
        combine = (
            datetime_formats.get(date_style)
            or datetime_formats.get("medium")
            or _DATETIME_COMBINE_FALLBACK
        )
        return str(combine).replace("{1}", date_pattern).replace("{0}", time_pattern)

    # ------------------------------------------------------------------
    # Formatting and parsing
    # ------------------------------------------------------------------

    def string_from_date(self, value: date | datetime | str) -> str:
        """Render a date or datetime with the configured pattern.

        Args:
            value: datetime, date (treated as midnight) or ISO 8601 string.
                Naive values are rendered as given; no zone conversion happens.

        Returns:
            Formatted string ("" when the formatter is unconfigured)

        Raises:
            DateFormattingError: If the string is not ISO 8601 or Babel
                rejects the pattern. fallback_value holds the ISO text.
        """
        dt_value = _coerce_datetime(value)

        with self._lock:
            pattern = self.pattern
            if not pattern:
                return ""
            try:
                return str(
                    babel_dates.format_datetime(dt_value, format=pattern, locale=self._locale)
                )
            except (ValueError, KeyError, AttributeError, OverflowError) as e:
                msg = f"Date formatting failed for '{dt_value}' with pattern '{pattern}': {e}"
                raise DateFormattingError(msg, fallback_value=dt_value.isoformat()) from e

    def parse(self, value: str) -> tuple[datetime | None, tuple[DateParseError, ...]]:
        """Parse a string with the configured pattern.

        Never raises for bad input.

        Returns:
            Tuple of (result, errors):
            - result: Parsed datetime, or None if parsing failed
            - errors: Tuple of DateParseError (empty tuple on success)
        """
        with self._lock:
            pattern = self.pattern
            if not pattern:
                error = DateParseError(
                    "Formatter has no pattern or style configured",
                    input_value=str(value),
                    locale_code=canonical_locale_id(self._locale),
                )
                return (None, (error,))
            return parse_date_string(value, pattern, self._locale)

    def date_from_string(self, value: str) -> datetime | None:
        """Parse a string, returning None when it does not match."""
        result, _ = self.parse(value)
        return result


def _coerce_datetime(value: date | datetime | str) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    try:
        return datetime.fromisoformat(value)
    except (TypeError, ValueError) as e:
        msg = f"Invalid datetime string '{value}': not ISO 8601 format"
        raise DateFormattingError(msg, fallback_value=str(value)) from e
