"""Locale-aware parsing of date strings against CLDR date patterns.

- parse_date_string() returns tuple[datetime | None, tuple[DateParseError, ...]]
- Functions NEVER raise for bad input, errors are returned in the tuple
- Compiled patterns are cached per (pattern, locale)

Babel renders dates from CLDR patterns but offers no general inverse. This
module provides one: a pattern is tokenized, each field letter becomes a
regular expression group, and the captured groups are assembled back into a
datetime.

Names (months, weekdays, eras, AM/PM markers) come from the locale's CLDR
data rather than the C library, so "7 mars 2024" parses under fr_FR no matter
what the process locale is.

Timezone Handling:
    UTC offset fields (Z, ZZ, ZZZ, ZZZZZ, x..xxxxx, X..XXXXX) and localized
    GMT fields (ZZZZ, O, OOOO) are parsed and produce an aware datetime.

    Zone NAME fields (z..zzzz, v, vvvv, V..VVVV) must be one of the locale's
    CLDR zone or metazone names, exemplar cities, a localized GMT offset,
    an ISO offset or a tz database identifier. They are then ignored:
    names are ambiguous across regions and mapping them is time-zone
    resolution, which Babel/pytz/zoneinfo own. The result stays naive.

Day Periods:
    a is AM/PM. b/B are CLDR flexible day periods ("noon", "in the
    evening", "下午"); with a 12-hour field the hour is placed in whichever
    half of the day the period's CLDR rule covers.

Hour-24 Handling:
    k/kk (1-24) maps 24 to hour 0 of the same day.

Patterns without any field letter are rejected, and a field that appears
twice must carry the same value both times.

Thread-safe. Uses Babel CLDR data + stdlib re.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import StrEnum
from typing import TYPE_CHECKING

from cldrdates.constants import (
    DEFAULT_PARSE_YEAR,
    MAX_LOCALE_CACHE_SIZE,
    MAX_PATTERN_CACHE_SIZE,
    TWO_DIGIT_YEAR_PIVOT,
)
from cldrdates.core.errors import DateParseError
from cldrdates.locale_utils import canonical_locale_id, get_babel_locale

if TYPE_CHECKING:
    from collections.abc import Iterable

    from babel import Locale

__all__ = [
    "CompiledDatePattern",
    "clear_pattern_cache",
    "compile_date_pattern",
    "parse_date_string",
    "tokenize_pattern",
]

logger = logging.getLogger(__name__)


def parse_date_string(
    value: str,
    pattern: str,
    locale: Locale,
) -> tuple[datetime | None, tuple[DateParseError, ...]]:
    """Parse a string against a CLDR date pattern.

    Args:
        value: Text to parse (e.g., "2024-03-07", "7 mars 2024")
        pattern: CLDR date pattern (e.g., "yyyy-MM-dd", "d MMMM y")
        locale: Babel locale supplying month, weekday, era and AM/PM names

    Returns:
        Tuple of (result, errors):
        - result: Parsed datetime, or None if parsing failed
        - errors: Tuple of DateParseError (empty tuple on success)

    Examples:
        >>> result, errors = parse_date_string("2024-03-07", "yyyy-MM-dd", Locale("en"))
        >>> result
        datetime.datetime(2024, 3, 7, 0, 0)
        >>> errors
        ()

        >>> result, errors = parse_date_string("not-a-date", "yyyy-MM-dd", Locale("en"))
        >>> result is None
        True
        >>> len(errors)
        1
    """
    locale_code = canonical_locale_id(locale)

    # Runtime defense for untyped callers
    if not isinstance(value, str):
        return _failure(  # type: ignore[unreachable]
            str(value), locale_code, pattern, f"Expected string, got {type(value).__name__}"
        )

    try:
        compiled = compile_date_pattern(pattern, locale)
    except ValueError as e:
        logger.debug("Cannot compile pattern %r for %s: %s", pattern, locale_code, e)
        return _failure(value, locale_code, pattern, str(e))

    try:
        return (compiled.match(value), ())
    except ValueError as e:
        return _failure(value, locale_code, pattern, str(e))


def _failure(
    value: str, locale_code: str, pattern: str, reason: str
) -> tuple[None, tuple[DateParseError, ...]]:
    message = f"Failed to parse '{value}' with pattern '{pattern}' ({locale_code}): {reason}"
    error = DateParseError(
        message,
        input_value=value,
        locale_code=locale_code,
        pattern=pattern,
    )
    return (None, (error,))


def compile_date_pattern(pattern: str, locale: Locale) -> CompiledDatePattern:
    """Compile a CLDR pattern for a locale, reusing earlier compilations.

    Raises:
        ValueError: If the pattern contains a field letter that cannot be parsed,
            or no field at all
    """
    return _compile_cached(pattern, canonical_locale_id(locale))


@functools.lru_cache(maxsize=MAX_PATTERN_CACHE_SIZE)
def _compile_cached(pattern: str, locale_code: str) -> CompiledDatePattern:
    locale = get_babel_locale(locale_code)
    names = _LocaleNames.from_locale(locale)

    parts: list[str] = []
    fields: list[_FieldSpec] = []

    for text, is_field in tokenize_pattern(pattern):
        if not is_field:
            parts.append(_literal_regex(text))
            continue
        group = f"f{len(fields)}"
        spec, regex = _field_regex(text, group, names)
        fields.append(spec)
        parts.append(f"(?P<{group}>{regex})")

    if not fields:
        msg = "Pattern has no date or time fields"
        raise ValueError(msg)

    regex = re.compile("".join(parts), re.IGNORECASE)
    return CompiledDatePattern(
        pattern=pattern,
        locale_code=locale_code,
        regex=regex,
        fields=tuple(fields),
    )


def clear_pattern_cache() -> None:
    """Clear compiled pattern cache (useful in tests)."""
    _compile_cached.cache_clear()
    _zone_name_regex.cache_clear()


# ==============================================================================
# CLDR PATTERN TOKENIZER
# ==============================================================================
#
# CLDR Pattern Syntax (subset relevant to parsing):
#   Pattern | Meaning                | Example
#   --------|------------------------|--------
#   G       | Era                    | AD
#   y       | Year                   | 2024
#   yy      | 2-digit year           | 24
#   M/L     | Month (numeric)        | 3, 03
#   MMM     | Month (short name)     | Mar
#   MMMM    | Month (full name)      | March
#   d       | Day of month           | 7, 07
#   E/c/e   | Weekday name           | Thu, Thursday
#   a       | AM/PM marker           | PM
#   b/B     | Flexible day period    | noon, in the evening
#   h/H/k/K | Hour (1-12/0-23/1-24/0-11)
#   m, s    | Minute, second         | 30
#   S+      | Fractional seconds     | 123
#   Z/x/X/O | UTC offset             | +0100, GMT+1
#   z/v/V   | Zone name              | PST, Europe/Riga (ignored)
#
# QUOTE ESCAPING:
#   - Single quotes delimit literal text: 'at' -> "at"
#   - Double single quotes escape: '' -> "'"
#   - Example: "h 'o''clock' a" -> "2 o'clock PM"
#
# ==============================================================================


def tokenize_pattern(pattern: str) -> list[tuple[str, bool]]:
    """Split a CLDR pattern into (text, is_field) tokens.

    Runs of one ASCII letter are fields; quoted text and everything else are
    literals. Adjacent literal characters are merged into one token.

    Examples:
        "d.MM.yyyy" -> [("d", True), (".", False), ("MM", True), (".", False), ("yyyy", True)]
        "h 'o''clock' a" -> [("h", True), (" o'clock ", False), ("a", True)]
    """
    tokens: list[tuple[str, bool]] = []
    literal: list[str] = []
    i = 0
    n = len(pattern)

    def flush_literal() -> None:
        if literal:
            tokens.append(("".join(literal), False))
            literal.clear()

    while i < n:
        char = pattern[i]

        if char == "'":
            # '' outside quotes is a literal quote
            if i + 1 < n and pattern[i + 1] == "'":
                literal.append("'")
                i += 2
                continue

            i += 1
            while i < n:
                if pattern[i] == "'":
                    if i + 1 < n and pattern[i + 1] == "'":
                        literal.append("'")
                        i += 2
                        continue
                    i += 1
                    break
                literal.append(pattern[i])
                i += 1
            continue

        if char.isascii() and char.isalpha():
            flush_literal()
            j = i + 1
            while j < n and pattern[j] == char:
                j += 1
            tokens.append((pattern[i:j], True))
            i = j
            continue

        literal.append(char)
        i += 1

    flush_literal()
    return tokens


# ==============================================================================
# FIELD COMPILATION
# ==============================================================================


class _Field(StrEnum):
    """Meaning of a captured group."""

    ERA = "era"
    YEAR = "year"
    YEAR_2 = "year_2"
    MONTH = "month"
    MONTH_NAME = "month_name"
    DAY = "day"
    WEEKDAY = "weekday"
    PERIOD = "period"
    DAY_PERIOD = "day_period"
    HOUR_1_12 = "hour_1_12"
    HOUR_0_23 = "hour_0_23"
    HOUR_1_24 = "hour_1_24"
    HOUR_0_11 = "hour_0_11"
    MINUTE = "minute"
    SECOND = "second"
    FRACTION = "fraction"
    OFFSET = "offset"
    GMT_OFFSET = "gmt_offset"
    ZONE_NAME = "zone_name"


# Seconds since midnight, half-open: (start, end)
type _Span = tuple[int, int]

_NOON = 12 * 3600
_DAY = 24 * 3600


@dataclass(frozen=True, slots=True)
class _FieldSpec:
    group: str
    field: _Field
    names: Mapping[str, int] | None = None
    spans: Mapping[str, tuple[_Span, ...]] | None = None


@dataclass(frozen=True, slots=True)
class _LocaleNames:
    """Lowercased CLDR names for one locale, mapped to their numeric values.

    day_periods maps each flexible day period name to the parts of the day
    its CLDR rules cover. A name shared by several periods (zh "下午" is
    both "pm" and "afternoon2") covers the union.
    """

    locale_code: str
    months: Mapping[str, int]
    standalone_months: Mapping[str, int]
    weekdays: Mapping[str, int]
    eras: Mapping[str, int]
    periods: Mapping[str, int]
    day_periods: Mapping[str, tuple[_Span, ...]]

    @classmethod
    def from_locale(cls, locale: Locale) -> _LocaleNames:
        periods = _name_map(
            _widths(locale.day_periods, "format", ("abbreviated", "wide", "narrow")),
            keep=("am", "pm"),
        )
        return cls(
            locale_code=canonical_locale_id(locale),
            months=_name_map(_widths(locale.months, "format", ("wide", "abbreviated"))),
            standalone_months=_name_map(
                _widths(locale.months, "stand-alone", ("wide", "abbreviated"))
            ),
            weekdays=_name_map(
                _widths(locale.days, "format", ("wide", "abbreviated", "short"))
                + _widths(locale.days, "stand-alone", ("wide", "abbreviated", "short"))
            ),
            eras=_name_map([locale.eras.get("wide", {}), locale.eras.get("abbreviated", {})]),
            periods=periods,
            day_periods=_day_period_spans(locale),
        )


def _day_period_spans(locale: Locale) -> dict[str, tuple[_Span, ...]]:
    """Map every day period name (any context, any width) to its spans."""
    spans_by_id: dict[str, list[_Span]] = {"am": [(0, _NOON)], "pm": [(_NOON, _DAY)]}
    for period_id, rules in locale.day_period_rules.get(None, {}).items():
        spans = spans_by_id.setdefault(period_id, [])
        for rule in rules:
            spans.extend(_rule_spans(rule))

    names: dict[str, list[_Span]] = {}
    for context in ("format", "stand-alone"):
        for table in locale.day_periods.get(context, {}).values():
            for period_id, name in table.items():
                merged = names.setdefault(name.lower(), [])
                for span in spans_by_id.get(period_id, ()):
                    if span not in merged:
                        merged.append(span)
    return {name: tuple(spans) for name, spans in names.items() if spans}


def _rule_spans(rule: Mapping[str, int]) -> list[_Span]:
    """Turn one CLDR dayPeriodRule (at/from/after/before/to) into spans."""
    if "at" in rule:
        return [(rule["at"], rule["at"] + 1)]
    if "from" in rule:
        start = rule["from"]
    else:
        start = rule["after"] + 1 if "after" in rule else 0
    if "before" in rule:
        end = rule["before"]
    else:
        end = rule["to"] + 1 if "to" in rule else _DAY
    if start < end:
        return [(start, end)]
    # Wraps midnight, e.g. night1 from 21:00 before 06:00
    return [(start, _DAY), (0, end)]


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _zone_name_regex(locale_code: str) -> str:
    """Alternation of every zone text Babel can write for the locale.

    Covers CLDR zone and metazone names, exemplar cities, the localized GMT
    format (e.g. "GMT+01:00", "UTC+1"), ISO offsets and tz database ids.
    """
    locale = get_babel_locale(locale_code)
    names: dict[str, int] = {}
    for table in (locale.time_zones, locale.meta_zones):
        for entry in table.values():
            if not isinstance(entry, Mapping):
                continue
            for value in entry.values():
                texts = value.values() if isinstance(value, Mapping) else (value,)
                for text in texts:
                    if isinstance(text, str) and text and text != _NO_INHERITANCE_MARKER:
                        names.setdefault(text.lower(), 0)

    alternatives = [_alternation(names), _GMT_OFFSET_REGEX, _OFFSET_REGEX, _ZONE_ID_REGEX]

    prefix, _, suffix = str(locale.zone_formats.get("gmt", "GMT%s")).partition("%s")
    if prefix or suffix:
        offset = r"(?:[+-]\d{1,2}(?::?\d{2}){0,2})?"
        alternatives.append(f"{re.escape(prefix)}{offset}{re.escape(suffix)}")

    return "|".join(alternatives)


def _widths(
    data: Mapping[str, Mapping[str, Mapping[int | str, str]]],
    context: str,
    widths: Iterable[str],
) -> list[Mapping[int | str, str]]:
    tables = data.get(context, {})
    return [tables[width] for width in widths if width in tables]


def _name_map(
    tables: Iterable[Mapping[int | str, str]],
    *,
    keep: tuple[str, ...] | None = None,
) -> dict[str, int]:
    """Merge CLDR name tables into lowercase name -> value.

    Earlier tables win on collisions. With keep, only those keys are taken and
    they are mapped to their position in keep (am -> 0, pm -> 1).
    """
    names: dict[str, int] = {}
    for table in tables:
        for key, name in table.items():
            if keep is not None:
                if key not in keep:
                    continue
                value = keep.index(str(key))
            else:
                value = int(key)
            names.setdefault(name.lower(), value)
    return names


def _alternation(names: Mapping[str, object]) -> str:
    if not names:
        return "(?!)"
    # Longest first so "June" wins over "Jun"
    ordered = sorted(names, key=len, reverse=True)
    return "|".join(re.escape(name) for name in ordered)


def _literal_regex(text: str) -> str:
    parts: list[str] = []
    previous_space = False
    for char in text:
        if char.isspace():
            # CLDR uses U+202F and U+00A0 where users type plain spaces
            if not previous_space:
                parts.append(r"\s+")
            previous_space = True
            continue
        previous_space = False
        parts.append(re.escape(char))
    return "".join(parts)


_OFFSET_REGEX = r"Z|[+-]\d{2}(?::?\d{2}){0,2}"
_GMT_OFFSET_REGEX = r"(?:GMT|UTC)(?:[+-]\d{1,2}(?::?\d{2})?)?"
# tz database identifiers: Etc/UTC, America/Argentina/Buenos_Aires, Etc/GMT+5
_ZONE_ID_REGEX = r"[A-Za-z][A-Za-z_]*(?:/[A-Za-z0-9_+\-]+)+"
_NO_INHERITANCE_MARKER = "∅∅∅"
_TWO_DIGITS = r"\d{1,2}"


def _field_regex(token: str, group: str, names: _LocaleNames) -> tuple[_FieldSpec, str]:
    letter = token[0]
    width = len(token)

    match letter:
        case "G":
            return _FieldSpec(group, _Field.ERA, names.eras), _alternation(names.eras)
        case "y":
            if width == 2:
                return _FieldSpec(group, _Field.YEAR_2), r"\d{2}"
            return _FieldSpec(group, _Field.YEAR), r"\d{1,4}"
        case "M" | "L":
            if width <= 2:
                return _FieldSpec(group, _Field.MONTH), _TWO_DIGITS
            # Lenient: the other context's names are accepted too
            if letter == "M":
                merged = {**names.standalone_months, **names.months}
            else:
                merged = {**names.months, **names.standalone_months}
            return _FieldSpec(group, _Field.MONTH_NAME, merged), _alternation(merged)
        case "d":
            return _FieldSpec(group, _Field.DAY), _TWO_DIGITS
        case "E":
            return _FieldSpec(group, _Field.WEEKDAY), _alternation(names.weekdays)
        case "e" | "c":
            if width <= 2:
                return _FieldSpec(group, _Field.WEEKDAY), r"\d"
            return _FieldSpec(group, _Field.WEEKDAY), _alternation(names.weekdays)
        case "a":
            return _FieldSpec(group, _Field.PERIOD, names.periods), _alternation(names.periods)
        case "b" | "B":
            spec = _FieldSpec(group, _Field.DAY_PERIOD, spans=names.day_periods)
            return spec, _alternation(names.day_periods)
        case "h":
            return _FieldSpec(group, _Field.HOUR_1_12), _TWO_DIGITS
        case "H":
            return _FieldSpec(group, _Field.HOUR_0_23), _TWO_DIGITS
        case "k":
            return _FieldSpec(group, _Field.HOUR_1_24), _TWO_DIGITS
        case "K":
            return _FieldSpec(group, _Field.HOUR_0_11), _TWO_DIGITS
        case "m":
            return _FieldSpec(group, _Field.MINUTE), _TWO_DIGITS
        case "s":
            return _FieldSpec(group, _Field.SECOND), _TWO_DIGITS
        case "S":
            return _FieldSpec(group, _Field.FRACTION), r"\d{1,9}"
        case "Z" if width == 4:
            return _FieldSpec(group, _Field.GMT_OFFSET), _GMT_OFFSET_REGEX
        case "O":
            return _FieldSpec(group, _Field.GMT_OFFSET), _GMT_OFFSET_REGEX
        case "Z" | "x" | "X":
            return _FieldSpec(group, _Field.OFFSET), _OFFSET_REGEX
        case "z" | "v" | "V":
            return _FieldSpec(group, _Field.ZONE_NAME), _zone_name_regex(names.locale_code)
        case _:
            msg = f"Unsupported pattern field '{token}'"
            raise ValueError(msg)


# ==============================================================================
# MATCHING
# ==============================================================================


@dataclass(frozen=True, slots=True)
class CompiledDatePattern:
    """A CLDR pattern compiled for one locale.

    Attributes:
        pattern: Source CLDR pattern
        locale_code: Canonical locale identifier the names were taken from
        regex: Anchored-at-use regular expression with one group per field
        fields: Meaning of each group, in pattern order
    """

    pattern: str
    locale_code: str
    regex: re.Pattern[str]
    fields: tuple[_FieldSpec, ...]

    def match(self, value: str) -> datetime:
        """Parse value, raising ValueError when it does not fit the pattern."""
        found = self.regex.fullmatch(value.strip())
        if found is None:
            msg = "Input does not match pattern"
            raise ValueError(msg)

        captured: dict[_Field, tuple[_FieldSpec, str]] = {}
        for spec in self.fields:
            text = found.group(spec.group)
            if spec.field in captured and spec.field not in _UNCHECKED_REPEATS:
                earlier_spec, earlier = captured[spec.field]
                if _field_value(earlier_spec, earlier) != _field_value(spec, text):
                    msg = f"Conflicting values '{earlier}' and '{text}' for {spec.field}"
                    raise ValueError(msg)
            captured[spec.field] = (spec, text)
        return _assemble(captured)


# Text fields whose repeats may legitimately differ in spelling
_UNCHECKED_REPEATS = frozenset({_Field.WEEKDAY, _Field.ZONE_NAME, _Field.DAY_PERIOD})


def _field_value(spec: _FieldSpec, text: str) -> int | str:
    if text.isdigit():
        return int(text)
    lowered = text.lower()
    if spec.names is not None:
        return spec.names.get(lowered, lowered)
    return lowered


def _assemble(captured: Mapping[_Field, tuple[_FieldSpec, str]]) -> datetime:
    def number(field: _Field) -> int | None:
        if field not in captured:
            return None
        return int(captured[field][1])

    def named(field: _Field) -> int | None:
        if field not in captured:
            return None
        spec, text = captured[field]
        value = (spec.names or {}).get(text.lower())
        if value is None:
            msg = f"Unknown name '{text}'"
            raise ValueError(msg)
        return value

    if named(_Field.ERA) == 0:
        msg = "Years before 1 AD are not representable"
        raise ValueError(msg)

    year = number(_Field.YEAR)
    two_digit = number(_Field.YEAR_2)
    if two_digit is not None:
        year = two_digit + (2000 if two_digit < TWO_DIGIT_YEAR_PIVOT else 1900)
    if year is None:
        year = DEFAULT_PARSE_YEAR

    month = number(_Field.MONTH)
    month_name = named(_Field.MONTH_NAME)
    if month is None:
        month = month_name
    elif month_name is not None and month_name != month:
        msg = f"Month {month} contradicts month name '{captured[_Field.MONTH_NAME][1]}'"
        raise ValueError(msg)
    day = number(_Field.DAY)

    minute = number(_Field.MINUTE) or 0
    second = number(_Field.SECOND) or 0
    hour = _hour(captured, named(_Field.PERIOD))
    if _Field.DAY_PERIOD in captured and _TWELVE_HOUR_FIELDS & captured.keys():
        spec, text = captured[_Field.DAY_PERIOD]
        spans = (spec.spans or {}).get(text.lower(), ())
        hour = _place_in_day_period(hour % 12, minute, second, spans)

    microsecond = 0
    if _Field.FRACTION in captured:
        digits = captured[_Field.FRACTION][1]
        microsecond = int(digits[:6].ljust(6, "0"))

    tzinfo = None
    if _Field.OFFSET in captured:
        tzinfo = _parse_offset(captured[_Field.OFFSET][1])
    elif _Field.GMT_OFFSET in captured:
        tzinfo = _parse_offset(captured[_Field.GMT_OFFSET][1][3:] or "Z")

    return datetime(
        year,
        month if month is not None else 1,
        day if day is not None else 1,
        hour,
        minute,
        second,
        microsecond,
        tzinfo=tzinfo,
    )


_TWELVE_HOUR_FIELDS = frozenset({_Field.HOUR_1_12, _Field.HOUR_0_11})


def _place_in_day_period(hour: int, minute: int, second: int, spans: tuple[_Span, ...]) -> int:
    """Pick the morning or afternoon reading of a 12-hour value.

    "下午3:04" is 15:04 because afternoon2 covers 13:00-19:00, while
    "凌晨3:04" (night1, 00:00-05:00) stays 03:04.
    """
    for candidate in (hour, hour + 12):
        moment = candidate * 3600 + minute * 60 + second
        if any(start <= moment < end for start, end in spans):
            return candidate
    msg = f"Hour {hour} lies outside the day period"
    raise ValueError(msg)


def _hour(captured: Mapping[_Field, tuple[_FieldSpec, str]], period: int | None) -> int:
    pm = period == 1

    if _Field.HOUR_0_23 in captured:
        return int(captured[_Field.HOUR_0_23][1])
    if _Field.HOUR_1_24 in captured:
        value = int(captured[_Field.HOUR_1_24][1])
        if not 1 <= value <= 24:
            msg = f"Hour {value} out of range 1-24"
            raise ValueError(msg)
        return value % 24
    if _Field.HOUR_1_12 in captured:
        value = int(captured[_Field.HOUR_1_12][1])
        if not 1 <= value <= 12:
            msg = f"Hour {value} out of range 1-12"
            raise ValueError(msg)
        return value % 12 + (12 if pm else 0)
    if _Field.HOUR_0_11 in captured:
        value = int(captured[_Field.HOUR_0_11][1])
        if not 0 <= value <= 11:
            msg = f"Hour {value} out of range 0-11"
            raise ValueError(msg)
        return value + (12 if pm else 0)
    return 0


def _parse_offset(text: str) -> timezone:
    """Parse 'Z', '+01', '+0100', '+01:00', '+1', '-05:30:00' into a timezone."""
    if text.upper() == "Z":
        return timezone.utc

    sign = -1 if text[0] == "-" else 1
    digits = text[1:].replace(":", "")
    if len(digits) in (1, 3, 5):
        # Localized GMT allows a single-digit hour (GMT+1, GMT+1:30)
        digits = "0" + digits
    hours = int(digits[0:2])
    minutes = int(digits[2:4] or 0)
    seconds = int(digits[4:6] or 0)
    return timezone(sign * timedelta(hours=hours, minutes=minutes, seconds=seconds))
