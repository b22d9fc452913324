"""Skeleton to pattern expansion with CLDR availableFormats.

A skeleton ("yMMMd", "jmm") lists the wanted fields and widths without order
or punctuation; the locale's availableFormats map skeletons to patterns
("MMM d, y"). Babel ships the data and a distance-based best match, and this
module adds the pattern-generator steps around it:

    1. j/J/C resolve to the locale's preferred hour letter
    2. exact skeleton lookup, then best match with identical fields
    3. date and time halves matched separately and joined with the
       locale's dateTimeFormat ("{1} 'at' {0}")
    4. best match allowing different fields
    5. matched patterns are widened to the requested field widths, so
       "yMMMMd" yields "MMMM d, y" rather than "MMM d, y"

Numeric and text forms never convert into each other: a requested "MMMM"
widens "MMM" but leaves a numeric "M" alone.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from babel import dates as babel_dates

from cldrdates.parsing.dates import tokenize_pattern

if TYPE_CHECKING:
    from collections.abc import Mapping

    from babel import Locale

__all__ = ["expand_skeleton"]

_HOUR_LETTERS = frozenset("hHkK")
_PREFERRED_HOUR_SUBSTITUTES = frozenset("jJC")
_DATE_LETTERS = frozenset("GyYuUrQqMLlwWdDFgEec")
_TIME_LETTERS = frozenset("abBhHkKmsSAzZOvVXx")

# Letters that share a requested width (L is stand-alone M, c/e are local E)
_WIDTH_FAMILY = {"L": "M", "c": "E", "e": "E"}
# Widths from which these letters render text instead of numbers
_TEXT_FROM = {"M": 3, "L": 3, "c": 3, "e": 3}


def expand_skeleton(skeleton: str, locale: Locale) -> str | None:
    """Best CLDR pattern for a skeleton in a locale, or None without any match.

    Examples:
        >>> expand_skeleton("yMMMd", Locale.parse("en_US"))
        'MMM d, y'
        >>> expand_skeleton("yMMMMd", Locale.parse("en_US"))
        'MMMM d, y'
    """
    skeleton = _resolve_hour_letters(skeleton, locale)
    skeletons = locale.datetime_skeletons
    requested = _requested_widths(skeleton)
    if not requested:
        return None

    pattern = _match(skeleton, skeletons)
    if pattern is None:
        pattern = _match_halves(skeleton, locale)
    if pattern is None:
        key = babel_dates.match_skeleton(skeleton, skeletons, allow_different_fields=True)
        if key is not None:
            pattern = str(skeletons[key].pattern)
    if pattern is None:
        return None
    return _widen_fields(pattern, requested)


def _preferred_hour_letter(locale: Locale) -> str:
    short_time = locale.time_formats.get("short")
    if short_time is not None:
        for text, is_field in tokenize_pattern(str(short_time.pattern)):
            if is_field and text[0] in _HOUR_LETTERS:
                return text[0]
    return "H"


def _resolve_hour_letters(skeleton: str, locale: Locale) -> str:
    if not _PREFERRED_HOUR_SUBSTITUTES & set(skeleton):
        return skeleton
    letter = _preferred_hour_letter(locale)
    return "".join(letter if char in _PREFERRED_HOUR_SUBSTITUTES else char for char in skeleton)


def _requested_widths(skeleton: str) -> dict[str, int]:
    widths: dict[str, int] = {}
    for text, is_field in tokenize_pattern(skeleton):
        if is_field:
            family = _WIDTH_FAMILY.get(text[0], text[0])
            widths[family] = max(widths.get(family, 0), len(text))
    return widths


def _match(skeleton: str, skeletons: Mapping[str, object]) -> str | None:
    key = skeleton if skeleton in skeletons else babel_dates.match_skeleton(skeleton, skeletons)
    if key is None:
        return None
    return str(skeletons[key].pattern)  # type: ignore[attr-defined]


def _match_halves(skeleton: str, locale: Locale) -> str | None:
    date_part = "".join(char for char in skeleton if char in _DATE_LETTERS)
    time_part = "".join(char for char in skeleton if char in _TIME_LETTERS)
    if not date_part or not time_part:
        return None

    skeletons = locale.datetime_skeletons
    date_pattern = _match(date_part, skeletons)
    time_pattern = _match(time_part, skeletons)
    if date_pattern is None or time_pattern is None:
        return None

    combine = locale.datetime_formats.get(_combine_length(date_part)) or "{1} {0}"
    return str(combine).replace("{1}", date_pattern).replace("{0}", time_pattern)


def _combine_length(date_skeleton: str) -> str:
    """dateTimeFormat length implied by the date half's month and weekday widths."""
    month = date_skeleton.count("M") + date_skeleton.count("L")
    if month >= 4:
        return "full" if "E" in date_skeleton else "long"
    if month == 3:
        return "medium"
    return "short"


def _widen_fields(pattern: str, requested: Mapping[str, int]) -> str:
    out: list[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        char = pattern[i]

        if char == "'":
            # Copy quoted literals unchanged, honoring '' escapes
            j = i + 1
            while j < n:
                if pattern[j] == "'":
                    if j + 1 < n and pattern[j + 1] == "'" and j != i + 1:
                        j += 2
                        continue
                    break
                j += 1
            out.append(pattern[i : j + 1])
            i = j + 1
            continue

        if char.isascii() and char.isalpha():
            j = i + 1
            while j < n and pattern[j] == char:
                j += 1
            width = j - i
            wanted = requested.get(_WIDTH_FAMILY.get(char, char), 0)
            threshold = _TEXT_FROM.get(char)
            same_kind = threshold is None or (width >= threshold) == (wanted >= threshold)
            if wanted > width and same_kind:
                width = wanted
            out.append(char * width)
            i = j
            continue

        out.append(char)
        i += 1
    return "".join(out)
