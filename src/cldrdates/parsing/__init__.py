"""Parsing: locale-aware display strings back to Python datetimes.

- Functions NEVER raise for unparseable input - errors are returned in tuple
- Inverse of Babel's pattern-based date formatting

Public API:
    parse_date_string - Returns tuple[datetime | None, tuple[DateParseError, ...]]
    compile_date_pattern - Compiled, cached (pattern, locale) matcher
    clear_pattern_cache - Drop compiled patterns

Example:
    >>> from babel import Locale
    >>> from cldrdates.parsing import parse_date_string
    >>> result, errors = parse_date_string("7 mars 2024", "d MMMM y", Locale.parse("fr_FR"))
    >>> result
    datetime.datetime(2024, 3, 7, 0, 0)

Python 3.13+. Uses Babel CLDR data + stdlib re.
"""

from .dates import (
    CompiledDatePattern,
    clear_pattern_cache,
    compile_date_pattern,
    parse_date_string,
    tokenize_pattern,
)

__all__ = [
    "CompiledDatePattern",
    "clear_pattern_cache",
    "compile_date_pattern",
    "parse_date_string",
    "tokenize_pattern",
]
