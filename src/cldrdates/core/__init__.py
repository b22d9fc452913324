"""Core types shared across the parsing and runtime layers.

Python 3.13+.
"""

from .errors import DateError, DateFormattingError, DateParseError

__all__ = [
    "DateError",
    "DateFormattingError",
    "DateParseError",
]
