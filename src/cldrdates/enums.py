"""Enumerations for cldrdates type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they drop straight into
Babel calls and cache keys.

Python 3.13+.
"""

from enum import StrEnum


class FormatStyle(StrEnum):
    """Predefined date or time formatting style.

    Values match the CLDR format lengths used by Babel, plus NONE which
    leaves that half of the output out entirely.

    StrEnum provides automatic string conversion: str(FormatStyle.SHORT) == "short"
    """

    NONE = "none"
    """Omit this component (no date part or no time part)."""

    SHORT = "short"
    """Numeric, e.g. 3/7/24 or 3:30 PM"""

    MEDIUM = "medium"
    """Abbreviated, e.g. Mar 7, 2024"""

    LONG = "long"
    """Full month name, e.g. March 7, 2024"""

    FULL = "full"
    """Weekday included, e.g. Thursday, March 7, 2024"""

    @property
    def is_none(self) -> bool:
        """True for the NONE style."""
        return self is FormatStyle.NONE


__all__ = [
    "FormatStyle",
]
