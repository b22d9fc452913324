"""Exception hierarchy for cldrdates.

Formatting failures are raised; parse failures are returned alongside a
``None`` result so callers can treat an unparseable string as an absent
value rather than an exceptional one.

Python 3.13+. Zero external dependencies.
"""

__all__ = ["DateError", "DateFormattingError", "DateParseError"]


class DateError(Exception):
    """Base exception for all cldrdates errors."""


class DateFormattingError(DateError):
    """Raised when rendering a date with a configured formatter fails.

    Typical cause is a pattern containing a letter Babel does not support.
    The error carries a fallback_value (ISO 8601 text of the input) that
    callers can show instead of failing outright.

    Attributes:
        fallback_value: String to use in output when formatting fails
    """

    def __init__(self, message: str, fallback_value: str) -> None:
        """Initialize DateFormattingError.

        Args:
            message: Error message
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value


class DateParseError(DateError):
    """Record of a string that could not be turned into a datetime.

    Returned in the error tuple of DateFormatter.parse(), never raised by it.

    Attributes:
        input_value: The string that failed to parse
        locale_code: Canonical identifier of the formatter's locale
        pattern: CLDR pattern the input was matched against

    Example:
        >>> result, errors = formatter.parse("not-a-date")
        >>> if errors:
        ...     for error in errors:
        ...         print(f"Parse failed: {error.input_value} ({error.pattern})")
    """

    def __init__(
        self,
        message: str,
        *,
        input_value: str = "",
        locale_code: str = "",
        pattern: str = "",
    ) -> None:
        """Initialize DateParseError.

        Args:
            message: Error message
            input_value: The string that failed to parse
            locale_code: The locale used for parsing
            pattern: The CLDR pattern used for parsing
        """
        super().__init__(message)
        self.input_value = input_value
        self.locale_code = locale_code
        self.pattern = pattern
