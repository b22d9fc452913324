"""cldrdates - cached, locale-aware date formatting and parsing.

Converts between dates and text under a combination of style, template
(skeleton), explicit CLDR pattern and locale. Configured formatters are
expensive to build and cheap to reuse, so they are built once per distinct
configuration and cached for the life of the process.

Public API:
    format_with_style / format_with_template / format_with_pattern
        date or datetime -> str
    parse_with_style / parse_with_template / parse_with_pattern
        str -> datetime | None
    Style, Template, Pattern, LocalizedStyle, LocalizedTemplate, LocalizedPattern
        Configuration variants
    FormatterCache - get-or-create cache of configured formatters
    DateFormatter - the configurable formatter handed out by the cache
    FormatStyle - none/short/medium/long/full

Exceptions:
    DateError - Base exception class
    DateFormattingError - Formatting failed (carries fallback_value)
    DateParseError - Parse failure record (returned, not raised)

Submodules:
    cldrdates.runtime - DateFormatter, configurations, FormatterCache
    cldrdates.parsing - CLDR pattern to datetime parsing
    cldrdates.locale_utils - Locale normalization and default locale lookup
"""

from .conversion import (
    format_with_pattern,
    format_with_style,
    format_with_template,
    parse_with_pattern,
    parse_with_style,
    parse_with_template,
)
from .core.errors import DateError, DateFormattingError, DateParseError
from .enums import FormatStyle
from .runtime import (
    Configuration,
    DateFormatter,
    FormatterCache,
    LocalizedPattern,
    LocalizedStyle,
    LocalizedTemplate,
    Pattern,
    Style,
    Template,
    get_default_cache,
    reset_default_cache,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("cldrdates")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Configuration",
    "DateError",
    "DateFormatter",
    "DateFormattingError",
    "DateParseError",
    "FormatStyle",
    "FormatterCache",
    "LocalizedPattern",
    "LocalizedStyle",
    "LocalizedTemplate",
    "Pattern",
    "Style",
    "Template",
    "__version__",
    "format_with_pattern",
    "format_with_style",
    "format_with_template",
    "get_default_cache",
    "parse_with_pattern",
    "parse_with_style",
    "parse_with_template",
    "reset_default_cache",
]
