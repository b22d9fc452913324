"""Runtime package: formatter engine, configurations and the formatter cache.

Depends on the parsing package for string-to-date conversion.

Python 3.13+.
"""

from .cache import FormatterCache, get_default_cache, reset_default_cache
from .configuration import (
    Configuration,
    LocalizedPattern,
    LocalizedStyle,
    LocalizedTemplate,
    Pattern,
    Style,
    Template,
    apply_configuration,
    configuration_cache_key,
)
from .formatter import DateFormatter

__all__ = [
    "Configuration",
    "DateFormatter",
    "FormatterCache",
    "LocalizedPattern",
    "LocalizedStyle",
    "LocalizedTemplate",
    "Pattern",
    "Style",
    "Template",
    "apply_configuration",
    "configuration_cache_key",
    "get_default_cache",
    "reset_default_cache",
]
