"""Formatter configurations: the closed set of ways a formatter can be set up.

A configuration is one of six immutable variants:

    Style(date_style, time_style)
    Template(template)
    Pattern(pattern)
    LocalizedStyle(date_style, time_style, locale)
    LocalizedTemplate(template, locale)
    LocalizedPattern(pattern, locale)

Each variant renders a canonical cache key and applies itself to a blank
DateFormatter. Both operations are single exhaustive ``match`` statements in
this module, so adding a variant means extending the ``Configuration`` alias
and both functions together; type checkers flag a missed case through
``assert_never``.

Cache Key Structure:
    variantName(field,field,...)
    - fields in declared order, comma-joined
    - styles by enum value, locales by canonical identifier

    >>> Style(FormatStyle.SHORT, FormatStyle.NONE).cache_key()
    'style(short,none)'
    >>> LocalizedPattern("yyyy-MM-dd", "de-DE").cache_key()
    'localizedPattern(yyyy-MM-dd,de_DE)'

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, assert_never

from cldrdates.enums import FormatStyle
from cldrdates.locale_utils import canonical_locale_id, coerce_locale

if TYPE_CHECKING:
    from babel import Locale

    from cldrdates.runtime.formatter import DateFormatter

__all__ = [
    "Configuration",
    "LocalizedPattern",
    "LocalizedStyle",
    "LocalizedTemplate",
    "Pattern",
    "Style",
    "Template",
    "apply_configuration",
    "configuration_cache_key",
]


class _ConfigurationMixin:
    """Method surface shared by all variants; logic lives in the functions below."""

    __slots__ = ()

    def cache_key(self) -> str:
        """Canonical cache key for this configuration."""
        return configuration_cache_key(self)  # type: ignore[arg-type]

    def apply(self, formatter: DateFormatter) -> None:
        """Configure a blank formatter with this configuration's settings."""
        apply_configuration(self, formatter)  # type: ignore[arg-type]


def _style(value: FormatStyle | str) -> FormatStyle:
    return FormatStyle(value)


@dataclass(frozen=True, slots=True)
class Style(_ConfigurationMixin):
    """Predefined date and time styles in the formatter's default locale."""

    date_style: FormatStyle
    time_style: FormatStyle

    def __post_init__(self) -> None:
        object.__setattr__(self, "date_style", _style(self.date_style))
        object.__setattr__(self, "time_style", _style(self.time_style))


@dataclass(frozen=True, slots=True)
class Template(_ConfigurationMixin):
    """Skeleton (e.g. "yMMMd") expanded to the default locale's pattern."""

    template: str


@dataclass(frozen=True, slots=True)
class Pattern(_ConfigurationMixin):
    """Literal CLDR pattern (e.g. "yyyy-MM-dd"), used as is."""

    pattern: str


@dataclass(frozen=True, slots=True)
class LocalizedStyle(_ConfigurationMixin):
    """Predefined date and time styles in an explicit locale."""

    date_style: FormatStyle
    time_style: FormatStyle
    locale: Locale

    def __post_init__(self) -> None:
        object.__setattr__(self, "date_style", _style(self.date_style))
        object.__setattr__(self, "time_style", _style(self.time_style))
        object.__setattr__(self, "locale", coerce_locale(self.locale))


@dataclass(frozen=True, slots=True)
class LocalizedTemplate(_ConfigurationMixin):
    """Skeleton expanded with an explicit locale."""

    template: str
    locale: Locale

    def __post_init__(self) -> None:
        object.__setattr__(self, "locale", coerce_locale(self.locale))


@dataclass(frozen=True, slots=True)
class LocalizedPattern(_ConfigurationMixin):
    """Literal CLDR pattern rendered with an explicit locale."""

    pattern: str
    locale: Locale

    def __post_init__(self) -> None:
        object.__setattr__(self, "locale", coerce_locale(self.locale))


type Configuration = (
    Style | Template | Pattern | LocalizedStyle | LocalizedTemplate | LocalizedPattern
)


def configuration_cache_key(configuration: Configuration) -> str:
    """Render the canonical cache key of a configuration.

    Two configurations that apply identical settings produce identical keys;
    any differing field (style, template, pattern, locale) changes the key.
    """
    match configuration:
        case Style(date_style, time_style):
            return f"style({date_style},{time_style})"
        case Template(template):
            return f"template({template})"
        case Pattern(pattern):
            return f"pattern({pattern})"
        case LocalizedStyle(date_style, time_style, locale):
            return f"localizedStyle({date_style},{time_style},{canonical_locale_id(locale)})"
        case LocalizedTemplate(template, locale):
            return f"localizedTemplate({template},{canonical_locale_id(locale)})"
        case LocalizedPattern(pattern, locale):
            return f"localizedPattern({pattern},{canonical_locale_id(locale)})"
        case _:
            assert_never(configuration)


def apply_configuration(configuration: Configuration, formatter: DateFormatter) -> None:
    """Assign the settings implied by a configuration to a formatter.

    Only assigns, never accumulates, so applying twice leaves the same state.
    Localized variants set the locale first so that template expansion and
    style lookup see the override.
    """
    match configuration:
        case Style(date_style, time_style):
            formatter.date_style = date_style
            formatter.time_style = time_style
        case Template(template):
            formatter.set_localized_date_format_from_template(template)
        case Pattern(pattern):
            formatter.date_format = pattern
        case LocalizedStyle(date_style, time_style, locale):
            formatter.locale = locale
            formatter.date_style = date_style
            formatter.time_style = time_style
        case LocalizedTemplate(template, locale):
            formatter.locale = locale
            formatter.set_localized_date_format_from_template(template)
        case LocalizedPattern(pattern, locale):
            formatter.locale = locale
            formatter.date_format = pattern
        case _:
            assert_never(configuration)
