"""Rendering time points as strings.

Plain rendering goes through ``strftime``. Locale-aware rendering is
delegated to Babel's CLDR data; nothing here knows about month names or
locale conventions itself.
"""

from typing import Literal, TypeAlias

from babel import Locale, UnknownLocaleError
from babel.dates import format_date

from dateconv.formats import to_strftime
from dateconv.parsing import now, to_datetime, try_parse

Style: TypeAlias = Literal["full", "long", "medium", "short"]

_STYLES = ("full", "long", "medium", "short")


def format_point(point: int, pattern: str, *, tz: str = "UTC") -> str:
    """Render a time point with a pattern, as wall time in ``tz``."""
    return to_datetime(point, tz=tz).strftime(to_strftime(pattern))


def current_date(pattern: str, *, tz: str = "UTC") -> str:
    """Render the current date and time with a pattern."""
    return format_point(now(), pattern, tz=tz)


def reformat(
    value: str, input_pattern: str, output_pattern: str, *, tz: str = "UTC"
) -> str:
    """Re-render a date string in another pattern.

    Returns ``value`` unchanged if it does not match ``input_pattern``.

    Example:
        >>> reformat("2024-01-12", "yyyy-MM-dd", "dd/MM/yyyy")
        '12/01/2024'
    """
    result = try_parse(value, input_pattern, tz=tz)
    if result.value is None:
        return value
    return format_point(result.value, output_pattern, tz=tz)


def _resolve_locale(language: str, region: str) -> Locale:
    """Return the locale for language/region, codes in any case.

    Pairs without their own CLDR data (e.g. fr/US) fall back to the language.
    """
    try:
        return Locale.parse(f"{language}_{region}")
    except UnknownLocaleError:
        return Locale.parse(language)


def format_localized(
    point: int,
    language: str,
    region: str,
    style: Style = "full",
    *,
    tz: str = "UTC",
) -> str:
    """Render the date of a time point the way a locale writes it.

    Args:
        point: Time point in epoch milliseconds
        language: ISO 639 language code (e.g., "en", "es")
        region: ISO 3166 region code (e.g., "US", "MX")
        style: "full", "long", "medium" or "short"
        tz: IANA timezone the date is taken in

    Returns:
        Localized date string, e.g. "Friday, January 12, 2024" for en/US

    Raises:
        ValueError: If ``style`` is not one of the supported styles
        babel.UnknownLocaleError: If no locale data exists for the language
    """
    if style not in _STYLES:
        valid = ", ".join(_STYLES)
        raise ValueError(f"Invalid style '{style}'. Valid styles: {valid}")
    locale = _resolve_locale(language, region)
    return format_date(to_datetime(point, tz=tz).date(), format=style, locale=locale)


def reformat_localized(
    value: str,
    input_pattern: str,
    language: str,
    region: str,
    style: Style = "full",
    *,
    tz: str = "UTC",
) -> str:
    """Parse a date string and render it for a locale.

    Returns ``value`` unchanged if it does not match ``input_pattern``.
    """
    result = try_parse(value, input_pattern, tz=tz)
    if result.value is None:
        return value
    return format_localized(result.value, language, region, style, tz=tz)
