"""Parsing date/time strings into time points.

A time point is an ``int`` count of milliseconds since the Unix epoch.
Every parse comes in two forms: a ``try_*`` function returning a
:class:`~dateconv.result.ParseResult`, and a sentinel form returning ``-1``
when the input cannot be parsed. Neither form raises on bad input.
"""

import logging
from collections.abc import Sequence
from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo

from dateutil import parser as dateutil_parser

from dateconv.formats import DEFAULT_CANDIDATES, has_year, to_strftime
from dateconv.result import ParseFailure, ParseResult
from dateconv.util import EPOCH, MILLISECOND, now

_log = logging.getLogger(__name__)

_ONE_MS = timedelta(milliseconds=MILLISECOND)
_LEAP_YEAR = 1972


def _to_point(dt: datetime, zone: ZoneInfo) -> int:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=zone)
    return (dt - EPOCH) // _ONE_MS


def to_time_point(dt: datetime | date, *, tz: str = "UTC") -> int:
    """Convert a datetime or date to epoch milliseconds.

    Naive datetimes are read as wall time in ``tz``; dates become midnight
    in ``tz``. Aware datetimes keep their own offset.
    """
    if not isinstance(dt, datetime):
        dt = datetime.combine(dt, time.min)
    return _to_point(dt, ZoneInfo(tz))


def to_datetime(point: int, *, tz: str = "UTC") -> datetime:
    """Convert epoch milliseconds to an aware datetime in ``tz``."""
    return (EPOCH + point * _ONE_MS).astimezone(ZoneInfo(tz))


def _attempt(value: str, pattern: str, zone: ZoneInfo) -> ParseResult:
    try:
        directives = to_strftime(pattern)
        if has_year(directives):
            parsed = datetime.strptime(value, directives)
        else:
            # Parse against a leap year so 02-29 is accepted
            if not isinstance(value, str):
                raise TypeError(f"Expected a string, got {type(value).__name__}")
            parsed = datetime.strptime(
                f"{_LEAP_YEAR}|{value}", f"%Y|{directives}"
            )
    except (ValueError, TypeError) as e:
        return ParseResult(success=False, value=None, error=e)

    # Year-less values sit in the epoch year; Feb 29 rolls over to Mar 1
    if not has_year(directives):
        if (parsed.month, parsed.day) == (2, 29):
            parsed = parsed.replace(year=EPOCH.year, month=3, day=1)
        else:
            parsed = parsed.replace(year=EPOCH.year)
    return ParseResult(
        success=True, value=_to_point(parsed, zone), error=None, pattern=pattern
    )


def try_parse(
    value: str,
    pattern: str,
    *,
    tz: str = "UTC",
    logger: logging.Logger | None = None,
) -> ParseResult:
    """Parse ``value`` with exactly one pattern.

    Args:
        value: Date/time string to parse
        pattern: ``strftime`` or ``yyyy-MM-dd`` style pattern
        tz: IANA timezone used for values without an offset
        logger: Receives the failure diagnostic (default: module logger)

    Returns:
        ParseResult holding the time point, or the error on failure
    """
    log = logger or _log
    result = _attempt(value, pattern, ZoneInfo(tz))
    if not result.success:
        log.warning("Could not parse %r with %r: %s", value, pattern, result.error)
    return result


def parse_exact(
    value: str,
    pattern: str,
    *,
    tz: str = "UTC",
    logger: logging.Logger | None = None,
) -> int:
    """Parse ``value`` with exactly one pattern, returning ``-1`` on failure."""
    return try_parse(value, pattern, tz=tz, logger=logger).or_sentinel()


def try_parse_any(
    value: str,
    candidates: Sequence[str] | None = None,
    *,
    tz: str = "UTC",
    lenient: bool = False,
    logger: logging.Logger | None = None,
) -> ParseResult:
    """Parse ``value`` with the first candidate pattern that matches.

    Candidates are tried strictly in order, so an input that two patterns
    accept is read the way the earlier one reads it.

    Args:
        value: Date/time string to parse
        candidates: Ordered patterns to try (default: ``DEFAULT_CANDIDATES``)
        tz: IANA timezone used for values without an offset
        lenient: After every candidate fails, let ``dateutil`` guess the layout
        logger: Receives diagnostics (default: module logger)

    Returns:
        ParseResult from the first matching pattern, or one carrying a
        ParseFailure if nothing matched

    Example:
        >>> try_parse_any("12/01/2024", ["%d/%m/%Y", "%m/%d/%Y"]).pattern
        '%d/%m/%Y'
    """
    log = logger or _log
    zone = ZoneInfo(tz)

    if candidates is None:
        patterns = DEFAULT_CANDIDATES
    elif isinstance(candidates, str):
        patterns = (candidates,)
    else:
        patterns = tuple(candidates)

    for pattern in patterns:
        result = _attempt(value, pattern, zone)
        if result.success:
            return result
        log.debug("Pattern %r rejected %r: %s", pattern, value, result.error)

    if lenient:
        try:
            parsed = dateutil_parser.parse(value)
        except (ValueError, OverflowError, TypeError) as e:
            log.debug("Lenient parse rejected %r: %s", value, e)
        else:
            return ParseResult(success=True, value=_to_point(parsed, zone), error=None)

    failure = ParseFailure(value, patterns)
    log.warning("%s", failure)
    return ParseResult(success=False, value=None, error=failure)


def parse_with_fallback(
    value: str,
    candidates: Sequence[str] | None = None,
    *,
    tz: str = "UTC",
    lenient: bool = False,
    logger: logging.Logger | None = None,
) -> int:
    """Parse ``value`` with the first matching candidate, returning ``-1`` on failure."""
    return try_parse_any(
        value, candidates, tz=tz, lenient=lenient, logger=logger
    ).or_sentinel()


__all__ = [
    "now",
    "to_time_point",
    "to_datetime",
    "try_parse",
    "parse_exact",
    "try_parse_any",
    "parse_with_fallback",
]
