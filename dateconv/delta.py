"""Elapsed-time arithmetic on time points.

All durations are non-negative ``int`` milliseconds. Functions taking a
string plus a pattern parse it first and return a sentinel (``-1`` or
``"00:00:00"``) if it cannot be parsed.
"""

from typing import Literal, TypeAlias

from dateconv.parsing import now, try_parse
from dateconv.result import FAILED, FAILED_CLOCK
from dateconv.util import DAY, HOUR, MILLISECOND, MINUTE, SECOND

DurationUnit: TypeAlias = Literal["milliseconds", "seconds", "minutes", "hours", "days"]

SCALES: dict[str, int] = {
    "milliseconds": MILLISECOND,
    "seconds": SECOND,
    "minutes": MINUTE,
    "hours": HOUR,
    "days": DAY,
}


def absolute_delta(a: int, b: int) -> int:
    """Return the distance between two time points in milliseconds."""
    return abs(a - b)


def elapsed_since_now(point: int) -> int:
    """Return milliseconds between ``point`` and the clock at call time."""
    return absolute_delta(point, now())


def convert_duration(milliseconds: int, unit: DurationUnit) -> int:
    """Convert a duration to ``unit``, truncating any remainder.

    Example:
        >>> convert_duration(90_000, "minutes")
        1

    Raises:
        ValueError: If ``unit`` is not a known duration unit
    """
    if unit not in SCALES:
        valid = ", ".join(SCALES)
        raise ValueError(f"Invalid unit '{unit}'. Valid units: {valid}")
    return milliseconds // SCALES[unit]


def format_as_clock(milliseconds: int) -> str:
    """Render a duration as ``HH:mm:ss`` on a 24-hour clock face.

    Whole days are dropped, so 30 hours renders as ``"06:00:00"``.
    Use :func:`format_duration` for a running total of hours.
    """
    seconds = (milliseconds // SECOND) % 60
    minutes = (milliseconds // MINUTE) % 60
    hours = (milliseconds // HOUR) % 24
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_duration(milliseconds: int) -> str:
    """Render a duration as ``HH:mm:ss`` without wrapping the hours."""
    seconds = (milliseconds // SECOND) % 60
    minutes = (milliseconds // MINUTE) % 60
    hours = milliseconds // HOUR
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def hours_between(a: int, b: int) -> int:
    return convert_duration(absolute_delta(a, b), "hours")


def hours_between_strings(
    from_value: str, to_value: str, pattern: str, *, tz: str = "UTC"
) -> int:
    """Whole hours between two date strings sharing one pattern, or ``-1``."""
    start = try_parse(from_value, pattern, tz=tz)
    end = try_parse(to_value, pattern, tz=tz)
    if start.value is None or end.value is None:
        return FAILED
    return hours_between(start.value, end.value)


def hours_since(point: int) -> int:
    return elapsed_in_unit(point, "hours")


def hours_since_string(value: str, pattern: str, *, tz: str = "UTC") -> int:
    return elapsed_in_unit_string(value, pattern, "hours", tz=tz)


def elapsed_in_unit(point: int, unit: DurationUnit) -> int:
    return convert_duration(elapsed_since_now(point), unit)


def elapsed_in_unit_string(
    value: str, pattern: str, unit: DurationUnit, *, tz: str = "UTC"
) -> int:
    """Time between a date string and now in ``unit``, or ``-1`` if unparseable."""
    result = try_parse(value, pattern, tz=tz)
    if result.value is None:
        return FAILED
    return elapsed_in_unit(result.value, unit)


def elapsed_clock(point: int) -> str:
    return format_as_clock(elapsed_since_now(point))


def elapsed_clock_string(value: str, pattern: str, *, tz: str = "UTC") -> str:
    """Time between a date string and now as ``HH:mm:ss``, or ``"00:00:00"``."""
    result = try_parse(value, pattern, tz=tz)
    if result.value is None:
        return FAILED_CLOCK
    return elapsed_clock(result.value)
