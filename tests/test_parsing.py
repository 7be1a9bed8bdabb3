"""Tests for parsing date/time strings into time points."""

import logging
from datetime import date, datetime, timezone
from time import time
from unittest.mock import MagicMock

import pytest

from dateconv import (
    DEFAULT_CANDIDATES,
    ParseFailure,
    format_point,
    formats,
    now,
    parse_exact,
    parse_with_fallback,
    to_datetime,
    to_time_point,
    try_parse,
    try_parse_any,
)


def _ms(*args: int) -> int:
    return int(datetime(*args, tzinfo=timezone.utc).timestamp()) * 1000


def test_parse_exact_date_in_utc():
    """Test that a date-only string becomes midnight UTC."""
    assert parse_exact("2024-01-12", formats.DATE) == _ms(2024, 1, 12)


def test_parse_exact_accepts_letter_patterns():
    """Test that yyyy-MM-dd style patterns parse like strftime ones."""
    assert parse_exact("12/01/2024 10:30", "dd/MM/yyyy HH:mm") == _ms(
        2024, 1, 12, 10, 30
    )


def test_parse_exact_keeps_milliseconds():
    """Test that the fraction field is kept down to the millisecond."""
    point = parse_exact("2024-01-12 10:00:00.123456", formats.TIMESTAMP_MICROS)
    assert point == _ms(2024, 1, 12, 10) + 123


def test_parse_exact_respects_timezone():
    """Test that naive input is read as wall time in the given zone."""
    point = parse_exact("2024-01-12 00:00", formats.TIMESTAMP_MINUTES, tz="US/Pacific")
    assert point == _ms(2024, 1, 12, 8)


def test_parse_exact_offset_in_input_wins():
    """Test that an explicit offset overrides the tz argument."""
    point = parse_exact(
        "2024-01-12 10:00 +0200", "yyyy-MM-dd HH:mm Z", tz="US/Pacific"
    )
    assert point == _ms(2024, 1, 12, 8)


def test_time_only_pattern_lands_on_epoch_day():
    """Test that time-only values are offsets into 1970-01-01."""
    assert parse_exact("01:30:00", formats.TIME) == 90 * 60 * 1000


def test_parse_exact_failure_returns_sentinel():
    """Test that unparseable input yields -1 instead of raising."""
    assert parse_exact("not-a-date", formats.DATE) == -1
    assert parse_exact("2024-01-12 10:00", formats.DATE) == -1
    assert parse_exact(None, formats.DATE) == -1  # type: ignore[arg-type]


def test_parse_exact_bad_pattern_returns_sentinel():
    """Test that a pattern with unknown letters is a parse failure."""
    assert parse_exact("2024", "QQQQ") == -1


def test_try_parse_reports_error():
    """Test that the result type carries the underlying error."""
    result = try_parse("2024-13-45", formats.DATE)

    assert not result.success
    assert result.value is None
    assert isinstance(result.error, ValueError)
    assert result.or_sentinel() == -1


def test_try_parse_reports_pattern():
    """Test that a successful result names the pattern used."""
    result = try_parse("2024-01-12", formats.DATE)

    assert result.success
    assert result.pattern == formats.DATE
    assert result.error is None


def test_fallback_first_candidate_wins():
    """Test that an ambiguous input is read by the earlier candidate."""
    day_second = parse_with_fallback("2024-01-12", ["%Y-%m-%d", "%Y-%d-%m"])
    month_second = parse_with_fallback("2024-01-12", ["%Y-%d-%m", "%Y-%m-%d"])

    assert day_second == _ms(2024, 1, 12)
    assert month_second == _ms(2024, 12, 1)


def test_fallback_skips_failing_candidates():
    """Test that later candidates are tried after earlier ones fail."""
    result = try_parse_any("12/01/2024", [formats.DATE, formats.DATE_DAY_FIRST])

    assert result.value == _ms(2024, 1, 12)
    assert result.pattern == formats.DATE_DAY_FIRST


@pytest.mark.parametrize(
    "value,expected",
    [
        ("2024-01-12 10:15:30.250", _ms(2024, 1, 12, 10, 15, 30) + 250),
        ("2024-01-12 10:15:30", _ms(2024, 1, 12, 10, 15, 30)),
        ("2024-01-12 10:15", _ms(2024, 1, 12, 10, 15)),
        ("2024-01-12 10", _ms(2024, 1, 12, 10)),
        ("2024-01-12", _ms(2024, 1, 12)),
        ("2024/01/12", _ms(2024, 1, 12)),
        ("12/01/2024", _ms(2024, 1, 12)),
        ("2024-01", _ms(2024, 1, 1)),
        ("2024", _ms(2024, 1, 1)),
        ("10:15", _ms(1970, 1, 1, 10, 15)),
    ],
)
def test_fallback_default_candidates(value, expected):
    """Test the default candidate list against common layouts."""
    assert parse_with_fallback(value) == expected


def test_fallback_accepts_single_pattern_string():
    """Test that a bare pattern string is treated as a one-item list."""
    assert parse_with_fallback("2024-01-12", formats.DATE) == _ms(2024, 1, 12)


def test_fallback_failure():
    """Test that no matching candidate yields ParseFailure and -1."""
    result = try_parse_any("Jan 12 2024")

    assert not result.success
    assert isinstance(result.error, ParseFailure)
    assert result.error.patterns == DEFAULT_CANDIDATES
    assert parse_with_fallback("Jan 12 2024") == -1


def test_fallback_empty_candidates_fails():
    """Test that an empty candidate list never matches."""
    assert parse_with_fallback("2024-01-12", []) == -1


def test_fallback_lenient():
    """Test that lenient mode lets dateutil read unlisted layouts."""
    assert parse_with_fallback("Jan 12 2024 10:00", lenient=True) == _ms(
        2024, 1, 12, 10
    )
    assert parse_with_fallback("definitely not a date", lenient=True) == -1


def test_round_trip_through_pattern():
    """Test that format then parse restores the point, minus precision."""
    point = _ms(2024, 3, 5, 14, 7, 9)

    for pattern in (formats.TIMESTAMP, formats.TIMESTAMP_MICROS, "dd/MM/yyyy HH:mm:ss"):
        assert parse_with_fallback(format_point(point, pattern), [pattern]) == point

    text = format_point(point, formats.TIMESTAMP_MINUTES)
    assert parse_with_fallback(text, [formats.TIMESTAMP_MINUTES]) == _ms(
        2024, 3, 5, 14, 7
    )


def test_no_diagnostics_on_success(caplog):
    """Test that successful parses log nothing."""
    caplog.set_level(logging.DEBUG, logger="dateconv")

    parse_exact("2024-01-12", formats.DATE)
    parse_with_fallback("2024-01-12", [formats.DATE])

    assert caplog.records == []


def test_failure_logs_one_warning(caplog):
    """Test that a failed fallback parse logs a single warning."""
    caplog.set_level(logging.DEBUG, logger="dateconv")

    parse_with_fallback("garbage", [formats.DATE, formats.TIME])

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    debugs = [r for r in caplog.records if r.levelno == logging.DEBUG]
    assert len(warnings) == 1
    assert "garbage" in warnings[0].getMessage()
    assert len(debugs) == 2


def test_injected_logger():
    """Test that diagnostics go to a caller-supplied logger."""
    log = MagicMock(spec=logging.Logger)

    parse_exact("2024-01-12", formats.DATE, logger=log)
    log.warning.assert_not_called()

    parse_exact("nope", formats.DATE, logger=log)
    log.warning.assert_called_once()


def test_to_time_point_and_back():
    """Test conversion between datetimes and time points."""
    dt = datetime(2024, 1, 12, 10, 30, tzinfo=timezone.utc)
    point = to_time_point(dt)

    assert point == _ms(2024, 1, 12, 10, 30)
    assert to_datetime(point) == dt
    assert to_time_point(date(2024, 1, 12)) == _ms(2024, 1, 12)
    assert to_time_point(datetime(2024, 1, 12), tz="US/Pacific") == _ms(
        2024, 1, 12, 8
    )


def test_to_datetime_before_epoch():
    """Test that negative time points map before 1970."""
    assert to_datetime(-1000) == datetime(1969, 12, 31, 23, 59, 59, tzinfo=timezone.utc)


def test_now_reads_clock():
    """Test that now() tracks the system clock in milliseconds."""
    assert abs(now() - int(time() * 1000)) < 1000


def test_year_less_pattern_accepts_leap_day():
    """Test that Feb 29 without a year rolls over to Mar 1 of the epoch year."""
    assert parse_exact("02-29", "MM-dd") == _ms(1970, 3, 1)
    assert parse_exact("03-01", "MM-dd") == _ms(1970, 3, 1)
    assert parse_exact("12-31 23:59", "MM-dd HH:mm") == _ms(1970, 12, 31, 23, 59)
    assert parse_exact("02-30", "MM-dd") == -1
