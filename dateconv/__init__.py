from . import formats
from .delta import (
    DurationUnit,
    absolute_delta,
    convert_duration,
    elapsed_clock,
    elapsed_clock_string,
    elapsed_in_unit,
    elapsed_in_unit_string,
    elapsed_since_now,
    format_as_clock,
    format_duration,
    hours_between,
    hours_between_strings,
    hours_since,
    hours_since_string,
)
from .formats import DEFAULT_CANDIDATES, to_strftime
from .formatting import (
    current_date,
    format_localized,
    format_point,
    reformat,
    reformat_localized,
)
from .parsing import (
    now,
    parse_exact,
    parse_with_fallback,
    to_datetime,
    to_time_point,
    try_parse,
    try_parse_any,
)
from .result import FAILED, FAILED_CLOCK, ParseFailure, ParseResult

__all__ = [
    "formats",
    "DEFAULT_CANDIDATES",
    "to_strftime",
    "ParseResult",
    "ParseFailure",
    "FAILED",
    "FAILED_CLOCK",
    "now",
    "to_time_point",
    "to_datetime",
    "try_parse",
    "parse_exact",
    "try_parse_any",
    "parse_with_fallback",
    "DurationUnit",
    "absolute_delta",
    "elapsed_since_now",
    "convert_duration",
    "format_as_clock",
    "format_duration",
    "hours_between",
    "hours_between_strings",
    "hours_since",
    "hours_since_string",
    "elapsed_in_unit",
    "elapsed_in_unit_string",
    "elapsed_clock",
    "elapsed_clock_string",
    "format_point",
    "current_date",
    "reformat",
    "format_localized",
    "reformat_localized",
]
