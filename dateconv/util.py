"""Utility constants and helpers for dateconv.

Time unit constants represent durations in milliseconds.
These are used throughout the API for consistent time representation.
"""

from datetime import datetime, timezone
from time import time as current_time

# Time unit constants (all values in milliseconds)
MILLISECOND = 1
SECOND = 1000
MINUTE = 60000
HOUR = 3600000
DAY = 86400000

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def now() -> int:
    """Return the current system clock reading in milliseconds since the epoch."""
    return int(current_time() * SECOND)
