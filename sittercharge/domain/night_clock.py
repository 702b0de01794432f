"""
Time-of-day helpers for a single babysitting night.

A night runs from 17:00 through midnight to 04:00 the next morning. Plain
``datetime.time`` comparison gets that order wrong after midnight (01:00 sorts
before 17:00), so ordering inside a night goes through ``night_offset``.
"""

from datetime import time, timedelta

FIVE_PM = time(17, 0)
FOUR_AM = time(4, 0)
MIDNIGHT = time(0, 0)

MINUTES_PER_DAY = 24 * 60


def is_midnight(value: time) -> bool:
    """Check if a time is exactly 00:00."""
    return value == MIDNIGHT


def between_inclusive(begin: time, end: time, value: time) -> bool:
    """
    Check if ``value`` lies between ``begin`` and ``end`` (both inclusive).

    Raises:
        ValueError: If ``end`` is before ``begin``
    """
    if end < begin:
        raise ValueError(f"End time ({end}) is before begin time ({begin}).")
    return begin <= value <= end


def is_evening(value: time) -> bool:
    """Check if a time falls between 17:00 and the end of the day."""
    return value.hour >= FIVE_PM.hour


def is_early_morning(value: time) -> bool:
    """Check if a time falls between midnight and 04:00 inclusive."""
    return between_inclusive(MIDNIGHT, FOUR_AM, value)


def is_night_time(value: time) -> bool:
    """Check if a time belongs to the 17:00 - 04:00 night window."""
    return is_evening(value) or is_early_morning(value)


def night_offset(value: time) -> timedelta:
    """
    Return how far into the night a time lies, measured from 17:00.

    17:00 maps to zero, midnight to seven hours and 04:00 to eleven hours.
    Only meaningful for times inside the night window.
    """
    minutes = (value.hour * 60 + value.minute - FIVE_PM.hour * 60) % MINUTES_PER_DAY
    return timedelta(minutes=minutes, seconds=value.second, microseconds=value.microsecond)


def is_before_in_night(value: time, other: time) -> bool:
    """Check if ``value`` comes before ``other`` in night ordering."""
    return night_offset(value) < night_offset(other)


def round_up_hour(value: time) -> int:
    """
    Return the hour of ``value``, counting any partial hour as a full one.

    09:00 gives 9, while 09:00:00.000001 and 09:59 both give 10.
    """
    if value.minute or value.second or value.microsecond:
        return value.hour + 1
    return value.hour
