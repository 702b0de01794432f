"""
Validation rules for a night of babysitting.

Each rule raises ``InvalidShiftError`` with its own message and rule name, so
a caller can tell exactly why a shift was rejected.
"""

from datetime import time

from .exceptions import InvalidShiftError
from .night_clock import (
    is_before_in_night,
    is_evening,
    is_midnight,
    is_night_time,
)

START_BEFORE_5PM = "start_before_5pm"
END_AFTER_4AM = "end_after_4am"
BEDTIME_AFTER_MIDNIGHT = "bedtime_after_midnight"
BEDTIME_BEFORE_START = "bedtime_before_start"
END_BEFORE_BEDTIME = "end_before_bedtime"


def validate_shift(start_time: time, bed_time: time, end_time: time) -> None:
    """
    Check that start, bed and end times describe a valid night.

    Rules:
    - The sitter starts no earlier than 5:00PM (midnight counts as a late start).
    - The sitter leaves no later than 4:00AM.
    - Bedtime is in the evening or exactly at midnight, never after it.
    - Bedtime is not before the start time.
    - The end time is not before bedtime.

    Range rules are checked before ordering rules, so the ordering checks only
    ever see times inside the night window.

    Raises:
        InvalidShiftError: On the first rule that does not hold
    """
    if not (is_evening(start_time) or is_midnight(start_time)):
        raise InvalidShiftError(
            f"Start time is before 5pm: {start_time}", START_BEFORE_5PM
        )

    if not is_night_time(end_time):
        raise InvalidShiftError(
            f"End time is after 4am: {end_time}", END_AFTER_4AM
        )

    if not (is_evening(bed_time) or is_midnight(bed_time)):
        raise InvalidShiftError(
            f"Bed time is after midnight: {bed_time}", BEDTIME_AFTER_MIDNIGHT
        )

    if is_before_in_night(bed_time, start_time):
        raise InvalidShiftError(
            f"Bed time is before start time: {bed_time} < {start_time}",
            BEDTIME_BEFORE_START,
        )

    if is_before_in_night(end_time, bed_time):
        raise InvalidShiftError(
            f"End time is before bed time: {end_time} < {bed_time}",
            END_BEFORE_BEDTIME,
        )
