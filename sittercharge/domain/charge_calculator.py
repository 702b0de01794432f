"""
Core business logic for pricing a night of babysitting.

Pricing rules:
- $12/hour from start time to bedtime.
- $8/hour from bedtime to midnight.
- $16/hour from midnight to the end of the job.
- Only full hours are billed: working any part of a clock hour bills that
  whole hour.
- An hour that is partly before and partly after bedtime is billed at the
  pre-bedtime rate (bedtime at 22:05 bills the whole 22 o'clock hour at $12).

Pure domain logic: no I/O, no state between calls.
"""

import logging
from datetime import time

from .models import DEFAULT_RATES, ChargeBreakdown, RateTable, Shift
from .night_clock import FOUR_AM, is_midnight, round_up_hour

logger = logging.getLogger(__name__)


def hours_before_midnight(start_time: time) -> int:
    """Return the hours from the start time to midnight (0 for a midnight start)."""
    if start_time.hour == 0:
        return 0
    return 24 - start_time.hour


def hours_after_midnight(end_time: time) -> int:
    """
    Return the hours worked after midnight, based on the end time.
    Fractional hours are rounded up to a whole hour.
    """
    if end_time.hour > FOUR_AM.hour:
        return 0
    return round_up_hour(end_time)


def hours_pre_bedtime(start_time: time, bed_time: time) -> int:
    """Return the hours from the start time to bedtime, rounded up."""
    if bed_time == start_time:
        return 0
    if is_midnight(bed_time):
        return 24 - start_time.hour
    return round_up_hour(bed_time) - start_time.hour


def hours_post_bedtime(start_time: time, bed_time: time, end_time: time) -> int:
    """
    Return the hours from bedtime to midnight or the end time, whichever is first.

    The hour bedtime falls in has already been billed before bedtime, so it
    is not counted again here.
    """
    pre_bedtime = hours_pre_bedtime(start_time, bed_time)
    if end_time.hour <= FOUR_AM.hour:
        return hours_before_midnight(start_time) - pre_bedtime
    return round_up_hour(end_time) - start_time.hour - pre_bedtime


class ChargeCalculator:
    """
    Calculates the nightly charge for a shift under a given rate table.

    Algorithm:
    1. Validate the start, bed and end times (by building a Shift)
    2. Count whole hours before bedtime
    3. Count whole hours from bedtime to midnight
    4. Count whole hours after midnight
    5. Price each segment at its own rate and add them up
    """

    def __init__(self, rates: RateTable = DEFAULT_RATES):
        self.rates = rates

    def calculate_breakdown(
        self,
        start_time: time,
        bed_time: time,
        end_time: time
    ) -> ChargeBreakdown:
        """
        Calculate the hours and amounts billed for each segment of the night.

        Args:
            start_time: When babysitting begins
            bed_time: When the children go to bed
            end_time: When babysitting ends

        Returns:
            ChargeBreakdown for the shift

        Raises:
            InvalidShiftError: If the times do not describe a valid night
        """
        shift = Shift(start_time=start_time, bed_time=bed_time, end_time=end_time)

        breakdown = ChargeBreakdown(
            pre_bedtime_hours=hours_pre_bedtime(shift.start_time, shift.bed_time),
            post_bedtime_hours=hours_post_bedtime(
                shift.start_time, shift.bed_time, shift.end_time
            ),
            post_midnight_hours=hours_after_midnight(shift.end_time),
            rates=self.rates,
        )

        logger.debug(
            "Shift %s billed as %d/%d/%d hours",
            shift,
            breakdown.pre_bedtime_hours,
            breakdown.post_bedtime_hours,
            breakdown.post_midnight_hours,
        )
        return breakdown

    def calculate_total_charge(self, start_time: time, bed_time: time, end_time: time) -> int:
        """Return the total charge, in dollars, for a night of babysitting."""
        return self.calculate_breakdown(start_time, bed_time, end_time).total


def calculate_total_charge(
    start_time: time,
    bed_time: time,
    end_time: time,
    rates: RateTable = DEFAULT_RATES
) -> int:
    """
    Calculate the charge for a night of babysitting.

    Raises:
        InvalidShiftError: If the times do not describe a valid night
    """
    return ChargeCalculator(rates=rates).calculate_total_charge(start_time, bed_time, end_time)
