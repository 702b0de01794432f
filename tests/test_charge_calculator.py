"""
Tests for the charge calculator and its hour bucketing.
"""

from datetime import time

import pytest

from sittercharge import calculate_total_charge
from sittercharge.domain.charge_calculator import (
    ChargeCalculator,
    hours_after_midnight,
    hours_before_midnight,
    hours_post_bedtime,
    hours_pre_bedtime,
)
from sittercharge.domain.exceptions import InvalidShiftError
from sittercharge.domain.models import RateTable


class TestHoursBeforeMidnight:
    """Tests for hours_before_midnight."""

    def test_midnight_start_has_no_hours_before_midnight(self):
        """Starting at midnight leaves nothing before midnight."""
        assert hours_before_midnight(time(0, 0)) == 0

    def test_partial_last_hour_counts_as_one(self):
        """23:59 still bills the 23 o'clock hour."""
        assert hours_before_midnight(time(23, 59)) == 1

    def test_whole_hours(self):
        """Hours are counted from the start hour."""
        assert hours_before_midnight(time(12, 0)) == 12
        assert hours_before_midnight(time(17, 0)) == 7


class TestHoursAfterMidnight:
    """Tests for hours_after_midnight."""

    @pytest.mark.parametrize(
        "end_time",
        [time(5, 0), time(12, 0), time(17, 0), time(23, 59), time(0, 0)],
    )
    def test_no_hours_after_midnight(self, end_time):
        """Evening ends and an exact midnight end bill nothing after midnight."""
        assert hours_after_midnight(end_time) == 0

    def test_just_after_midnight_bills_one_hour(self):
        """Any time past midnight bills the whole first hour."""
        assert hours_after_midnight(time(0, 0, 0, 1)) == 1

    def test_exact_and_partial_hours(self):
        """Exact hours stay, partial hours round up."""
        assert hours_after_midnight(time(3, 0)) == 3
        assert hours_after_midnight(time(2, 10)) == 3
        assert hours_after_midnight(time(4, 0)) == 4


class TestBedtimeBuckets:
    """Tests for hours_pre_bedtime and hours_post_bedtime."""

    def test_bedtime_at_start_has_no_pre_bedtime_hours(self):
        """Bedtime right at the start bills nothing before bedtime."""
        assert hours_pre_bedtime(time(19, 15), time(19, 15)) == 0

    def test_midnight_bedtime(self):
        """Midnight bedtime bills every hour up to midnight before bedtime."""
        assert hours_pre_bedtime(time(17, 0), time(0, 0)) == 7
        assert hours_post_bedtime(time(17, 0), time(0, 0), time(4, 0)) == 0

    def test_straddling_hour_goes_to_pre_bedtime(self):
        """Bedtime at 22:05 bills the 22 o'clock hour before bedtime."""
        assert hours_pre_bedtime(time(17, 0), time(22, 5)) == 6
        assert hours_post_bedtime(time(17, 0), time(22, 5), time(23, 0)) == 0
        assert hours_post_bedtime(time(17, 0), time(22, 5), time(23, 1)) == 1

    def test_zero_length_shift_inside_an_hour_bills_that_hour(self):
        """Start, bed and end at 19:15 still bill the 19 o'clock hour after bedtime."""
        assert hours_pre_bedtime(time(19, 15), time(19, 15)) == 0
        assert hours_post_bedtime(time(19, 15), time(19, 15), time(19, 15)) == 1
        assert calculate_total_charge(time(19, 15), time(19, 15), time(19, 15)) == 8

    def test_post_bedtime_stops_at_midnight(self):
        """Post-bedtime hours end at midnight for a post-midnight end."""
        assert hours_post_bedtime(time(19, 15), time(21, 30), time(2, 10)) == 2

    def test_post_bedtime_stops_at_evening_end(self):
        """Post-bedtime hours end at the end time for an evening end."""
        assert hours_post_bedtime(time(20, 0), time(22, 15), time(23, 45)) == 1


class TestChargeCalculator:
    """Tests for ChargeCalculator and calculate_total_charge."""

    @pytest.mark.parametrize(
        "start_time, bed_time, end_time, expected",
        [
            (time(17, 0), time(0, 0), time(4, 0), 148),
            (time(17, 0), time(17, 0), time(17, 0), 0),
            (time(20, 0), time(22, 15), time(23, 45), 44),
            (time(19, 15), time(21, 30), time(2, 10), 100),
            (time(18, 0), time(23, 0), time(0, 0), 68),
            (time(0, 0), time(0, 0), time(2, 0), 32),
        ],
    )
    def test_total_charge(self, start_time, bed_time, end_time, expected):
        """Known shifts produce the expected charge."""
        assert calculate_total_charge(start_time, bed_time, end_time) == expected

    @pytest.mark.parametrize(
        "start_time, bed_time, end_time, span",
        [
            (time(17, 0), time(0, 0), time(4, 0), 11),
            (time(20, 0), time(22, 15), time(23, 45), 4),
            (time(19, 15), time(21, 30), time(2, 10), 8),
            (time(18, 30), time(18, 45), time(19, 10), 2),
            (time(23, 30), time(0, 0), time(0, 30), 2),
            (time(17, 0), time(17, 0), time(17, 0), 0),
        ],
    )
    def test_segments_cover_the_whole_shift(self, start_time, bed_time, end_time, span):
        """Segment hours add up to the rounded-up length of the shift."""
        breakdown = ChargeCalculator().calculate_breakdown(start_time, bed_time, end_time)

        assert breakdown.total_hours == span

    def test_breakdown_matches_total(self):
        """The breakdown total equals the plain total charge."""
        calculator = ChargeCalculator()
        breakdown = calculator.calculate_breakdown(time(19, 15), time(21, 30), time(2, 10))

        assert breakdown.pre_bedtime_hours == 3
        assert breakdown.post_bedtime_hours == 2
        assert breakdown.post_midnight_hours == 3
        assert breakdown.total == 100
        assert calculator.calculate_total_charge(time(19, 15), time(21, 30), time(2, 10)) == 100

    def test_custom_rates(self):
        """Injected rates replace the default ones."""
        rates = RateTable(pre_bedtime_rate=10, post_bedtime_rate=5, post_midnight_rate=20)
        calculator = ChargeCalculator(rates=rates)

        assert calculator.calculate_total_charge(time(17, 0), time(0, 0), time(4, 0)) == 150
        assert calculate_total_charge(time(20, 0), time(22, 15), time(23, 45), rates=rates) == 35

    def test_repeated_calls_give_same_result(self):
        """The calculation has no state between calls."""
        calculator = ChargeCalculator()
        results = {
            calculator.calculate_total_charge(time(19, 15), time(21, 30), time(2, 10))
            for _ in range(5)
        }

        assert results == {100}

    def test_invalid_shift_raises_error(self):
        """Invalid input fails validation before any arithmetic."""
        with pytest.raises(InvalidShiftError, match="End time is after 4am"):
            calculate_total_charge(time(17, 0), time(21, 0), time(5, 0))
