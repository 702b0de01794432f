"""
Domain models for shifts, rates and charge breakdowns.
"""

from dataclasses import dataclass
from datetime import time

from .validation import validate_shift


@dataclass(frozen=True)
class RateTable:
    """Hourly rates in whole dollars for each segment of the night."""
    pre_bedtime_rate: int = 12
    post_bedtime_rate: int = 8
    post_midnight_rate: int = 16


DEFAULT_RATES = RateTable()


@dataclass(frozen=True)
class Shift:
    """
    Represents one night of babysitting.

    Invariant: the times satisfy ``validate_shift``; constructing a Shift
    with invalid times raises ``InvalidShiftError``.
    """
    start_time: time
    bed_time: time
    end_time: time

    def __post_init__(self):
        validate_shift(self.start_time, self.bed_time, self.end_time)

    def __str__(self) -> str:
        return (
            f"{self.start_time.strftime('%H:%M')} - {self.end_time.strftime('%H:%M')} "
            f"(bed {self.bed_time.strftime('%H:%M')})"
        )


@dataclass(frozen=True)
class ChargeBreakdown:
    """
    Whole hours billed per segment of a shift, with the rates they were billed at.
    """
    pre_bedtime_hours: int
    post_bedtime_hours: int
    post_midnight_hours: int
    rates: RateTable = DEFAULT_RATES

    @property
    def pre_bedtime_amount(self) -> int:
        return self.pre_bedtime_hours * self.rates.pre_bedtime_rate

    @property
    def post_bedtime_amount(self) -> int:
        return self.post_bedtime_hours * self.rates.post_bedtime_rate

    @property
    def post_midnight_amount(self) -> int:
        return self.post_midnight_hours * self.rates.post_midnight_rate

    @property
    def total_hours(self) -> int:
        """Return the number of billed hours across all segments."""
        return self.pre_bedtime_hours + self.post_bedtime_hours + self.post_midnight_hours

    @property
    def total(self) -> int:
        """Return the total charge in dollars."""
        return self.pre_bedtime_amount + self.post_bedtime_amount + self.post_midnight_amount

    def format_display(self) -> str:
        """
        Format the breakdown for display.
        Format: 3h x $12 + 1h x $8 + 0h x $16 = $44
        """
        parts = [
            f"{self.pre_bedtime_hours}h x ${self.rates.pre_bedtime_rate}",
            f"{self.post_bedtime_hours}h x ${self.rates.post_bedtime_rate}",
            f"{self.post_midnight_hours}h x ${self.rates.post_midnight_rate}",
        ]
        return f"{' + '.join(parts)} = ${self.total}"
