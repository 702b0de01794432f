"""
Application service for quoting a night of babysitting.

The service turns the three time-of-day strings a user types into ``time``
values and delegates the pricing to the domain-level ``ChargeCalculator``.
This keeps the CLI thin and lets the calculator be swapped in tests.
"""

from __future__ import annotations

import logging
from datetime import time

import pendulum

from ..domain.charge_calculator import ChargeCalculator
from ..domain.exceptions import InvalidShiftError, TimeParseError
from ..domain.models import ChargeBreakdown

logger = logging.getLogger(__name__)

# Tried in order; a trailing AM/PM marker is required by the 12-hour forms.
TIME_FORMATS = ("h:mmA", "hA", "H:mm:ss", "H:mm")


def parse_time_of_day(value: str) -> time:
    """
    Parse a time-of-day string such as ``17:00``, ``7:15PM`` or ``9pm``.

    Args:
        value: Time string typed by the user

    Returns:
        Naive ``datetime.time`` without a date part

    Raises:
        TimeParseError: If the string matches none of the supported formats
    """
    normalized = value.strip().replace(" ", "").upper()

    for fmt in TIME_FORMATS:
        try:
            parsed = pendulum.from_format(normalized, fmt)
        except ValueError:
            continue
        return time(parsed.hour, parsed.minute, parsed.second, parsed.microsecond)

    raise TimeParseError(
        f"Could not parse time '{value}'. Use HH:MM (e.g. 17:30) or 12-hour form (e.g. 5:30PM)."
    )


class ShiftQuoteService:
    """
    Orchestrates input parsing and charge calculation.
    """

    def __init__(self, calculator: ChargeCalculator) -> None:
        self._calculator = calculator

    def quote(self, *, start: str, bed: str, end: str) -> ChargeBreakdown:
        """
        Parse the three times and calculate the charge breakdown.

        Raises:
            TimeParseError: If any of the times cannot be parsed
            InvalidShiftError: If the times do not describe a valid night
        """
        start_time = parse_time_of_day(start)
        bed_time = parse_time_of_day(bed)
        end_time = parse_time_of_day(end)

        logger.debug("Quoting start=%s bed=%s end=%s", start_time, bed_time, end_time)

        try:
            return self._calculator.calculate_breakdown(start_time, bed_time, end_time)
        except InvalidShiftError as exc:
            logger.info("Rejected shift (%s): %s", exc.rule, exc)
            raise

    def quote_total(self, *, start: str, bed: str, end: str) -> int:
        """Parse the three times and return only the total charge."""
        return self.quote(start=start, bed=bed, end=end).total
