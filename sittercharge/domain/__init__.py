"""
Domain layer - Pure business logic without external dependencies.
"""

from .charge_calculator import ChargeCalculator, calculate_total_charge
from .exceptions import InvalidShiftError, SitterChargeError, TimeParseError
from .models import DEFAULT_RATES, ChargeBreakdown, RateTable, Shift

__all__ = [
    "ChargeCalculator",
    "calculate_total_charge",
    "InvalidShiftError",
    "SitterChargeError",
    "TimeParseError",
    "DEFAULT_RATES",
    "ChargeBreakdown",
    "RateTable",
    "Shift",
]
