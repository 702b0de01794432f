"""
sittercharge - nightly babysitting charge calculator.
"""

from .domain.charge_calculator import ChargeCalculator, calculate_total_charge
from .domain.exceptions import InvalidShiftError, SitterChargeError, TimeParseError
from .domain.models import ChargeBreakdown, RateTable

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ChargeCalculator",
    "calculate_total_charge",
    "InvalidShiftError",
    "SitterChargeError",
    "TimeParseError",
    "ChargeBreakdown",
    "RateTable",
]
