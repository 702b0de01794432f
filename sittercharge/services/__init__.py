"""
Application services coordinating parsing and domain calculations.
"""

from .quote import ShiftQuoteService, parse_time_of_day

__all__ = ["ShiftQuoteService", "parse_time_of_day"]
