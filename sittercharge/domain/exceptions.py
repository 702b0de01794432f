"""
Domain-specific exception hierarchy for the babysitting charge calculator.
"""


class SitterChargeError(Exception):
    """Base class for all application-level errors."""


class InvalidShiftError(SitterChargeError):
    """
    Raised when a start/bed/end triple does not describe a valid night.

    ``rule`` names the violated constraint so callers can tell failures apart
    without matching on the message text.
    """

    def __init__(self, message: str, rule: str) -> None:
        super().__init__(message)
        self.rule = rule


class TimeParseError(SitterChargeError):
    """Raised when a time-of-day string cannot be parsed."""
