"""
Error types raised by date arithmetic and calendar adjustment.
"""


class FiccDatesError(Exception):
    """Base class for all ficcdates errors."""


class PeriodOutOfBoundsError(FiccDatesError, OverflowError):
    """Date arithmetic with a period left the representable date range."""


class InvalidTenorError(FiccDatesError, ValueError):
    """A tenor string could not be parsed into a Period."""


class EasterYearOutOfRangeError(FiccDatesError, ValueError):
    """Easter tables only cover 1901-2199."""


class AdjustmentError(FiccDatesError, RuntimeError):
    """No business day was found within the adjustment search bound."""
