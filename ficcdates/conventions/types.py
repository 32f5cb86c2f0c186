"""
Basic types and enums used across the date conventions.
"""

from enum import Enum
from typing import Optional

from ficcdates.conventions.period import Period, ON, Days, Weeks, Months, Years


class BusinessDayConvention(Enum):
    """Business day adjustment rules."""

    FOLLOWING = "Following"
    MODIFIED_FOLLOWING = "Modified Following"
    HALF_MONTH_MODIFIED_FOLLOWING = "Half-Month Modified Following"
    PRECEDING = "Preceding"
    MODIFIED_PRECEDING = "Modified Preceding"
    UNADJUSTED = "Unadjusted"
    NEAREST = "Nearest"

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> Optional["BusinessDayConvention"]:
        """Look up a convention by display name, CamelCase code or member name."""
        return _BDC_CODES.get(code.strip().replace("-", "").replace(" ", "").replace("_", "").upper())


_BDC_CODES = {
    member.value.replace("-", "").replace(" ", "").upper(): member
    for member in BusinessDayConvention
}


class Frequency(Enum):
    """Payment frequencies, valued as number of periods per year."""

    NO_FREQUENCY = -1
    ONCE = 0
    ANNUAL = 1
    SEMIANNUAL = 2
    EVERY_FOURTH_MONTH = 3
    QUARTERLY = 4
    BIMONTHLY = 6
    MONTHLY = 12
    EVERY_FOURTH_WEEK = 13
    BIWEEKLY = 26
    WEEKLY = 52
    DAILY = 365
    OTHER_FREQUENCY = 999

    @property
    def display_name(self) -> str:
        if self is Frequency.OTHER_FREQUENCY:
            return "Unknown Frequency"
        return "-".join(part.capitalize() for part in self.name.split("_"))

    def period(self) -> Optional[Period]:
        """Length of one coupon interval; None when the frequency has no interval."""
        return _FREQUENCY_PERIODS.get(self)

    @classmethod
    def from_code(cls, code: str) -> Optional["Frequency"]:
        key = code.strip().replace("-", "").replace("_", "").upper()
        if key == "ONCE":
            return cls.ONCE
        for member in cls:
            if member in (cls.NO_FREQUENCY, cls.OTHER_FREQUENCY):
                continue
            if member.name.replace("_", "") == key:
                return member
        return None


_FREQUENCY_PERIODS = {
    Frequency.NO_FREQUENCY: ON,
    Frequency.ANNUAL: Years(1),
    Frequency.SEMIANNUAL: Months(6),
    Frequency.EVERY_FOURTH_MONTH: Months(4),
    Frequency.QUARTERLY: Months(3),
    Frequency.BIMONTHLY: Months(2),
    Frequency.MONTHLY: Months(1),
    Frequency.EVERY_FOURTH_WEEK: Weeks(4),
    Frequency.BIWEEKLY: Weeks(2),
    Frequency.WEEKLY: Weeks(1),
    Frequency.DAILY: Days(1),
}


class RollConvention(Enum):
    """Roll conventions for schedule generation."""

    NO_ROLL = "NO_ROLL"
    EOM = "EOM"  # End of Month
    IMM = "IMM"  # International Money Market (3rd Wednesday)
