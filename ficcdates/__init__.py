"""Fixed income date conventions.

This package provides the temporal building blocks used when pricing rates
products: business day calendars, tenor periods and their date arithmetic,
day count conventions and IMM dates.

Key modules:
- calendars: Business day calendars, joint calendars and the calendar registry
- conventions: Business day conventions, periods and day count conventions
- imm: IMM dates and futures contract codes
- business_calendar: Spot dates and tenor maturities under market defaults
"""

from ficcdates.calendars import Calendar, JointCalendar, get_calendar
from ficcdates.conventions import (
    BusinessDayConvention,
    DayCounter,
    Period,
    get_day_count_convention,
)
from ficcdates.imm import IMM, imm

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "BusinessDayConvention",
    "Calendar",
    "DayCounter",
    "IMM",
    "JointCalendar",
    "Period",
    "get_calendar",
    "get_day_count_convention",
    "imm",
]
