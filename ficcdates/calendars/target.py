"""
TARGET (Trans-European Automated Real-time Gross settlement Express Transfer)
calendar.
"""

from datetime import date

from ficcdates.calendars.base import Calendar


class Target(Calendar):
    """TARGET2 settlement calendar.

    Holidays:
    - Saturdays and Sundays
    - New Year's Day, January 1st
    - Good Friday and Easter Monday (since 2000)
    - Labour Day, May 1st (since 2000)
    - Christmas, December 25th
    - Day of Goodwill, December 26th (since 2000)
    - December 31st (1998, 1999 and 2001)
    """

    name = "TARGET"

    def is_business_day(self, d: date) -> bool:
        day, month, year = d.day, d.month, d.year
        day_of_year = d.timetuple().tm_yday
        em = self.easter_monday(year)
        if (
            self.is_weekend(d)
            or (day == 1 and month == 1)
            # Good Friday
            or (day_of_year == em - 3 and year >= 2000)
            # Easter Monday
            or (day_of_year == em and year >= 2000)
            or (day == 1 and month == 5 and year >= 2000)
            or (day == 25 and month == 12)
            or (day == 26 and month == 12 and year >= 2000)
            or (day == 31 and month == 12 and year in (1998, 1999, 2001))
        ):
            return False
        return True
