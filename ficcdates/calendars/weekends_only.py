"""Calendar whose only non-business days are Saturdays and Sundays."""

from datetime import date

from ficcdates.calendars.base import Calendar


class WeekendsOnly(Calendar):
    """Simple calendar that only considers weekends as non-business days."""

    name = "WEEKEND"

    def is_business_day(self, d: date) -> bool:
        return not self.is_weekend(d)
