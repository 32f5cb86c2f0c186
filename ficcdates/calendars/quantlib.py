"""
QuantLib-backed calendars.

Wraps any ``QuantLib.Calendar`` as a holiday predicate so the country rule
sets maintained by QuantLib can be used with the generic adjustment and
advancement algorithms of :class:`~ficcdates.calendars.base.Calendar`.
"""

from datetime import date, datetime
from typing import Optional, Union

import QuantLib as ql

from ficcdates.calendars.base import Calendar


def _to_ql_date(dt: Union[date, datetime]) -> ql.Date:
    """Convert Python date/datetime to QuantLib Date."""
    if isinstance(dt, datetime):
        dt = dt.date()
    return ql.Date(dt.day, dt.month, dt.year)


class QuantLibCalendar(Calendar):
    """Calendar whose business days come from a QuantLib calendar."""

    def __init__(self, ql_calendar: ql.Calendar, name: Optional[str] = None):
        self._ql_calendar = ql_calendar
        self.name = name or ql_calendar.name()

    def is_business_day(self, d: date) -> bool:
        """Check if date is a business day (not weekend or holiday)."""
        return self._ql_calendar.isBusinessDay(_to_ql_date(d))


# Lazily-built QuantLib country calendars by registry key
QUANTLIB_FACTORIES = {
    "ARGENTINA": lambda: ql.Argentina(),
    "AUSTRALIA": lambda: ql.Australia(),
    "BRAZIL": lambda: ql.Brazil(),
    "CANADA": lambda: ql.Canada(),
    "CHINA": lambda: ql.China(),
    "CZECH REPUBLIC": lambda: ql.CzechRepublic(),
    "DENMARK": lambda: ql.Denmark(),
    "FINLAND": lambda: ql.Finland(),
    "FRANCE": lambda: ql.France(),
    "GERMANY": lambda: ql.Germany(),
    "HONG KONG": lambda: ql.HongKong(),
    "INDIA": lambda: ql.India(),
    "INDONESIA": lambda: ql.Indonesia(),
    "ISRAEL": lambda: ql.Israel(),
    "ITALY": lambda: ql.Italy(),
    "JAPAN": lambda: ql.Japan(),
    "MEXICO": lambda: ql.Mexico(),
    "NEW ZEALAND": lambda: ql.NewZealand(),
    "NORWAY": lambda: ql.Norway(),
    "POLAND": lambda: ql.Poland(),
    "ROMANIA": lambda: ql.Romania(),
    "RUSSIA": lambda: ql.Russia(),
    "SINGAPORE": lambda: ql.Singapore(),
    "SLOVAKIA": lambda: ql.Slovakia(),
    "SOUTH AFRICA": lambda: ql.SouthAfrica(),
    "SOUTH KOREA": lambda: ql.SouthKorea(),
    "SWEDEN": lambda: ql.Sweden(),
    "SWITZERLAND": lambda: ql.Switzerland(),
    "TAIWAN": lambda: ql.Taiwan(),
    "THAILAND": lambda: ql.Thailand(),
    "TURKEY": lambda: ql.Turkey(),
    "UKRAINE": lambda: ql.Ukraine(),
}
