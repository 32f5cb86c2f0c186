"""
Period value type and its arithmetic against dates.

A Period is one of the point-in-time markers ``ON``, ``SPOT`` and ``SN`` or a
signed/unsigned count of days, weeks, months or years. Adding a period to a
date never fails for ordinary dates; month arithmetic clamps to the last day
of the target month (Jan 31 + 1M -> Feb 28/29).

Examples:
    >>> from datetime import date
    >>> date(2023, 1, 31) + Months(1)
    datetime.date(2023, 2, 28)
    >>> Period.from_tenor("3M")
    Period(unit=<PeriodUnit.MONTHS: 'M'>, length=3)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import TYPE_CHECKING, Union

from dateutil.relativedelta import relativedelta

from ficcdates.exceptions import InvalidTenorError, PeriodOutOfBoundsError
from ficcdates.utils.date import DateLike, to_date

if TYPE_CHECKING:
    from ficcdates.calendars.base import Calendar


class PeriodUnit(Enum):
    """Kinds of Period."""

    ON = "ON"
    SPOT = "SPOT"
    SN = "SN"
    DAYS = "D"
    WEEKS = "W"
    MONTHS = "M"
    YEARS = "Y"


_MARKERS = (PeriodUnit.ON, PeriodUnit.SPOT, PeriodUnit.SN)
_UNSIGNED = (PeriodUnit.MONTHS, PeriodUnit.YEARS)

_TENOR_PATTERN = re.compile(r"^(-?\d+)([DWMY])$")
_MARKER_ALIASES = {
    "ON": PeriodUnit.ON,
    "O/N": PeriodUnit.ON,
    "SPOT": PeriodUnit.SPOT,
    "SP": PeriodUnit.SPOT,
    "SN": PeriodUnit.SN,
    "S/N": PeriodUnit.SN,
}


@dataclass(frozen=True)
class Period:
    """Relative time offset applied to a reference date."""

    unit: PeriodUnit
    length: int = 0

    def __post_init__(self):
        if self.unit in _MARKERS and self.length != 0:
            raise ValueError(f"{self.unit.value} does not take a length")
        if self.unit in _UNSIGNED and self.length < 0:
            raise ValueError(f"{self.unit.name.lower()} must be non-negative, got {self.length}")

    @classmethod
    def from_tenor(cls, tenor: str) -> "Period":
        """Parse a tenor string such as 'ON', 'SPOT', '1W', '3M' or '2Y'."""
        t = tenor.upper().strip()
        if t in _MARKER_ALIASES:
            return cls(_MARKER_ALIASES[t])
        match = _TENOR_PATTERN.match(t)
        if match is None:
            raise InvalidTenorError(f"Unsupported tenor: {tenor}")
        length = int(match.group(1))
        unit = PeriodUnit(match.group(2))
        if unit in _UNSIGNED and length < 0:
            raise InvalidTenorError(f"Negative {unit.name.lower()} tenor: {tenor}")
        return cls(unit, length)

    @property
    def tenor(self) -> str:
        if self.unit in _MARKERS:
            return self.unit.value
        return f"{self.length}{self.unit.value}"

    @property
    def is_marker(self) -> bool:
        """True for ON, SPOT and SN, which are points in time rather than durations."""
        return self.unit in _MARKERS

    def __str__(self) -> str:
        return self.tenor

    def __mul__(self, k: int) -> "Period":
        if not isinstance(k, int) or isinstance(k, bool):
            return NotImplemented
        if self.unit in _MARKERS:
            return self
        return Period(self.unit, self.length * k)

    __rmul__ = __mul__

    def __radd__(self, other: date) -> date:
        if not isinstance(other, date):
            return NotImplemented
        return self._shift(other, 1)

    def __rsub__(self, other: date) -> date:
        if not isinstance(other, date):
            return NotImplemented
        return self._shift(other, -1)

    def _shift(self, d: date, sign: int) -> date:
        try:
            if self.unit in (PeriodUnit.ON, PeriodUnit.SN):
                return d + timedelta(days=sign)
            if self.unit == PeriodUnit.SPOT:
                return d
            if self.unit == PeriodUnit.DAYS:
                return d + timedelta(days=sign * self.length)
            if self.unit == PeriodUnit.WEEKS:
                return d + timedelta(weeks=sign * self.length)
            if self.unit == PeriodUnit.MONTHS:
                return d + relativedelta(months=sign * self.length)
            return d + relativedelta(months=sign * 12 * self.length)
        except (OverflowError, ValueError) as exc:
            op = "+" if sign > 0 else "-"
            raise PeriodOutOfBoundsError(f"{d} {op} {self} is out of bounds") from exc

    def settlement_date(
        self, valuation_date: DateLike, calendar: "Calendar", spot_lag_days: int = 2
    ) -> date:
        """Settlement date of an instrument of this tenor traded on valuation_date.

        ON starts from the valuation date; everything else starts from spot,
        taken as ``spot_lag_days`` calendar days later. The tenor is added, the
        result is capped at the calendar's last business day of the month, and
        finally rolled forward to a business day.
        """
        valuation_date = to_date(valuation_date)
        if self.unit == PeriodUnit.ON:
            start = valuation_date
        else:
            start = valuation_date + Days(spot_lag_days)
        settlement = start + self
        month_end = calendar.end_of_month(settlement)
        if settlement >= month_end:
            settlement = month_end
        return calendar.adjust(settlement)


PeriodLike = Union[Period, str]


def to_period(period: PeriodLike) -> Period:
    """Accept either a Period or a tenor string."""
    if isinstance(period, Period):
        return period
    if isinstance(period, str):
        return Period.from_tenor(period)
    raise TypeError(f"Unsupported type for period: {type(period)}")


ON = Period(PeriodUnit.ON)
SPOT = Period(PeriodUnit.SPOT)
SN = Period(PeriodUnit.SN)


def Days(n: int) -> Period:
    return Period(PeriodUnit.DAYS, n)


def Weeks(n: int) -> Period:
    return Period(PeriodUnit.WEEKS, n)


def Months(n: int) -> Period:
    return Period(PeriodUnit.MONTHS, n)


def Years(n: int) -> Period:
    return Period(PeriodUnit.YEARS, n)
