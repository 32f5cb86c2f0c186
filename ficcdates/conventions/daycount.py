"""
Day count convention implementations.

Every convention exposes ``day_count(d1, d2)`` (signed number of days under
the convention) and ``year_fraction(d1, d2)``. Both are zero for equal dates.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date, timedelta
from enum import Enum
from typing import TYPE_CHECKING, Optional

from dateutil.relativedelta import relativedelta

from ficcdates.utils.date import DateLike, days_in_year, is_leap_year, to_date

if TYPE_CHECKING:
    from ficcdates.calendars.base import Calendar

logger = logging.getLogger(__name__)

# Average Gregorian year length used to guess a date from a year fraction
DAYS_PER_YEAR = 365.25


class DayCounter(ABC):
    """Base class for day count conventions."""

    name: str = "DayCounter"

    @abstractmethod
    def day_count(self, d1: date, d2: date) -> int:
        """Calculate number of days between two dates."""

    @abstractmethod
    def year_fraction(self, d1: date, d2: date) -> float:
        """Calculate year fraction between two dates."""

    def year_fraction_to_date(self, reference_date: DateLike, t: float) -> date:
        """Approximate date lying ``t`` years after reference_date.

        Guesses with an average year length, measures the guess under this
        convention and corrects once by the residual. Exact only where the
        convention is linear in days around the result.
        """
        reference_date = to_date(reference_date)
        guess = reference_date + timedelta(days=round(t * DAYS_PER_YEAR))
        residual = t - self.year_fraction(reference_date, guess)
        correction = round(residual * DAYS_PER_YEAR)
        if correction:
            logger.debug("%s: correcting %s by %s days", self.name, guess, correction)
        return guess + timedelta(days=correction)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class _ActualFixed(DayCounter):
    """Actual days over a fixed year length."""

    days_in_year: int

    def day_count(self, d1: date, d2: date) -> int:
        return (to_date(d2) - to_date(d1)).days

    def year_fraction(self, d1: date, d2: date) -> float:
        return self.day_count(d1, d2) / float(self.days_in_year)


class Actual360(_ActualFixed):
    """ACT/360 day count convention.

    Used for:
    - IBOR floating legs
    - OIS fixed legs
    - Money market instruments
    """

    name = "ACT/360"
    days_in_year = 360


class Actual364(_ActualFixed):
    """ACT/364 day count convention."""

    name = "ACT/364"
    days_in_year = 364


class Actual365Fixed(_ActualFixed):
    """ACT/365F (ACT/365 Fixed) day count convention.

    Used for:
    - GBP money markets
    - Some fixed IRS legs (market dependent)
    """

    name = "ACT/365F"
    days_in_year = 365


class Actual366(_ActualFixed):
    """ACT/366 day count convention."""

    name = "ACT/366"
    days_in_year = 366


class ActualActualMarket(Enum):
    ISDA = "ISDA"
    EURO = "EURO"


class ActualActual(DayCounter):
    """ACT/ACT day count convention.

    ISDA splits the interval at each calendar-year boundary and divides each
    part by the length of its own year. EURO (AFB) counts whole years back
    from the end date and divides the remainder by 365, or 366 when the
    remainder spans a February 29th.
    """

    def __init__(self, market: ActualActualMarket = ActualActualMarket.ISDA):
        self.market = market
        self.name = f"ACT/ACT {market.value}"

    def day_count(self, d1: date, d2: date) -> int:
        return (to_date(d2) - to_date(d1)).days

    def year_fraction(self, d1: date, d2: date) -> float:
        d1, d2 = to_date(d1), to_date(d2)
        if d1 == d2:
            return 0.0
        if d1 > d2:
            logger.debug("Swapping start/end for %s: %s, %s", self.name, d1, d2)
            return -self.year_fraction(d2, d1)
        if self.market == ActualActualMarket.EURO:
            return self._euro_year_fraction(d1, d2)
        return self._isda_year_fraction(d1, d2)

    @staticmethod
    def _isda_year_fraction(d1: date, d2: date) -> float:
        y1, y2 = d1.year, d2.year
        total = float(y2 - y1 - 1)
        total += (date(y1 + 1, 1, 1) - d1).days / float(days_in_year(y1))
        total += (d2 - date(y2, 1, 1)).days / float(days_in_year(y2))
        return total

    @staticmethod
    def _euro_year_fraction(d1: date, d2: date) -> float:
        new_d2 = d2
        temp = d2
        whole_years = 0.0
        while temp > d1:
            temp = new_d2 - relativedelta(years=1)
            if temp.day == 28 and temp.month == 2 and is_leap_year(temp.year):
                temp += timedelta(days=1)
            if temp >= d1:
                whole_years += 1.0
                new_d2 = temp

        den = 365.0
        if is_leap_year(new_d2.year):
            feb29 = date(new_d2.year, 2, 29)
            if new_d2 > feb29 and d1 <= feb29:
                den += 1.0
        elif is_leap_year(d1.year):
            feb29 = date(d1.year, 2, 29)
            if new_d2 > feb29 and d1 <= feb29:
                den += 1.0

        return whole_years + (new_d2 - d1).days / den


class Thirty360Market(Enum):
    USA = "USA"
    EUROPEAN = "EUROPEAN"
    ITALIAN = "ITALIAN"
    ISMA = "ISMA"
    ISDA = "ISDA"
    GERMAN = "GERMAN"
    NASD = "NASD"


def _is_last_of_february(d: date) -> bool:
    return d.month == 2 and d.day == (29 if is_leap_year(d.year) else 28)


class Thirty360(DayCounter):
    """30/360 family.

    All variants compute ``360*(y2-y1) + 30*(m2-m1) + (dd2-dd1)`` after
    adjusting the day-of-month values by the market's end-of-month rules.
    ISDA and GERMAN need the contract's termination date, which is exempt
    from the end-of-February rule.
    """

    def __init__(
        self,
        market: Thirty360Market = Thirty360Market.USA,
        termination_date: Optional[DateLike] = None,
    ):
        if market in (Thirty360Market.ISDA, Thirty360Market.GERMAN) and termination_date is None:
            raise ValueError(f"30/360 {market.value} requires a termination date")
        self.market = market
        self.termination_date = to_date(termination_date) if termination_date is not None else None
        self.name = f"30/360 {market.value}"

    def day_count(self, d1: date, d2: date) -> int:
        d1, d2 = to_date(d1), to_date(d2)
        dd1, dd2 = d1.day, d2.day
        mm1, mm2 = d1.month, d2.month

        if self.market == Thirty360Market.USA:
            if dd1 == 31:
                dd1 = 30
            if dd2 == 31 and dd1 >= 30:
                dd2 = 30
            if _is_last_of_february(d2) and _is_last_of_february(d1):
                dd2 = 30
            if _is_last_of_february(d1):
                dd1 = 30

        elif self.market == Thirty360Market.EUROPEAN:
            if dd1 == 31:
                dd1 = 30
            if dd2 == 31:
                dd2 = 30

        elif self.market == Thirty360Market.ITALIAN:
            if dd1 == 31:
                dd1 = 30
            if dd2 == 31:
                dd2 = 30
            if mm1 == 2 and dd1 > 27:
                dd1 = 30
            if mm2 == 2 and dd2 > 27:
                dd2 = 30

        elif self.market == Thirty360Market.ISMA:
            if dd1 == 31:
                dd1 = 30
            if dd2 == 31 and dd1 == 30:
                dd2 = 30

        elif self.market in (Thirty360Market.ISDA, Thirty360Market.GERMAN):
            if dd1 == 31:
                dd1 = 30
            if dd2 == 31:
                dd2 = 30
            if _is_last_of_february(d1):
                dd1 = 30
            if d2 != self.termination_date and _is_last_of_february(d2):
                dd2 = 30

        elif self.market == Thirty360Market.NASD:
            if dd1 == 31:
                dd1 = 30
            if dd2 == 31 and dd1 >= 30:
                dd2 = 30
            if dd2 == 31 and dd1 < 30:
                dd2 = 1
                mm2 += 1

        return 360 * (d2.year - d1.year) + 30 * (mm2 - mm1) + (dd2 - dd1)

    def year_fraction(self, d1: date, d2: date) -> float:
        return self.day_count(d1, d2) / 360.0

    def __repr__(self) -> str:
        return f"Thirty360({self.market}, termination_date={self.termination_date!r})"


class Thirty365(DayCounter):
    """30/365: unadjusted 30-day months over a 365-day year."""

    name = "30/365"

    def day_count(self, d1: date, d2: date) -> int:
        d1, d2 = to_date(d1), to_date(d2)
        return 360 * (d2.year - d1.year) + 30 * (d2.month - d1.month) + (d2.day - d1.day)

    def year_fraction(self, d1: date, d2: date) -> float:
        return self.day_count(d1, d2) / 365.0


class Business252(DayCounter):
    """BUS/252: business days under a calendar over 252.

    Long intervals are counted month by month.
    """

    def __init__(self, calendar: "Calendar"):
        self.calendar = calendar
        self.name = f"BUS/252({calendar.name})"

    @staticmethod
    def _same_month(d1: date, d2: date) -> bool:
        return d1.year == d2.year and d1.month == d2.month

    def day_count(self, d1: date, d2: date) -> int:
        d1, d2 = to_date(d1), to_date(d2)
        if self._same_month(d1, d2) or d1 >= d2:
            return self.calendar.business_days_between(d1, d2)

        month_start = date(d1.year, d1.month, 1) + relativedelta(months=1)
        total = self.calendar.business_days_between(d1, month_start)
        while not self._same_month(month_start, d2):
            next_month = month_start + relativedelta(months=1)
            total += self.calendar.business_days_between(month_start, next_month)
            month_start = next_month
        total += self.calendar.business_days_between(month_start, d2)
        return total

    def year_fraction(self, d1: date, d2: date) -> float:
        return self.day_count(d1, d2) / 252.0

    def __repr__(self) -> str:
        return f"Business252({self.calendar!r})"


# Pre-defined day count convention instances
ACT_360 = Actual360()
ACT_364 = Actual364()
ACT_365F = Actual365Fixed()
ACT_366 = Actual366()
ACT_ACT = ActualActual(ActualActualMarket.ISDA)
ACT_ACT_EURO = ActualActual(ActualActualMarket.EURO)
THIRTY_360U = Thirty360(Thirty360Market.USA)
THIRTY_360E = Thirty360(Thirty360Market.EUROPEAN)
THIRTY_360_ITALIAN = Thirty360(Thirty360Market.ITALIAN)
THIRTY_360_ISMA = Thirty360(Thirty360Market.ISMA)
THIRTY_360_NASD = Thirty360(Thirty360Market.NASD)
THIRTY_365 = Thirty365()

# Registry
DAY_COUNT_CONVENTIONS = {
    "ACT/360": ACT_360,
    "ACTUAL/360": ACT_360,
    "ACT/364": ACT_364,
    "ACTUAL/364": ACT_364,
    "ACT/365F": ACT_365F,
    "ACT/365": ACT_365F,
    "ACTUAL/365F": ACT_365F,
    "ACT/366": ACT_366,
    "ACTUAL/366": ACT_366,
    "ACT/ACT": ACT_ACT,
    "ACTUAL/ACTUAL": ACT_ACT,
    "ACT/ACT ISDA": ACT_ACT,
    "ACT/ACT EURO": ACT_ACT_EURO,
    "ACT/ACT AFB": ACT_ACT_EURO,
    "30/360": THIRTY_360U,
    "30U/360": THIRTY_360U,
    "30/360 US": THIRTY_360U,
    "30E/360": THIRTY_360E,
    "30/360E": THIRTY_360E,
    "30/360 EUROPEAN": THIRTY_360E,
    "30/360 ITALIAN": THIRTY_360_ITALIAN,
    "30/360 ISMA": THIRTY_360_ISMA,
    "30/360 NASD": THIRTY_360_NASD,
    "30/365": THIRTY_365,
}


def get_day_count_convention(name: str) -> DayCounter:
    """Get a day count convention by name."""
    name_upper = name.strip().upper()
    if name_upper not in DAY_COUNT_CONVENTIONS:
        raise ValueError(
            f"Unknown day count convention: {name}. "
            f"Available: {list(DAY_COUNT_CONVENTIONS.keys())}"
        )
    return DAY_COUNT_CONVENTIONS[name_upper]
