"""
United States calendars.
"""

from datetime import date
from enum import Enum

from ficcdates.calendars.base import Calendar

MON, TUE, WED, THU, FRI = 0, 1, 2, 3, 4


class UnitedStatesMarket(Enum):
    """US markets with distinct holiday rules."""

    SETTLEMENT = "SETTLEMENT"
    LIBOR = "LIBOR"
    NYSE = "NYSE"


def _is_washington_birthday(d: date) -> bool:
    day, weekday, month, year = d.day, d.weekday(), d.month, d.year
    if month != 2:
        return False
    if year >= 1971:
        # third Monday in February
        return 15 <= day <= 21 and weekday == MON
    # February 22nd, possibly adjusted
    return day == 22 or (day == 23 and weekday == MON) or (day == 21 and weekday == FRI)


def _is_memorial_day(d: date) -> bool:
    day, weekday, month, year = d.day, d.weekday(), d.month, d.year
    if month != 5:
        return False
    if year >= 1971:
        # last Monday in May
        return day >= 25 and weekday == MON
    # May 30th, possibly adjusted
    return day == 30 or (day == 31 and weekday == MON) or (day == 29 and weekday == FRI)


def _is_labor_day(d: date) -> bool:
    return d.day <= 7 and d.weekday() == MON and d.month == 9


def _is_columbus_day(d: date) -> bool:
    return 8 <= d.day <= 14 and d.weekday() == MON and d.month == 10 and d.year >= 1971


def _is_veterans_day(d: date) -> bool:
    day, weekday, month, year = d.day, d.weekday(), d.month, d.year
    if year <= 1970 or year >= 1978:
        # November 11th, adjusted
        return month == 11 and (
            day == 11 or (day == 12 and weekday == MON) or (day == 10 and weekday == FRI)
        )
    # fourth Monday in October (1971-1977)
    return 22 <= day <= 28 and weekday == MON and month == 10


def _is_juneteenth(d: date) -> bool:
    day, weekday = d.day, d.weekday()
    return (
        (day == 19 or (day == 20 and weekday == MON) or (day == 18 and weekday == FRI))
        and d.month == 6
        and d.year >= 2022
    )


def _is_independence_day(d: date) -> bool:
    day, weekday = d.day, d.weekday()
    return (day == 4 or (day == 5 and weekday == MON) or (day == 3 and weekday == FRI)) and d.month == 7


def _is_thanksgiving(d: date) -> bool:
    return 22 <= d.day <= 28 and d.weekday() == THU and d.month == 11


def _is_christmas(d: date) -> bool:
    day, weekday = d.day, d.weekday()
    return (day == 25 or (day == 26 and weekday == MON) or (day == 24 and weekday == FRI)) and d.month == 12


# NYSE special closings as (year, month, day)
_NYSE_SPECIAL_CLOSINGS = {
    (2018, 12, 5),  # President Bush's funeral
    (2012, 10, 29), (2012, 10, 30),  # Hurricane Sandy
    (2007, 1, 2),  # President Ford's funeral
    (2004, 6, 11),  # President Reagan's funeral
    (2001, 9, 11), (2001, 9, 12), (2001, 9, 13), (2001, 9, 14),
    (1994, 4, 27),  # President Nixon's funeral
    (1985, 9, 27),  # Hurricane Gloria
    (1977, 7, 14),  # blackout
    (1973, 1, 25),  # President Johnson's funeral
    (1972, 12, 28),  # President Truman's funeral
    (1969, 7, 21),  # lunar exploration day of participation
    (1969, 3, 31),  # President Eisenhower's funeral
    (1969, 2, 10),  # heavy snow
    (1968, 7, 5),  # day after Independence Day
    (1968, 4, 9),  # day of mourning for Martin Luther King Jr.
    (1963, 11, 25),  # President Kennedy's funeral
    (1961, 5, 29),  # day before Decoration Day
    (1958, 12, 26),  # day after Christmas
    (1954, 12, 24), (1956, 12, 24), (1965, 12, 24),  # Christmas Eve
}


class UnitedStates(Calendar):
    """US calendars for settlement, LIBOR fixing and the NYSE."""

    def __init__(self, market: UnitedStatesMarket = UnitedStatesMarket.SETTLEMENT):
        self.market = market
        self.name = f"US {market.value.lower()}"

    def _settlement_is_business_day(self, d: date) -> bool:
        day, weekday, month, year = d.day, d.weekday(), d.month, d.year
        if (
            self.is_weekend(d)
            # New Year's Day (possibly moved to Monday if on Sunday)
            or ((day == 1 or (day == 2 and weekday == MON)) and month == 1)
            # (or to Friday if on Saturday)
            or (day == 31 and weekday == FRI and month == 12)
            # Martin Luther King's birthday (third Monday in January)
            or (15 <= day <= 21 and weekday == MON and month == 1 and year >= 1983)
            or _is_washington_birthday(d)
            or _is_memorial_day(d)
            or _is_juneteenth(d)
            or _is_independence_day(d)
            or _is_labor_day(d)
            or _is_columbus_day(d)
            or _is_veterans_day(d)
            or _is_thanksgiving(d)
            or _is_christmas(d)
        ):
            return False
        return True

    def _libor_is_business_day(self, d: date) -> bool:
        # Independence Day moved off a weekend is a LIBOR fixing day since 2015
        if (
            ((d.day == 5 and d.weekday() == MON) or (d.day == 3 and d.weekday() == FRI))
            and d.month == 7
            and d.year >= 2015
        ):
            return True
        return self._settlement_is_business_day(d)

    def _nyse_is_business_day(self, d: date) -> bool:
        day, weekday, month, year = d.day, d.weekday(), d.month, d.year
        day_of_year = d.timetuple().tm_yday
        em = self.easter_monday(year)
        if (
            self.is_weekend(d)
            or ((day == 1 or (day == 2 and weekday == MON)) and month == 1)
            or _is_washington_birthday(d)
            # Good Friday
            or day_of_year == em - 3
            or _is_memorial_day(d)
            or _is_juneteenth(d)
            or _is_independence_day(d)
            or _is_labor_day(d)
            or _is_thanksgiving(d)
            or _is_christmas(d)
        ):
            return False

        # Martin Luther King's birthday (third Monday in January)
        if year >= 1998 and 15 <= day <= 21 and weekday == MON and month == 1:
            return False

        # Presidential election days
        if (year <= 1968 or (year <= 1980 and year % 4 == 0)) and month == 11 and day <= 7 and weekday == TUE:
            return False

        if (year, month, day) in _NYSE_SPECIAL_CLOSINGS:
            return False

        # Paperwork crisis: closed on Wednesdays from June 12th to December 31st, 1968
        if year == 1968 and day_of_year >= 163 and weekday == WED:
            return False

        return True

    def is_business_day(self, d: date) -> bool:
        if self.market == UnitedStatesMarket.LIBOR:
            return self._libor_is_business_day(d)
        if self.market == UnitedStatesMarket.NYSE:
            return self._nyse_is_business_day(d)
        return self._settlement_is_business_day(d)
