"""
United Kingdom calendars.
"""

from datetime import date
from enum import Enum

from ficcdates.calendars.base import Calendar

MON, TUE = 0, 1


class UnitedKingdomMarket(Enum):
    """UK markets; all currently share the settlement holidays."""

    SETTLEMENT = "SETTLEMENT"
    EXCHANGE = "EXCHANGE"
    METALS = "METALS"


class UnitedKingdom(Calendar):
    """UK bank holidays (England and Wales)."""

    def __init__(self, market: UnitedKingdomMarket = UnitedKingdomMarket.SETTLEMENT):
        self.market = market
        self.name = f"UK {market.value.lower()}"

    @staticmethod
    def _is_bank_holiday(d: date) -> bool:
        day, weekday, month, year = d.day, d.weekday(), d.month, d.year
        return (
            # first Monday of May (Early May Bank Holiday),
            # moved to May 8th in 1995 and 2020 for V.E. day
            (day <= 7 and weekday == MON and month == 5 and year not in (1995, 2020))
            or (day == 8 and month == 5 and year in (1995, 2020))
            # last Monday of May (Spring Bank Holiday), moved for the
            # Golden, Diamond and Platinum Jubilees
            or (day >= 25 and weekday == MON and month == 5 and year not in (2002, 2012, 2022))
            or (day in (3, 4) and month == 6 and year == 2002)
            or (day in (4, 5) and month == 6 and year == 2012)
            or (day in (2, 3) and month == 6 and year == 2022)
            # last Monday of August (Summer Bank Holiday)
            or (day >= 25 and weekday == MON and month == 8)
            # Royal Wedding
            or (day == 29 and month == 4 and year == 2011)
            # The Queen's Funeral
            or (day == 19 and month == 9 and year == 2022)
            # King Charles III Coronation
            or (day == 8 and month == 5 and year == 2023)
        )

    def _settlement_is_business_day(self, d: date) -> bool:
        day, weekday, month, year = d.day, d.weekday(), d.month, d.year
        day_of_year = d.timetuple().tm_yday
        em = self.easter_monday(year)
        if (
            self.is_weekend(d)
            # New Year's Day (possibly moved to Monday)
            or ((day == 1 or (day in (2, 3) and weekday == MON)) and month == 1)
            # Good Friday
            or day_of_year == em - 3
            # Easter Monday
            or day_of_year == em
            or self._is_bank_holiday(d)
            # Christmas (possibly moved to Monday or Tuesday)
            or ((day == 25 or (day == 27 and weekday in (MON, TUE))) and month == 12)
            # Boxing Day (possibly moved to Monday or Tuesday)
            or ((day == 26 or (day == 28 and weekday in (MON, TUE))) and month == 12)
            # December 31st, 1999 only
            or (day == 31 and month == 12 and year == 1999)
        ):
            return False
        return True

    def is_business_day(self, d: date) -> bool:
        return self._settlement_is_business_day(d)
