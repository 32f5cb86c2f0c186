"""
Business day calendar capability and its default algorithms.

A concrete calendar only has to answer ``is_business_day``; adjustment,
advancement, end-of-month snapping and business-day counting are all derived
from that single predicate.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date, timedelta
from functools import lru_cache
from typing import List, Tuple

from dateutil.easter import EASTER_ORTHODOX, EASTER_WESTERN, easter

from ficcdates.conventions.period import PeriodLike, PeriodUnit, to_period
from ficcdates.conventions.types import BusinessDayConvention
from ficcdates.exceptions import (
    AdjustmentError,
    EasterYearOutOfRangeError,
    PeriodOutOfBoundsError,
)
from ficcdates.utils.date import DateLike, to_date

logger = logging.getLogger(__name__)

EASTER_FIRST_YEAR = 1901
EASTER_LAST_YEAR = 2199

# Upper bound on one-day steps when searching for a business day.
MAX_ADJUSTMENT_DAYS = 366

ONE_DAY = timedelta(days=1)


@lru_cache(maxsize=None)
def _easter_monday_table(method: int) -> Tuple[int, ...]:
    """Day-of-year of Easter Monday for every year in the supported range."""
    return tuple(
        (easter(year, method) + ONE_DAY).timetuple().tm_yday
        for year in range(EASTER_FIRST_YEAR, EASTER_LAST_YEAR + 1)
    )


def _easter_monday_lookup(year: int, method: int) -> int:
    if not EASTER_FIRST_YEAR <= year <= EASTER_LAST_YEAR:
        raise EasterYearOutOfRangeError(
            f"Easter tables cover {EASTER_FIRST_YEAR}-{EASTER_LAST_YEAR}, got {year}"
        )
    return _easter_monday_table(method)[year - EASTER_FIRST_YEAR]


class Calendar(ABC):
    """Base business day calendar.

    Subclasses implement ``is_business_day``; every other method is derived
    from it and carries no state of its own.
    """

    name: str = "Calendar"

    @abstractmethod
    def is_business_day(self, d: date) -> bool:
        """Check if date is a business day."""

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def is_holiday(self, d: date) -> bool:
        return not self.is_business_day(d)

    @staticmethod
    def is_weekend(d: date) -> bool:
        return d.weekday() >= 5  # 5=Sat, 6=Sun

    @staticmethod
    def easter_monday(year: int) -> int:
        """Day of year of Easter Monday (Western), valid for 1901-2199."""
        return _easter_monday_lookup(year, EASTER_WESTERN)

    @staticmethod
    def orthodox_easter_monday(year: int) -> int:
        """Day of year of Orthodox Easter Monday, valid for 1901-2199."""
        return _easter_monday_lookup(year, EASTER_ORTHODOX)

    @staticmethod
    def last_day_of_month(d: date) -> date:
        """Get the last calendar day of the month of d."""
        if d.month == 12:
            next_month = date(d.year + 1, 1, 1)
        else:
            next_month = date(d.year, d.month + 1, 1)
        return next_month - ONE_DAY

    def is_end_of_month(self, d: date) -> bool:
        """True if d is the last business day of its month."""
        d = to_date(d)
        return d == self.end_of_month(d)

    def end_of_month(self, d: DateLike) -> date:
        """Last business day of the month of d.

        Steps back from the last calendar day; stops at the first of the month
        if the whole month is closed.
        """
        current = self.last_day_of_month(to_date(d))
        while not self.is_business_day(current) and current.day > 1:
            current -= ONE_DAY
        return current

    @staticmethod
    def _step(d: date, step: timedelta) -> date:
        try:
            return d + step
        except OverflowError as exc:
            raise PeriodOutOfBoundsError(f"{d} + {step.days} days is out of bounds") from exc

    def _roll(self, d: date, step: timedelta) -> date:
        current = d
        for _ in range(MAX_ADJUSTMENT_DAYS):
            if self.is_business_day(current):
                return current
            current = self._step(current, step)
        raise AdjustmentError(
            f"No business day within {MAX_ADJUSTMENT_DAYS} days of {d} in {self.name}"
        )

    def adjust(
        self,
        d: DateLike,
        convention: BusinessDayConvention = BusinessDayConvention.FOLLOWING,
    ) -> date:
        """Apply business day adjustment to a date."""
        d = to_date(d)

        if convention == BusinessDayConvention.UNADJUSTED:
            return d

        elif convention in (
            BusinessDayConvention.FOLLOWING,
            BusinessDayConvention.MODIFIED_FOLLOWING,
            BusinessDayConvention.HALF_MONTH_MODIFIED_FOLLOWING,
        ):
            adjusted = self._roll(d, ONE_DAY)
            if convention == BusinessDayConvention.FOLLOWING:
                return adjusted
            if adjusted.month != d.month:
                logger.debug("%s: %s rolled into next month, using Preceding", convention.value, d)
                return self._roll(d, -ONE_DAY)
            if (
                convention == BusinessDayConvention.HALF_MONTH_MODIFIED_FOLLOWING
                and d.day <= 15 < adjusted.day
            ):
                logger.debug("%s: %s rolled past mid-month, using Preceding", convention.value, d)
                return self._roll(d, -ONE_DAY)
            return adjusted

        elif convention in (
            BusinessDayConvention.PRECEDING,
            BusinessDayConvention.MODIFIED_PRECEDING,
        ):
            adjusted = self._roll(d, -ONE_DAY)
            if (
                convention == BusinessDayConvention.MODIFIED_PRECEDING
                and adjusted.month != d.month
            ):
                logger.debug("%s: %s rolled into previous month, using Following", convention.value, d)
                return self._roll(d, ONE_DAY)
            return adjusted

        elif convention == BusinessDayConvention.NEAREST:
            forward = backward = d
            for _ in range(MAX_ADJUSTMENT_DAYS):
                if self.is_business_day(forward):
                    return forward
                if self.is_business_day(backward):
                    return backward
                forward = self._step(forward, ONE_DAY)
                backward = self._step(backward, -ONE_DAY)
            raise AdjustmentError(
                f"No business day within {MAX_ADJUSTMENT_DAYS} days of {d} in {self.name}"
            )

        else:
            raise ValueError(f"Unknown business day convention: {convention}")

    def advance(
        self,
        d: DateLike,
        period: PeriodLike,
        convention: BusinessDayConvention = BusinessDayConvention.FOLLOWING,
        end_of_month: bool = False,
    ) -> date:
        """Move d by period and land on a business day.

        Days periods count business days; months and years are added on the
        calendar and then adjusted, or snapped to the month's last business
        day when end_of_month is set. Other periods are added then adjusted.
        """
        d = to_date(d)
        period = to_period(period)

        if period.unit == PeriodUnit.DAYS:
            n = period.length
            if n == 0:
                return self.adjust(d, convention)
            step = ONE_DAY if n > 0 else -ONE_DAY
            current = d
            for _ in range(abs(n)):
                current = self._roll(self._step(current, step), step)
            return current

        shifted = d + period
        if period.unit in (PeriodUnit.MONTHS, PeriodUnit.YEARS) and end_of_month:
            return self.end_of_month(self.adjust(shifted, convention))
        return self.adjust(shifted, convention)

    def business_days_between(
        self,
        start: DateLike,
        end: DateLike,
        include_first: bool = True,
        include_last: bool = False,
    ) -> int:
        """Count business days between two dates.

        When start is after end the count is negated. The flags always refer
        to the chronologically first and last dates, whatever the argument
        order.
        """
        start, end = to_date(start), to_date(end)
        if start > end:
            return -self.business_days_between(end, start, include_first, include_last)

        if start == end:
            return int(include_first and include_last and self.is_business_day(start))

        count = 0
        current = start + ONE_DAY
        while current < end:
            if self.is_business_day(current):
                count += 1
            current += ONE_DAY
        if include_first and self.is_business_day(start):
            count += 1
        if include_last and self.is_business_day(end):
            count += 1
        return count

    def holiday_list(
        self, start: DateLike, end: DateLike, include_weekends: bool = False
    ) -> List[date]:
        """Non-business days in [start, end]."""
        start, end = to_date(start), to_date(end)
        holidays = []
        current = start
        while current <= end:
            if not self.is_business_day(current) and (include_weekends or not self.is_weekend(current)):
                holidays.append(current)
            current += ONE_DAY
        return holidays

    def business_day_list(self, start: DateLike, end: DateLike) -> List[date]:
        """Business days in [start, end]."""
        start, end = to_date(start), to_date(end)
        days = []
        current = start
        while current <= end:
            if self.is_business_day(current):
                days.append(current)
            current += ONE_DAY
        return days
