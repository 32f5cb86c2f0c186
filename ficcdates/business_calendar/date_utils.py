"""
Date calculation utilities for money-market and swap conventions.
Provides standalone functions for business day adjustments, spot lag calculations and tenor arithmetic.
"""

from datetime import date
from typing import List, Optional, Union

from ficcdates.calendars import Calendar, get_calendar
from ficcdates.conventions.period import Days, PeriodLike, PeriodUnit, to_period
from ficcdates.conventions.types import BusinessDayConvention, Frequency, RollConvention
from ficcdates.imm import imm
from ficcdates.utils.date import DateLike, to_date

# Default market settings
_DEFAULT_CALENDAR: Optional[Calendar] = None  # Will be initialized on first use
_DEFAULT_SPOT_LAG = 2
_DEFAULT_BUSINESS_DAY_CONVENTION = BusinessDayConvention.MODIFIED_FOLLOWING
_DEFAULT_END_OF_MONTH_RULE = False


def _get_default_calendar() -> Calendar:
    """Get default calendar, initializing if needed."""
    global _DEFAULT_CALENDAR
    if _DEFAULT_CALENDAR is None:
        _DEFAULT_CALENDAR = get_calendar("TARGET")
    return _DEFAULT_CALENDAR


def set_default_calendar(calendar_name: str) -> None:
    """Set the default calendar for date calculations."""
    global _DEFAULT_CALENDAR
    _DEFAULT_CALENDAR = get_calendar(calendar_name)


def set_default_spot_lag(spot_lag: int) -> None:
    """Set the default spot lag in business days."""
    global _DEFAULT_SPOT_LAG
    if spot_lag < 0:
        raise ValueError(f"Spot lag must be non-negative, got {spot_lag}")
    _DEFAULT_SPOT_LAG = spot_lag


def set_default_business_day_convention(convention: BusinessDayConvention) -> None:
    """Set the default business day convention for tenor arithmetic."""
    global _DEFAULT_BUSINESS_DAY_CONVENTION
    _DEFAULT_BUSINESS_DAY_CONVENTION = convention


def set_default_end_of_month_rule(end_of_month: bool) -> None:
    global _DEFAULT_END_OF_MONTH_RULE
    _DEFAULT_END_OF_MONTH_RULE = end_of_month


def get_spot_date(
    trade_date: DateLike, calendar: Optional[Calendar] = None, spot_lag: Optional[int] = None
) -> date:
    """Get spot date from trade date: spot_lag business days later."""
    if calendar is None:
        calendar = _get_default_calendar()
    if spot_lag is None:
        spot_lag = _DEFAULT_SPOT_LAG
    return calendar.advance(to_date(trade_date), Days(spot_lag))


def adjust_business_date(
    dt: DateLike,
    convention: Optional[BusinessDayConvention] = None,
    calendar: Optional[Calendar] = None,
) -> date:
    """Apply business day adjustment using market conventions."""
    if calendar is None:
        calendar = _get_default_calendar()
    if convention is None:
        convention = _DEFAULT_BUSINESS_DAY_CONVENTION
    return calendar.adjust(dt, convention)


def compute_maturity(
    curve_date: DateLike,
    tenor: PeriodLike,
    calendar: Optional[Calendar] = None,
    spot_lag: Optional[int] = None,
    business_day_convention: Optional[BusinessDayConvention] = None,
    end_of_month_rule: Optional[bool] = None,
) -> date:
    """Compute maturity date from curve date and tenor.

    ON starts from the curve date, every other tenor from spot. Day and
    week tenors are added on the calendar; all tenors are then adjusted
    under the business day convention.
    """
    if calendar is None:
        calendar = _get_default_calendar()
    if business_day_convention is None:
        business_day_convention = _DEFAULT_BUSINESS_DAY_CONVENTION
    if end_of_month_rule is None:
        end_of_month_rule = _DEFAULT_END_OF_MONTH_RULE

    period = to_period(tenor)
    if period.unit == PeriodUnit.ON:
        start = calendar.adjust(curve_date, BusinessDayConvention.FOLLOWING)
    else:
        start = get_spot_date(curve_date, calendar, spot_lag)

    if period.unit == PeriodUnit.DAYS:
        return calendar.adjust(start + period, business_day_convention)
    return calendar.advance(start, period, business_day_convention, end_of_month_rule)


def generate_payment_schedule(
    curve_date: DateLike,
    tenor: PeriodLike,
    frequency: Union[PeriodLike, Frequency],
    calendar: Optional[Calendar] = None,
    spot_lag: Optional[int] = None,
    business_day_convention: Optional[BusinessDayConvention] = None,
    end_of_month_rule: Optional[bool] = None,
    roll_convention: RollConvention = RollConvention.NO_ROLL,
) -> List[date]:
    """Payment dates from spot to the tenor's maturity, stepping by frequency.

    EOM rolling applies the end-of-month rule to every step. IMM rolling moves
    each intermediate date to the IMM date (third Wednesday) of its month;
    spot and maturity are left as they are.
    """
    if calendar is None:
        calendar = _get_default_calendar()
    if business_day_convention is None:
        business_day_convention = _DEFAULT_BUSINESS_DAY_CONVENTION
    if end_of_month_rule is None:
        end_of_month_rule = _DEFAULT_END_OF_MONTH_RULE

    if roll_convention == RollConvention.EOM:
        end_of_month_rule = True

    step = frequency.period() if isinstance(frequency, Frequency) else to_period(frequency)
    if step is None or step.is_marker or step.length <= 0:
        raise ValueError(f"Schedule frequency must be a positive duration, got {frequency}")

    spot = get_spot_date(curve_date, calendar, spot_lag)
    maturity = compute_maturity(
        curve_date, tenor, calendar, spot_lag, business_day_convention, end_of_month_rule
    )
    dates: List[date] = [spot]
    n = 1
    while True:
        next_d = calendar.advance(spot, n * step, business_day_convention, end_of_month_rule)
        if next_d >= maturity:
            dates.append(maturity)
            break
        if roll_convention == RollConvention.IMM:
            next_d = calendar.adjust(
                imm.next_date(date(next_d.year, next_d.month, 1), main_cycle=False),
                business_day_convention,
            )
        dates.append(next_d)
        n += 1
    return dates
