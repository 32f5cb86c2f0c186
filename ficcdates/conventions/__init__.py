# Re-export convention components
from .daycount import (
    ACT_360,
    ACT_364,
    ACT_365F,
    ACT_366,
    ACT_ACT,
    ACT_ACT_EURO,
    DAY_COUNT_CONVENTIONS,
    THIRTY_360E,
    THIRTY_360U,
    THIRTY_365,
    Actual360,
    Actual364,
    Actual365Fixed,
    Actual366,
    ActualActual,
    ActualActualMarket,
    Business252,
    DayCounter,
    Thirty360,
    Thirty360Market,
    Thirty365,
    get_day_count_convention,
)
from .period import ON, SN, SPOT, Days, Months, Period, PeriodUnit, Weeks, Years, to_period
from .types import BusinessDayConvention, Frequency, RollConvention
