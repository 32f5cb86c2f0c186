from .date_utils import (
    adjust_business_date,
    compute_maturity,
    generate_payment_schedule,
    get_spot_date,
    set_default_business_day_convention,
    set_default_calendar,
    set_default_end_of_month_rule,
    set_default_spot_lag,
)

__all__ = [
    "adjust_business_date",
    "compute_maturity",
    "generate_payment_schedule",
    "get_spot_date",
    "set_default_business_day_convention",
    "set_default_calendar",
    "set_default_end_of_month_rule",
    "set_default_spot_lag",
]
