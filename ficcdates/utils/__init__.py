from .date import DateLike, days_in_year, is_leap_year, to_date

__all__ = ["DateLike", "to_date", "is_leap_year", "days_in_year"]
