"""
Joint calendar: a date is a business day only if every member calendar agrees.
"""

import logging
from datetime import date
from typing import Iterable

from ficcdates.calendars.base import Calendar

logger = logging.getLogger(__name__)


class JointCalendar(Calendar):
    """Logical conjunction of several calendars (e.g. London and New York).

    Members are evaluated in the given order and evaluation stops at the first
    closed market, so put the most restrictive calendar first. A joint
    calendar without members treats every date as a business day.
    """

    def __init__(self, calendars: Iterable[Calendar]):
        self.calendars = tuple(calendars)
        if not self.calendars:
            logger.warning("JointCalendar created without member calendars")
        self.name = "+".join(c.name for c in self.calendars) or "JOINT"

    def is_business_day(self, d: date) -> bool:
        return all(c.is_business_day(d) for c in self.calendars)

    def __len__(self) -> int:
        return len(self.calendars)
