"""
IMM (International Money Market) dates and futures contract codes.

IMM dates are the third Wednesdays of a month, i.e. the Wednesday falling on
days 15-21. The main cycle is March, June, September and December. Contract
codes are a month letter followed by the last digit of the year ("Z3").
"""

from __future__ import annotations

import calendar
import logging
from datetime import date
from enum import Enum
from typing import Optional

from ficcdates.utils.date import DateLike, to_date

logger = logging.getLogger(__name__)

WEDNESDAY = 2
MAIN_CYCLE_MONTHS = (3, 6, 9, 12)


class IMMMonth(Enum):
    """IMM month codes."""

    F = 1
    G = 2
    H = 3
    J = 4
    K = 5
    M = 6
    N = 7
    Q = 8
    U = 9
    V = 10
    X = 11
    Z = 12


_MAIN_CYCLE_LETTERS = frozenset(m.name for m in IMMMonth if m.value in MAIN_CYCLE_MONTHS)
_ALL_LETTERS = frozenset(m.name for m in IMMMonth)


def nth_weekday(n: int, weekday: int, month: int, year: int) -> Optional[date]:
    """Date of the n-th given weekday (0=Mon ... 6=Sun) in a month.

    Returns None when n is outside 1-5 or the month has no such occurrence.
    """
    if not 1 <= n <= 5:
        return None
    first = date(year, month, 1).weekday()
    day = 1 + (weekday - first) % 7 + (n - 1) * 7
    if day > calendar.monthrange(year, month)[1]:
        return None
    return date(year, month, day)


class IMM:
    """IMM date engine."""

    def is_imm_date(self, d: DateLike, main_cycle: bool = True) -> bool:
        d = to_date(d)
        if d.weekday() != WEDNESDAY:
            return False
        if not 15 <= d.day <= 21:
            return False
        if not main_cycle:
            return True
        return d.month in MAIN_CYCLE_MONTHS

    def is_imm_code(self, imm_code: str, main_cycle: bool = True) -> bool:
        if not isinstance(imm_code, str) or len(imm_code) != 2:
            return False
        if imm_code[1] not in "0123456789":
            return False
        letters = _MAIN_CYCLE_LETTERS if main_cycle else _ALL_LETTERS
        return imm_code[0].upper() in letters

    def code(self, d: DateLike) -> Optional[str]:
        """Contract code of an IMM date; None for any other date."""
        d = to_date(d)
        if not self.is_imm_date(d, main_cycle=False):
            return None
        return f"{IMMMonth(d.month).name}{d.year % 10}"

    def date(self, imm_code: str, reference_date: DateLike) -> Optional[date]:
        """IMM date of a contract code, taken as the first one on or after reference_date.

        The year digit is placed in the reference date's decade and moved one
        decade forward if that lands before the reference date.
        """
        if not self.is_imm_code(imm_code, main_cycle=False):
            return None
        reference_date = to_date(reference_date)
        month = IMMMonth[imm_code[0].upper()].value
        year = int(imm_code[1])
        if year == 0 and reference_date.year <= 1909:
            year += 10
        year += reference_date.year - reference_date.year % 10

        result = self.next_date(date(year, month, 1), main_cycle=False)
        if result < reference_date:
            logger.debug("IMM code %s before %s, rolling forward a decade", imm_code, reference_date)
            result = self.next_date(date(year + 10, month, 1), main_cycle=False)
        return result

    def next_date(self, d: DateLike, main_cycle: bool = True) -> date:
        """First IMM date strictly after d."""
        d = to_date(d)
        year, month = d.year, d.month
        offset = 3 if main_cycle else 1
        skip_months = offset - (month % offset)
        if skip_months != offset or d.day > 21:
            skip_months += month
            if skip_months <= 12:
                month = skip_months
            else:
                month = skip_months - 12
                year += 1

        result = nth_weekday(3, WEDNESDAY, month, year)
        if result <= d:
            result = self.next_date(date(year, month, 22), main_cycle)
        return result

    def next_code(self, d: DateLike, main_cycle: bool = True) -> str:
        """Contract code of the first IMM date strictly after d."""
        return self.code(self.next_date(d, main_cycle))


imm = IMM()


def is_imm_date(d: DateLike, main_cycle: bool = True) -> bool:
    return imm.is_imm_date(d, main_cycle)


def is_imm_code(imm_code: str, main_cycle: bool = True) -> bool:
    return imm.is_imm_code(imm_code, main_cycle)


def imm_code(d: DateLike) -> Optional[str]:
    return imm.code(d)


def imm_date(code: str, reference_date: DateLike) -> Optional[date]:
    return imm.date(code, reference_date)


def next_imm_date(d: DateLike, main_cycle: bool = True) -> date:
    return imm.next_date(d, main_cycle)


def next_imm_code(d: DateLike, main_cycle: bool = True) -> str:
    return imm.next_code(d, main_cycle)

