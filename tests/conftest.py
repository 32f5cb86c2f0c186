"""
Shared pytest fixtures for ficcdates tests.

Provides the calendars and reference dates used across the test modules.
"""

import pytest
from datetime import date

from ficcdates.calendars import (
    Calendar,
    JointCalendar,
    Target,
    UnitedKingdom,
    UnitedStates,
    WeekendsOnly,
)


class ClosedCalendar(Calendar):
    """Calendar on which no day is ever a business day."""

    name = "CLOSED"

    def is_business_day(self, d: date) -> bool:
        return False


@pytest.fixture
def target() -> Target:
    """TARGET settlement calendar."""
    return Target()


@pytest.fixture
def weekends_only() -> WeekendsOnly:
    return WeekendsOnly()


@pytest.fixture
def uk() -> UnitedKingdom:
    return UnitedKingdom()


@pytest.fixture
def us() -> UnitedStates:
    return UnitedStates()


@pytest.fixture
def us_uk(us: UnitedStates, uk: UnitedKingdom) -> JointCalendar:
    """Joint New York and London calendar used for GBPUSD settlement."""
    return JointCalendar([us, uk])


@pytest.fixture
def closed_calendar() -> ClosedCalendar:
    return ClosedCalendar()


@pytest.fixture
def valuation_date() -> date:
    """Monday valuation date used by the settlement scenarios."""
    return date(2023, 10, 16)
