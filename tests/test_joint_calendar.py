"""Tests for joint calendars."""

import logging

from datetime import date, timedelta

from ficcdates.calendars import JointCalendar, Target, WeekendsOnly
from ficcdates.conventions.period import Days


def test_conjunction(us, uk, us_uk) -> None:
    """A joint date is a business day exactly when every member agrees."""
    d = date(2023, 1, 1)
    while d <= date(2024, 12, 31):
        assert us_uk.is_business_day(d) == (us.is_business_day(d) and uk.is_business_day(d)), d
        d += timedelta(days=1)


def test_order_does_not_change_result(us, uk, us_uk) -> None:
    reversed_joint = JointCalendar([uk, us])
    d = date(2023, 1, 1)
    while d <= date(2023, 12, 31):
        assert reversed_joint.is_business_day(d) == us_uk.is_business_day(d)
        d += timedelta(days=1)


def test_either_holiday_closes(us_uk) -> None:
    # US Thanksgiving, London open
    assert not us_uk.is_business_day(date(2023, 11, 23))
    # UK Summer Bank Holiday, New York open
    assert not us_uk.is_business_day(date(2023, 8, 28))
    assert us_uk.is_business_day(date(2023, 11, 24))


def test_empty_calendar_always_open(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="ficcdates.calendars.joint"):
        joint = JointCalendar([])
    assert "without member calendars" in caplog.text
    assert joint.name == "JOINT"
    assert len(joint) == 0
    assert joint.is_business_day(date(2023, 12, 25))
    assert joint.is_business_day(date(2023, 10, 14))


def test_copies_members() -> None:
    members = [Target()]
    joint = JointCalendar(members)
    members.append(WeekendsOnly())
    assert len(joint) == 1
    assert joint.calendars == (members[0],)


def test_accepts_generator() -> None:
    joint = JointCalendar(c for c in (Target(), WeekendsOnly()))
    assert joint.name == "TARGET+WEEKEND"
    assert joint.is_business_day(date(2023, 12, 27))
    assert not joint.is_business_day(date(2023, 12, 26))


def test_inherits_default_algorithms(us_uk) -> None:
    """Spot from Friday 2023-11-24 skips the weekend; Monday 27th is open on both sides."""
    assert us_uk.advance(date(2023, 11, 22), Days(2)) == date(2023, 11, 27)
    assert us_uk.end_of_month(date(2023, 12, 1)) == date(2023, 12, 29)
