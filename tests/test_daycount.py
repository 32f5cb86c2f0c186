"""Tests for day count conventions."""

import pytest
import QuantLib as ql
from datetime import date

from ficcdates.calendars import Target, WeekendsOnly
from ficcdates.conventions.daycount import (
    ACT_360,
    ACT_364,
    ACT_365F,
    ACT_366,
    ACT_ACT,
    ACT_ACT_EURO,
    THIRTY_360_ISMA,
    THIRTY_360_ITALIAN,
    THIRTY_360_NASD,
    THIRTY_360E,
    THIRTY_360U,
    THIRTY_365,
    ActualActual,
    ActualActualMarket,
    Business252,
    DayCounter,
    Thirty360,
    Thirty360Market,
    get_day_count_convention,
)
from ficcdates.utils.date import to_date


def _ql(d: date) -> ql.Date:
    return ql.Date(d.day, d.month, d.year)


DATE_PAIRS = [
    (date(2023, 1, 1), date(2024, 1, 1)),
    (date(2024, 1, 1), date(2024, 7, 1)),
    (date(2023, 11, 4), date(2024, 11, 3)),
    (date(2024, 12, 15), date(2025, 1, 15)),
    (date(2003, 11, 1), date(2004, 5, 1)),
    (date(1999, 2, 1), date(1999, 7, 1)),
    (date(2000, 1, 30), date(2000, 6, 30)),
    (date(2002, 8, 15), date(2003, 7, 15)),
    (date(2007, 2, 28), date(2012, 2, 29)),
    (date(2004, 2, 29), date(2008, 2, 28)),
    (date(2023, 3, 15), date(2031, 9, 30)),
]


class TestActualFixed:

    def test_act_365f_one_year(self) -> None:
        """A 365-day interval spanning Feb 29th is exactly one ACT/365F year."""
        assert ACT_365F.year_fraction(date(2023, 11, 4), date(2024, 11, 3)) == 1.0

    @pytest.mark.parametrize(
        "counter, denominator",
        [(ACT_360, 360), (ACT_364, 364), (ACT_365F, 365), (ACT_366, 366)],
    )
    def test_denominators(self, counter: DayCounter, denominator: int) -> None:
        d1, d2 = date(2023, 1, 15), date(2023, 7, 20)
        assert counter.day_count(d1, d2) == 186
        assert counter.year_fraction(d1, d2) == pytest.approx(186 / denominator)

    def test_negative_interval(self) -> None:
        assert ACT_360.day_count(date(2023, 7, 20), date(2023, 1, 15)) == -186
        assert ACT_360.year_fraction(date(2023, 7, 20), date(2023, 1, 15)) == pytest.approx(-186 / 360)

    def test_accepts_strings(self) -> None:
        assert ACT_365F.day_count("2023-01-01", "20230201") == 31


class TestActualActual:

    def test_isda_year_end(self) -> None:
        fraction = ACT_ACT.year_fraction(date(2024, 12, 15), date(2025, 1, 15))
        assert fraction == pytest.approx(17 / 366 + 14 / 365)

    def test_euro(self) -> None:
        assert ACT_ACT_EURO.year_fraction(date(2023, 1, 1), date(2024, 1, 1)) == 1.0
        assert ACT_ACT_EURO.year_fraction(date(2024, 1, 1), date(2024, 7, 1)) == pytest.approx(182 / 366)

    @pytest.mark.parametrize("counter", [ACT_ACT, ACT_ACT_EURO])
    def test_negative_interval(self, counter: ActualActual) -> None:
        d1, d2 = date(2023, 3, 15), date(2025, 8, 1)
        assert counter.year_fraction(d2, d1) == pytest.approx(-counter.year_fraction(d1, d2))

    @pytest.mark.parametrize("d1, d2", DATE_PAIRS)
    def test_isda_matches_quantlib(self, d1: date, d2: date) -> None:
        expected = ql.ActualActual(ql.ActualActual.ISDA).yearFraction(_ql(d1), _ql(d2))
        assert ACT_ACT.year_fraction(d1, d2) == pytest.approx(expected, abs=1e-12)

    @pytest.mark.parametrize("d1, d2", DATE_PAIRS)
    def test_euro_matches_quantlib(self, d1: date, d2: date) -> None:
        expected = ql.ActualActual(ql.ActualActual.Euro).yearFraction(_ql(d1), _ql(d2))
        assert ACT_ACT_EURO.year_fraction(d1, d2) == pytest.approx(expected, abs=1e-12)

    def test_names(self) -> None:
        assert ACT_ACT.name == "ACT/ACT ISDA"
        assert ActualActual(ActualActualMarket.EURO).name == "ACT/ACT EURO"


class TestThirty360:

    def test_usa(self) -> None:
        assert THIRTY_360U.day_count(date(2023, 2, 1), date(2023, 3, 1)) == 30
        assert THIRTY_360U.day_count(date(2023, 1, 31), date(2023, 3, 31)) == 60
        assert THIRTY_360U.day_count(date(2023, 2, 28), date(2024, 2, 29)) == 360
        assert THIRTY_360U.year_fraction(date(2023, 2, 1), date(2023, 3, 1)) == pytest.approx(30 / 360)

    @pytest.mark.parametrize(
        "start, end, expected",
        [
            # simple cases
            ("2006-08-20", "2007-02-20", 180),
            ("2007-02-20", "2007-08-20", 180),
            ("2008-08-20", "2009-02-20", 180),
            # february end dates
            ("2006-02-28", "2006-08-31", 182),
            ("2006-08-31", "2007-02-28", 178),
            ("2007-08-31", "2008-02-29", 179),
            ("2008-02-29", "2008-08-31", 181),
            ("2011-08-31", "2012-02-29", 179),
            # miscellaneous
            ("2006-01-31", "2006-02-28", 28),
            ("2006-01-30", "2006-02-28", 28),
            ("2006-02-28", "2006-03-03", 5),
            ("2006-09-30", "2006-10-31", 30),
            ("2007-02-26", "2008-02-29", 363),
            ("2008-02-29", "2009-02-28", 359),
            ("2008-02-28", "2008-03-31", 32),
        ],
    )
    def test_european(self, start: str, end: str, expected: int) -> None:
        assert THIRTY_360E.day_count(start, end) == expected

    @pytest.mark.parametrize("d1, d2", DATE_PAIRS)
    def test_european_matches_quantlib(self, d1: date, d2: date) -> None:
        expected = ql.Thirty360(ql.Thirty360.European).dayCount(_ql(d1), _ql(d2))
        assert THIRTY_360E.day_count(d1, d2) == expected

    @pytest.mark.parametrize(
        "termination, start, end, expected",
        [
            ("2009-08-20", "2006-08-20", "2007-02-20", 180),
            ("2012-02-29", "2006-02-28", "2006-08-31", 180),
            ("2012-02-29", "2007-08-31", "2008-02-29", 180),
            ("2012-02-29", "2011-08-31", "2012-02-29", 179),
            ("2008-02-29", "2006-01-31", "2006-02-28", 30),
            ("2008-02-29", "2006-02-28", "2006-03-03", 3),
            ("2008-02-29", "2006-02-14", "2006-02-28", 16),
            ("2008-02-29", "2007-02-28", "2008-02-28", 358),
            ("2008-02-29", "2007-02-28", "2008-02-29", 359),
            ("2008-02-29", "2008-02-29", "2009-02-28", 360),
            ("2008-02-29", "2008-02-29", "2008-03-31", 30),
        ],
    )
    def test_isda(self, termination: str, start: str, end: str, expected: int) -> None:
        """The termination date is exempt from the end-of-February rule."""
        counter = Thirty360(Thirty360Market.ISDA, termination_date=termination)
        assert counter.day_count(start, end) == expected

    @pytest.mark.parametrize(
        "start, end, expected",
        [
            ("2006-08-31", "2007-02-28", 178),
            ("2007-02-28", "2007-08-31", 183),
            ("2008-02-29", "2008-08-31", 182),
            ("2006-02-28", "2006-03-03", 5),
            ("2006-09-30", "2006-10-31", 30),
            ("2008-02-28", "2008-08-30", 182),
            ("2008-02-28", "2008-03-31", 33),
        ],
    )
    def test_isma(self, start: str, end: str, expected: int) -> None:
        assert THIRTY_360_ISMA.day_count(start, end) == expected

    def test_italian(self) -> None:
        """Late-February days count as the 30th."""
        assert THIRTY_360_ITALIAN.day_count(date(2023, 2, 28), date(2023, 3, 31)) == 30
        assert THIRTY_360_ITALIAN.day_count(date(2024, 1, 30), date(2024, 2, 28)) == 30

    def test_nasd(self) -> None:
        """A 31st end date rolls to the 1st of the next month unless the start is the 30th or 31st."""
        assert THIRTY_360_NASD.day_count(date(2023, 1, 15), date(2023, 3, 31)) == 76
        assert THIRTY_360_NASD.day_count(date(2023, 1, 30), date(2023, 3, 31)) == 60

    @pytest.mark.parametrize("market", [Thirty360Market.ISDA, Thirty360Market.GERMAN])
    def test_termination_date_required(self, market: Thirty360Market) -> None:
        with pytest.raises(ValueError):
            Thirty360(market)

    def test_german_same_as_isda(self) -> None:
        isda = Thirty360(Thirty360Market.ISDA, date(2012, 2, 29))
        german = Thirty360(Thirty360Market.GERMAN, date(2012, 2, 29))
        for start, end in DATE_PAIRS:
            assert german.day_count(start, end) == isda.day_count(start, end)


class TestThirty365:

    def test_day_count(self) -> None:
        assert THIRTY_365.day_count(date(2023, 1, 31), date(2023, 3, 2)) == 31
        assert THIRTY_365.year_fraction(date(2023, 1, 31), date(2023, 3, 2)) == pytest.approx(31 / 365)


class TestBusiness252:

    def test_month_by_month(self) -> None:
        counter = Business252(WeekendsOnly())
        assert counter.day_count(date(2023, 1, 2), date(2023, 3, 1)) == 42
        assert counter.year_fraction(date(2023, 1, 2), date(2023, 3, 1)) == pytest.approx(1 / 6)

    def test_name(self) -> None:
        assert Business252(WeekendsOnly()).name == "BUS/252(WEEKEND)"

    def test_reverse_interval(self) -> None:
        counter = Business252(WeekendsOnly())
        assert counter.day_count(date(2023, 3, 1), date(2023, 1, 2)) == -42

    @pytest.mark.parametrize("d1, d2", DATE_PAIRS)
    def test_matches_quantlib(self, target, d1: date, d2: date) -> None:
        expected = ql.Business252(ql.TARGET()).dayCount(_ql(d1), _ql(d2))
        assert Business252(target).day_count(d1, d2) == expected

    def test_matches_calendar_count(self, target: Target) -> None:
        d1, d2 = date(2022, 11, 17), date(2025, 2, 3)
        assert Business252(target).day_count(d1, d2) == target.business_days_between(d1, d2)


@pytest.mark.parametrize(
    "counter",
    [
        ACT_360,
        ACT_364,
        ACT_365F,
        ACT_366,
        ACT_ACT,
        ACT_ACT_EURO,
        THIRTY_360U,
        THIRTY_360E,
        THIRTY_360_ITALIAN,
        THIRTY_360_ISMA,
        THIRTY_360_NASD,
        Thirty360(Thirty360Market.ISDA, date(2030, 1, 1)),
        THIRTY_365,
        Business252(WeekendsOnly()),
    ],
    ids=str,
)
def test_same_date_is_zero(counter: DayCounter) -> None:
    d = date(2024, 2, 29)
    assert counter.day_count(d, d) == 0
    assert counter.year_fraction(d, d) == 0.0


class TestYearFractionToDate:

    def test_act_365f(self) -> None:
        assert ACT_365F.year_fraction_to_date(date(2023, 1, 1), 1.0) == date(2024, 1, 1)

    def test_act_360_corrects_guess(self) -> None:
        assert ACT_360.year_fraction_to_date(date(2023, 1, 1), 0.5) == date(2023, 6, 30)

    def test_thirty_360(self) -> None:
        assert THIRTY_360U.year_fraction_to_date("2023-01-15", 1.0) == date(2024, 1, 15)

    def test_zero(self) -> None:
        assert ACT_ACT.year_fraction_to_date(date(2023, 5, 5), 0.0) == date(2023, 5, 5)


class TestRegistry:

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("ACT/360", ACT_360),
            ("act/365f", ACT_365F),
            ("ACT/365", ACT_365F),
            ("ACT/ACT", ACT_ACT),
            ("ACT/ACT EURO", ACT_ACT_EURO),
            ("30/360", THIRTY_360U),
            ("30E/360", THIRTY_360E),
            ("30/360 ISMA", THIRTY_360_ISMA),
            (" 30/365 ", THIRTY_365),
        ],
    )
    def test_lookup(self, name: str, expected: DayCounter) -> None:
        assert get_day_count_convention(name) is expected

    def test_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown day count convention"):
            get_day_count_convention("ACT/999")


def test_to_date_rejects_bad_input() -> None:
    with pytest.raises(ValueError):
        to_date("15/01/2023")
    with pytest.raises(TypeError):
        to_date(20230115)
