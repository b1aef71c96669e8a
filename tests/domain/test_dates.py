from datetime import date

import pytest

from fund_tracker.domain.dates import (
    history_span_label,
    parse_nav_date,
    subtract_months,
    subtract_years,
    years_between,
)


def test_parse_nav_date():
    assert parse_nav_date("05-03-2024") == date(2024, 3, 5)


def test_parse_nav_date_rejects_other_formats():
    with pytest.raises(ValueError):
        parse_nav_date("2024-03-05")


def test_subtract_years_rolls_leap_day_forward():
    assert subtract_years(date(2024, 2, 29), 1) == date(2023, 3, 1)
    assert subtract_years(date(2024, 2, 29), 4) == date(2020, 2, 29)


def test_subtract_months_overflows_short_months():
    assert subtract_months(date(2024, 7, 15), 6) == date(2024, 1, 15)
    assert subtract_months(date(2024, 8, 31), 6) == date(2024, 3, 2)
    assert subtract_months(date(2024, 3, 10), 6) == date(2023, 9, 10)


def test_years_between_uses_julian_year():
    assert years_between(date(2020, 1, 1), date(2021, 1, 1)) == pytest.approx(366 / 365.25)


@pytest.mark.parametrize(
    "start, end, label",
    [
        (date(2024, 1, 1), date(2024, 8, 15), "7M"),
        (date(2020, 1, 1), date(2022, 1, 5), "2Y"),
        (date(2019, 1, 1), date(2024, 4, 15), "5Y 3M"),
    ],
)
def test_history_span_label(start, end, label):
    assert history_span_label(start, end) == label
