"""Date helpers for DD-MM-YYYY NAV dates."""
from __future__ import annotations

from datetime import date, datetime, timedelta

NAV_DATE_FORMAT = "%d-%m-%Y"
DAYS_PER_YEAR = 365.25
DAYS_PER_MONTH = 30.44


def parse_nav_date(value: str) -> date:
    return datetime.strptime(value.strip(), NAV_DATE_FORMAT).date()


def format_nav_date(value: date) -> str:
    return value.strftime(NAV_DATE_FORMAT)


def subtract_years(value: date, years: int) -> date:
    """Calendar subtraction; 29 Feb lands on 1 Mar when the target year is not a leap year."""
    try:
        return value.replace(year=value.year - years)
    except ValueError:
        return date(value.year - years, 3, 1)


def subtract_months(value: date, months: int) -> date:
    """Calendar subtraction; a day past the end of the target month overflows into the next one."""
    index = value.year * 12 + (value.month - 1) - months
    year, month = divmod(index, 12)
    return date(year, month + 1, 1) + timedelta(days=value.day - 1)


def years_between(start: date, end: date) -> float:
    return (end - start).days / DAYS_PER_YEAR


def history_span_label(start: date, end: date) -> str:
    total_months = int(abs((end - start).days) / DAYS_PER_MONTH)
    years, months = divmod(total_months, 12)
    if years == 0:
        return f"{months}M"
    if months == 0:
        return f"{years}Y"
    return f"{years}Y {months}M"
