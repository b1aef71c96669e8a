"""CAGR engine: annualized growth between NAV points and the multi-period table."""
from __future__ import annotations

from datetime import date
from typing import Sequence

from .dates import subtract_years, years_between
from .models import NavSample

CAGR_PERIODS: dict[str, int] = {
    "1Y": 1,
    "3Y": 3,
    "5Y": 5,
    "7Y": 7,
    "10Y": 10,
    "15Y": 15,
}
MAX_PERIOD = "Max"
DEFAULT_COMPLETENESS = 0.90


def calculate_cagr(start_value: float, end_value: float, years: float) -> float:
    """Annualized growth in percent; 0.0 when any input is not positive."""
    if start_value <= 0 or end_value <= 0 or years <= 0:
        return 0.0
    return ((end_value / start_value) ** (1 / years) - 1) * 100


def sort_by_date(series: Sequence[NavSample]) -> list[NavSample]:
    return sorted(series, key=lambda sample: sample.nav_date)


def find_closest_index(dates: Sequence[date], target: date) -> int:
    """Binary search over ascending dates for the sample nearest ``target``.

    Only midpoints visited by the search are candidates, so the result is the
    first strictly-closer midpoint seen rather than the global minimum. An
    exact match ends the search. Returns -1 for an empty sequence.
    """
    left, right = 0, len(dates) - 1
    closest = -1
    min_diff: int | None = None
    while left <= right:
        mid = (left + right) // 2
        diff = abs((dates[mid] - target).days)
        if min_diff is None or diff < min_diff:
            min_diff = diff
            closest = mid
        if dates[mid] == target:
            break
        if dates[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return closest


def compute_cagr_table(
    nav_series: Sequence[NavSample],
    *,
    completeness: float = DEFAULT_COMPLETENESS,
) -> dict[str, float]:
    if len(nav_series) < 2:
        return {}

    ordered = sort_by_date(nav_series)
    dates = [sample.nav_date for sample in ordered]
    latest = ordered[-1]
    end_date = dates[-1]
    oldest_date = dates[0]
    current_nav = latest.value

    table: dict[str, float] = {}

    max_years = years_between(oldest_date, end_date)
    if max_years >= 1:
        table[MAX_PERIOD] = calculate_cagr(ordered[0].value, current_nav, max_years)

    for label, years in CAGR_PERIODS.items():
        target = subtract_years(end_date, years)
        if oldest_date > target:
            continue
        index = find_closest_index(dates, target)
        if index == -1:
            continue
        actual_years = years_between(dates[index], end_date)
        if actual_years >= years * completeness:
            table[label] = calculate_cagr(ordered[index].value, current_nav, actual_years)

    return table
