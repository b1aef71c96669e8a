"""Domain services over NAV histories and fund listings."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Sequence

from .cagr import CAGR_PERIODS, DEFAULT_COMPLETENESS, MAX_PERIOD, compute_cagr_table, sort_by_date
from .dates import history_span_label, subtract_months, subtract_years
from .models import FundRecord, NavSample, SearchResult

CHART_PERIODS: tuple[str, ...] = ("6M", *CAGR_PERIODS, MAX_PERIOD)

LOW_RISK_CATEGORIES = (
    "Liquid Fund",
    "Overnight Fund",
    "Money Market Fund",
    "Ultra Short Duration Fund",
)
HIGH_RISK_CATEGORIES = (
    "Small Cap Fund",
    "Mid Cap Fund",
    "Sectoral Fund",
    "Thematic Fund",
)

DISCONTINUED_AFTER_MONTHS = 6
LOCAL_SEARCH_LIMIT = 20


@dataclass(frozen=True)
class ChartPoint:
    date: str
    nav: float


def period_start(end: date, period: str) -> date | None:
    if period == MAX_PERIOD:
        return None
    if period == "6M":
        return subtract_months(end, 6)
    if period not in CAGR_PERIODS:
        raise ValueError(f"Unknown period: {period!r}")
    return subtract_years(end, CAGR_PERIODS[period])


def filter_by_period(series: Sequence[NavSample], period: str) -> list[NavSample]:
    """Samples within ``period`` of the latest date, in their original order."""
    if not series:
        return []
    if period == MAX_PERIOD:
        return list(series)
    end = max(sample.nav_date for sample in series)
    start = period_start(end, period)
    return [sample for sample in series if start <= sample.nav_date <= end]


def chart_points(series: Sequence[NavSample], period: str) -> list[ChartPoint]:
    return [ChartPoint(date=s.date, nav=s.value) for s in sort_by_date(filter_by_period(series, period))]


def available_periods(cagr_table: dict[str, float]) -> list[str]:
    return [p for p in CHART_PERIODS if p in ("6M", MAX_PERIOD) or p in cagr_table]


def nav_range(points: Sequence[ChartPoint]) -> tuple[float, float] | None:
    if not points:
        return None
    values = [point.nav for point in points]
    return min(values), max(values)


def is_discontinued(last_updated: date, today: date) -> bool:
    return last_updated < subtract_months(today, DISCONTINUED_AFTER_MONTHS)


def risk_level_for_category(category: str | None) -> str:
    if not category:
        return "Moderate"
    lowered = category.lower()
    if any(name.lower() in lowered for name in LOW_RISK_CATEGORIES):
        return "Low"
    if any(name.lower() in lowered for name in HIGH_RISK_CATEGORIES):
        return "High"
    return "Moderate"


def search_local_funds(
    funds: Iterable[SearchResult],
    query: str,
    limit: int = LOCAL_SEARCH_LIMIT,
) -> list[SearchResult]:
    terms = query.lower().split()
    matches: list[SearchResult] = []
    for fund in funds:
        name = fund.scheme_name.lower()
        house = (fund.fund_house or "").lower()
        if all(term in name or term in house for term in terms):
            matches.append(fund)
            if len(matches) >= limit:
                break
    return matches


def history_span(series: Sequence[NavSample]) -> str:
    if len(series) < 2:
        return ""
    dates = [sample.nav_date for sample in series]
    return history_span_label(min(dates), max(dates))


@dataclass(frozen=True)
class FundAnalysis:
    cagr: dict[str, float]
    periods: tuple[str, ...]
    span: str
    discontinued: bool


class FundAnalyzer:
    """Derives the per-fund figures shown next to the NAV chart."""

    def __init__(self, completeness: float | None = None) -> None:
        if completeness is None:
            completeness = DEFAULT_COMPLETENESS
        self._completeness = completeness

    def analyze(self, fund: FundRecord, today: date) -> FundAnalysis:
        table = compute_cagr_table(fund.nav_data, completeness=self._completeness)
        discontinued = bool(fund.nav_data) and is_discontinued(
            max(sample.nav_date for sample in fund.nav_data), today
        )
        return FundAnalysis(
            cagr=table,
            periods=tuple(available_periods(table)),
            span=history_span(fund.nav_data),
            discontinued=discontinued,
        )
