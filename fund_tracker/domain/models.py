"""Domain models for mutual fund tracking.

These dataclasses capture the canonical shape of fund data after it has been
fetched and parsed, plus the plain input/output records of the calculators.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Literal

from .dates import parse_nav_date

InvestmentType = Literal["lumpsum", "sip"]


@dataclass(frozen=True)
class NavSample:
    """A single NAV observation as published by the fund-data provider."""

    date: str
    nav: str

    @property
    def nav_date(self) -> date:
        return parse_nav_date(self.date)

    @property
    def value(self) -> float:
        return float(self.nav)


@dataclass(frozen=True)
class SearchResult:
    scheme_code: str
    scheme_name: str
    fund_house: str = ""


@dataclass(frozen=True)
class FundMetrics:
    """Supplementary metrics; every member is optional because providers rarely publish all of them."""

    risk_level: str | None = None
    expense_ratio: float | None = None
    fund_size: float | None = None
    pe_ratio: float | None = None
    pb_ratio: float | None = None
    beta: float | None = None
    std_dev: float | None = None
    sharpe_ratio: float | None = None
    turnover_ratio: float | None = None


@dataclass(frozen=True)
class FundRecord:
    """A fund as loaded for a single selection, with its NAV history newest-first."""

    scheme_code: str
    scheme_name: str
    fund_house: str
    scheme_type: str
    scheme_category: str
    nav_data: tuple[NavSample, ...]
    metrics: FundMetrics = field(default_factory=FundMetrics)

    @property
    def current_nav(self) -> str:
        return self.nav_data[0].nav if self.nav_data else ""

    @property
    def last_updated(self) -> str:
        return self.nav_data[0].date if self.nav_data else ""


@dataclass(frozen=True)
class CagrInputs:
    initial_amount: float = 10_000.0
    final_amount: float = 20_000.0
    years: int = 5
    months: int = 0

    @property
    def total_years(self) -> float:
        return self.years + self.months / 12


@dataclass(frozen=True)
class ProjectionInputs:
    investment_type: InvestmentType = "lumpsum"
    amount: float = 10_000.0
    annual_rate: float = 12.0
    years: int = 5


@dataclass(frozen=True)
class ProjectionSummary:
    total_investment: float
    projected_value: float
    total_gains: float
    tax_amount: float
    post_tax_value: float


@dataclass(frozen=True)
class WithdrawalInputs:
    initial_corpus: float = 10_000_000.0
    withdrawal_rate: float = 4.0
    growth_rate: float = 8.0
    years: int = 30


@dataclass(frozen=True)
class WithdrawalYear:
    year: int
    starting_corpus: float
    annual_withdrawal: float
    growth_amount: float
    annual_tax: float
    ending_corpus: float
    monthly_income_before_tax: float
    monthly_income_after_tax: float
