"""Application-level DTOs for the fund dashboard."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from fund_tracker.domain.models import FundRecord
from fund_tracker.domain.services import ChartPoint, FundAnalysis, chart_points, nav_range


@dataclass(slots=True, frozen=True)
class FundView:
    fund: FundRecord
    analysis: FundAnalysis

    @property
    def cagr(self) -> dict[str, float]:
        return self.analysis.cagr

    @property
    def expected_cagr(self) -> float | None:
        return self.analysis.cagr.get("Max")

    def chart(self, period: str) -> Sequence[ChartPoint]:
        return chart_points(self.fund.nav_data, period)

    def chart_range(self, period: str) -> tuple[float, float] | None:
        return nav_range(self.chart(period))
