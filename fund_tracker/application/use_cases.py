"""Application services orchestrating fund lookup and analysis."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Sequence

from fund_tracker.application.dto import FundView
from fund_tracker.domain.models import SearchResult
from fund_tracker.domain.repositories import FundDetailRepository, FundDirectory
from fund_tracker.domain.services import FundAnalyzer, risk_level_for_category

logger = logging.getLogger(__name__)


class SearchFundsUseCase:
    def __init__(self, directory: FundDirectory) -> None:
        self._directory = directory

    def execute(self, query: str) -> Sequence[SearchResult]:
        if not query.strip():
            return []
        return self._directory.search(query)


@dataclass(slots=True)
class FundSelectionContext:
    repository: FundDetailRepository
    analyzer: FundAnalyzer


class SelectFundUseCase:
    def __init__(self, context: FundSelectionContext) -> None:
        self._context = context

    def execute(self, scheme_code: str, today: date | None = None) -> FundView | None:
        fund = self._context.repository.get_fund(scheme_code)
        if fund is None:
            logger.info("No fund details available for %s", scheme_code)
            return None
        metrics = replace(fund.metrics, risk_level=risk_level_for_category(fund.scheme_category))
        fund = replace(fund, metrics=metrics)
        analysis = self._context.analyzer.analyze(fund, today or date.today())
        return FundView(fund=fund, analysis=analysis)
