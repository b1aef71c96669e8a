"""Indian mutual fund NAV tracking and return projection toolkit."""
from fund_tracker.application.use_cases import FundSelectionContext, SearchFundsUseCase, SelectFundUseCase
from fund_tracker.domain.cagr import calculate_cagr, compute_cagr_table
from fund_tracker.domain.projection import lumpsum_value, project_investment, sip_future_value, tax_on_gains
from fund_tracker.domain.services import FundAnalyzer
from fund_tracker.domain.withdrawal import simulate_withdrawal
from fund_tracker.infrastructure.api.mfapi_client import MfApiClient
from fund_tracker.infrastructure.storage.cache_store import CacheStore

__all__ = [
    "SearchFundsUseCase",
    "SelectFundUseCase",
    "FundSelectionContext",
    "FundAnalyzer",
    "calculate_cagr",
    "compute_cagr_table",
    "lumpsum_value",
    "sip_future_value",
    "tax_on_gains",
    "project_investment",
    "simulate_withdrawal",
    "MfApiClient",
    "CacheStore",
]
