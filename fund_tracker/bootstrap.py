"""Wiring of repositories and use cases from settings."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

import requests

from fund_tracker.application.debounce import Debouncer, debounced_search
from fund_tracker.application.use_cases import FundSelectionContext, SearchFundsUseCase, SelectFundUseCase
from fund_tracker.config import SETTINGS, Settings
from fund_tracker.domain.models import SearchResult
from fund_tracker.domain.services import FundAnalyzer
from fund_tracker.infrastructure.api.mfapi_client import MfApiClient
from fund_tracker.infrastructure.repositories.mfapi_repositories import (
    ApiFundDetailRepository,
    CachedFundDirectory,
)
from fund_tracker.infrastructure.storage.cache_store import CacheStore


@dataclass(slots=True)
class Services:
    settings: Settings
    client: MfApiClient
    cache: CacheStore
    directory: CachedFundDirectory
    search: SearchFundsUseCase
    select: SelectFundUseCase

    def debounced_search(self, on_results: Callable[[Sequence[SearchResult]], Any]) -> Debouncer:
        return debounced_search(self.search.execute, on_results, delay_ms=self.settings.search_debounce_ms)


def build_services(settings: Settings = SETTINGS, session: requests.Session | None = None) -> Services:
    client = MfApiClient(settings.api_base_url, session=session, timeout=settings.request_timeout)
    cache = CacheStore(
        settings.cache_path,
        store_name=settings.cache_store_name,
        schema_version=settings.cache_schema_version,
        expiry_ms=settings.cache_expiry_ms,
    )
    directory = CachedFundDirectory(client, cache)
    select = SelectFundUseCase(
        FundSelectionContext(
            repository=ApiFundDetailRepository(client),
            analyzer=FundAnalyzer(settings.cagr_completeness),
        )
    )
    return Services(
        settings=settings,
        client=client,
        cache=cache,
        directory=directory,
        search=SearchFundsUseCase(directory),
        select=select,
    )
