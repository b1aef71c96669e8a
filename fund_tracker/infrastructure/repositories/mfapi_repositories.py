"""API-backed repositories for fund listings and fund details."""
from __future__ import annotations

import logging
from typing import Sequence

from fund_tracker.domain.models import FundRecord, SearchResult
from fund_tracker.domain.repositories import CacheBackend, FundDetailRepository, FundDirectory
from fund_tracker.domain.services import search_local_funds
from fund_tracker.infrastructure.api.mfapi_client import MfApiClient
from fund_tracker.infrastructure.parsing.mfapi import parse_search_results, search_results_to_payload

logger = logging.getLogger(__name__)

ALL_FUNDS_CACHE_KEY = "all_funds"


class CachedFundDirectory(FundDirectory):
    """Fund universe served from the local cache, refreshed from the API on a miss."""

    def __init__(self, client: MfApiClient, cache: CacheBackend, cache_key: str = ALL_FUNDS_CACHE_KEY) -> None:
        self._client = client
        self._cache = cache
        self._cache_key = cache_key

    def list_all(self) -> Sequence[SearchResult]:
        cached = self._cache.get(self._cache_key)
        if cached:
            return parse_search_results(cached)
        funds = self._client.list_all()
        if funds:
            self._cache.set(self._cache_key, search_results_to_payload(funds))
        return funds

    def search(self, query: str) -> Sequence[SearchResult]:
        funds = self.list_all()
        if funds:
            local = search_local_funds(funds, query)
            if local:
                return local
        logger.debug("No local matches for %r, falling back to API search", query)
        return self._client.search(query)


class ApiFundDetailRepository(FundDetailRepository):
    def __init__(self, client: MfApiClient) -> None:
        self._client = client

    def get_fund(self, scheme_code: str) -> FundRecord | None:
        return self._client.fetch_fund(scheme_code)
