"""HTTP client for the mutual fund data API (mfapi.in compatible)."""
from __future__ import annotations

import logging
from typing import Any

import requests

from fund_tracker.domain.models import FundRecord, SearchResult
from fund_tracker.infrastructure.parsing.mfapi import parse_fund_payload, parse_search_results

logger = logging.getLogger(__name__)


class MfApiClient:
    """Thin JSON-over-HTTPS client; failures are logged and degraded to empty results."""

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        timeout: float | None = 30.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get_json(self, url: str, params: dict[str, str] | None = None) -> Any:
        response = self._session.get(
            url,
            params=params,
            headers={"Accept": "application/json"},
            timeout=self._timeout,
        )
        response.raise_for_status()
        return response.json()

    def search(self, query: str) -> list[SearchResult]:
        try:
            payload = self._get_json(f"{self._base_url}/search", params={"q": query})
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Error searching funds for %r: %s", query, exc)
            return []
        return parse_search_results(payload)

    def fetch_fund(self, scheme_code: str) -> FundRecord | None:
        try:
            payload = self._get_json(f"{self._base_url}/{scheme_code}")
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Error fetching fund details for %s: %s", scheme_code, exc)
            return None
        return parse_fund_payload(payload)

    def list_all(self) -> list[SearchResult]:
        try:
            payload = self._get_json(self._base_url)
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Error fetching all funds: %s", exc)
            return []
        return parse_search_results(payload)
