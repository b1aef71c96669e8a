from pathlib import Path
from unittest.mock import MagicMock

from fund_tracker.domain.models import SearchResult
from fund_tracker.infrastructure.repositories.mfapi_repositories import (
    ALL_FUNDS_CACHE_KEY,
    CachedFundDirectory,
)
from fund_tracker.infrastructure.storage.cache_store import CacheStore

FUNDS = [
    SearchResult("1", "Alpha Small Cap Fund", "Alpha"),
    SearchResult("2", "Beta Liquid Fund", "Beta"),
]


def make_client(funds=FUNDS, remote=()) -> MagicMock:
    client = MagicMock()
    client.list_all.return_value = list(funds)
    client.search.return_value = list(remote)
    return client


def test_list_all_populates_cache_on_miss(tmp_path: Path):
    cache = CacheStore(tmp_path / "c.sqlite3")
    client = make_client()

    directory = CachedFundDirectory(client, cache)

    assert list(directory.list_all()) == FUNDS
    assert cache.get(ALL_FUNDS_CACHE_KEY) == [
        {"schemeCode": "1", "schemeName": "Alpha Small Cap Fund", "fundHouse": "Alpha"},
        {"schemeCode": "2", "schemeName": "Beta Liquid Fund", "fundHouse": "Beta"},
    ]


def test_list_all_prefers_cache(tmp_path: Path):
    cache = CacheStore(tmp_path / "c.sqlite3")
    cache.set(ALL_FUNDS_CACHE_KEY, [{"schemeCode": 7, "schemeName": "Cached Fund"}])
    client = make_client()

    directory = CachedFundDirectory(client, cache)

    assert list(directory.list_all()) == [SearchResult("7", "Cached Fund", "")]
    client.list_all.assert_not_called()


def test_search_uses_local_matches_first(tmp_path: Path):
    client = make_client()
    directory = CachedFundDirectory(client, CacheStore(tmp_path / "c.sqlite3"))

    assert list(directory.search("liquid")) == [FUNDS[1]]
    client.search.assert_not_called()


def test_search_falls_back_to_api(tmp_path: Path):
    remote = [SearchResult("9", "Gamma Gold ETF FoF", "Gamma")]
    client = make_client(remote=remote)
    directory = CachedFundDirectory(client, CacheStore(tmp_path / "c.sqlite3"))

    assert list(directory.search("gold")) == remote
    client.search.assert_called_once_with("gold")


def test_empty_listing_is_not_cached(tmp_path: Path):
    cache = CacheStore(tmp_path / "c.sqlite3")
    client = make_client(funds=[])

    CachedFundDirectory(client, cache).list_all()

    assert cache.get(ALL_FUNDS_CACHE_KEY) is None


def test_failed_listing_is_retried(tmp_path: Path):
    client = make_client()
    client.list_all.side_effect = [[], list(FUNDS)]
    directory = CachedFundDirectory(client, CacheStore(tmp_path / "c.sqlite3"))

    assert list(directory.list_all()) == []
    assert list(directory.list_all()) == FUNDS
    assert client.list_all.call_count == 2


def test_expired_listing_is_refetched(tmp_path: Path):
    now = [1_700_000_000_000]
    cache = CacheStore(tmp_path / "c.sqlite3", expiry_ms=1000, clock=lambda: now[0])
    cache.set(ALL_FUNDS_CACHE_KEY, [{"schemeCode": 5, "schemeName": "Old Fund"}])
    client = make_client()
    directory = CachedFundDirectory(client, cache)

    assert list(directory.list_all()) == [SearchResult("5", "Old Fund", "")]
    client.list_all.assert_not_called()

    now[0] += 10_000

    assert list(directory.list_all()) == FUNDS
    client.list_all.assert_called_once_with()
