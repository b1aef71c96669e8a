"""Repository interfaces anchoring the domain layer."""
from __future__ import annotations

from typing import Any, Protocol, Sequence

from .models import FundRecord, SearchResult


class FundDirectory(Protocol):
    """Lists and searches the universe of funds."""

    def list_all(self) -> Sequence[SearchResult]:
        ...

    def search(self, query: str) -> Sequence[SearchResult]:
        ...


class FundDetailRepository(Protocol):
    """Loads a single fund with its NAV history."""

    def get_fund(self, scheme_code: str) -> FundRecord | None:
        ...


class CacheBackend(Protocol):
    def get(self, key: str) -> Any | None:
        ...

    def set(self, key: str, value: Any) -> None:
        ...

    def clear(self, key: str) -> None:
        ...
