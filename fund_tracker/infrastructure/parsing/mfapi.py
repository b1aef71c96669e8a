"""Parsers turning fund-data API payloads into canonical domain records."""
from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Sequence

from fund_tracker.domain.dates import parse_nav_date
from fund_tracker.domain.models import FundMetrics, FundRecord, NavSample, SearchResult

logger = logging.getLogger(__name__)


def parse_nav_value(value: object) -> float | None:
    if value is None:
        return None
    s = str(value).strip().replace(",", "")
    if not s:
        return None
    try:
        result = float(s)
    except ValueError:
        return None
    if not math.isfinite(result) or result <= 0:
        return None
    return result


def parse_nav_samples(rows: Iterable[Any]) -> list[NavSample]:
    """Keep rows with a DD-MM-YYYY date and a positive NAV, newest first.

    Thousands separators are stripped so ``NavSample.value`` always parses.
    """
    samples: list[NavSample] = []
    for row in rows:
        if not isinstance(row, dict):
            continue
        raw_date = str(row.get("date") or "").strip()
        raw_nav = row.get("nav")
        if parse_nav_value(raw_nav) is None:
            continue
        nav = str(raw_nav).strip().replace(",", "")
        try:
            parse_nav_date(raw_date)
        except ValueError:
            continue
        samples.append(NavSample(date=raw_date, nav=nav))
    samples.sort(key=lambda sample: sample.nav_date, reverse=True)
    return samples


def parse_fund_payload(payload: Any) -> FundRecord | None:
    if not isinstance(payload, dict):
        return None
    meta = payload.get("meta") or {}
    if not isinstance(meta, dict):
        meta = {}
    samples = parse_nav_samples(payload.get("data") or [])
    if not samples:
        logger.warning("No NAV data available for scheme %s", meta.get("scheme_code"))
        return None
    return FundRecord(
        scheme_code=str(meta.get("scheme_code", "")),
        scheme_name=str(meta.get("scheme_name", "")),
        fund_house=str(meta.get("fund_house", "")),
        scheme_type=str(meta.get("scheme_type", "")),
        scheme_category=str(meta.get("scheme_category", "")),
        nav_data=tuple(samples),
        metrics=FundMetrics(),
    )


def parse_search_results(payload: Any) -> list[SearchResult]:
    if not isinstance(payload, list):
        return []
    results: list[SearchResult] = []
    for row in payload:
        if not isinstance(row, dict):
            continue
        code = row.get("schemeCode")
        name = row.get("schemeName")
        if code is None or not name:
            continue
        results.append(
            SearchResult(
                scheme_code=str(code),
                scheme_name=str(name),
                fund_house=str(row.get("fundHouse") or ""),
            )
        )
    return results


def search_results_to_payload(results: Sequence[SearchResult]) -> list[dict[str, str]]:
    return [
        {"schemeCode": r.scheme_code, "schemeName": r.scheme_name, "fundHouse": r.fund_house}
        for r in results
    ]
