"""Central configuration for the fund tracker package."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = Path(os.environ.get("FUND_TRACKER_DATA_DIR", BASE_DIR / "data"))
CACHE_DIR = DATA_DIR / "cache"

DEFAULT_API_BASE_URL = "https://api.mfapi.in/mf"
DEFAULT_STORE_NAME = "mutual_funds"
DEFAULT_CACHE_EXPIRY_MS = 24 * 60 * 60 * 1000


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    return int(_env_float(name, default))


@dataclass(slots=True, frozen=True)
class Settings:
    api_base_url: str
    cache_path: Path
    cache_store_name: str
    cache_schema_version: int
    cache_expiry_ms: int
    request_timeout: float
    cagr_completeness: float
    search_debounce_ms: int
    tax_exemption: float
    tax_rate: float


def load_settings() -> Settings:
    return Settings(
        api_base_url=os.environ.get("FUND_TRACKER_API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/"),
        cache_path=Path(os.environ.get("FUND_TRACKER_CACHE_PATH", CACHE_DIR / "fund_tracker.sqlite3")),
        cache_store_name=os.environ.get("FUND_TRACKER_CACHE_STORE", DEFAULT_STORE_NAME),
        cache_schema_version=_env_int("FUND_TRACKER_CACHE_VERSION", 1),
        cache_expiry_ms=_env_int("FUND_TRACKER_CACHE_EXPIRY_MS", DEFAULT_CACHE_EXPIRY_MS),
        request_timeout=_env_float("FUND_TRACKER_REQUEST_TIMEOUT", 30.0),
        # 0.99 is the stricter variant; 0.90 tolerates holiday gaps around the target date.
        cagr_completeness=_env_float("FUND_TRACKER_CAGR_COMPLETENESS", 0.90),
        search_debounce_ms=_env_int("FUND_TRACKER_SEARCH_DEBOUNCE_MS", 300),
        tax_exemption=150_000.0,
        tax_rate=0.125,
    )


SETTINGS = load_settings()
