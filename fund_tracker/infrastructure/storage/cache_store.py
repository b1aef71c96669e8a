"""Persistent key/value cache with expiry, backed by a local SQLite file."""
from __future__ import annotations

import json
import logging
import re
import sqlite3
import time
from contextlib import closing
from pathlib import Path
from typing import Any, Callable

from fund_tracker.config import DEFAULT_CACHE_EXPIRY_MS, DEFAULT_STORE_NAME

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


def _normalize_store_name(name: str) -> str:
    sanitized = re.sub(r"[^0-9A-Za-z_]+", "_", name.strip())
    return sanitized or DEFAULT_STORE_NAME


class CacheStore:
    """Best-effort cache: read or write failures are logged and behave like a miss.

    Entries are stored as ``{"data": <json text>, "timestamp": <epoch ms>}``.
    Anything older than ``expiry_ms`` is treated as absent and deleted on read.
    """

    def __init__(
        self,
        path: Path,
        *,
        store_name: str = DEFAULT_STORE_NAME,
        schema_version: int = 1,
        expiry_ms: int = DEFAULT_CACHE_EXPIRY_MS,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        self._path = Path(path)
        self._table = _normalize_store_name(store_name)
        self._quoted = f'"{self._table}"'
        self._schema_version = schema_version
        self._expiry_ms = expiry_ms
        self._clock = clock
        self._initialized = False

    @property
    def path(self) -> Path:
        return self._path

    def _connect(self) -> sqlite3.Connection:
        if not self._initialized:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self._path)
        if not self._initialized:
            self._upgrade(conn)
            self._initialized = True
        return conn

    def _upgrade(self, conn: sqlite3.Connection) -> None:
        with conn:
            conn.execute(
                f"CREATE TABLE IF NOT EXISTS {self._quoted} "
                "(key TEXT PRIMARY KEY, entry TEXT NOT NULL)"
            )
            (current,) = conn.execute("PRAGMA user_version").fetchone()
            if current < self._schema_version:
                conn.execute(f"PRAGMA user_version = {int(self._schema_version)}")

    def get(self, key: str | None = None) -> Any | None:
        key = key or self._table
        try:
            with closing(self._connect()) as conn:
                row = conn.execute(f"SELECT entry FROM {self._quoted} WHERE key = ?", (key,)).fetchone()
        except (sqlite3.Error, OSError) as exc:
            logger.warning("Error reading from cache %s: %s", key, exc)
            return None
        if row is None:
            return None

        try:
            entry = json.loads(row[0])
            data = entry["data"]
            timestamp = int(entry["timestamp"])
        except (ValueError, KeyError, TypeError) as exc:
            logger.warning("Malformed cache entry %s: %s", key, exc)
            return None
        if not data or not timestamp:
            return None

        if self._clock() - timestamp > self._expiry_ms:
            self.clear(key)
            return None

        try:
            return json.loads(data)
        except ValueError as exc:
            logger.warning("Error decoding cached payload %s: %s", key, exc)
            return None

    def set(self, key: str | None, value: Any) -> None:
        key = key or self._table
        if not value:
            logger.warning("Refusing to cache empty value under %s", key)
            return
        try:
            serialized = json.dumps(value)
        except (TypeError, ValueError) as exc:
            logger.warning("Failed to serialize cache value %s: %s", key, exc)
            return
        entry = json.dumps({"data": serialized, "timestamp": self._clock()})
        try:
            with closing(self._connect()) as conn, conn:
                conn.execute(
                    f"INSERT OR REPLACE INTO {self._quoted} (key, entry) VALUES (?, ?)",
                    (key, entry),
                )
        except (sqlite3.Error, OSError) as exc:
            logger.warning("Error setting cache %s: %s", key, exc)

    def clear(self, key: str | None = None) -> None:
        key = key or self._table
        try:
            with closing(self._connect()) as conn, conn:
                conn.execute(f"DELETE FROM {self._quoted} WHERE key = ?", (key,))
        except (sqlite3.Error, OSError) as exc:
            logger.warning("Error clearing cache %s: %s", key, exc)
