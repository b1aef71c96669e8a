"""Cancellable delayed invocation for search-as-you-type."""
from __future__ import annotations

import threading
from typing import Any, Callable


class Debouncer:
    """Each trigger cancels the pending call and schedules a new one after ``delay`` seconds."""

    def __init__(self, delay: float, callback: Callable[..., Any]) -> None:
        self._delay = delay
        self._callback = callback
        self._timer: threading.Timer | None = None
        self._lock = threading.Lock()

    def trigger(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self._delay, self._callback, args=args, kwargs=kwargs)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None and self._timer.is_alive()


def debounced_search(
    search: Callable[[str], Any],
    on_results: Callable[[Any], Any],
    delay_ms: int = 300,
) -> Debouncer:
    """Wrap a search callable so only the last query typed within ``delay_ms`` is issued."""

    def run(query: str) -> None:
        on_results(search(query))

    return Debouncer(delay_ms / 1000, run)
