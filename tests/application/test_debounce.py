import threading
import time

from fund_tracker.application.debounce import Debouncer, debounced_search


def test_only_last_trigger_fires():
    calls: list[tuple] = []
    fired = threading.Event()

    def callback(*args):
        calls.append(args)
        fired.set()

    debouncer = Debouncer(0.05, callback)
    debouncer.trigger("s")
    debouncer.trigger("sm")
    debouncer.trigger("small")

    assert fired.wait(2)
    time.sleep(0.1)
    assert calls == [("small",)]
    assert not debouncer.pending


def test_cancel_prevents_call():
    calls: list[tuple] = []
    debouncer = Debouncer(0.05, lambda *args: calls.append(args))

    debouncer.trigger("x")
    assert debouncer.pending
    debouncer.cancel()
    time.sleep(0.15)

    assert calls == []
    assert not debouncer.pending


def test_debounced_search_issues_last_query_only():
    issued: list[str] = []
    received = threading.Event()
    results: list[list[str]] = []

    def search(query: str) -> list[str]:
        issued.append(query)
        return [query.upper()]

    def on_results(found: list[str]) -> None:
        results.append(found)
        received.set()

    debouncer = debounced_search(search, on_results, delay_ms=50)
    for query in ("a", "al", "alp"):
        debouncer.trigger(query)

    assert received.wait(2)
    time.sleep(0.1)
    assert issued == ["alp"]
    assert results == [["ALP"]]
