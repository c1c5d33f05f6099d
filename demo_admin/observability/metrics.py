from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import Decimal
from threading import Lock
from typing import Any, Callable


@dataclass
class _LatencyAgg:
    count: int = 0
    sum_ms: float = 0.0
    max_ms: float = 0.0

    def observe(self, elapsed_ms: float) -> None:
        self.count += 1
        self.sum_ms += float(elapsed_ms)
        if elapsed_ms > self.max_ms:
            self.max_ms = float(elapsed_ms)


class InMemoryMetrics:
    """Thread-safe, process-local metrics (resets on restart).

    Counters and latency aggregates are pushed by callers; gauges are callables
    evaluated only when a snapshot is taken, so they always reflect current state.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._counters: dict[str, int] = {}
        self._latency: dict[str, _LatencyAgg] = {}
        self._gauges: dict[str, Callable[[], int | float | Decimal]] = {}

    def increment(self, name: str, amount: int = 1) -> None:
        with self._lock:
            self._counters[name] = self._counters.get(name, 0) + int(amount)

    def observe(self, name: str, elapsed_ms: float) -> None:
        with self._lock:
            self._latency.setdefault(name, _LatencyAgg()).observe(elapsed_ms)

    def observe_http_request(self, elapsed_ms: float) -> None:
        with self._lock:
            self._counters["http_requests_total"] = self._counters.get("http_requests_total", 0) + 1
            self._latency.setdefault("http_request_ms", _LatencyAgg()).observe(elapsed_ms)

    def register_gauge(self, name: str, fn: Callable[[], int | float | Decimal]) -> None:
        with self._lock:
            self._gauges[name] = fn

    def counter(self, name: str) -> int:
        with self._lock:
            return self._counters.get(name, 0)

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            counters = dict(self._counters)
            latency = {name: asdict(agg) for name, agg in self._latency.items()}
            gauges = dict(self._gauges)

        # Gauges read repositories, which take their own locks; evaluate outside ours.
        return {
            "counters": {"http_requests_total": 0, **counters},
            "gauges": {name: float(fn()) for name, fn in gauges.items()},
            "latency_ms": latency,
        }

    def reset(self) -> None:
        with self._lock:
            self._counters.clear()
            self._latency.clear()
