from __future__ import annotations

from typing import Protocol

from demo_admin.observability.metrics import InMemoryMetrics


class RepositoryObserver(Protocol):
    """Receives post-hoc notifications about repository operations."""

    def created(self, resource: str) -> None: ...

    def updated(self, resource: str) -> None: ...

    def deleted(self, resource: str) -> None: ...

    def viewed(self, resource: str, count: int) -> None: ...

    def operation_completed(self, resource: str, operation: str, elapsed_ms: float) -> None: ...


class NullObserver:
    def created(self, resource: str) -> None:
        return None

    def updated(self, resource: str) -> None:
        return None

    def deleted(self, resource: str) -> None:
        return None

    def viewed(self, resource: str, count: int) -> None:
        return None

    def operation_completed(self, resource: str, operation: str, elapsed_ms: float) -> None:
        return None


class MetricsObserver:
    """Maps repository notifications onto named counters and latency aggregates."""

    def __init__(self, metrics: InMemoryMetrics) -> None:
        self.metrics = metrics

    def created(self, resource: str) -> None:
        self.metrics.increment(f"{resource}_created_total")

    def updated(self, resource: str) -> None:
        self.metrics.increment(f"{resource}_updated_total")

    def deleted(self, resource: str) -> None:
        self.metrics.increment(f"{resource}_deleted_total")

    def viewed(self, resource: str, count: int) -> None:
        self.metrics.increment(f"{resource}_views_total", count)

    def operation_completed(self, resource: str, operation: str, elapsed_ms: float) -> None:
        self.metrics.observe(f"{resource}_operation_duration", elapsed_ms)
        self.metrics.observe(f"{resource}_{operation}_duration", elapsed_ms)
