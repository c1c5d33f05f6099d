from __future__ import annotations

import logging
from time import perf_counter
from typing import Any, Callable, Generic

from demo_admin.observability.instrumentation import NullObserver, RepositoryObserver
from demo_admin.repositories.memory import InMemoryRepository, T

logger = logging.getLogger(__name__)


class EntityService(Generic[T]):
    """Instrumented facade over one repository.

    Results are exactly what the repository returns. Timing, logging and
    observer notifications happen after the repository call has completed,
    and a failing observer is logged rather than raised.
    """

    def __init__(
        self,
        resource: str,
        repository: InMemoryRepository[T],
        observer: RepositoryObserver | None = None,
    ) -> None:
        self.resource = resource
        self.repository = repository
        self.observer: RepositoryObserver = observer or NullObserver()

    def _notify(self, fn: Callable[[], Any]) -> None:
        try:
            fn()
        except Exception:
            # Metrics are advisory.
            logger.exception("entity.observer_failed", extra={"resource": self.resource})

    def _completed(self, operation: str, start: float) -> None:
        elapsed_ms = (perf_counter() - start) * 1000.0
        self._notify(lambda: self.observer.operation_completed(self.resource, operation, elapsed_ms))

    def list_all(self) -> list[T]:
        start = perf_counter()
        records = self.repository.list_all()
        logger.info("entity.list", extra={"resource": self.resource, "count": len(records)})
        self._notify(lambda: self.observer.viewed(self.resource, len(records)))
        self._completed("list", start)
        return records

    def get_by_id(self, entity_id: int) -> T | None:
        start = perf_counter()
        record = self.repository.get_by_id(entity_id)
        logger.info("entity.get", extra={"resource": self.resource, "id": entity_id, "found": record is not None})
        if record is not None:
            self._notify(lambda: self.observer.viewed(self.resource, 1))
        self._completed("get", start)
        return record

    def create(self, payload: T) -> T:
        start = perf_counter()
        record = self.repository.create(payload)
        logger.info("entity.create", extra={"resource": self.resource, "id": record.id})  # type: ignore[attr-defined]
        self._notify(lambda: self.observer.created(self.resource))
        self._completed("create", start)
        return record

    def update(self, entity_id: int, payload: T) -> T | None:
        start = perf_counter()
        record = self.repository.update(entity_id, payload)
        logger.info("entity.update", extra={"resource": self.resource, "id": entity_id, "found": record is not None})
        if record is not None:
            self._notify(lambda: self.observer.updated(self.resource))
        self._completed("update", start)
        return record

    def delete(self, entity_id: int) -> bool:
        start = perf_counter()
        removed = self.repository.delete(entity_id)
        logger.info("entity.delete", extra={"resource": self.resource, "id": entity_id, "found": removed})
        if removed:
            self._notify(lambda: self.observer.deleted(self.resource))
        self._completed("delete", start)
        return removed
