from __future__ import annotations

from threading import Lock
from typing import Generic, TypeVar

from pydantic import BaseModel

# Entities must declare an ``id`` field; the repository owns its value.
T = TypeVar("T", bound=BaseModel)


class InMemoryRepository(Generic[T]):
    """Thread-safe, identifier-indexed store for one entity kind.

    Records are immutable pydantic models swapped in whole under a single lock,
    so readers see a record either entirely before or entirely after a write.
    Identifiers start at 1, only grow, and are never reused after deletion.
    Nothing here raises for a missing id: lookups return ``None`` / ``False``.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._records: dict[int, T] = {}
        self._next_id = 1

    def list_all(self) -> list[T]:
        with self._lock:
            return list(self._records.values())

    def get_by_id(self, entity_id: int) -> T | None:
        with self._lock:
            return self._records.get(entity_id)

    def create(self, payload: T) -> T:
        with self._lock:
            entity_id = self._next_id
            self._next_id += 1
            record = payload.model_copy(update={"id": entity_id})
            self._records[entity_id] = record
            return record

    def update(self, entity_id: int, payload: T) -> T | None:
        """Replace an existing record, keeping ``entity_id``. Never inserts."""

        with self._lock:
            if entity_id not in self._records:
                return None
            record = payload.model_copy(update={"id": entity_id})
            self._records[entity_id] = record
            return record

    def delete(self, entity_id: int) -> bool:
        with self._lock:
            return self._records.pop(entity_id, None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def __len__(self) -> int:
        return self.count()
