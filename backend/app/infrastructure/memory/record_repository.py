"""Concrete repository implementation holding records in process memory."""

import logging
import threading

from app.application.interfaces import RecordRepository
from app.domain.entities import Record
from app.infrastructure.memory.seed import seed_records

logger = logging.getLogger(__name__)


class InMemoryRecordRepository(RecordRepository):
    """Implements the RecordRepository port with an ordered list and an id counter.

    Nothing here awaits, so each call finishes in one step on the event loop;
    the lock keeps id allocation and list splicing consistent if the store is
    shared across threads.
    """

    def __init__(self, records: list[Record] | None = None, next_id: int | None = None):
        self._records: list[Record] = list(records or [])
        self._lock = threading.Lock()
        if next_id is None:
            next_id = max((int(r.id) for r in self._records if r.id.isdigit()), default=0) + 1
        self._next_id = next_id

    @classmethod
    def seeded(cls) -> "InMemoryRecordRepository":
        """A store pre-loaded with the fixed 20-record dataset."""
        repository = cls(seed_records())
        logger.debug("Seeded record store with %d records", len(repository._records))
        return repository

    async def list_all(self) -> list[Record]:
        with self._lock:
            return list(self._records)

    async def get_by_id(self, record_id: str) -> Record | None:
        record_id = str(record_id)
        with self._lock:
            return next((r for r in self._records if r.id == record_id), None)

    async def insert(self, record: Record) -> Record:
        with self._lock:
            self._records.append(record)
        return record

    async def remove_by_id(self, record_id: str) -> Record | None:
        record_id = str(record_id)
        with self._lock:
            for index, record in enumerate(self._records):
                if record.id == record_id:
                    return self._records.pop(index)
        return None

    async def next_id(self) -> str:
        with self._lock:
            allocated = self._next_id
            self._next_id += 1
        return str(allocated)

    async def count(self) -> int:
        with self._lock:
            return len(self._records)
