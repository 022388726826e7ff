"""Abstract repository interface (port) for the record store."""

from abc import ABC, abstractmethod

from app.domain.entities import Record


class RecordRepository(ABC):
    """Port for record storage — implemented in the infrastructure layer."""

    @abstractmethod
    async def list_all(self) -> list[Record]:
        """Return every record in insertion order."""
        ...

    @abstractmethod
    async def get_by_id(self, record_id: str) -> Record | None:
        """Retrieve a single record, or ``None`` when absent."""
        ...

    @abstractmethod
    async def insert(self, record: Record) -> Record:
        """Append a record and return the stored instance."""
        ...

    @abstractmethod
    async def remove_by_id(self, record_id: str) -> Record | None:
        """Remove a record. Returns the removed record, or ``None`` if not found."""
        ...

    @abstractmethod
    async def next_id(self) -> str:
        """Allocate a fresh, never-reused identifier."""
        ...

    @abstractmethod
    async def count(self) -> int:
        ...
