"""Application service (use case) for Record operations."""

import logging

from app.application.interfaces import RecordRepository
from app.application.schemas import RecordCreate, RecordUpdate
from app.domain.entities import DeleteResult, Record
from app.domain.exceptions import EntityNotFoundError
from app.domain.validators import (
    NAME_EMPTY_MESSAGE,
    default_date,
    is_valid_date,
    validate_date,
    validate_disease,
    validate_name,
)

logger = logging.getLogger(__name__)


class RecordService:
    """Orchestrates record CRUD logic. Depends on the repository port (DI).

    Every mutation validates its whole input before touching the store, so a
    failed call never leaves a record half-updated.
    """

    def __init__(self, repository: RecordRepository):
        self._repository = repository

    async def list_records(self) -> list[Record]:
        return await self._repository.list_all()

    async def get_record(self, record_id: str | int) -> Record | None:
        return await self._repository.get_by_id(str(record_id))

    async def add_record(self, data: RecordCreate) -> Record:
        name = validate_name(data.name)
        disease = validate_disease(data.disease)

        # An unparseable date is replaced with "now" here, unlike update.
        if data.date_added and is_valid_date(data.date_added):
            date_added = validate_date(data.date_added)
        else:
            date_added = default_date()

        record = Record(
            id=await self._repository.next_id(),
            name=name,
            disease=disease,
            date_added=date_added,
        )
        stored = await self._repository.insert(record)
        logger.info("Added record %s (%s)", stored.id, stored.disease.value)
        return stored

    async def update_record(self, record_id: str | int, data: RecordUpdate) -> Record:
        record = await self._repository.get_by_id(str(record_id))
        if record is None:
            raise EntityNotFoundError("Record", record_id)

        name = (
            validate_name(data.name, required_message=NAME_EMPTY_MESSAGE)
            if data.name is not None
            else None
        )
        disease = validate_disease(data.disease) if data.disease is not None else None
        date_added = validate_date(data.date_added) if data.date_added is not None else None

        record.update(name=name, disease=disease, date_added=date_added)
        logger.info("Updated record %s", record.id)
        return record

    async def delete_record(self, record_id: str | int) -> DeleteResult:
        removed = await self._repository.remove_by_id(str(record_id))
        if removed is None:
            logger.info("Delete requested for missing record %s", record_id)
            return DeleteResult(
                success=False,
                message=f"Record with id {record_id} not found.",
                removed=None,
            )
        logger.info("Deleted record %s", removed.id)
        return DeleteResult(
            success=True,
            message=f"Record {record_id} deleted successfully.",
            removed=removed,
        )
