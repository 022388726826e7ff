"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from app.application.interfaces import RecordRepository
from app.application.services import RecordService


def get_record_repository(request: Request) -> RecordRepository:
    """The record store owned by the running application (see ``create_app``)."""
    return request.app.state.record_repository


async def get_record_service(
    repository: RecordRepository = Depends(get_record_repository),
) -> AsyncGenerator[RecordService, None]:
    """Provides a RecordService bound to the application's record store."""
    yield RecordService(repository)
