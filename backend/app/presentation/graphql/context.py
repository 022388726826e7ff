"""Per-request GraphQL context carrying the application services."""

from fastapi import Depends
from strawberry.fastapi import BaseContext

from app.application.services import RecordService
from app.infrastructure.dependencies import get_record_service


class GraphQLContext(BaseContext):
    def __init__(self, record_service: RecordService):
        super().__init__()
        self.record_service = record_service


async def get_graphql_context(
    record_service: RecordService = Depends(get_record_service),
) -> GraphQLContext:
    """FastAPI dependency used as the GraphQLRouter ``context_getter``."""
    return GraphQLContext(record_service)
