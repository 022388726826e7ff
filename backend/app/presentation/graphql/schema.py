"""GraphQL schema — record queries and mutations.

Resolvers stay thin: they pull ``RecordService`` from the request context,
delegate, and translate domain exceptions into ``GraphQLError`` so they are
reported in the response's ``errors`` list with a machine-readable code.
"""

from collections.abc import Iterator
from contextlib import contextmanager

import strawberry
from graphql import GraphQLError
from strawberry.types import Info

from app.application.schemas import RecordCreate, RecordUpdate
from app.application.services import RecordService
from app.domain.exceptions import EntityNotFoundError, ValidationError
from app.presentation.graphql.types import DeleteResultType, DiseaseEnum, RecordType


def _service(info: Info) -> RecordService:
    return info.context.record_service


@contextmanager
def _domain_errors() -> Iterator[None]:
    """Map domain exceptions onto GraphQL errors."""
    try:
        yield
    except ValidationError as e:
        raise GraphQLError(e.message, extensions={"code": "BAD_USER_INPUT"}) from e
    except EntityNotFoundError as e:
        raise GraphQLError(str(e), extensions={"code": "NOT_FOUND"}) from e


@strawberry.type
class Query:
    @strawberry.field(description="Fetch all records")
    async def records(self, info: Info) -> list[RecordType]:
        records = await _service(info).list_records()
        return [RecordType.from_entity(r) for r in records]

    @strawberry.field(description="Fetch a single record by id")
    async def record(self, info: Info, id: strawberry.ID) -> RecordType | None:
        record = await _service(info).get_record(id)
        return RecordType.from_entity(record) if record is not None else None


@strawberry.type
class Mutation:
    @strawberry.mutation(
        description="Create a new record (dateAdded defaults to now if not provided)"
    )
    async def add_record(
        self,
        info: Info,
        name: str,
        disease: DiseaseEnum,
        date_added: str | None = None,
    ) -> RecordType:
        with _domain_errors():
            record = await _service(info).add_record(
                RecordCreate(name=name, disease=disease, date_added=date_added)
            )
        return RecordType.from_entity(record)

    @strawberry.mutation(
        description="Update an existing record (only provided fields are changed)"
    )
    async def update_record(
        self,
        info: Info,
        id: strawberry.ID,
        name: str | None = None,
        disease: DiseaseEnum | None = None,
        date_added: str | None = None,
    ) -> RecordType:
        with _domain_errors():
            record = await _service(info).update_record(
                id, RecordUpdate(name=name, disease=disease, date_added=date_added)
            )
        return RecordType.from_entity(record)

    @strawberry.mutation(description="Delete a record and return info")
    async def delete_record(self, info: Info, id: strawberry.ID) -> DeleteResultType:
        result = await _service(info).delete_record(id)
        return DeleteResultType.from_entity(result)


schema = strawberry.Schema(query=Query, mutation=Mutation)
