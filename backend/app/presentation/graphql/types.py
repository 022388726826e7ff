"""Strawberry object types mirroring the domain entities."""


import strawberry

from app.domain.entities import DeleteResult, Disease, Record

DiseaseEnum = strawberry.enum(Disease, name="Disease", description="Supported eye diseases")


@strawberry.type(name="Record", description="An eye-disease record for a person")
class RecordType:
    id: strawberry.ID
    name: str
    disease: DiseaseEnum
    date_added: str = strawberry.field(description="ISO-8601 timestamp (UTC)")

    @classmethod
    def from_entity(cls, record: Record) -> "RecordType":
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            disease=record.disease,
            date_added=record.date_added,
        )


@strawberry.type(name="DeleteResult", description="Result for deletions")
class DeleteResultType:
    success: bool
    message: str
    removed: RecordType | None = None

    @classmethod
    def from_entity(cls, result: DeleteResult) -> "DeleteResultType":
        removed = RecordType.from_entity(result.removed) if result.removed is not None else None
        return cls(success=result.success, message=result.message, removed=removed)
