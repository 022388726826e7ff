"""Pydantic DTOs (Data Transfer Objects) for the Record feature.

Field-level checks live in ``app.domain.validators`` so that error messages
stay identical across transports; these models only carry the input.
"""

from pydantic import BaseModel, Field

from app.domain.entities import Disease


class RecordCreate(BaseModel):
    """Input for creating a record."""

    name: str | None = Field(None, examples=["Aarav"])
    disease: Disease | str | None = Field(None, examples=["Cataracts"])
    date_added: str | None = Field(None, examples=["2025-01-05T09:10:00.000Z"])


class RecordUpdate(BaseModel):
    """Input for updating a record — all fields optional, ``None`` means "leave as is"."""

    name: str | None = None
    disease: Disease | str | None = None
    date_added: str | None = None
