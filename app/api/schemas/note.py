"""
Esquemas Pydantic para `notes`.

Convenciones:
- Campos en snake_case; el JSON de salida usa camelCase para timestamps.
- Timestamps ISO-8601 UTC sellados en el servicio.
- Los tags se conservan tal cual (sin normalizar, sin deduplicar).
"""
from typing import Annotated, List, Optional

from pydantic import BaseModel, Field, StringConstraints, field_validator, model_validator


TITLE_MAX = 200
BODY_MAX = 10_000
TAG_MAX = 50
TAGS_MAX = 20
TAG_PATTERN = r"^[a-zA-Z0-9_-]+$"

Tag = Annotated[str, StringConstraints(min_length=1, max_length=TAG_MAX, pattern=TAG_PATTERN)]
Title = Annotated[str, StringConstraints(min_length=1, max_length=TITLE_MAX)]
Body = Annotated[str, StringConstraints(min_length=1, max_length=BODY_MAX)]
Tags = Annotated[List[Tag], Field(max_length=TAGS_MAX)]

# UUID canónico con guiones; sin llaves, sin `urn:uuid:` ni hex corrido
UUID_PATTERN = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"

# Mensajes para el cliente por (campo, tipo de error pydantic)
VALIDATION_MESSAGES = {
    ("title", "string_too_short"): "Title must not be empty",
    ("title", "string_too_long"): f"Title must be at most {TITLE_MAX} characters",
    ("body", "string_too_short"): "Body must not be empty",
    ("body", "string_too_long"): "Body must be at most 10 000 characters",
    ("tag", "string_too_short"): "Tag must not be empty",
    ("tag", "string_too_long"): f"Tag must be at most {TAG_MAX} characters",
    ("tag", "string_pattern_mismatch"): "Tag may only contain letters, digits, hyphens and underscores",
    ("tags", "too_long"): f"A note may have at most {TAGS_MAX} tags",
    ("note_id", "string_pattern_mismatch"): "Note id must be a valid UUID",
}


class NoteCreate(BaseModel):
    title: Title
    body: Body
    tags: Tags = Field(default_factory=list)


class NoteUpdate(BaseModel):
    """PATCH parcial: cada campo es opcional pero debe venir al menos uno."""

    title: Optional[Title] = None
    body: Optional[Body] = None
    tags: Optional[Tags] = None

    @field_validator("title", "body", "tags", mode="before")
    @classmethod
    def _reject_null(cls, v):
        # Solo corre con valores enviados; omitir el campo sigue siendo válido
        if v is None:
            raise ValueError("Field must not be null")
        return v

    @model_validator(mode="after")
    def _at_least_one(self) -> "NoteUpdate":
        if not self.model_fields_set & {"title", "body", "tags"}:
            raise ValueError("At least one field must be provided for update")
        return self

    def changes(self) -> dict:
        """Solo los campos enviados por el cliente."""
        return self.model_dump(exclude_unset=True)


class NoteOut(BaseModel):
    id: str
    title: str
    body: str
    tags: List[str]
    created_at: str = Field(serialization_alias="createdAt")
    updated_at: str = Field(serialization_alias="updatedAt")
