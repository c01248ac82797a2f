"""Subject Schemas - create and partial-update payloads."""

from pydantic import BaseModel, Field, field_validator

from campus.schemas.common import strip_text


class SubjectCreate(BaseModel):
    """Subject creation payload."""
    name: str = Field(min_length=1, max_length=200)
    code: str = Field(min_length=1, max_length=32)
    credit_hours: int
    educator: str = Field(min_length=1, max_length=200)

    @field_validator("name", "code", "educator")
    @classmethod
    def strip_required(cls, v: str) -> str:
        return strip_text(v)


class SubjectUpdate(BaseModel):
    """Subject partial update."""
    name: str | None = Field(None, min_length=1, max_length=200)
    code: str | None = Field(None, min_length=1, max_length=32)
    credit_hours: int | None = None
    educator: str | None = Field(None, min_length=1, max_length=200)

    @field_validator("name", "code", "educator")
    @classmethod
    def strip_optional(cls, v: str | None) -> str | None:
        return strip_text(v)
