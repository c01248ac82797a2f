"""Learner Schemas - create and partial-update payloads.

Invariants:
    - LearnerCreate requires name, email, age; field_of_study optional
    - LearnerUpdate: every field optional, unset fields are not applied
"""

from pydantic import BaseModel, Field, field_validator

from campus.schemas.common import strip_text


class LearnerCreate(BaseModel):
    """Learner registration payload."""
    name: str = Field(min_length=1, max_length=200)
    email: str = Field(min_length=3, max_length=320)
    age: int
    field_of_study: str | None = Field(None, max_length=200)

    @field_validator("name", "email")
    @classmethod
    def strip_required(cls, v: str) -> str:
        return strip_text(v)


class LearnerUpdate(BaseModel):
    """Learner partial update. Explicit null field_of_study resets it."""
    name: str | None = Field(None, min_length=1, max_length=200)
    email: str | None = Field(None, min_length=3, max_length=320)
    age: int | None = None
    field_of_study: str | None = Field(None, max_length=200)

    @field_validator("name", "email")
    @classmethod
    def strip_optional(cls, v: str | None) -> str | None:
        return strip_text(v)
