"""GraphQL Input Types - filter, sort, page, and create/update payloads.

Invariants:
    - Filter inputs map one-to-one onto core criteria fields
    - Sort fields are closed enums per kind; direction is a free token
      (case-insensitive, anything but "desc" means ascending)
    - Update inputs default every field to UNSET so absent != null
"""

import dataclasses
from enum import Enum
from typing import Any

import strawberry

from campus.core.criteria import LearnerCriteria, SubjectCriteria
from campus.core.domain_types import DEFAULT_PAGE_SIZE
from campus.core.query_pipeline import PageOptions, SortSpec


def supplied_fields(data: Any) -> dict[str, Any]:
    """Fields the client actually sent (UNSET dropped, explicit null kept)."""
    return {
        f.name: getattr(data, f.name)
        for f in dataclasses.fields(data)
        if getattr(data, f.name) is not strawberry.UNSET
    }


# ─── Filters ─────────────────────────────────────────────────────

@strawberry.input(name="LearnerFilter")
class LearnerFilterInput:
    name_contains: str | None = None
    email_contains: str | None = None
    field_of_study_equals: str | None = None
    field_of_study_contains: str | None = None
    min_age: int | None = None
    max_age: int | None = None

    def to_criteria(self) -> LearnerCriteria:
        return LearnerCriteria(
            name_contains=self.name_contains,
            email_contains=self.email_contains,
            field_of_study_equals=self.field_of_study_equals,
            field_of_study_contains=self.field_of_study_contains,
            min_age=self.min_age,
            max_age=self.max_age,
        )


@strawberry.input(name="SubjectFilter")
class SubjectFilterInput:
    name_contains: str | None = None
    code_equals: str | None = None
    code_starts_with: str | None = None
    educator_contains: str | None = None
    min_credit_hours: int | None = None
    max_credit_hours: int | None = None

    def to_criteria(self) -> SubjectCriteria:
        return SubjectCriteria(
            name_contains=self.name_contains,
            code_equals=self.code_equals,
            code_starts_with=self.code_starts_with,
            educator_contains=self.educator_contains,
            min_credit_hours=self.min_credit_hours,
            max_credit_hours=self.max_credit_hours,
        )


# ─── Sort & page ─────────────────────────────────────────────────

@strawberry.enum(name="LearnerSortField")
class LearnerSortField(Enum):
    NAME = "name"
    EMAIL = "email"
    AGE = "age"
    FIELD_OF_STUDY = "field_of_study"


@strawberry.enum(name="SubjectSortField")
class SubjectSortField(Enum):
    NAME = "name"
    CODE = "code"
    CREDIT_HOURS = "credit_hours"
    EDUCATOR = "educator"


@strawberry.input(name="LearnerSort")
class LearnerSortInput:
    field: LearnerSortField
    direction: str | None = "ASC"

    def to_spec(self) -> SortSpec:
        return SortSpec.parse(self.field.value, self.direction)


@strawberry.input(name="SubjectSort")
class SubjectSortInput:
    field: SubjectSortField
    direction: str | None = "ASC"

    def to_spec(self) -> SortSpec:
        return SortSpec.parse(self.field.value, self.direction)


@strawberry.input(name="PageOptions")
class PageInput:
    page_size: int | None = DEFAULT_PAGE_SIZE
    page_number: int | None = 0

    def to_options(self) -> PageOptions:
        return PageOptions(page_size=self.page_size, page_number=self.page_number)


# ─── Payloads ────────────────────────────────────────────────────

@strawberry.input(name="CreateLearnerInput")
class CreateLearnerInput:
    name: str
    email: str
    age: int
    field_of_study: str | None = None


@strawberry.input(name="UpdateLearnerInput")
class UpdateLearnerInput:
    name: str | None = strawberry.UNSET
    email: str | None = strawberry.UNSET
    age: int | None = strawberry.UNSET
    field_of_study: str | None = strawberry.UNSET


@strawberry.input(name="CreateSubjectInput")
class CreateSubjectInput:
    name: str
    code: str
    credit_hours: int
    educator: str


@strawberry.input(name="UpdateSubjectInput")
class UpdateSubjectInput:
    name: str | None = strawberry.UNSET
    code: str | None = strawberry.UNSET
    credit_hours: int | None = strawberry.UNSET
    educator: str | None = strawberry.UNSET
