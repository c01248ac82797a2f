"""Learner Repository - learner collection, email uniqueness, delete cascade.

Invariants:
    - Email unique among learners (case-insensitive), self-match excluded on update
    - Age bound checked on create and only when age is supplied on update
    - create() opens an empty enrollment entry; delete() drops the learner's edges
"""

from collections.abc import Mapping
from typing import Any

from campus.core.criteria import LearnerCriteria
from campus.core.domain_types import EntityKind, LearnerId, DEFAULT_FIELD_OF_STUDY
from campus.core.enrollment_store import EnrollmentStore
from campus.core.id_allocator import IdAllocator
from campus.core.validation import check_age, check_email, check_required_text
from campus.models.learner import Learner
from campus.repositories.base import InMemoryRepository, UniqueIndex, reject_unknown_fields


UPDATABLE_FIELDS = frozenset({"name", "email", "age", "field_of_study"})


def _clean_field_of_study(value: str | None) -> str:
    if value is None or not value.strip():
        return DEFAULT_FIELD_OF_STUDY
    return value.strip()


class LearnerRepository(InMemoryRepository[Learner]):
    kind = EntityKind.LEARNER

    def __init__(self, allocator: IdAllocator, enrollments: EnrollmentStore):
        super().__init__(allocator)
        self._enrollments = enrollments
        self._emails = UniqueIndex(self.kind, "email")

    def create(
        self, name: str, email: str, age: int, field_of_study: str | None = None,
    ) -> Learner:
        name = check_required_text(name, "name")
        email = check_email(email)
        age = check_age(age)
        self._emails.check(email)

        learner = Learner(
            id=LearnerId(self._allocate_id()),
            name=name,
            email=email,
            age=age,
            field_of_study=_clean_field_of_study(field_of_study),
        )
        self._store(learner.id, learner)
        self._emails.claim(email, learner.id)
        self._enrollments.ensure_learner(learner.id)
        return learner

    def update(self, learner_id: str, changes: Mapping[str, Any]) -> Learner:
        learner = self.get(learner_id)
        reject_unknown_fields(changes, UPDATABLE_FIELDS)

        cleaned: dict[str, Any] = {}
        if "name" in changes:
            cleaned["name"] = check_required_text(changes["name"], "name")
        if "email" in changes:
            cleaned["email"] = check_email(changes["email"])
            self._emails.check(cleaned["email"], exclude_id=learner.id)
        if "age" in changes:
            cleaned["age"] = check_age(changes["age"])
        if "field_of_study" in changes:
            cleaned["field_of_study"] = _clean_field_of_study(changes["field_of_study"])

        if "email" in cleaned:
            self._emails.release(learner.email)
            self._emails.claim(cleaned["email"], learner.id)
        for name, value in cleaned.items():
            setattr(learner, name, value)
        return learner

    def delete(self, learner_id: str) -> bool:
        learner = self._discard(learner_id)
        if learner is None:
            return False
        self._emails.release(learner.email)
        self._enrollments.drop_learner(learner.id)
        return True

    def find_by_field_of_study(self, fragment: str) -> list[Learner]:
        """Case-insensitive substring match on field_of_study."""
        return self.list(LearnerCriteria(field_of_study_contains=fragment))

    def clear(self) -> None:
        super().clear()
        self._emails.clear()
