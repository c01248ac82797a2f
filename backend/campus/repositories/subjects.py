"""Subject Repository - subject collection, code uniqueness, delete cascade.

Invariants:
    - Code unique among subjects (case-insensitive), self-match excluded on update
    - Credit hours bound checked on create and only when supplied on update
    - delete() removes the subject from every learner's enrollment set
"""

from collections.abc import Mapping
from typing import Any

from campus.core.domain_types import EntityKind, SubjectId
from campus.core.enrollment_store import EnrollmentStore
from campus.core.id_allocator import IdAllocator
from campus.core.validation import check_credit_hours, check_required_text
from campus.models.subject import Subject
from campus.repositories.base import InMemoryRepository, UniqueIndex, reject_unknown_fields

UPDATABLE_FIELDS = frozenset({"name", "code", "credit_hours", "educator"})


class SubjectRepository(InMemoryRepository[Subject]):
    kind = EntityKind.SUBJECT

    def __init__(self, allocator: IdAllocator, enrollments: EnrollmentStore):
        super().__init__(allocator)
        self._enrollments = enrollments
        self._codes = UniqueIndex(self.kind, "code")

    def create(
        self, name: str, code: str, credit_hours: int, educator: str,
    ) -> Subject:
        name = check_required_text(name, "name")
        code = check_required_text(code, "code")
        credit_hours = check_credit_hours(credit_hours)
        educator = check_required_text(educator, "educator")
        self._codes.check(code)

        subject = Subject(
            id=SubjectId(self._allocate_id()),
            name=name,
            code=code,
            credit_hours=credit_hours,
            educator=educator,
        )
        self._store(subject.id, subject)
        self._codes.claim(code, subject.id)
        return subject

    def update(self, subject_id: str, changes: Mapping[str, Any]) -> Subject:
        subject = self.get(subject_id)
        reject_unknown_fields(changes, UPDATABLE_FIELDS)

        cleaned: dict[str, Any] = {}
        if "name" in changes:
            cleaned["name"] = check_required_text(changes["name"], "name")
        if "code" in changes:
            cleaned["code"] = check_required_text(changes["code"], "code")
            self._codes.check(cleaned["code"], exclude_id=subject.id)
        if "credit_hours" in changes:
            cleaned["credit_hours"] = check_credit_hours(changes["credit_hours"])
        if "educator" in changes:
            cleaned["educator"] = check_required_text(changes["educator"], "educator")

        if "code" in cleaned:
            self._codes.release(subject.code)
            self._codes.claim(cleaned["code"], subject.id)
        for name, value in cleaned.items():
            setattr(subject, name, value)
        return subject

    def delete(self, subject_id: str) -> bool:
        subject = self._discard(subject_id)
        if subject is None:
            return False
        self._codes.release(subject.code)
        self._enrollments.drop_subject(subject.id)
        return True

    def clear(self) -> None:
        super().clear()
        self._codes.clear()
