"""Boundary Protocols - contracts between the services layer and storage.

Invariants:
    - Services depend on these Protocols, never on a concrete repository class
    - get() raises NotFoundError; find() returns None
    - create/update raise ValidationError or ConflictError and leave state unchanged on failure
    - delete() returns False for an unknown ID and cascades into enrollments otherwise

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Synchronous: storage is in-memory, the Registrar owns locking
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from campus.core.criteria import LearnerCriteria, SubjectCriteria
from campus.core.query_pipeline import PageOptions, SortSpec
from campus.models.credential import Credential
from campus.models.learner import Learner
from campus.models.subject import Subject


class LearnerRepository(Protocol):
    """Contract for the learner collection."""
    def __len__(self) -> int: ...
    def all(self) -> list[Learner]: ...
    def find(self, entity_id: str) -> Learner | None: ...
    def get(self, entity_id: str) -> Learner: ...
    def exists(self, entity_id: str) -> bool: ...
    def list(
        self,
        criteria: LearnerCriteria | None = None,
        sort: SortSpec | None = None,
        page: PageOptions | None = None,
    ) -> list[Learner]: ...
    def create(
        self, name: str, email: str, age: int, field_of_study: str | None = None,
    ) -> Learner: ...
    def update(self, learner_id: str, changes: Mapping[str, Any]) -> Learner: ...
    def delete(self, learner_id: str) -> bool: ...
    def find_by_field_of_study(self, fragment: str) -> list[Learner]: ...
    def clear(self) -> None: ...


class SubjectRepository(Protocol):
    """Contract for the subject collection."""
    def __len__(self) -> int: ...
    def all(self) -> list[Subject]: ...
    def find(self, entity_id: str) -> Subject | None: ...
    def get(self, entity_id: str) -> Subject: ...
    def exists(self, entity_id: str) -> bool: ...
    def list(
        self,
        criteria: SubjectCriteria | None = None,
        sort: SortSpec | None = None,
        page: PageOptions | None = None,
    ) -> list[Subject]: ...
    def create(
        self, name: str, code: str, credit_hours: int, educator: str,
    ) -> Subject: ...
    def update(self, subject_id: str, changes: Mapping[str, Any]) -> Subject: ...
    def delete(self, subject_id: str) -> bool: ...
    def clear(self) -> None: ...


class CredentialRepository(Protocol):
    """Contract for system-user credentials."""
    def __len__(self) -> int: ...
    def find(self, entity_id: str) -> Credential | None: ...
    def create(self, email: str, password_hash: str) -> Credential: ...
    def email_taken(self, email: str) -> bool: ...
    def find_by_email(self, email: str) -> Credential | None: ...
    def clear(self) -> None: ...
