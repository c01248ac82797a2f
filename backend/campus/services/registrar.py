"""Registrar - resolver facade over repositories, enrollments, and the auth gate.

Invariants:
    - Owns every piece of shared state; nothing lives in module globals
    - Every public call runs under one re-entrant lock: mutations appear atomic
      at the granularity of one call
    - Mutations (except register/authenticate) pass AuthGate.require() first;
      a rejected call touches no repository and no enrollment edge
    - link/unlink verify both IDs exist (NotFoundError) and are idempotent
    - Derived lists (subjects of a learner, learners of a subject) are computed
      from the enrollment store on demand, in collection order
    - reset() returns the instance to its just-constructed state

Design Decisions:
    - Payload schemas (pydantic) in, entity dataclasses out: the API layer
      converts to transport types
    - build_registrar() wires concrete classes from Settings; tests inject their own
"""

import logging
import threading
from collections.abc import Sequence
from datetime import timedelta

from campus.config import Settings
from campus.core.criteria import LearnerCriteria, SubjectCriteria
from campus.core.domain_types import EntityKind
from campus.core.enrollment_store import EnrollmentStore
from campus.core.id_allocator import IdAllocator
from campus.core.query_pipeline import PageOptions, SortSpec
from campus.core.repository_protocols import (
    CredentialRepository,
    LearnerRepository,
    SubjectRepository,
)
from campus.infrastructure.passwords import PasswordHasher
from campus.infrastructure.tokens import TokenService
from campus.models.credential import CurrentUser
from campus.models.learner import Learner
from campus.models.subject import Subject
from campus.repositories.credentials import CredentialRepository as InMemoryCredentials
from campus.repositories.learners import LearnerRepository as InMemoryLearners
from campus.repositories.subjects import SubjectRepository as InMemorySubjects
from campus.schemas.auth import CredentialsIn
from campus.schemas.common import changes_of
from campus.schemas.learner import LearnerCreate, LearnerUpdate
from campus.schemas.subject import SubjectCreate, SubjectUpdate
from campus.services.auth_gate import AuthGate, AuthResult

logger = logging.getLogger(__name__)


class Registrar:
    """Single entry point for every query and mutation."""

    def __init__(
        self,
        learners: LearnerRepository,
        subjects: SubjectRepository,
        credentials: CredentialRepository,
        enrollments: EnrollmentStore,
        allocator: IdAllocator,
        auth: AuthGate,
        lock: threading.RLock,
    ):
        self._learners = learners
        self._subjects = subjects
        self._credentials = credentials
        self._enrollments = enrollments
        self._allocator = allocator
        self.auth = auth
        self._lock = lock

    # ─── Queries ─────────────────────────────────────────────────

    def list_learners(
        self,
        criteria: LearnerCriteria | None = None,
        sort: SortSpec | None = None,
        page: PageOptions | None = None,
    ) -> list[Learner]:
        with self._lock:
            return self._learners.list(criteria, sort, page)

    def get_learner(self, learner_id: str) -> Learner | None:
        with self._lock:
            return self._learners.find(learner_id)

    def list_subjects(
        self,
        criteria: SubjectCriteria | None = None,
        sort: SortSpec | None = None,
        page: PageOptions | None = None,
    ) -> list[Subject]:
        with self._lock:
            return self._subjects.list(criteria, sort, page)

    def get_subject(self, subject_id: str) -> Subject | None:
        with self._lock:
            return self._subjects.find(subject_id)

    def find_learners_by_field(self, fragment: str) -> list[Learner]:
        with self._lock:
            return self._learners.find_by_field_of_study(fragment)

    def subjects_of_learner(self, learner_id: str) -> list[Subject]:
        with self._lock:
            ids = self._enrollments.subjects_of(learner_id)
            return [s for s in self._subjects.all() if s.id in ids]

    def learners_of_subject(self, subject_id: str) -> list[Learner]:
        with self._lock:
            ids = self._enrollments.learners_of(subject_id)
            return [learner for learner in self._learners.all() if learner.id in ids]

    def subject_count(self, learner_id: str) -> int:
        return len(self.subjects_of_learner(learner_id))

    def learner_count(self, subject_id: str) -> int:
        return len(self.learners_of_subject(subject_id))

    def counts(self) -> dict[str, int]:
        with self._lock:
            return {
                "learners": len(self._learners),
                "subjects": len(self._subjects),
                "credentials": len(self._credentials),
                "enrollments": self._enrollments.edge_count(),
            }

    # ─── Credentials ─────────────────────────────────────────────

    def register_credential(self, payload: CredentialsIn) -> AuthResult:
        return self.auth.register(payload.email, payload.password)

    def authenticate_credential(self, payload: CredentialsIn) -> AuthResult:
        return self.auth.authenticate(payload.email, payload.password)

    def current_user(self, authorization: str | None) -> CurrentUser | None:
        return self.auth.verify_header(authorization)

    # ─── Learner mutations ───────────────────────────────────────

    def create_learner(
        self, current_user: CurrentUser | None, payload: LearnerCreate,
    ) -> Learner:
        user = self.auth.require(current_user, "create_learner")
        with self._lock:
            learner = self._learners.create(
                payload.name, payload.email, payload.age, payload.field_of_study,
            )
        self._log_mutation("create_learner", EntityKind.LEARNER, learner.id, user)
        return learner

    def update_learner(
        self, current_user: CurrentUser | None, learner_id: str, payload: LearnerUpdate,
    ) -> Learner:
        user = self.auth.require(current_user, "update_learner")
        with self._lock:
            learner = self._learners.update(learner_id, changes_of(payload))
        self._log_mutation("update_learner", EntityKind.LEARNER, learner_id, user)
        return learner

    def delete_learner(self, current_user: CurrentUser | None, learner_id: str) -> bool:
        user = self.auth.require(current_user, "delete_learner")
        with self._lock:
            removed = self._learners.delete(learner_id)
        if removed:
            self._log_mutation("delete_learner", EntityKind.LEARNER, learner_id, user)
        return removed

    # ─── Subject mutations ───────────────────────────────────────

    def create_subject(
        self, current_user: CurrentUser | None, payload: SubjectCreate,
    ) -> Subject:
        user = self.auth.require(current_user, "create_subject")
        with self._lock:
            subject = self._subjects.create(
                payload.name, payload.code, payload.credit_hours, payload.educator,
            )
        self._log_mutation("create_subject", EntityKind.SUBJECT, subject.id, user)
        return subject

    def update_subject(
        self, current_user: CurrentUser | None, subject_id: str, payload: SubjectUpdate,
    ) -> Subject:
        user = self.auth.require(current_user, "update_subject")
        with self._lock:
            subject = self._subjects.update(subject_id, changes_of(payload))
        self._log_mutation("update_subject", EntityKind.SUBJECT, subject_id, user)
        return subject

    def delete_subject(self, current_user: CurrentUser | None, subject_id: str) -> bool:
        user = self.auth.require(current_user, "delete_subject")
        with self._lock:
            removed = self._subjects.delete(subject_id)
        if removed:
            self._log_mutation("delete_subject", EntityKind.SUBJECT, subject_id, user)
        return removed

    # ─── Enrollment mutations ────────────────────────────────────

    def link_learner_subject(
        self, current_user: CurrentUser | None, learner_id: str, subject_id: str,
    ) -> Learner:
        user = self.auth.require(current_user, "link_learner_subject")
        with self._lock:
            learner = self._learners.get(learner_id)
            self._subjects.get(subject_id)
            self._enrollments.link(learner.id, subject_id)
        self._log_mutation("link_learner_subject", EntityKind.LEARNER, learner_id, user)
        return learner

    def unlink_learner_subject(
        self, current_user: CurrentUser | None, learner_id: str, subject_id: str,
    ) -> Learner:
        user = self.auth.require(current_user, "unlink_learner_subject")
        with self._lock:
            learner = self._learners.get(learner_id)
            self._subjects.get(subject_id)
            self._enrollments.unlink(learner.id, subject_id)
        self._log_mutation("unlink_learner_subject", EntityKind.LEARNER, learner_id, user)
        return learner

    # ─── Lifecycle ───────────────────────────────────────────────

    def load_records(
        self,
        learner_rows: Sequence[tuple[str, str, int, str | None]],
        subject_rows: Sequence[tuple[str, str, int, str]],
        enrollment_pairs: Sequence[tuple[int, int]] = (),
    ) -> tuple[list[Learner], list[Subject]]:
        """Bulk-create records at startup, bypassing the auth gate.

        enrollment_pairs index into the created rows: (learner_idx, subject_idx).
        """
        with self._lock:
            learners = [self._learners.create(*row) for row in learner_rows]
            subjects = [self._subjects.create(*row) for row in subject_rows]
            for learner_idx, subject_idx in enrollment_pairs:
                self._enrollments.link(learners[learner_idx].id, subjects[subject_idx].id)
        return learners, subjects

    def reset(self) -> None:
        """Drop every record, edge, credential, and ID counter; revoke all tokens."""
        with self._lock:
            self._learners.clear()
            self._subjects.clear()
            self._credentials.clear()
            self._enrollments.clear()
            self._allocator.reset()
            self.auth.reset()
        logger.info("Registrar state reset", extra={"operation": "reset"})

    def _log_mutation(
        self, operation: str, kind: EntityKind, entity_id: str, user: CurrentUser,
    ) -> None:
        logger.info(
            f"{operation} {kind.value} {entity_id}",
            extra={
                "operation": operation,
                "entity_kind": kind.value,
                "entity_id": entity_id,
                "user_id": user.id,
            },
        )


def build_registrar(settings: Settings) -> Registrar:
    """Wire a Registrar with in-memory repositories from settings."""
    lock = threading.RLock()
    allocator = IdAllocator()
    enrollments = EnrollmentStore()
    learners = InMemoryLearners(allocator, enrollments)
    subjects = InMemorySubjects(allocator, enrollments)
    credentials = InMemoryCredentials(allocator)
    auth = AuthGate(
        credentials,
        PasswordHasher(rounds=settings.bcrypt_rounds),
        TokenService(
            settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            ttl=timedelta(hours=settings.token_ttl_hours),
        ),
        lock,
    )
    return Registrar(
        learners, subjects, credentials, enrollments, allocator, auth, lock,
    )
