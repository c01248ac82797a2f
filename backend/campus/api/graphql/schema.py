"""GraphQL Schema - Query and Mutation roots over the Registrar.

Invariants:
    - Reads need no token; every learner/subject/enrollment mutation needs one,
      checked before the payload is parsed
    - registerUser/login run in a worker thread (bcrypt is CPU-bound)
    - Domain errors carry extensions {code, category, ...}; other errors are
      reported as strawberry reports them
    - Domain errors are logged at WARNING without traceback

Design Decisions:
    - Explicit resolver methods per operation, no generated CRUD
"""

import asyncio
import logging

import strawberry
from graphql import GraphQLError
from strawberry.extensions import SchemaExtension
from strawberry.types import ExecutionContext, Info
from strawberry.utils.logging import StrawberryLogger

from campus.api.graphql.inputs import (
    CreateLearnerInput,
    CreateSubjectInput,
    LearnerFilterInput,
    LearnerSortInput,
    PageInput,
    SubjectFilterInput,
    SubjectSortInput,
    UpdateLearnerInput,
    UpdateSubjectInput,
    supplied_fields,
)
from campus.api.graphql.types import AuthPayloadType, LearnerType, SubjectType, UserType
from campus.core.errors import CampusError
from campus.schemas.auth import CredentialsIn
from campus.schemas.common import parse_payload
from campus.schemas.learner import LearnerCreate, LearnerUpdate
from campus.schemas.subject import SubjectCreate, SubjectUpdate

logger = logging.getLogger(__name__)


def _require_user(info: Info, operation: str) -> None:
    """Reject anonymous writes before their payload is inspected."""
    info.context.registrar.auth.require(info.context.current_user, operation)


@strawberry.type
class Query:
    @strawberry.field(description="List learners with optional filter, sort, and page.")
    def learners(
        self,
        info: Info,
        filter_by: LearnerFilterInput | None = None,
        sort: LearnerSortInput | None = None,
        page: PageInput | None = None,
    ) -> list[LearnerType]:
        learners = info.context.registrar.list_learners(
            filter_by.to_criteria() if filter_by else None,
            sort.to_spec() if sort else None,
            page.to_options() if page else None,
        )
        return [LearnerType.from_model(learner) for learner in learners]

    @strawberry.field(description="Fetch one learner, or null if unknown.")
    def learner(self, info: Info, id: strawberry.ID) -> LearnerType | None:
        learner = info.context.registrar.get_learner(id)
        return LearnerType.from_model(learner) if learner else None

    @strawberry.field(description="List subjects with optional filter, sort, and page.")
    def subjects(
        self,
        info: Info,
        filter_by: SubjectFilterInput | None = None,
        sort: SubjectSortInput | None = None,
        page: PageInput | None = None,
    ) -> list[SubjectType]:
        subjects = info.context.registrar.list_subjects(
            filter_by.to_criteria() if filter_by else None,
            sort.to_spec() if sort else None,
            page.to_options() if page else None,
        )
        return [SubjectType.from_model(subject) for subject in subjects]

    @strawberry.field(description="Fetch one subject, or null if unknown.")
    def subject(self, info: Info, id: strawberry.ID) -> SubjectType | None:
        subject = info.context.registrar.get_subject(id)
        return SubjectType.from_model(subject) if subject else None

    @strawberry.field(description="Learners whose field of study contains the text.")
    def learners_by_field(self, info: Info, field: str) -> list[LearnerType]:
        learners = info.context.registrar.find_learners_by_field(field)
        return [LearnerType.from_model(learner) for learner in learners]

    @strawberry.field(description="The authenticated user, or null.")
    def me(self, info: Info) -> UserType | None:
        user = info.context.current_user
        return UserType.from_model(user) if user else None


@strawberry.type
class Mutation:
    @strawberry.mutation(description="Create a system user and return a bearer token.")
    async def register_user(self, info: Info, email: str, password: str) -> AuthPayloadType:
        payload = parse_payload(CredentialsIn, {"email": email, "password": password})
        result = await asyncio.to_thread(
            info.context.registrar.register_credential, payload,
        )
        return AuthPayloadType.from_result(result)

    @strawberry.mutation(description="Exchange email and password for a bearer token.")
    async def login(self, info: Info, email: str, password: str) -> AuthPayloadType:
        payload = parse_payload(CredentialsIn, {"email": email, "password": password})
        result = await asyncio.to_thread(
            info.context.registrar.authenticate_credential, payload,
        )
        return AuthPayloadType.from_result(result)

    @strawberry.mutation
    def create_learner(self, info: Info, data: CreateLearnerInput) -> LearnerType:
        _require_user(info, "create_learner")
        payload = parse_payload(LearnerCreate, supplied_fields(data))
        learner = info.context.registrar.create_learner(info.context.current_user, payload)
        return LearnerType.from_model(learner)

    @strawberry.mutation
    def update_learner(
        self, info: Info, id: strawberry.ID, data: UpdateLearnerInput,
    ) -> LearnerType:
        _require_user(info, "update_learner")
        payload = parse_payload(LearnerUpdate, supplied_fields(data))
        learner = info.context.registrar.update_learner(
            info.context.current_user, id, payload,
        )
        return LearnerType.from_model(learner)

    @strawberry.mutation
    def delete_learner(self, info: Info, id: strawberry.ID) -> bool:
        return info.context.registrar.delete_learner(info.context.current_user, id)

    @strawberry.mutation
    def create_subject(self, info: Info, data: CreateSubjectInput) -> SubjectType:
        _require_user(info, "create_subject")
        payload = parse_payload(SubjectCreate, supplied_fields(data))
        subject = info.context.registrar.create_subject(info.context.current_user, payload)
        return SubjectType.from_model(subject)

    @strawberry.mutation
    def update_subject(
        self, info: Info, id: strawberry.ID, data: UpdateSubjectInput,
    ) -> SubjectType:
        _require_user(info, "update_subject")
        payload = parse_payload(SubjectUpdate, supplied_fields(data))
        subject = info.context.registrar.update_subject(
            info.context.current_user, id, payload,
        )
        return SubjectType.from_model(subject)

    @strawberry.mutation
    def delete_subject(self, info: Info, id: strawberry.ID) -> bool:
        return info.context.registrar.delete_subject(info.context.current_user, id)

    @strawberry.mutation(description="Enroll a learner in a subject (idempotent).")
    def enroll_learner(
        self, info: Info, learner_id: strawberry.ID, subject_id: strawberry.ID,
    ) -> LearnerType:
        learner = info.context.registrar.link_learner_subject(
            info.context.current_user, learner_id, subject_id,
        )
        return LearnerType.from_model(learner)

    @strawberry.mutation(description="Remove a learner from a subject (idempotent).")
    def unenroll_learner(
        self, info: Info, learner_id: strawberry.ID, subject_id: strawberry.ID,
    ) -> LearnerType:
        learner = info.context.registrar.unlink_learner_subject(
            info.context.current_user, learner_id, subject_id,
        )
        return LearnerType.from_model(learner)


class DomainErrorExtension(SchemaExtension):
    """Copy CampusError.to_extensions() onto the matching GraphQL errors."""

    def on_operation(self):
        yield
        result = self.execution_context.result
        if not result or not result.errors:
            return
        for error in result.errors:
            original = error.original_error
            if isinstance(original, CampusError):
                error.extensions = {**(error.extensions or {}), **original.to_extensions()}


class CampusSchema(strawberry.Schema):
    """Schema that logs domain errors quietly and everything else loudly."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        for error in errors:
            original = error.original_error
            if isinstance(original, CampusError):
                logger.warning(
                    f"{original.code}: {original.message}",
                    extra={
                        "error_code": original.code,
                        "operation": original.context.operation,
                        "entity_kind": original.context.entity_kind,
                        "entity_id": original.context.entity_id,
                    },
                )
            else:
                StrawberryLogger.error(error, execution_context)


def build_schema() -> CampusSchema:
    return CampusSchema(
        query=Query, mutation=Mutation, extensions=[DomainErrorExtension],
    )
