"""GraphQL Object Types - transport views of learners, subjects, and users.

Invariants:
    - Types are built from entity models via from_model(); no type holds a model reference
    - subjects/subjectCount and learners/learnerCount resolve from the enrollment
      store at query time
    - User exposes id and email only
"""

import strawberry
from strawberry.types import Info

from campus.models.credential import CurrentUser
from campus.models.learner import Learner
from campus.models.subject import Subject
from campus.services.auth_gate import AuthResult


@strawberry.type(name="Learner")
class LearnerType:
    id: strawberry.ID
    name: str
    email: str
    age: int
    field_of_study: str

    @strawberry.field(description="Subjects this learner is enrolled in.")
    def subjects(self, info: Info) -> list["SubjectType"]:
        registrar = info.context.registrar
        return [SubjectType.from_model(s) for s in registrar.subjects_of_learner(self.id)]

    @strawberry.field(description="Number of subjects this learner is enrolled in.")
    def subject_count(self, info: Info) -> int:
        return info.context.registrar.subject_count(self.id)

    @classmethod
    def from_model(cls, learner: Learner) -> "LearnerType":
        return cls(
            id=strawberry.ID(learner.id),
            name=learner.name,
            email=learner.email,
            age=learner.age,
            field_of_study=learner.field_of_study,
        )


@strawberry.type(name="Subject")
class SubjectType:
    id: strawberry.ID
    name: str
    code: str
    credit_hours: int
    educator: str

    @strawberry.field(description="Learners registered for this subject.")
    def learners(self, info: Info) -> list[LearnerType]:
        registrar = info.context.registrar
        return [
            LearnerType.from_model(learner)
            for learner in registrar.learners_of_subject(self.id)
        ]

    @strawberry.field(description="Number of learners registered for this subject.")
    def learner_count(self, info: Info) -> int:
        return info.context.registrar.learner_count(self.id)

    @classmethod
    def from_model(cls, subject: Subject) -> "SubjectType":
        return cls(
            id=strawberry.ID(subject.id),
            name=subject.name,
            code=subject.code,
            credit_hours=subject.credit_hours,
            educator=subject.educator,
        )


@strawberry.type(name="User")
class UserType:
    id: strawberry.ID
    email: str

    @classmethod
    def from_model(cls, user: CurrentUser) -> "UserType":
        return cls(id=strawberry.ID(user.id), email=user.email)


@strawberry.type(name="AuthPayload")
class AuthPayloadType:
    token: str
    user: UserType

    @classmethod
    def from_result(cls, result: AuthResult) -> "AuthPayloadType":
        return cls(token=result.token, user=UserType.from_model(result.user))
