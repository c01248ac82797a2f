"""Filter Criteria - closed, typed predicate sets per entity kind.

Invariants:
    - Every field is optional; None imposes no constraint
    - Present fields combine with logical AND
    - String predicates are case-insensitive (contains / starts-with / equals)
    - Numeric predicates are inclusive bounds (min_x <= value <= max_x)
    - An entity whose compared attribute is absent fails that predicate

Design Decisions:
    - Frozen dataclass per kind instead of an open dict: unknown predicate names
      are rejected at construction, never silently ignored
"""

from dataclasses import dataclass

from campus.models.learner import Learner
from campus.models.subject import Subject


def text_contains(value: str | None, needle: str | None) -> bool:
    if needle is None:
        return True
    return value is not None and needle.casefold() in value.casefold()


def text_starts_with(value: str | None, prefix: str | None) -> bool:
    if prefix is None:
        return True
    return value is not None and value.casefold().startswith(prefix.casefold())


def text_equals(value: str | None, expected: str | None) -> bool:
    if expected is None:
        return True
    return value is not None and value.casefold() == expected.casefold()


def within(value: int | None, low: int | None, high: int | None) -> bool:
    if low is None and high is None:
        return True
    if value is None:
        return False
    if low is not None and value < low:
        return False
    if high is not None and value > high:
        return False
    return True


@dataclass(frozen=True)
class LearnerCriteria:
    """Predicates accepted by list-learners."""
    name_contains: str | None = None
    email_contains: str | None = None
    field_of_study_equals: str | None = None
    field_of_study_contains: str | None = None
    min_age: int | None = None
    max_age: int | None = None

    def matches(self, learner: Learner) -> bool:
        return (
            text_contains(learner.name, self.name_contains)
            and text_contains(learner.email, self.email_contains)
            and text_equals(learner.field_of_study, self.field_of_study_equals)
            and text_contains(learner.field_of_study, self.field_of_study_contains)
            and within(learner.age, self.min_age, self.max_age)
        )


@dataclass(frozen=True)
class SubjectCriteria:
    """Predicates accepted by list-subjects."""
    name_contains: str | None = None
    code_equals: str | None = None
    code_starts_with: str | None = None
    educator_contains: str | None = None
    min_credit_hours: int | None = None
    max_credit_hours: int | None = None

    def matches(self, subject: Subject) -> bool:
        return (
            text_contains(subject.name, self.name_contains)
            and text_equals(subject.code, self.code_equals)
            and text_starts_with(subject.code, self.code_starts_with)
            and text_contains(subject.educator, self.educator_contains)
            and within(
                subject.credit_hours, self.min_credit_hours, self.max_credit_hours,
            )
        )
