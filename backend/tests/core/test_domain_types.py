"""Domain Types - verifies identifier wrappers, enums, and bounds.

Tests:
    - NewType wrappers exist and are callable
    - SortDirection.parse is case-insensitive and defaults to ASC
    - EntityKind has exactly 3 members and a display label
    - Bounds match the documented limits
"""

from campus.core.domain_types import (
    LearnerId, SubjectId, UserId,
    EntityKind, SortDirection,
    MIN_LEARNER_AGE, MIN_CREDIT_HOURS, MAX_CREDIT_HOURS,
    DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, MIN_PASSWORD_LENGTH, TOKEN_TTL_HOURS,
)


def test_identity_types_wrap_str():
    assert LearnerId("1") == "1"
    assert SubjectId("2") == "2"
    assert UserId("3") == "3"


def test_entity_kind_has_three_members():
    assert set(EntityKind) == {
        EntityKind.LEARNER, EntityKind.SUBJECT, EntityKind.CREDENTIAL,
    }


def test_entity_kind_label():
    assert EntityKind.LEARNER.label == "Learner"
    assert EntityKind.SUBJECT.label == "Subject"


def test_sort_direction_parses_desc_any_case():
    assert SortDirection.parse("DESC") is SortDirection.DESC
    assert SortDirection.parse("desc") is SortDirection.DESC
    assert SortDirection.parse(" Desc ") is SortDirection.DESC


def test_sort_direction_defaults_to_asc():
    assert SortDirection.parse(None) is SortDirection.ASC
    assert SortDirection.parse("ASC") is SortDirection.ASC
    assert SortDirection.parse("sideways") is SortDirection.ASC


def test_enums_serialize_as_strings():
    assert EntityKind.LEARNER.value == "learner"
    assert SortDirection.DESC.value == "desc"


def test_bounds():
    assert MIN_LEARNER_AGE == 18
    assert (MIN_CREDIT_HOURS, MAX_CREDIT_HOURS) == (1, 5)
    assert (DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE) == (10, 50)
    assert MIN_PASSWORD_LENGTH == 8
    assert TOKEN_TTL_HOURS == 24
