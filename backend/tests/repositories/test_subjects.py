"""Subject Repository - code uniqueness, credit hour bounds, delete cascade.

Tests cover:
    - Code uniqueness is case-insensitive
    - Credit hours in [1, 5] on create and update
    - Delete removes the subject from every enrollment set
"""

import pytest

from campus.core.criteria import SubjectCriteria
from campus.core.errors import ConflictError, ValidationError


def _add(repo, code="CS101", hours=3, name="Intro", educator="Dr. Lee"):
    return repo.create(name, code, hours, educator)


def test_create_and_get(subjects):
    subject = _add(subjects)
    assert subjects.get(subject.id) is subject
    assert subject.id == "1"


def test_duplicate_code_any_case_conflicts(subjects):
    _add(subjects, code="CS101")
    with pytest.raises(ConflictError) as exc:
        _add(subjects, code="cs101")
    assert exc.value.field == "code"


@pytest.mark.parametrize("hours", [0, 6])
def test_credit_hours_out_of_range(subjects, hours):
    with pytest.raises(ValidationError):
        _add(subjects, hours=hours)


def test_update_credit_hours_checked(subjects):
    subject = _add(subjects)
    with pytest.raises(ValidationError):
        subjects.update(subject.id, {"credit_hours": 9})
    assert subject.credit_hours == 3


def test_update_code_self_match_allowed(subjects):
    subject = _add(subjects, code="CS101")
    subjects.update(subject.id, {"code": "cs101"})
    assert subject.code == "cs101"


def test_delete_removes_from_every_learner(subjects, enrollments):
    subject = _add(subjects)
    other = _add(subjects, code="CS102")
    enrollments.link("1", subject.id)
    enrollments.link("2", subject.id)
    enrollments.link("2", other.id)

    assert subjects.delete(subject.id) is True
    assert enrollments.subjects_of("1") == set()
    assert enrollments.subjects_of("2") == {other.id}
    assert enrollments.has_entry("1")


def test_delete_unknown_returns_false(subjects):
    assert subjects.delete("7") is False


def test_code_prefix_filter(subjects):
    _add(subjects, code="CS101")
    _add(subjects, code="CS401")
    _add(subjects, code="MA101")
    result = subjects.list(SubjectCriteria(code_starts_with="cs1"))
    assert [s.code for s in result] == ["CS101"]


def test_subject_and_learner_ids_are_independent(subjects, learners):
    subject = _add(subjects)
    learner = learners.create("Ada", "ada@x.com", 30)
    assert subject.id == learner.id == "1"
