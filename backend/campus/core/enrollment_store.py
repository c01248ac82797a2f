"""Enrollment Store - bidirectional many-to-many index between learners and subjects.

Invariants:
    - Storage is one mapping: learner_id -> set of subject_ids (duplicates suppressed)
    - link/unlink are idempotent and never raise for unknown IDs
    - learners_of(s) is derived by scanning the mapping, equivalent to a reverse index
    - drop_learner removes the learner's entry entirely
    - drop_subject removes the subject from every set, leaving empty sets in place
    - After any sequence of calls, subjects_of and learners_of agree edge-for-edge

Design Decisions:
    - ID validity is checked by the caller (Registrar) before link, not here
    - Returned sets are copies: callers cannot mutate stored edges
"""

from campus.core.domain_types import LearnerId, SubjectId


class EnrollmentStore:
    """Adjacency mapping from learner IDs to subject ID sets."""

    def __init__(self):
        self._edges: dict[LearnerId, set[SubjectId]] = {}

    def ensure_learner(self, learner_id: LearnerId) -> None:
        """Create an empty edge set for a newly registered learner."""
        self._edges.setdefault(learner_id, set())

    def link(self, learner_id: LearnerId, subject_id: SubjectId) -> None:
        self._edges.setdefault(learner_id, set()).add(subject_id)

    def unlink(self, learner_id: LearnerId, subject_id: SubjectId) -> None:
        subjects = self._edges.get(learner_id)
        if subjects is not None:
            subjects.discard(subject_id)

    def is_linked(self, learner_id: LearnerId, subject_id: SubjectId) -> bool:
        return subject_id in self._edges.get(learner_id, ())

    def subjects_of(self, learner_id: LearnerId) -> set[SubjectId]:
        return set(self._edges.get(learner_id, ()))

    def learners_of(self, subject_id: SubjectId) -> set[LearnerId]:
        return {
            learner_id
            for learner_id, subjects in self._edges.items()
            if subject_id in subjects
        }

    def drop_learner(self, learner_id: LearnerId) -> None:
        self._edges.pop(learner_id, None)

    def drop_subject(self, subject_id: SubjectId) -> None:
        for subjects in self._edges.values():
            subjects.discard(subject_id)

    def has_entry(self, learner_id: LearnerId) -> bool:
        return learner_id in self._edges

    def edge_count(self) -> int:
        return sum(len(subjects) for subjects in self._edges.values())

    def clear(self) -> None:
        self._edges.clear()
