"""Learner - a registered student record.

Invariants:
    - id is allocator-issued and never reused within a process lifetime
    - email is unique among learners, compared case-insensitively
    - age >= MIN_LEARNER_AGE; field_of_study defaults to DEFAULT_FIELD_OF_STUDY
    - Enrolled subjects are NOT stored here (derived from the enrollment store)
"""

from dataclasses import dataclass

from campus.core.domain_types import LearnerId, DEFAULT_FIELD_OF_STUDY


@dataclass
class Learner:
    """Learner entity - mutated in place by partial updates."""
    id: LearnerId
    name: str
    email: str
    age: int
    field_of_study: str = DEFAULT_FIELD_OF_STUDY
