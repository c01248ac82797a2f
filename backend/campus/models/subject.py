"""Subject - a course offering learners can enroll in.

Invariants:
    - id is allocator-issued and never reused within a process lifetime
    - code is unique among subjects, compared case-insensitively
    - MIN_CREDIT_HOURS <= credit_hours <= MAX_CREDIT_HOURS
    - Registered learners are NOT stored here (derived from the enrollment store)
"""

from dataclasses import dataclass

from campus.core.domain_types import SubjectId


@dataclass
class Subject:
    """Subject entity - mutated in place by partial updates."""
    id: SubjectId
    name: str
    code: str
    credit_hours: int
    educator: str
