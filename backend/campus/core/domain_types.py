"""Domain Types - named identifiers, enums, and bounds shared across the codebase.

Invariants:
    - LearnerId, SubjectId, UserId wrap str - identifiers are string-encoded integers
    - MIN_LEARNER_AGE and the credit-hour bounds are inclusive
    - Page size never exceeds MAX_PAGE_SIZE once clamped
    - All valid states encoded as Enums - no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

LearnerId = NewType("LearnerId", str)
SubjectId = NewType("SubjectId", str)
UserId = NewType("UserId", str)


# ─── Enums ───────────────────────────────────────────────────────

class EntityKind(str, Enum):
    """Named collections, each with its own identifier space."""
    LEARNER = "learner"
    SUBJECT = "subject"
    CREDENTIAL = "credential"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class SortDirection(str, Enum):
    """Sort direction. Parsing is case-insensitive; unknown tokens mean ASC."""
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, token: str | None) -> "SortDirection":
        if token and token.strip().lower() == cls.DESC.value:
            return cls.DESC
        return cls.ASC


# ─── Bounds ──────────────────────────────────────────────────────

MIN_LEARNER_AGE = 18
MIN_CREDIT_HOURS = 1
MAX_CREDIT_HOURS = 5
DEFAULT_FIELD_OF_STUDY = "Undeclared"

MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_BYTES = 72  # bcrypt ignores anything past this

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 50

TOKEN_TTL_HOURS = 24
