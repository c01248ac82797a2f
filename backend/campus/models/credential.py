"""Credential - a system user allowed to mutate learner and subject data.

Invariants:
    - email is unique among credentials, compared case-insensitively
    - password_hash never leaves the service layer (CurrentUser carries id + email only)
"""

from dataclasses import dataclass, field

from campus.core.domain_types import UserId


@dataclass
class Credential:
    """Stored system user with its salted password hash."""
    id: UserId
    email: str
    password_hash: str = field(repr=False)

    def to_current_user(self) -> "CurrentUser":
        return CurrentUser(id=self.id, email=self.email)


@dataclass(frozen=True)
class CurrentUser:
    """Authenticated caller as seen by resolvers - no secrets."""
    id: UserId
    email: str
