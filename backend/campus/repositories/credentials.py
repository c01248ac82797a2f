"""Credential Repository - system users keyed by ID with a unique email index.

Invariants:
    - Email unique among credentials (case-insensitive)
    - Stores hashes only; never sees a plaintext password
"""

from campus.core.domain_types import EntityKind, UserId
from campus.core.id_allocator import IdAllocator
from campus.core.validation import check_email
from campus.models.credential import Credential
from campus.repositories.base import InMemoryRepository, UniqueIndex


class CredentialRepository(InMemoryRepository[Credential]):
    kind = EntityKind.CREDENTIAL

    def __init__(self, allocator: IdAllocator):
        super().__init__(allocator)
        self._emails = UniqueIndex(self.kind, "email")

    def create(self, email: str, password_hash: str) -> Credential:
        email = check_email(email)
        self._emails.check(email)
        credential = Credential(
            id=UserId(self._allocate_id()), email=email, password_hash=password_hash,
        )
        self._store(credential.id, credential)
        self._emails.claim(email, credential.id)
        return credential

    def email_taken(self, email: str) -> bool:
        return self._emails.owner_of(email) is not None

    def find_by_email(self, email: str) -> Credential | None:
        owner = self._emails.owner_of(email)
        return self.find(owner) if owner is not None else None

    def clear(self) -> None:
        super().clear()
        self._emails.clear()
