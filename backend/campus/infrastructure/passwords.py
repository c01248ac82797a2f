"""Password Hashing - bcrypt wrapper with a fixed work factor per process.

Invariants:
    - hash() returns a salted bcrypt hash as str (ASCII, "$2b$..." form)
    - verify() never raises for a malformed hash or an over-long password; it returns False
    - dummy_verify() spends the same work as verify() against a throwaway hash

Design Decisions:
    - bcrypt rounds come from settings so tests can run at the minimum (4)
"""

import logging

import bcrypt

logger = logging.getLogger(__name__)


class PasswordHasher:
    """Salted bcrypt hashing. Operates only on its arguments."""

    def __init__(self, rounds: int = 12):
        self._rounds = rounds
        self._dummy_hash: str | None = None

    def hash(self, password: str) -> str:
        hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(self._rounds))
        return hashed.decode("ascii")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("ascii"),
            )
        except ValueError as e:
            logger.warning(f"Password verification rejected input: {e}")
            return False

    def dummy_verify(self, password: str) -> None:
        """Burn one verification so unknown-email logins cost as much as real ones."""
        if self._dummy_hash is None:
            self._dummy_hash = self.hash("unused-password")
        self.verify(password, self._dummy_hash)
