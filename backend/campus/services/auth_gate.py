"""Auth Gate - credential registration, login, and bearer-token verification.

Invariants:
    - register rejects malformed email, short/over-long password (ValidationError)
      and duplicate email, case-insensitive (ConflictError)
    - authenticate fails with one generic AuthenticationError for unknown email
      and for wrong password alike
    - verify never raises: bad, expired, or orphaned tokens yield None
    - A token is honoured only for the credential it was issued to (same id and
      email) and only within the generation it was issued in; reset() starts a
      new generation, so IDs reissued after a reset never revive old tokens
    - require() raises AuthorizationError before any repository is touched
    - CurrentUser carries id + email only, never the hash

Design Decisions:
    - Hashing runs outside the shared lock (it reads only its arguments);
      credential reads/writes run inside it
"""

import logging
import threading
from dataclasses import dataclass

from campus.core.errors import AuthenticationError, AuthorizationError, ConflictError
from campus.core.repository_protocols import CredentialRepository
from campus.core.validation import check_email, check_password, normalize_key
from campus.infrastructure.passwords import PasswordHasher
from campus.infrastructure.tokens import TokenService
from campus.models.credential import CurrentUser

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a successful register/login."""
    token: str
    user: CurrentUser


def extract_bearer_token(authorization: str | None) -> str | None:
    """Token from an `Authorization: Bearer <token>` header value, else None."""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != BEARER_SCHEME:
        return None
    token = token.strip()
    return token or None


class AuthGate:
    """Issues and checks bearer credentials for system users."""

    def __init__(
        self,
        credentials: CredentialRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
        lock: threading.RLock,
    ):
        self._credentials = credentials
        self._hasher = hasher
        self._tokens = tokens
        self._lock = lock
        self._generation = 0

    def register(self, email: str, password: str) -> AuthResult:
        email = check_email(email)
        check_password(password)
        with self._lock:
            if self._credentials.email_taken(email):
                raise ConflictError("Credential", "email", email)
        password_hash = self._hasher.hash(password)
        with self._lock:
            # re-checked inside create(): another caller may have registered meanwhile
            credential = self._credentials.create(email, password_hash)
        logger.info(
            "Credential registered",
            extra={"operation": "register_credential", "user_id": credential.id},
        )
        return self._issue(credential.to_current_user())

    def authenticate(self, email: str, password: str) -> AuthResult:
        with self._lock:
            credential = self._credentials.find_by_email(email or "")
        if credential is None:
            self._hasher.dummy_verify(password or "")
            logger.info("Login failed", extra={"operation": "authenticate_credential"})
            raise AuthenticationError()
        if not self._hasher.verify(password or "", credential.password_hash):
            logger.info(
                "Login failed",
                extra={"operation": "authenticate_credential", "user_id": credential.id},
            )
            raise AuthenticationError()
        return self._issue(credential.to_current_user())

    def verify(self, token: str | None) -> CurrentUser | None:
        if not token:
            return None
        claims = self._tokens.decode(token)
        if claims is None:
            return None
        with self._lock:
            if claims.get("gen") != self._generation:
                return None
            credential = self._credentials.find(claims["sub"])
        if credential is None:
            return None
        if normalize_key(claims["email"]) != normalize_key(credential.email):
            return None
        return credential.to_current_user()

    def verify_header(self, authorization: str | None) -> CurrentUser | None:
        return self.verify(extract_bearer_token(authorization))

    def require(self, current_user: CurrentUser | None, operation: str) -> CurrentUser:
        if current_user is None:
            logger.info(
                "Rejected unauthenticated mutation", extra={"operation": operation},
            )
            raise AuthorizationError(operation)
        return current_user

    def reset(self) -> None:
        """Invalidate every token issued so far."""
        with self._lock:
            self._generation += 1

    def _issue(self, user: CurrentUser) -> AuthResult:
        with self._lock:
            generation = self._generation
        token = self._tokens.issue(user.id, user.email, generation)
        return AuthResult(token=token, user=user)
