"""Bearer Tokens - signed JWTs (python-jose) carrying user id and email.

Invariants:
    - Claims: sub (user id), email, gen (issuer generation), iat, exp; exp = iat + ttl
    - decode() returns None for expired, malformed, or wrongly-signed tokens (never raises)
    - Only the configured algorithm is accepted on decode

Design Decisions:
    - Clock is injectable so expiry is testable without sleeping
"""

import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTError

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """Issues and decodes HS256 bearer tokens."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(hours=24),
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._ttl = ttl
        self._clock = clock

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, user_id: str, email: str, generation: int = 0) -> str:
        issued_at = self._clock()
        claims = {
            "sub": user_id,
            "email": email,
            "gen": generation,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._ttl).timestamp()),
        }
        return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)

    def decode(self, token: str) -> dict[str, Any] | None:
        try:
            claims = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except ExpiredSignatureError:
            logger.info("Rejected expired bearer token")
            return None
        except JWTError:
            logger.info("Rejected malformed bearer token")
            return None
        if not isinstance(claims.get("sub"), str) or not isinstance(claims.get("email"), str):
            return None
        return claims
