"""Password hashing and JWT issuance/verification for authentication."""

from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

import bcrypt
import jwt
from pydantic import ValidationError

from app.core.errors import InvalidTokenError
from app.core.roles import RoleName
from app.schemas.auth import Claims

# Default bcrypt cost (rounds); BCRYPT_ROUNDS in settings overrides it for credentials.
BCRYPT_ROUNDS = 12

# bcrypt only looks at the first 72 bytes.
BCRYPT_MAX_BYTES = 72

# Claims every token must carry; anything else in the payload is ignored.
REQUIRED_CLAIMS = ("user_id", "email", "role", "iat", "exp")


def hash_password(plain_password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash (constant-time compare inside bcrypt)."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@lru_cache
def dummy_password_hash(rounds: int = BCRYPT_ROUNDS) -> str:
    """
    Hash compared against when a login is unknown, so both failure paths cost one bcrypt check.

    rounds must match the cost stored credentials are hashed with; one hash is cached per cost.
    """
    return hash_password("quill-timing-equalizer", rounds=rounds)


class TokenCodec:
    """
    Signs and verifies access tokens with a single process-wide secret.

    Tokens are stateless: validity depends only on signature and expiry, so a
    password change does not invalidate tokens already issued.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expire_minutes: int = 1440,
    ) -> None:
        if not secret:
            raise ValueError("Token signing secret must be non-empty")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = timedelta(minutes=expire_minutes)

    def issue(
        self,
        user_id: int,
        email: str,
        role: RoleName,
        now: datetime | None = None,
    ) -> str:
        """Create a signed token for the user; iat=now, exp=now+ttl."""
        issued_at = now or datetime.now(UTC)
        payload: dict[str, Any] = {
            "user_id": user_id,
            "email": email,
            "role": RoleName(role).value,
            "iat": issued_at,
            "exp": issued_at + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Claims:
        """
        Decode and validate a token; return its claims.
        Raises InvalidTokenError for bad signature, malformed structure, expiry or payload.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": list(REQUIRED_CLAIMS)},
            )
            return Claims(
                user_id=payload["user_id"],
                email=payload["email"],
                role=payload["role"],
                issued_at=datetime.fromtimestamp(payload["iat"], UTC),
                expires_at=datetime.fromtimestamp(payload["exp"], UTC),
            )
        except (jwt.PyJWTError, ValidationError, KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError() from e
