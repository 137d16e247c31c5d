"""Authenticator: verifies login/password pairs and bridges to the token codec."""

import logging
from typing import Protocol

from app.core.errors import InvalidCredentialsError
from app.core.roles import RoleName
from app.core.security import BCRYPT_ROUNDS, TokenCodec, dummy_password_hash, verify_password
from app.models import Credential, User
from app.schemas.auth import Claims

logger = logging.getLogger(__name__)


class CredentialStore(Protocol):
    def get_by_login(self, login: str) -> Credential | None: ...


class IdentityStore(Protocol):
    def get_by_id(self, user_id: int) -> User | None: ...


class Authenticator:
    """
    Checks credentials and issues/validates access tokens.

    Every authentication failure raises the same InvalidCredentialsError so callers
    cannot tell an unknown login from a wrong password or a dangling credential.
    bcrypt_rounds must equal the cost credentials are hashed with.
    """

    def __init__(
        self,
        credentials: CredentialStore,
        users: IdentityStore,
        codec: TokenCodec,
        bcrypt_rounds: int = BCRYPT_ROUNDS,
    ) -> None:
        self.credentials = credentials
        self.users = users
        self.codec = codec
        self.bcrypt_rounds = bcrypt_rounds

    def authenticate(self, login: str, password: str) -> User:
        """Return the user (with role) owning login when password matches."""
        credential = self.credentials.get_by_login(login)
        if credential is None:
            # Same bcrypt cost as a real check, so timing does not reveal unknown logins.
            verify_password(password, dummy_password_hash(self.bcrypt_rounds))
            logger.info("Login failed: unknown login")
            raise InvalidCredentialsError()

        user = self.users.get_by_id(credential.user_id)
        if user is None:
            verify_password(password, dummy_password_hash(self.bcrypt_rounds))
            logger.warning("Login failed: credential %s references missing user", credential.id)
            raise InvalidCredentialsError()

        if not verify_password(password, credential.password):
            logger.info("Login failed: bad password for user_id=%s", user.id)
            raise InvalidCredentialsError()

        logger.info("Login succeeded for user_id=%s", user.id)
        return user

    def generate_token(self, user: User) -> str:
        """Issue a token carrying the user's id, email and role name. user.role must be loaded."""
        if user.role is None:
            raise ValueError(f"User {user.id} has no role loaded; cannot issue token")
        return self.codec.issue(
            user_id=user.id,
            email=user.email,
            role=RoleName(user.role.name),
        )

    def validate_token(self, token: str) -> Claims:
        """Verify a token. Raises InvalidTokenError."""
        return self.codec.verify(token)
