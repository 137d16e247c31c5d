"""Login credential management. Passwords are hashed on create and on every change."""

import logging

from sqlalchemy.exc import IntegrityError

from app.core.errors import ConflictError, NotFoundError, ValidationFailedError
from app.core.security import BCRYPT_ROUNDS, hash_password
from app.models import Credential
from app.repositories import CredentialRepository, UserRepository

logger = logging.getLogger(__name__)


class CredentialService:
    def __init__(
        self,
        credentials: CredentialRepository,
        users: UserRepository,
        bcrypt_rounds: int = BCRYPT_ROUNDS,
    ) -> None:
        self.credentials = credentials
        self.users = users
        self.bcrypt_rounds = bcrypt_rounds

    def create(self, user_id: int, login: str, password: str) -> Credential:
        """Bind a login/password to an existing user that has no credentials yet."""
        if self.users.get_by_id(user_id) is None:
            raise NotFoundError("User not found")
        if self.credentials.get_by_user_id(user_id) is not None:
            raise ConflictError("User already has credentials")
        if self.credentials.get_by_login(login) is not None:
            raise ConflictError("Login already taken")
        password_hash = hash_password(password, rounds=self.bcrypt_rounds)
        try:
            credential = self.credentials.create(
                user_id=user_id, login=login, password_hash=password_hash
            )
        except IntegrityError as e:
            self.credentials.session.rollback()
            raise ConflictError("Login already taken") from e
        logger.info("Created credentials for user_id=%s", user_id)
        return credential

    def get(self, user_id: int) -> Credential:
        credential = self.credentials.get_by_user_id(user_id)
        if credential is None:
            raise NotFoundError("Credentials not found")
        return credential

    def update(
        self,
        user_id: int,
        login: str | None = None,
        password: str | None = None,
    ) -> Credential:
        """
        Change login and/or password; omitted values are kept.

        Tokens issued before a password change stay valid until they expire.
        """
        if login is None and password is None:
            raise ValidationFailedError("Nothing to update: provide login and/or password")
        credential = self.get(user_id)
        new_login = login if login is not None else credential.login
        if new_login != credential.login:
            other = self.credentials.get_by_login(new_login)
            if other is not None and other.user_id != user_id:
                raise ConflictError("Login already taken")
        new_hash = (
            hash_password(password, rounds=self.bcrypt_rounds)
            if password is not None
            else credential.password
        )
        try:
            updated = self.credentials.update(user_id, login=new_login, password_hash=new_hash)
        except IntegrityError as e:
            self.credentials.session.rollback()
            raise ConflictError("Login already taken") from e
        if updated is None:
            raise NotFoundError("Credentials not found")
        logger.info(
            "Updated credentials for user_id=%s (login_changed=%s, password_changed=%s)",
            user_id,
            login is not None,
            password is not None,
        )
        return updated
