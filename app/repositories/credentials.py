"""Credential persistence (auth_credentials). Callers pass already-hashed passwords."""

from sqlalchemy.orm import Session

from app.models import Credential


class CredentialRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_login(self, login: str) -> Credential | None:
        return self.session.query(Credential).filter(Credential.login == login).first()

    def get_by_user_id(self, user_id: int) -> Credential | None:
        return self.session.query(Credential).filter(Credential.user_id == user_id).first()

    def create(self, user_id: int, login: str, password_hash: str) -> Credential:
        credential = Credential(user_id=user_id, login=login, password=password_hash)
        self.session.add(credential)
        self.session.commit()
        self.session.refresh(credential)
        return credential

    def update(self, user_id: int, login: str, password_hash: str) -> Credential | None:
        """Replace login and hash for the user's credential; None if the user has none."""
        credential = self.get_by_user_id(user_id)
        if credential is None:
            return None
        credential.login = login
        credential.password = password_hash
        self.session.commit()
        self.session.refresh(credential)
        return credential
