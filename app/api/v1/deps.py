"""Request-scoped service construction and shared query parameters."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.database import get_db
from app.core.security import TokenCodec
from app.repositories import (
    ArticleRepository,
    CommentRepository,
    CredentialRepository,
    RoleRepository,
    UserRepository,
)
from app.services.articles import ArticleService
from app.services.auth import Authenticator
from app.services.comments import CommentService
from app.services.credentials import CredentialService
from app.services.users import UserService


@lru_cache
def get_token_codec() -> TokenCodec:
    """Process-wide codec; the signing secret is read once from settings."""
    settings = get_settings()
    return TokenCodec(
        secret=settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
        expire_minutes=settings.JWT_EXPIRE_MINUTES,
    )


def get_authenticator(
    db: Annotated[Session, Depends(get_db)],
    codec: Annotated[TokenCodec, Depends(get_token_codec)],
) -> Authenticator:
    return Authenticator(
        CredentialRepository(db),
        UserRepository(db),
        codec,
        bcrypt_rounds=get_settings().BCRYPT_ROUNDS,
    )


def get_user_service(db: Annotated[Session, Depends(get_db)]) -> UserService:
    return UserService(UserRepository(db), RoleRepository(db))


def get_credential_service(db: Annotated[Session, Depends(get_db)]) -> CredentialService:
    return CredentialService(
        CredentialRepository(db),
        UserRepository(db),
        bcrypt_rounds=get_settings().BCRYPT_ROUNDS,
    )


def get_article_service(db: Annotated[Session, Depends(get_db)]) -> ArticleService:
    return ArticleService(ArticleRepository(db), UserRepository(db), CommentRepository(db))


def get_comment_service(db: Annotated[Session, Depends(get_db)]) -> CommentService:
    return CommentService(CommentRepository(db), ArticleRepository(db))


class Pagination:
    """?limit=&offset= with limit defaulting to DEFAULT_PAGE_SIZE and capped at MAX_PAGE_SIZE."""

    def __init__(
        self,
        limit: Annotated[int | None, Query(ge=1)] = None,
        offset: Annotated[int, Query(ge=0)] = 0,
    ) -> None:
        settings = get_settings()
        self.limit = min(limit or settings.DEFAULT_PAGE_SIZE, settings.MAX_PAGE_SIZE)
        self.offset = offset
