"""User registration, lookup, and per-author article listing."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.v1.auth import optional_auth, require_auth
from app.api.v1.deps import Pagination, get_article_service, get_user_service
from app.schemas.article import ArticleRead
from app.schemas.auth import Claims
from app.schemas.user import UserCreate, UserRead
from app.services.articles import ArticleService
from app.services.users import UserService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(
    body: UserCreate,
    users: Annotated[UserService, Depends(get_user_service)],
) -> UserRead:
    """Register a user with the default 'user' role. Credentials are created separately by an admin."""
    user = users.create_user(email=str(body.email), name=body.name)
    return UserRead.model_validate(user)


@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: int,
    users: Annotated[UserService, Depends(get_user_service)],
    _claims: Annotated[Claims, Depends(require_auth)],
) -> UserRead:
    return UserRead.model_validate(users.get_user(user_id))


@router.get("/{author_id}/articles", response_model=list[ArticleRead])
def get_user_articles(
    author_id: int,
    articles: Annotated[ArticleService, Depends(get_article_service)],
    page: Annotated[Pagination, Depends()],
    claims: Annotated[Claims | None, Depends(optional_auth)],
) -> list[ArticleRead]:
    """Articles written by author_id, newest first."""
    if claims is not None:
        logger.debug("articles of author_id=%s read by user_id=%s", author_id, claims.user_id)
    return articles.list_by_author(author_id, limit=page.limit, offset=page.offset)
