"""Article endpoints and the comment endpoints nested under an article."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from app.api.v1.auth import optional_auth, require_auth
from app.api.v1.deps import Pagination, get_article_service, get_comment_service
from app.schemas.article import ArticleCreate, ArticleRead, ArticleUpdate
from app.schemas.auth import Claims
from app.schemas.comment import CommentCreate, CommentRead
from app.services.articles import ArticleService
from app.services.comments import CommentService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=list[ArticleRead])
def list_articles(
    articles: Annotated[ArticleService, Depends(get_article_service)],
    page: Annotated[Pagination, Depends()],
    claims: Annotated[Claims | None, Depends(optional_auth)],
) -> list[ArticleRead]:
    """Newest articles first, with author name and comment rating stats."""
    if claims is not None:
        logger.debug("article list read by user_id=%s", claims.user_id)
    return articles.list_articles(limit=page.limit, offset=page.offset)


@router.get("/{article_id}", response_model=ArticleRead)
def get_article(
    article_id: int,
    articles: Annotated[ArticleService, Depends(get_article_service)],
    claims: Annotated[Claims | None, Depends(optional_auth)],
) -> ArticleRead:
    article = articles.get_article(article_id)
    if claims is not None:
        logger.debug("article_id=%s read by user_id=%s", article_id, claims.user_id)
    return article


@router.post("", response_model=ArticleRead, status_code=status.HTTP_201_CREATED)
def create_article(
    body: ArticleCreate,
    articles: Annotated[ArticleService, Depends(get_article_service)],
    claims: Annotated[Claims, Depends(require_auth)],
) -> ArticleRead:
    """Create an article authored by the caller."""
    return articles.create_article(
        title=body.title, content=body.content, author_id=claims.user_id
    )


@router.put("/{article_id}", response_model=ArticleRead)
def update_article(
    article_id: int,
    body: ArticleUpdate,
    articles: Annotated[ArticleService, Depends(get_article_service)],
    claims: Annotated[Claims, Depends(require_auth)],
) -> ArticleRead:
    """Update an article. Author or admin only (404 if missing, 403 if not allowed)."""
    return articles.update_article(
        article_id, title=body.title, content=body.content, claims=claims
    )


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_article(
    article_id: int,
    articles: Annotated[ArticleService, Depends(get_article_service)],
    claims: Annotated[Claims, Depends(require_auth)],
) -> Response:
    """Delete an article and its comments. Author or admin only."""
    articles.delete_article(article_id, claims=claims)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{article_id}/comments", response_model=list[CommentRead])
def list_comments(
    article_id: int,
    comments: Annotated[CommentService, Depends(get_comment_service)],
    page: Annotated[Pagination, Depends()],
    _claims: Annotated[Claims | None, Depends(optional_auth)],
) -> list[CommentRead]:
    items = comments.list_by_article(article_id, limit=page.limit, offset=page.offset)
    return [CommentRead.model_validate(c) for c in items]


@router.post(
    "/{article_id}/comments",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
)
def create_comment(
    article_id: int,
    body: CommentCreate,
    comments: Annotated[CommentService, Depends(get_comment_service)],
    claims: Annotated[Claims, Depends(require_auth)],
) -> CommentRead:
    comment = comments.create(
        article_id, user_id=claims.user_id, text=body.text, rating=body.rating
    )
    return CommentRead.model_validate(comment)
