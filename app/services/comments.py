"""Comments on articles, under the same ownership policy as articles."""

import logging

from app.core.errors import NotFoundError, ValidationFailedError
from app.models import Comment
from app.repositories import ArticleRepository, CommentRepository
from app.schemas.auth import Claims
from app.schemas.comment import RATING_MAX, RATING_MIN
from app.services.policy import load_owned

logger = logging.getLogger(__name__)


def _check_rating(rating: int) -> None:
    if not (RATING_MIN <= rating <= RATING_MAX):
        raise ValidationFailedError(f"Rating must be between {RATING_MIN} and {RATING_MAX}")


class CommentService:
    def __init__(self, comments: CommentRepository, articles: ArticleRepository) -> None:
        self.comments = comments
        self.articles = articles

    def create(self, article_id: int, user_id: int, text: str, rating: int) -> Comment:
        if not text:
            raise ValidationFailedError("Comment text must not be empty")
        _check_rating(rating)
        if self.articles.get(article_id) is None:
            raise NotFoundError("Article not found")
        comment = self.comments.create(
            article_id=article_id, user_id=user_id, text=text, rating=rating
        )
        logger.info("Created comment_id=%s on article_id=%s", comment.id, article_id)
        return comment

    def list_by_article(self, article_id: int, limit: int, offset: int) -> list[Comment]:
        if self.articles.get(article_id) is None:
            raise NotFoundError("Article not found")
        return self.comments.list_by_article(article_id, limit=limit, offset=offset)

    def update(
        self,
        comment_id: int,
        text: str | None,
        rating: int | None,
        claims: Claims,
    ) -> Comment:
        """Update text and/or rating. Owner or admin only; 404 before 403."""
        if rating is not None:
            _check_rating(rating)
        comment = load_owned(
            self.comments.get,
            comment_id,
            claims,
            owner_of=lambda c: c.user_id,
            resource="Comment",
        )
        if not text and rating is None:
            raise ValidationFailedError("Nothing to update: provide text and/or rating")
        comment = self.comments.update(comment, text=text or None, rating=rating)
        logger.info("Updated comment_id=%s by user_id=%s", comment_id, claims.user_id)
        return comment

    def delete(self, comment_id: int, claims: Claims) -> None:
        comment = load_owned(
            self.comments.get,
            comment_id,
            claims,
            owner_of=lambda c: c.user_id,
            resource="Comment",
        )
        self.comments.delete(comment)
        logger.info("Deleted comment_id=%s by user_id=%s", comment_id, claims.user_id)

    def rating_stats(self, article_id: int) -> tuple[float, int]:
        return self.comments.rating_stats(article_id)
