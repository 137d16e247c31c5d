"""Article CRUD with the ownership policy applied to updates and deletes."""

import logging

from app.core.errors import NotFoundError, ValidationFailedError
from app.models import Article
from app.repositories import ArticleRepository, CommentRepository, UserRepository
from app.schemas.article import ArticleRead
from app.schemas.auth import Claims
from app.services.policy import load_owned

logger = logging.getLogger(__name__)


def _to_read(
    article: Article,
    author_name: str | None = None,
    stats: tuple[float, int] = (0.0, 0),
) -> ArticleRead:
    return ArticleRead(
        id=article.id,
        title=article.title,
        content=article.content,
        author_id=article.author_id,
        author_name=author_name,
        rating_avg=stats[0],
        rating_count=stats[1],
        created_at=article.created_at,
        updated_at=article.updated_at,
    )


class ArticleService:
    def __init__(
        self,
        articles: ArticleRepository,
        users: UserRepository,
        comments: CommentRepository | None = None,
    ) -> None:
        self.articles = articles
        self.users = users
        self.comments = comments

    def _stats(self, article_id: int) -> tuple[float, int]:
        if self.comments is None:
            return (0.0, 0)
        return self.comments.rating_stats(article_id)

    def create_article(self, title: str, content: str, author_id: int) -> ArticleRead:
        author = self.users.get_by_id(author_id)
        if author is None:
            raise NotFoundError("Author not found")
        article = self.articles.create(title=title, content=content, author_id=author_id)
        logger.info("Created article_id=%s by user_id=%s", article.id, author_id)
        return _to_read(article, author_name=author.name)

    def get_article(self, article_id: int) -> ArticleRead:
        article = self.articles.get(article_id)
        if article is None:
            raise NotFoundError("Article not found")
        author_name = article.author.name if article.author is not None else None
        return _to_read(article, author_name=author_name, stats=self._stats(article_id))

    def update_article(
        self,
        article_id: int,
        title: str | None,
        content: str | None,
        claims: Claims,
    ) -> ArticleRead:
        """Update title and/or content. Owner or admin only; 404 before 403."""
        article = load_owned(
            self.articles.get,
            article_id,
            claims,
            owner_of=lambda a: a.author_id,
            resource="Article",
        )
        if title is None and content is None:
            raise ValidationFailedError("Nothing to update: provide title and/or content")
        article = self.articles.update(article, title=title, content=content)
        logger.info("Updated article_id=%s by user_id=%s", article_id, claims.user_id)
        author_name = article.author.name if article.author is not None else None
        return _to_read(article, author_name=author_name, stats=self._stats(article_id))

    def delete_article(self, article_id: int, claims: Claims) -> None:
        """Delete an article (and its comments). Owner or admin only; 404 before 403."""
        article = load_owned(
            self.articles.get,
            article_id,
            claims,
            owner_of=lambda a: a.author_id,
            resource="Article",
        )
        author_id = article.author_id
        self.articles.delete(article)
        logger.info(
            "Deleted article_id=%s (author_id=%s) by user_id=%s role=%s",
            article_id,
            author_id,
            claims.user_id,
            claims.role.value,
        )

    def list_articles(self, limit: int, offset: int) -> list[ArticleRead]:
        rows = self.articles.list_page(limit=limit, offset=offset)
        stats_by_id: dict[int, tuple[float, int]] = {}
        if self.comments is not None and rows:
            stats_by_id = self.comments.rating_stats_for([a.id for a, _ in rows])
        return [
            _to_read(article, author_name=name, stats=stats_by_id.get(article.id, (0.0, 0)))
            for article, name in rows
        ]

    def list_by_author(self, author_id: int, limit: int, offset: int) -> list[ArticleRead]:
        articles = self.articles.list_by_author(author_id, limit=limit, offset=offset)
        return [_to_read(a) for a in articles]
