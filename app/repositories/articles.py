"""Article persistence."""

from sqlalchemy.orm import Session

from app.models import Article, User


class ArticleRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, title: str, content: str, author_id: int) -> Article:
        article = Article(title=title, content=content, author_id=author_id)
        self.session.add(article)
        self.session.commit()
        self.session.refresh(article)
        return article

    def get(self, article_id: int) -> Article | None:
        return self.session.query(Article).filter(Article.id == article_id).first()

    def update(self, article: Article, title: str | None, content: str | None) -> Article:
        if title is not None:
            article.title = title
        if content is not None:
            article.content = content
        self.session.commit()
        self.session.refresh(article)
        return article

    def delete(self, article: Article) -> None:
        self.session.delete(article)
        self.session.commit()

    def list_page(self, limit: int, offset: int) -> list[tuple[Article, str | None]]:
        """Newest first, each paired with the author's name (None if the author row is gone)."""
        rows = (
            self.session.query(Article, User.name)
            .outerjoin(User, Article.author_id == User.id)
            .order_by(Article.created_at.desc(), Article.id.desc())
            .limit(limit)
            .offset(offset)
            .all()
        )
        return [(article, author_name) for article, author_name in rows]

    def list_by_author(self, author_id: int, limit: int, offset: int) -> list[Article]:
        return (
            self.session.query(Article)
            .filter(Article.author_id == author_id)
            .order_by(Article.created_at.desc(), Article.id.desc())
            .limit(limit)
            .offset(offset)
            .all()
        )
