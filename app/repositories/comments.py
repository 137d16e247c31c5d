"""Comment persistence and per-article rating aggregates."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models import Comment


class CommentRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, article_id: int, user_id: int, text: str, rating: int) -> Comment:
        comment = Comment(article_id=article_id, user_id=user_id, text=text, rating=rating)
        self.session.add(comment)
        self.session.commit()
        self.session.refresh(comment)
        return comment

    def get(self, comment_id: int) -> Comment | None:
        return self.session.query(Comment).filter(Comment.id == comment_id).first()

    def list_by_article(self, article_id: int, limit: int, offset: int) -> list[Comment]:
        return (
            self.session.query(Comment)
            .filter(Comment.article_id == article_id)
            .order_by(Comment.created_at.desc(), Comment.id.desc())
            .limit(limit)
            .offset(offset)
            .all()
        )

    def update(self, comment: Comment, text: str | None, rating: int | None) -> Comment:
        if text is not None:
            comment.text = text
        if rating is not None:
            comment.rating = rating
        self.session.commit()
        self.session.refresh(comment)
        return comment

    def delete(self, comment: Comment) -> None:
        self.session.delete(comment)
        self.session.commit()

    def rating_stats(self, article_id: int) -> tuple[float, int]:
        """Return (average rating, comment count); (0.0, 0) when there are no comments."""
        avg, count = (
            self.session.query(func.avg(Comment.rating), func.count(Comment.id))
            .filter(Comment.article_id == article_id)
            .one()
        )
        return (float(avg or 0.0), int(count or 0))

    def rating_stats_for(self, article_ids: list[int]) -> dict[int, tuple[float, int]]:
        """Rating stats for many articles in one query; articles without comments are absent."""
        if not article_ids:
            return {}
        rows = (
            self.session.query(
                Comment.article_id,
                func.avg(Comment.rating),
                func.count(Comment.id),
            )
            .filter(Comment.article_id.in_(article_ids))
            .group_by(Comment.article_id)
            .all()
        )
        return {article_id: (float(avg or 0.0), int(count)) for article_id, avg, count in rows}
