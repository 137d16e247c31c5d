"""ORM model for article comments."""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Text

from app.models.base import Base, TimestampMixin


class Comment(TimestampMixin, Base):
    """Comment with a 1-5 rating, owned by user_id."""

    __tablename__ = "comments"
    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_comments_rating_range"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    article_id = Column(
        Integer,
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    text = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False)
