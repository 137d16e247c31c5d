"""ORM model for login credentials (one per user)."""

from sqlalchemy import Column, ForeignKey, Integer, String

from app.models.base import Base, TimestampMixin


class Credential(TimestampMixin, Base):
    """
    Login name plus bcrypt password hash bound to exactly one user.

    password holds the hash only and is never serialized in responses.
    """

    __tablename__ = "auth_credentials"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )
    login = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
