"""SQLAlchemy ORM models."""

from app.models.article import Article
from app.models.base import Base
from app.models.comment import Comment
from app.models.credential import Credential
from app.models.role import Role
from app.models.user import User

__all__ = ["Article", "Base", "Comment", "Credential", "Role", "User"]
