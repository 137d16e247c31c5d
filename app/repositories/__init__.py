"""SQLAlchemy-backed stores. Getters return None for missing rows; services decide what that means."""

from app.repositories.articles import ArticleRepository
from app.repositories.comments import CommentRepository
from app.repositories.credentials import CredentialRepository
from app.repositories.roles import RoleRepository
from app.repositories.users import UserRepository

__all__ = [
    "ArticleRepository",
    "CommentRepository",
    "CredentialRepository",
    "RoleRepository",
    "UserRepository",
]
