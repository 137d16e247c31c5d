"""Pydantic request/response schemas."""

from app.schemas.article import ArticleCreate, ArticleRead, ArticleUpdate
from app.schemas.auth import Claims, LoginRequest, ProfileResponse, TokenResponse
from app.schemas.comment import CommentCreate, CommentRead, CommentUpdate
from app.schemas.credentials import CredentialsCreate, CredentialsRead, CredentialsUpdate
from app.schemas.health import HealthResponse
from app.schemas.user import (
    RoleRead,
    RolesListResponse,
    UserCreate,
    UserRead,
    UsersListResponse,
)

__all__ = [
    "ArticleCreate",
    "ArticleRead",
    "ArticleUpdate",
    "Claims",
    "CommentCreate",
    "CommentRead",
    "CommentUpdate",
    "CredentialsCreate",
    "CredentialsRead",
    "CredentialsUpdate",
    "HealthResponse",
    "LoginRequest",
    "ProfileResponse",
    "RoleRead",
    "RolesListResponse",
    "TokenResponse",
    "UserCreate",
    "UserRead",
    "UsersListResponse",
]
