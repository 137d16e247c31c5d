"""Schemas for users and roles."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

NAME_MIN_LEN = 2
NAME_MAX_LEN = 100


class RoleRead(BaseModel):
    """Role entry (admin listing and embedded in users)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None


class RolesListResponse(BaseModel):
    roles: list[RoleRead]


class UserCreate(BaseModel):
    """Request body for POST /users. New users always get the 'user' role."""

    email: EmailStr = Field(..., description="Unique email address")
    name: str = Field(..., min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN, description="Display name")


class UserRead(BaseModel):
    """User as returned by the API (credentials are never included)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str
    role: RoleRead | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UsersListResponse(BaseModel):
    """Response for GET /admin/users (admin only)."""

    users: list[UserRead]
