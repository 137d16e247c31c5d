"""Schemas for login credentials. Passwords are accepted, never returned."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.auth import LOGIN_MAX_LEN, LOGIN_MIN_LEN, PASSWORD_MAX_LEN, PASSWORD_MIN_LEN


class CredentialsCreate(BaseModel):
    """Request body for POST /admin/credentials."""

    user_id: int = Field(..., ge=1, description="User the credentials belong to")
    login: str = Field(
        ..., min_length=LOGIN_MIN_LEN, max_length=LOGIN_MAX_LEN, description="Unique login name"
    )
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LEN,
        max_length=PASSWORD_MAX_LEN,
        description="Plain password; stored hashed",
    )


class CredentialsUpdate(BaseModel):
    """Request body for PUT /admin/credentials/{user_id}; omitted fields are left unchanged."""

    login: str | None = Field(default=None, min_length=LOGIN_MIN_LEN, max_length=LOGIN_MAX_LEN)
    password: str | None = Field(
        default=None, min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN
    )


class CredentialsRead(BaseModel):
    """Credentials without the password hash."""

    model_config = ConfigDict(from_attributes=True)

    user_id: int
    login: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
