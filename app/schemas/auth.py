"""Request/response schemas for auth endpoints and decoded token claims."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.core.roles import RoleName
from app.schemas.user import UserRead

LOGIN_MIN_LEN = 3
LOGIN_MAX_LEN = 255
PASSWORD_MIN_LEN = 1
PASSWORD_MAX_LEN = 128


class Claims(BaseModel):
    """Identity carried by a verified access token; lives for one request only."""

    model_config = ConfigDict(frozen=True)

    user_id: int
    email: str
    role: RoleName
    issued_at: datetime
    expires_at: datetime

    @property
    def is_admin(self) -> bool:
        return self.role == RoleName.ADMIN


class LoginRequest(BaseModel):
    """Credentials for login."""

    login: str = Field(..., min_length=LOGIN_MIN_LEN, max_length=LOGIN_MAX_LEN, description="Login name")
    password: str = Field(
        ..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN, description="Password"
    )


class TokenResponse(BaseModel):
    """JWT access token and the authenticated user, returned after successful login."""

    token: str = Field(..., description="JWT access token; send as Authorization: Bearer <token>")
    token_type: str = Field(default="bearer", description="Token type")
    user: UserRead


class ProfileResponse(BaseModel):
    """Identity of the caller as read from the token (no database lookup)."""

    id: int
    email: str
    role: RoleName
    expires_at: datetime
