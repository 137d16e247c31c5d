"""Request/response schemas for article comments."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

RATING_MIN = 1
RATING_MAX = 5


class CommentCreate(BaseModel):
    text: str = Field(..., min_length=1, max_length=10_000)
    rating: int = Field(..., ge=RATING_MIN, le=RATING_MAX, description="Rating 1-5")


class CommentUpdate(BaseModel):
    """Omitted fields are left unchanged."""

    text: str | None = Field(default=None, min_length=1, max_length=10_000)
    rating: int | None = Field(default=None, ge=RATING_MIN, le=RATING_MAX)


class CommentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    article_id: int
    user_id: int
    text: str
    rating: int
    created_at: datetime | None = None
    updated_at: datetime | None = None
