"""Request/response schemas for articles."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 255
CONTENT_MIN_LENGTH = 10


class ArticleCreate(BaseModel):
    """Request body for POST /articles. The author is the authenticated caller."""

    title: str = Field(..., min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH)
    content: str = Field(..., min_length=CONTENT_MIN_LENGTH)


class ArticleUpdate(BaseModel):
    """Request body for PUT /articles/{id}; omitted fields are left unchanged."""

    title: str | None = Field(default=None, min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH)
    content: str | None = Field(default=None, min_length=CONTENT_MIN_LENGTH)


class ArticleRead(BaseModel):
    """
    Article as returned by the API.

    author_name is filled on list views; rating_avg/rating_count aggregate the
    article's comment ratings (0 when there are no comments).
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    author_id: int
    author_name: str | None = None
    rating_avg: float = 0.0
    rating_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
