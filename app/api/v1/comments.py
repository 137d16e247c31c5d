"""Comment mutation endpoints (owner or admin)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from app.api.v1.auth import require_auth
from app.api.v1.deps import get_comment_service
from app.schemas.auth import Claims
from app.schemas.comment import CommentRead, CommentUpdate
from app.services.comments import CommentService

router = APIRouter()


@router.put("/{comment_id}", response_model=CommentRead)
def update_comment(
    comment_id: int,
    body: CommentUpdate,
    comments: Annotated[CommentService, Depends(get_comment_service)],
    claims: Annotated[Claims, Depends(require_auth)],
) -> CommentRead:
    comment = comments.update(comment_id, text=body.text, rating=body.rating, claims=claims)
    return CommentRead.model_validate(comment)


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_comment(
    comment_id: int,
    comments: Annotated[CommentService, Depends(get_comment_service)],
    claims: Annotated[Claims, Depends(require_auth)],
) -> Response:
    comments.delete(comment_id, claims=claims)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
