"""API v1 routes."""

from fastapi import APIRouter, Depends

from app.api.v1 import admin, articles, auth, comments, health, users
from app.api.v1.auth import require_admin

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(articles.router, prefix="/articles", tags=["articles"])
router.include_router(comments.router, prefix="/comments", tags=["comments"])
router.include_router(
    admin.router,
    prefix="/admin",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)
