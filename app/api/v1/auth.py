"""Login, profile, and the request-time auth dependencies (require_auth, require_admin, optional_auth)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Header, Request

from app.api.v1.deps import get_authenticator
from app.core.errors import (
    ForbiddenError,
    InvalidTokenError,
    MissingClaimsError,
    UnauthenticatedError,
)
from app.schemas.auth import Claims, LoginRequest, ProfileResponse, TokenResponse
from app.schemas.user import UserRead
from app.services.auth import Authenticator

logger = logging.getLogger(__name__)
router = APIRouter()

BEARER_SCHEME = "Bearer"


def _bearer_token(authorization: str | None) -> str:
    """Extract the token from 'Bearer <token>'; exactly two space-separated parts."""
    if not authorization:
        raise UnauthenticatedError("Authorization header required")
    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != BEARER_SCHEME:
        raise UnauthenticatedError("Invalid authorization header format")
    return parts[1]


def require_auth(
    request: Request,
    authenticator: Annotated[Authenticator, Depends(get_authenticator)],
    authorization: Annotated[str | None, Header()] = None,
) -> Claims:
    """
    Dependency: require a valid Bearer token and return its claims.

    Checks run in order (header present, scheme format, signature/expiry) and the
    first failure raises UnauthenticatedError (401). Claims are also attached to
    request.state for the rest of the request.
    """
    token = _bearer_token(authorization)
    try:
        claims = authenticator.validate_token(token)
    except InvalidTokenError as e:
        logger.info("Rejected token on %s %s", request.method, request.url.path)
        raise UnauthenticatedError("Invalid token") from e
    request.state.claims = claims
    return claims


def require_admin(claims: Annotated[Claims, Depends(require_auth)]) -> Claims:
    """Dependency: require_auth plus role 'admin'. Raises ForbiddenError (403) otherwise."""
    if not claims.is_admin:
        raise ForbiddenError("Admin access required")
    return claims


def optional_auth(
    request: Request,
    authenticator: Annotated[Authenticator, Depends(get_authenticator)],
    authorization: Annotated[str | None, Header()] = None,
) -> Claims | None:
    """Dependency: claims when a well-formed valid Bearer token is sent, else None. Never raises."""
    if not authorization:
        return None
    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != BEARER_SCHEME:
        return None
    try:
        claims = authenticator.validate_token(parts[1])
    except InvalidTokenError:
        return None
    request.state.claims = claims
    return claims


def get_claims(request: Request) -> Claims:
    """
    Claims attached by a router-level auth dependency.

    Missing claims mean the route was mounted without a guard, which is a wiring
    bug (500), not an unauthenticated request.
    """
    claims = getattr(request.state, "claims", None)
    if not isinstance(claims, Claims):
        raise MissingClaimsError()
    return claims


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    authenticator: Annotated[Authenticator, Depends(get_authenticator)],
) -> TokenResponse:
    """
    Authenticate with login and password; returns a JWT access token and the user.
    Include the token in the Authorization header as: Bearer <token>
    """
    user = authenticator.authenticate(body.login, body.password)
    token = authenticator.generate_token(user)
    return TokenResponse(token=token, user=UserRead.model_validate(user))


@router.get("/profile", response_model=ProfileResponse)
def get_profile(claims: Annotated[Claims, Depends(require_auth)]) -> ProfileResponse:
    """Return the caller's identity straight from the token."""
    return ProfileResponse(
        id=claims.user_id,
        email=claims.email,
        role=claims.role,
        expires_at=claims.expires_at,
    )
