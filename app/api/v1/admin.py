"""Admin-only endpoints. The whole router is mounted behind require_admin."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.v1.auth import get_claims
from app.api.v1.deps import Pagination, get_credential_service, get_user_service
from app.schemas.auth import Claims
from app.schemas.credentials import CredentialsCreate, CredentialsRead, CredentialsUpdate
from app.schemas.user import RoleRead, RolesListResponse, UserRead, UsersListResponse
from app.services.credentials import CredentialService
from app.services.users import UserService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/users", response_model=UsersListResponse)
def list_users(
    users: Annotated[UserService, Depends(get_user_service)],
    page: Annotated[Pagination, Depends()],
) -> UsersListResponse:
    """List users, newest first."""
    items = users.list_users(limit=page.limit, offset=page.offset)
    return UsersListResponse(users=[UserRead.model_validate(u) for u in items])


@router.get("/roles", response_model=RolesListResponse)
def list_roles(users: Annotated[UserService, Depends(get_user_service)]) -> RolesListResponse:
    return RolesListResponse(roles=[RoleRead.model_validate(r) for r in users.list_roles()])


@router.get("/roles/{role_id}", response_model=RoleRead)
def get_role(
    role_id: int,
    users: Annotated[UserService, Depends(get_user_service)],
) -> RoleRead:
    return RoleRead.model_validate(users.get_role(role_id))


@router.post(
    "/credentials",
    response_model=CredentialsRead,
    status_code=status.HTTP_201_CREATED,
)
def create_credentials(
    body: CredentialsCreate,
    credentials: Annotated[CredentialService, Depends(get_credential_service)],
    claims: Annotated[Claims, Depends(get_claims)],
) -> CredentialsRead:
    """Create login credentials for a user. The password is stored hashed and never returned."""
    credential = credentials.create(body.user_id, login=body.login, password=body.password)
    logger.info("Admin user_id=%s created credentials for user_id=%s", claims.user_id, body.user_id)
    return CredentialsRead.model_validate(credential)


@router.get("/credentials/{user_id}", response_model=CredentialsRead)
def get_credentials(
    user_id: int,
    credentials: Annotated[CredentialService, Depends(get_credential_service)],
) -> CredentialsRead:
    return CredentialsRead.model_validate(credentials.get(user_id))


@router.put("/credentials/{user_id}", response_model=CredentialsRead)
def update_credentials(
    user_id: int,
    body: CredentialsUpdate,
    credentials: Annotated[CredentialService, Depends(get_credential_service)],
    claims: Annotated[Claims, Depends(get_claims)],
) -> CredentialsRead:
    """Change login and/or password (rehashed). Existing tokens stay valid until expiry."""
    credential = credentials.update(user_id, login=body.login, password=body.password)
    logger.info("Admin user_id=%s updated credentials for user_id=%s", claims.user_id, user_id)
    return CredentialsRead.model_validate(credential)
