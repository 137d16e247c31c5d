"""
Ownership policy for mutating owned resources (articles, comments).

A mutation is allowed for an admin or for the resource's owner. Resources are
always loaded first: a missing resource is NotFoundError before ownership is
considered, and a foreign one is AccessDeniedError. New owned resource types
must go through load_owned rather than re-implementing the check.
"""

from collections.abc import Callable
from typing import TypeVar

from app.core.errors import AccessDeniedError, NotFoundError
from app.core.roles import RoleName
from app.schemas.auth import Claims

T = TypeVar("T")


def can_modify(requester_id: int, requester_role: RoleName, owner_user_id: int) -> bool:
    """True when the requester is an admin or owns the resource."""
    return requester_role == RoleName.ADMIN or requester_id == owner_user_id


def ensure_can_modify(claims: Claims, owner_user_id: int) -> None:
    """Raise AccessDeniedError unless claims may modify a resource owned by owner_user_id."""
    if not can_modify(claims.user_id, claims.role, owner_user_id):
        raise AccessDeniedError()


def load_owned(
    load: Callable[[int], T | None],
    resource_id: int,
    claims: Claims,
    owner_of: Callable[[T], int],
    resource: str = "Resource",
) -> T:
    """Load a resource by id, then check the requester may modify it."""
    item = load(resource_id)
    if item is None:
        raise NotFoundError(f"{resource} not found")
    ensure_can_modify(claims, owner_of(item))
    return item
