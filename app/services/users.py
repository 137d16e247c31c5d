"""User registration and lookup."""

import logging

from sqlalchemy.exc import IntegrityError

from app.core.errors import ConflictError, NotFoundError
from app.core.roles import RoleName
from app.models import Role, User
from app.repositories import RoleRepository, UserRepository

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, users: UserRepository, roles: RoleRepository) -> None:
        self.users = users
        self.roles = roles

    def create_user(self, email: str, name: str, role: RoleName = RoleName.USER) -> User:
        """Create a user with the given role (default 'user'). Email must be unused."""
        if self.users.get_by_email(email) is not None:
            raise ConflictError(f"User with email {email} already exists")
        role_row = self.get_role_by_name(role)
        try:
            user = self.users.create(email=email, name=name, role_id=role_row.id)
        except IntegrityError as e:
            self.users.session.rollback()
            raise ConflictError(f"User with email {email} already exists") from e
        logger.info("Created user_id=%s with role %s", user.id, role_row.name)
        return user

    def get_user(self, user_id: int) -> User:
        user = self.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def list_users(self, limit: int, offset: int) -> list[User]:
        return self.users.list_page(limit=limit, offset=offset)

    def get_role_by_name(self, name: RoleName) -> Role:
        role = self.roles.get_by_name(RoleName(name).value)
        if role is None:
            # Roles are seeded by migration; a missing one means the schema is not initialised.
            raise RuntimeError(f"Role '{RoleName(name).value}' is missing; run migrations")
        return role

    def get_role(self, role_id: int) -> Role:
        role = self.roles.get_by_id(role_id)
        if role is None:
            raise NotFoundError("Role not found")
        return role

    def list_roles(self) -> list[Role]:
        return self.roles.list_all()
