"""ORM model for roles (RBAC)."""

from sqlalchemy import Column, Integer, String

from app.models.base import Base, TimestampMixin


class Role(TimestampMixin, Base):
    """
    Named capability class assigned to users.

    name is one of app.core.roles.RoleName ('user' or 'admin'); rows are seeded
    by the initial migration and looked up by name or id.
    """

    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(32), nullable=False, unique=True, index=True)
    description = Column(String(255), nullable=True)
