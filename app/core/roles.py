"""Closed set of role names shared by tokens, guards and the ownership policy."""

from enum import Enum


class RoleName(str, Enum):
    """Role names as stored in roles.name and carried in the token's role claim."""

    USER = "user"
    ADMIN = "admin"
