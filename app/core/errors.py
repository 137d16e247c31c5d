"""Service error taxonomy. Each error is terminal for the request and maps to one HTTP status."""


class ServiceError(Exception):
    """Base for errors raised by services and auth dependencies."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidCredentialsError(ServiceError):
    """Login unknown, user missing, or password mismatch. Never says which."""

    status_code = 401
    default_message = "Invalid credentials"


class InvalidTokenError(ServiceError):
    """Token malformed, signed with another key, or expired."""

    status_code = 401
    default_message = "Invalid token"


class UnauthenticatedError(ServiceError):
    """Missing or malformed Authorization header, or a token that failed verification."""

    status_code = 401
    default_message = "Not authenticated"


class ForbiddenError(ServiceError):
    """Authenticated, but the role is not allowed on this route."""

    status_code = 403
    default_message = "Admin access required"


class AccessDeniedError(ServiceError):
    """Authenticated and the resource exists, but the requester is neither owner nor admin."""

    status_code = 403
    default_message = "Access denied"


class NotFoundError(ServiceError):
    status_code = 404
    default_message = "Not found"


class ConflictError(ServiceError):
    status_code = 409
    default_message = "Already exists"


class ValidationFailedError(ServiceError):
    status_code = 422
    default_message = "Validation failed"


class MissingClaimsError(ServiceError):
    """A handler asked for claims but no auth dependency attached them (wiring bug)."""

    status_code = 500
    default_message = "User context not found"
