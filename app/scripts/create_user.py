"""
Create a user with login credentials (e.g. the first admin). Run from project root:
  python -m app.scripts.create_user EMAIL NAME LOGIN PASSWORD [role]
Example:
  python -m app.scripts.create_user admin@example.com "Site Admin" admin your-secure-password admin
"""
import argparse
import logging
import sys

from pydantic import ValidationError

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.core.errors import ServiceError
from app.core.roles import RoleName
from app.repositories import CredentialRepository, RoleRepository, UserRepository
from app.schemas.auth import LoginRequest
from app.schemas.user import UserCreate
from app.services.credentials import CredentialService
from app.services.users import UserService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Quill user with login credentials.")
    parser.add_argument("email", help="Unique email address")
    parser.add_argument("name", help="Display name (2-100 chars)")
    parser.add_argument("login", help="Login name (3-255 chars)")
    parser.add_argument("password", help="Password (1-128 chars)")
    parser.add_argument(
        "role",
        nargs="?",
        default=RoleName.USER.value,
        choices=[r.value for r in RoleName],
    )
    args = parser.parse_args(argv)

    try:
        profile = UserCreate(email=args.email.strip(), name=args.name.strip())
        login = LoginRequest(login=args.login.strip(), password=args.password)
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            print(f"{field}: {error['msg']}", file=sys.stderr)
        return 1

    settings = get_settings()
    db = SessionLocal()
    try:
        user_repo = UserRepository(db)
        credential_repo = CredentialRepository(db)
        if credential_repo.get_by_login(login.login) is not None:
            print(f"Login '{login.login}' is already taken.", file=sys.stderr)
            return 1

        users = UserService(user_repo, RoleRepository(db))
        credentials = CredentialService(
            credential_repo, user_repo, bcrypt_rounds=settings.BCRYPT_ROUNDS
        )
        user = users.create_user(
            email=str(profile.email), name=profile.name, role=RoleName(args.role)
        )
        try:
            credentials.create(user.id, login=login.login, password=login.password)
        except Exception:
            # The user and its credentials are created together or not at all.
            user_repo.delete(user)
            raise
        print(f"Created user '{login.login}' (id={user.id}) with role '{args.role}'.")
        return 0
    except ServiceError as e:
        print(e.message, file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("User creation failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
