"""Shared test helpers: in-memory SQLite database, seeded roles, and a fixed-secret token codec."""

from datetime import UTC, datetime, timedelta

from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.roles import RoleName
from app.core.security import TokenCodec, hash_password
from app.models import Base, Credential, Role, User
from app.schemas.auth import Claims

TEST_SECRET = "test-secret-key-with-at-least-32-bytes!!"
OTHER_SECRET = "another-secret-key-with-at-least-32-bytes"

# Minimum bcrypt cost keeps tests fast.
TEST_BCRYPT_ROUNDS = 4


def make_codec(secret: str = TEST_SECRET, expire_minutes: int = 1440) -> TokenCodec:
    return TokenCodec(secret=secret, algorithm="HS256", expire_minutes=expire_minutes)


def make_claims(user_id: int, role: RoleName = RoleName.USER) -> Claims:
    now = datetime.now(UTC)
    return Claims(
        user_id=user_id,
        email=f"user{user_id}@example.com",
        role=role,
        issued_at=now,
        expires_at=now + timedelta(hours=24),
    )


def make_session_factory() -> sessionmaker:
    """Fresh in-memory SQLite schema shared across threads (TestClient runs handlers in a pool)."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    with factory() as session:
        session.add_all(
            [
                Role(name="user", description="Regular user"),
                Role(name="admin", description="Administrator"),
            ]
        )
        session.commit()
    return factory


def add_user(
    session: Session,
    email: str,
    name: str = "Test User",
    role: str = "user",
    login: str | None = None,
    password: str | None = None,
) -> User:
    """Insert a user (and optionally credentials) directly, bypassing services."""
    role_row = session.query(Role).filter(Role.name == role).one()
    user = User(email=email, name=name, role_id=role_row.id)
    session.add(user)
    session.commit()
    if login is not None and password is not None:
        session.add(
            Credential(
                user_id=user.id,
                login=login,
                password=hash_password(password, rounds=TEST_BCRYPT_ROUNDS),
            )
        )
        session.commit()
    session.refresh(user)
    return user
