"""Role lookups. Roles are a small static set seeded by migration."""

from sqlalchemy.orm import Session

from app.models import Role


class RoleRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_id(self, role_id: int) -> Role | None:
        return self.session.query(Role).filter(Role.id == role_id).first()

    def get_by_name(self, name: str) -> Role | None:
        return self.session.query(Role).filter(Role.name == name).first()

    def list_all(self) -> list[Role]:
        return self.session.query(Role).order_by(Role.name).all()
