"""User persistence. Users are always loaded with their role."""

from sqlalchemy.orm import Session

from app.models import User


class UserRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_id(self, user_id: int) -> User | None:
        return self.session.query(User).filter(User.id == user_id).first()

    def get_by_email(self, email: str) -> User | None:
        return self.session.query(User).filter(User.email == email).first()

    def create(self, email: str, name: str, role_id: int) -> User:
        user = User(email=email, name=name, role_id=role_id)
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def list_page(self, limit: int, offset: int) -> list[User]:
        return (
            self.session.query(User)
            .order_by(User.created_at.desc(), User.id.desc())
            .limit(limit)
            .offset(offset)
            .all()
        )

    def delete(self, user: User) -> None:
        self.session.delete(user)
        self.session.commit()
