"""Durable storage for User records."""

from sqlalchemy import exists, select

from user_service.models import User
from user_service.repositories.base import BaseStore


class UserStore(BaseStore):
    """Queries and writes for the users table."""

    def get(self, user_id: int) -> User | None:
        return self.session.get(User, user_id)

    def get_by_username(self, username: str) -> User | None:
        return self.session.scalars(
            select(User).where(User.username == username)
        ).first()

    def get_by_email(self, email: str) -> User | None:
        return self.session.scalars(select(User).where(User.email == email)).first()

    def list_all(self) -> list[User]:
        return list(self.session.scalars(select(User).order_by(User.user_id)))

    def exists_by_username(self, username: str) -> bool:
        return bool(
            self.session.scalar(select(exists().where(User.username == username)))
        )

    def exists_by_email(self, email: str) -> bool:
        return bool(self.session.scalar(select(exists().where(User.email == email))))
