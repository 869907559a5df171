"""Durable storage for Role records."""

from sqlalchemy import func, select

from user_service.models import Role, User
from user_service.repositories.base import BaseStore


class RoleStore(BaseStore):
    """Queries and writes for the roles table."""

    def get(self, role_id: int) -> Role | None:
        return self.session.get(Role, role_id)

    def get_by_name(self, role_name: str) -> Role | None:
        return self.session.scalars(
            select(Role).where(Role.role_name == role_name)
        ).first()

    def list_all(self) -> list[Role]:
        return list(self.session.scalars(select(Role).order_by(Role.role_id)))

    def count_users(self, role_id: int) -> int:
        """Number of users currently referencing role_id."""
        return self.session.scalar(
            select(func.count()).select_from(User).where(User.role_id == role_id)
        ) or 0
