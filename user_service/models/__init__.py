"""SQLAlchemy ORM models."""

from user_service.models.base import Base
from user_service.models.role import Role
from user_service.models.user import User

__all__ = ["Base", "Role", "User"]
