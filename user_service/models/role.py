"""ORM model for roles assigned to users."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from user_service.models.base import Base


class Role(Base):
    """
    Named role referenced by users (many users to one role).

    role_name is unique across all roles; role_id is assigned by the database.
    """

    __tablename__ = "roles"

    role_id = Column(Integer, primary_key=True, autoincrement=True)
    role_name = Column(String(255), nullable=False, unique=True, index=True)

    users = relationship("User", back_populates="role", passive_deletes="all")

    def __repr__(self) -> str:
        return f"Role(role_id={self.role_id!r}, role_name={self.role_name!r})"
