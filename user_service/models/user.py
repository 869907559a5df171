"""ORM model for application users."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from user_service.models.base import Base


class User(Base):
    """
    User account. email is required and unique; username is optional but unique when set.

    Every user references exactly one role; the user does not own the role's lifecycle.
    """

    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    contact_number = Column(String(64), nullable=False)
    state = Column(String(255), nullable=False)
    role_id = Column(
        Integer,
        ForeignKey("roles.role_id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    username = Column(String(255), nullable=True, unique=True, index=True)

    role = relationship("Role", back_populates="users", lazy="joined")

    def __repr__(self) -> str:
        return f"User(user_id={self.user_id!r}, email={self.email!r}, role_id={self.role_id!r})"
