"""Stores: the only code that talks SQL to the roles and users tables."""

from user_service.repositories.role_store import RoleStore
from user_service.repositories.user_store import UserStore

__all__ = ["RoleStore", "UserStore"]
