"""Role service: CRUD over roles and resolution of the default signup role."""

import logging

from user_service.models import Role
from user_service.repositories import RoleStore
from user_service.schemas.role import RoleCreate, RoleUpdate
from user_service.services.exceptions import DefaultRoleNotFoundError, RoleInUseError
from user_service.services.validation import require_positive_id

logger = logging.getLogger(__name__)


class RoleService:
    """Stateless operations over the role store. Safe to share if the store's session is."""

    def __init__(self, store: RoleStore, default_role_name: str) -> None:
        self.store = store
        self.default_role_name = default_role_name

    def save_role(self, role: RoleCreate) -> Role:
        """
        Persist a new role.

        Raises ConstraintViolationError if role_name is taken; the store decides, there is no pre-check.
        """
        created = self.store.save(Role(role_name=role.role_name))
        logger.info("Created role role_id=%s role_name=%s", created.role_id, created.role_name)
        return created

    def get_role_by_id(self, role_id: int) -> Role | None:
        require_positive_id(role_id, "role_id")
        return self.store.get(role_id)

    def get_all_roles(self) -> list[Role]:
        return self.store.list_all()

    def delete_role_by_id(self, role_id: int) -> bool:
        """
        Delete a role. Returns False if it does not exist.

        Raises RoleInUseError while any user still references the role.
        """
        require_positive_id(role_id, "role_id")
        role = self.store.get(role_id)
        if role is None:
            return False
        user_count = self.store.count_users(role_id)
        if user_count:
            logger.warning(
                "Refusing to delete role_id=%s: referenced by %s user(s)", role_id, user_count
            )
            raise RoleInUseError(role_id, user_count)
        self.store.delete(role)
        logger.info("Deleted role role_id=%s", role_id)
        return True

    def update_role_by_id(self, role_id: int, patch: RoleUpdate) -> Role | None:
        """Overwrite role_name from patch. Returns None if the role does not exist."""
        require_positive_id(role_id, "role_id")
        role = self.store.get(role_id)
        if role is None:
            return None
        role.role_name = patch.role_name
        updated = self.store.save(role)
        logger.info("Updated role role_id=%s role_name=%s", role_id, updated.role_name)
        return updated

    def get_default_role(self) -> Role:
        """
        Resolve the role new signups receive, by its configured name.

        Raises DefaultRoleNotFoundError when the role is missing; this is a configuration
        fault and signups cannot proceed until an operator creates the role.
        """
        role = self.store.get_by_name(self.default_role_name)
        if role is None:
            logger.critical(
                "Default role '%s' not found; signups are refused until it is created",
                self.default_role_name,
            )
            raise DefaultRoleNotFoundError(self.default_role_name)
        return role
