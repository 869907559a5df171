"""User service: signup, login check, lookups, partial update and delete."""

import logging

from user_service.core.security import (
    BCRYPT_ROUNDS,
    PASSWORD_MAX_BYTES,
    hash_password,
    password_too_long,
    verify_password,
)
from user_service.models import User
from user_service.repositories import UserStore
from user_service.schemas.user import UserSignup, UserUpdate
from user_service.services.exceptions import InvalidInputError
from user_service.services.role_service import RoleService
from user_service.services.validation import require_positive_id

logger = logging.getLogger(__name__)


class UserService:
    """Operations over the user store; depends on RoleService for the default role."""

    def __init__(
        self,
        store: UserStore,
        role_service: RoleService,
        bcrypt_rounds: int = BCRYPT_ROUNDS,
    ) -> None:
        self.store = store
        self.role_service = role_service
        self.bcrypt_rounds = bcrypt_rounds

    def _hash(self, password: str) -> str:
        """Hash password, raising InvalidInputError if bcrypt could not compare it exactly."""
        if password_too_long(password):
            raise InvalidInputError(
                f"password must be at most {PASSWORD_MAX_BYTES} bytes in UTF-8"
            )
        return hash_password(password, self.bcrypt_rounds)

    def exists_by_username(self, username: str) -> bool:
        """Advisory pre-check; signup_user can still fail on a concurrent insert."""
        return self.store.exists_by_username(username)

    def exists_by_email(self, email: str) -> bool:
        """Advisory pre-check; signup_user can still fail on a concurrent insert."""
        return self.store.exists_by_email(email)

    def signup_user(self, candidate: UserSignup) -> User:
        """
        Create a user with the default role, ignoring any role on candidate.

        Raises DefaultRoleNotFoundError if the default role is missing and
        ConstraintViolationError if email or username is already taken.
        Raises InvalidInputError for passwords over 72 UTF-8 bytes.
        """
        default_role = self.role_service.get_default_role()
        user = User(
            email=candidate.email,
            username=candidate.username,
            password_hash=self._hash(candidate.password),
            contact_number=candidate.contact_number,
            state=candidate.state,
            role_id=default_role.role_id,
        )
        created = self.store.save(user)
        logger.info(
            "Signed up user_id=%s with role_id=%s", created.user_id, created.role_id
        )
        return created

    def authenticate_by_email(self, email: str, password: str) -> User | None:
        """
        Return the user if email exists and password matches, else None.

        Unknown email and wrong password are indistinguishable to the caller.
        """
        user = self.store.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed login for email=%s", email)
            return None
        return user

    def get_user_by_id(self, user_id: int) -> User | None:
        require_positive_id(user_id, "user_id")
        return self.store.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        return self.store.get_by_username(username)

    def get_user_by_email(self, email: str) -> User | None:
        return self.store.get_by_email(email)

    def get_all_users(self) -> list[User]:
        return self.store.list_all()

    def delete_user_by_id(self, user_id: int) -> bool:
        """Delete a user. Returns False if no user has that id."""
        require_positive_id(user_id, "user_id")
        user = self.store.get(user_id)
        if user is None:
            return False
        self.store.delete(user)
        logger.info("Deleted user user_id=%s", user_id)
        return True

    def update_user_by_id(self, user_id: int, patch: UserUpdate) -> User | None:
        """
        Overwrite username, email and password from patch; other fields are untouched.

        No uniqueness pre-check: the store raises ConstraintViolationError on collision.
        Last write wins against concurrent updates.
        """
        require_positive_id(user_id, "user_id")
        password_hash = self._hash(patch.password)
        user = self.store.get(user_id)
        if user is None:
            return None
        user.username = patch.username
        user.email = patch.email
        user.password_hash = password_hash
        updated = self.store.save(user)
        logger.info("Updated user user_id=%s", user_id)
        return updated
