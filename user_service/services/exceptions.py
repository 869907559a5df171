"""Errors raised by the role and user services. "Not found" is never an exception here."""


class UserServiceError(Exception):
    """Base class for service-layer failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConstraintViolationError(UserServiceError):
    """A uniqueness or reference rule rejected a write. Recoverable; report to the caller."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)


class RoleInUseError(ConstraintViolationError):
    """Raised when deleting a role that users still reference."""

    def __init__(self, role_id: int, user_count: int) -> None:
        self.role_id = role_id
        self.user_count = user_count
        super().__init__(
            "role_id",
            f"Role {role_id} is still assigned to {user_count} user(s)",
        )


class DefaultRoleNotFoundError(UserServiceError):
    """The configured default role does not exist. Signups must be refused until it is created."""

    def __init__(self, role_name: str) -> None:
        self.role_name = role_name
        super().__init__(f"Default role '{role_name}' not found")


class InvalidInputError(UserServiceError, ValueError):
    """Malformed input (e.g. a non-positive identifier) rejected before reaching the store."""

    pass
