"""Input checks applied before any store call."""

from user_service.services.exceptions import InvalidInputError


def require_positive_id(value: int, name: str) -> int:
    """Return value if it is a positive integer identifier; raise InvalidInputError otherwise."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidInputError(f"{name} must be a positive integer, got {value!r}")
    return value
