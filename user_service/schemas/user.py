"""Request/response schemas for user endpoints."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from user_service.core.security import (
    EMAIL_MAX_LEN,
    PASSWORD_MAX_BYTES,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
    password_too_long,
)
from user_service.schemas.role import RoleResponse


def _check_password_bytes(v: str) -> str:
    if password_too_long(v):
        raise ValueError(f"Password must be at most {PASSWORD_MAX_BYTES} bytes in UTF-8")
    return v


class RoleRef(BaseModel):
    """Role reference a client may send on signup. Accepted for compatibility, never applied."""

    role_id: int | None = None
    role_name: str | None = None


class UserSignup(BaseModel):
    """Signup body. Any supplied role is replaced by the default role."""

    email: str = Field(..., min_length=3, max_length=EMAIL_MAX_LEN, description="Unique email")
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    contact_number: str = Field(..., min_length=1, max_length=64)
    state: str = Field(..., min_length=1, max_length=255)
    username: str | None = Field(
        default=None,
        min_length=USERNAME_MIN_LEN,
        max_length=USERNAME_MAX_LEN,
        description="Optional unique username",
    )
    role: RoleRef | None = None

    @field_validator("password")
    @classmethod
    def validate_password_bytes(cls, v: str) -> str:
        return _check_password_bytes(v)


class UserLogin(BaseModel):
    """Credentials for login. Over-long passwords are not rejected here; they fail like a wrong one."""

    email: str = Field(..., max_length=EMAIL_MAX_LEN)
    password: str = Field(..., max_length=PASSWORD_MAX_LEN)


class UserUpdate(BaseModel):
    """
    Update body. username, email and password are overwritten as given, empty strings included.

    Other fields (contact_number, state, role) are ignored.
    """

    username: str | None = Field(default=None, max_length=USERNAME_MAX_LEN)
    email: str = Field(..., max_length=EMAIL_MAX_LEN)
    password: str = Field(..., max_length=PASSWORD_MAX_LEN)

    model_config = ConfigDict(extra="ignore")

    @field_validator("password")
    @classmethod
    def validate_password_bytes(cls, v: str) -> str:
        return _check_password_bytes(v)


class UserResponse(BaseModel):
    """User as returned to clients (no password hash)."""

    user_id: int
    email: str
    username: str | None
    contact_number: str
    state: str
    role: RoleResponse

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    """Plain confirmation message (e.g. after a delete)."""

    detail: str
