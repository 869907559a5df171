"""Pydantic request/response schemas."""

from user_service.schemas.health import HealthResponse
from user_service.schemas.role import RoleCreate, RoleResponse, RoleUpdate
from user_service.schemas.user import (
    MessageResponse,
    RoleRef,
    UserLogin,
    UserResponse,
    UserSignup,
    UserUpdate,
)

__all__ = [
    "HealthResponse",
    "MessageResponse",
    "RoleCreate",
    "RoleRef",
    "RoleResponse",
    "RoleUpdate",
    "UserLogin",
    "UserResponse",
    "UserSignup",
    "UserUpdate",
]
