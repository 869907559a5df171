"""User endpoints: signup, login, lookups, update and delete."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from user_service.api.v1.deps import get_user_service
from user_service.schemas.user import (
    MessageResponse,
    UserLogin,
    UserResponse,
    UserSignup,
    UserUpdate,
)
from user_service.services.exceptions import (
    ConstraintViolationError,
    DefaultRoleNotFoundError,
)
from user_service.services.user_service import UserService

logger = logging.getLogger(__name__)
router = APIRouter()

UserId = Annotated[int, Path(ge=1, description="User identifier")]


def _not_found(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def signup(
    body: UserSignup,
    users: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    """
    Register a user with the default role. Any role in the body is ignored.

    The existence checks reject obvious duplicates early; a concurrent signup that
    slips past them is still rejected by the database and reported the same way.
    """
    if body.username is not None and users.exists_by_username(body.username):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username already exists")
    if users.exists_by_email(body.email):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already exists")
    try:
        user = users.signup_user(body)
    except ConstraintViolationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    except DefaultRoleNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Signups are unavailable: default role is not configured.",
        ) from e
    return UserResponse.model_validate(user)


@router.post("/login", response_model=UserResponse)
def login(
    body: UserLogin,
    users: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    """Check email and password; 401 with the same message for any failure."""
    user = users.authenticate_by_email(body.email, body.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )
    return UserResponse.model_validate(user)


@router.get("", response_model=list[UserResponse])
def list_users(
    users: Annotated[UserService, Depends(get_user_service)],
) -> list[UserResponse]:
    return [UserResponse.model_validate(u) for u in users.get_all_users()]


@router.get("/by-username/{username}", response_model=UserResponse)
def get_user_by_username(
    username: str,
    users: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    user = users.get_user_by_username(username)
    if user is None:
        raise _not_found(f"User not found with username: {username}")
    return UserResponse.model_validate(user)


@router.get("/by-email/{email}", response_model=UserResponse)
def get_user_by_email(
    email: str,
    users: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    user = users.get_user_by_email(email)
    if user is None:
        raise _not_found(f"User not found with email: {email}")
    return UserResponse.model_validate(user)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: UserId,
    users: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    user = users.get_user_by_id(user_id)
    if user is None:
        raise _not_found(f"User with ID {user_id} not found.")
    return UserResponse.model_validate(user)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: UserId,
    body: UserUpdate,
    users: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    """Overwrite username, email and password. 400 if the new email or username is taken."""
    try:
        user = users.update_user_by_id(user_id, body)
    except ConstraintViolationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Failed to update user: {e.message}",
        ) from e
    if user is None:
        raise _not_found("User not found.")
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: UserId,
    users: Annotated[UserService, Depends(get_user_service)],
) -> MessageResponse:
    if not users.delete_user_by_id(user_id):
        raise _not_found(f"User not found with ID: {user_id}")
    logger.info("User %s deleted via API", user_id)
    return MessageResponse(detail=f"User deleted successfully with ID: {user_id}")
