"""Role endpoints: create, read, update and delete roles."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from user_service.api.v1.deps import get_role_service
from user_service.schemas.role import RoleCreate, RoleResponse, RoleUpdate
from user_service.schemas.user import MessageResponse
from user_service.services.exceptions import ConstraintViolationError
from user_service.services.role_service import RoleService

router = APIRouter()

RoleId = Annotated[int, Path(ge=1, description="Role identifier")]


@router.post("", response_model=RoleResponse, status_code=status.HTTP_201_CREATED)
def create_role(
    body: RoleCreate,
    roles: Annotated[RoleService, Depends(get_role_service)],
) -> RoleResponse:
    """Create a role. 400 if the name is already taken."""
    try:
        role = roles.save_role(body)
    except ConstraintViolationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Failed to create role: {e.message}",
        ) from e
    return RoleResponse.model_validate(role)


@router.get("", response_model=list[RoleResponse])
def list_roles(
    roles: Annotated[RoleService, Depends(get_role_service)],
) -> list[RoleResponse]:
    """List all roles ordered by id (empty list when none exist)."""
    return [RoleResponse.model_validate(r) for r in roles.get_all_roles()]


@router.get("/{role_id}", response_model=RoleResponse)
def get_role(
    role_id: RoleId,
    roles: Annotated[RoleService, Depends(get_role_service)],
) -> RoleResponse:
    role = roles.get_role_by_id(role_id)
    if role is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Role not found with ID: {role_id}",
        )
    return RoleResponse.model_validate(role)


@router.put("/{role_id}", response_model=RoleResponse)
def update_role(
    role_id: RoleId,
    body: RoleUpdate,
    roles: Annotated[RoleService, Depends(get_role_service)],
) -> RoleResponse:
    """Rename a role. 404 if missing, 400 if the new name is taken."""
    try:
        role = roles.update_role_by_id(role_id, body)
    except ConstraintViolationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Failed to update role: {e.message}",
        ) from e
    if role is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Role not found with ID: {role_id}",
        )
    return RoleResponse.model_validate(role)


@router.delete("/{role_id}", response_model=MessageResponse)
def delete_role(
    role_id: RoleId,
    roles: Annotated[RoleService, Depends(get_role_service)],
) -> MessageResponse:
    """Delete a role. 404 if missing, 400 while users still reference it."""
    try:
        deleted = roles.delete_role_by_id(role_id)
    except ConstraintViolationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Failed to delete role: {e.message}",
        ) from e
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Role does not exist with ID: {role_id}",
        )
    return MessageResponse(detail=f"Role deleted successfully with ID: {role_id}")
