"""Request/response schemas for role endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class RoleCreate(BaseModel):
    """Body for creating a role."""

    role_name: str = Field(..., min_length=1, max_length=255, description="Unique role name")

    model_config = ConfigDict(str_strip_whitespace=True)


class RoleUpdate(BaseModel):
    """Body for updating a role. Only role_name is applied; other fields are ignored."""

    role_name: str = Field(..., min_length=1, max_length=255, description="New role name")

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")


class RoleResponse(BaseModel):
    """Role as returned to clients."""

    role_id: int
    role_name: str

    model_config = ConfigDict(from_attributes=True)
