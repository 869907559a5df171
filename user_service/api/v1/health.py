"""Health check endpoint with database and default-role checks."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from user_service.api.v1.deps import get_role_service
from user_service.core.config import settings
from user_service.core.database import check_db_connected, get_db
from user_service.schemas.health import HealthResponse
from user_service.services.exceptions import DefaultRoleNotFoundError
from user_service.services.role_service import RoleService

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(
    db: Annotated[Session, Depends(get_db)],
    roles: Annotated[RoleService, Depends(get_role_service)],
) -> HealthResponse:
    """
    Return service health, database connectivity and whether signups can succeed.
    Used by load balancers and monitoring.
    """
    if not check_db_connected(db):
        return HealthResponse(environment=settings.APP_ENV, database="disconnected")

    try:
        roles.get_default_role()
        default_role = "present"
    except DefaultRoleNotFoundError:
        default_role = "missing"

    return HealthResponse(
        environment=settings.APP_ENV,
        database="connected",
        default_role=default_role,
    )
